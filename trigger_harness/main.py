"""
Public entry points.

Usage:
    from trigger_harness import wrap, make_data_snapshot

    wrapped = wrap(on_write)
    snap = make_data_snapshot({"name": "abe"}, "users/{uid}")
    wrapped(snap, {"params": {"uid": "abe"}})
"""

import logging
from typing import Any, Optional

from .config import HarnessConfig
from .core.context_builder import ContextBuilder, Overrides
from .core.invocation_context import reset_event_id, set_event_id
from .core.path_matcher import extract_params, is_valid_match
from .core.resource_compiler import compile_resource
from .lifecycle import get_project_settings
from .models.change import Change
from .models.snapshot import DataSnapshot
from .models.trigger import RegisteredHandler
from .runtime_config import clear_config, get_config, mock_config

logger = logging.getLogger("trigger_harness.main")

__all__ = [
    "WrappedHandler",
    "wrap",
    "make_change",
    "make_data_snapshot",
    "mock_config",
    "clear_config",
    "get_config",
    "is_valid_match",
    "extract_params",
    "compile_resource",
]


class WrappedHandler:
    """
    Callable that invokes a registered handler with a synthesized context.

    The trigger metadata is captured when the handler is wrapped. A
    path-bearing payload passed in is mutated in place: its path is rewritten
    to the compiled resource name.
    """

    def __init__(self, handler: RegisteredHandler, settings: Optional[HarnessConfig] = None):
        self.handler = handler
        self.trigger = handler.trigger
        self._builder = ContextBuilder(self.trigger, settings)

    def __call__(self, data: Any, overrides: Overrides = None) -> Any:
        context = self._builder.build(overrides, payload=data)
        token = set_event_id(context.eventId)
        try:
            logger.debug(f"Invoking {self.handler.name} for {context.resource.name}")
            return self.handler.run(data, context)
        finally:
            reset_event_id(token)


def wrap(handler: RegisteredHandler, settings: Optional[HarnessConfig] = None) -> WrappedHandler:
    """Wrap a registered handler so it can be invoked outside its runtime."""
    if not isinstance(handler, RegisteredHandler):
        raise TypeError(
            f"wrap() expects a RegisteredHandler, got {type(handler).__name__}; "
            "decorate the function with register_trigger first"
        )
    logger.info(f"Wrapping {handler.name} ({handler.trigger.event_type})")
    return WrappedHandler(handler, settings)


def make_change(before: Any, after: Any) -> Change:
    return Change(before=before, after=after)


def make_data_snapshot(value: Any, path: str, instance: Optional[str] = None) -> DataSnapshot:
    """Build a snapshot, defaulting the instance to the active session's database."""
    if instance is None:
        project = get_project_settings()
        if project is not None:
            instance = project.database_url
    return DataSnapshot(value, path, instance=instance)
