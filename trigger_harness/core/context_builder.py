"""
Event context synthesis.

Builds the context a wrapped handler receives: defaults, caller overrides,
params recovered from a path-bearing payload, and the compiled resource name.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union

from ..config import HarnessConfig, load_settings
from ..models.context import (
    AuthType,
    ContextOverrides,
    DatabaseEventContext,
    EventContext,
    EventResource,
)
from ..models.snapshot import KeyedPath, PathBearing
from ..models.trigger import TriggerMetadata
from .exceptions import PathMismatchError
from .path_matcher import extract_params, is_valid_match
from .resource_compiler import compile_resource, random_placeholder

logger = logging.getLogger("trigger_harness.context")

Overrides = Union[ContextOverrides, Dict[str, Any], None]


def generate_event_id() -> str:
    return str(uuid.uuid4())


def utc_timestamp() -> str:
    """Current time as ISO-8601 with millisecond precision, e.g. 2018-03-28T18:58:50.370Z"""
    now = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return now.replace("+00:00", "Z")


class ContextBuilder:
    def __init__(self, trigger: TriggerMetadata, settings: Optional[HarnessConfig] = None):
        self.trigger = trigger
        self.settings = settings or load_settings()

    @property
    def is_database(self) -> bool:
        return self.trigger.is_database(self.settings.DATABASE_EVENT_MARKER)

    def build(self, overrides: Overrides = None, payload: Any = None) -> EventContext:
        """
        Synthesize the context for one invocation.

        When the payload is PathBearing, its path is validated against the
        trigger template, params are recovered from it (caller params win),
        and the payload path is rewritten to the compiled resource name.

        Raises:
            PathMismatchError: the payload path does not fit the template
            MissingParamError: a wildcard is unresolved and STRICT_PARAMS is on
            pydantic.ValidationError: overrides contain unknown or invalid fields
        """
        if not isinstance(overrides, ContextOverrides):
            overrides = ContextOverrides.model_validate(overrides or {})

        template = self.trigger.resource_template
        params: Dict[str, str] = dict(overrides.params or {})

        path_bearing = isinstance(payload, PathBearing)
        if path_bearing:
            original_path = payload.get_path()
            if not is_valid_match(template, original_path):
                raise PathMismatchError(template, original_path)
            params = {**extract_params(template, original_path), **params}

        placeholder = None if self.settings.STRICT_PARAMS else random_placeholder
        resource_name = compile_resource(template, params, placeholder)
        logger.debug(f"Compiled resource {resource_name!r} from {template!r}")

        if path_bearing:
            payload.set_path(resource_name)
            if isinstance(payload, KeyedPath):
                logger.debug(f"Payload key is now {payload.derived_key()!r}")

        fields = {
            "eventId": overrides.eventId or generate_event_id(),
            "timestamp": overrides.timestamp or utc_timestamp(),
            "eventType": self.trigger.event_type,
            "resource": EventResource(service=self.trigger.service, name=resource_name),
            "params": params,
        }

        if not self.is_database:
            if overrides.auth is not None or overrides.authType is not None:
                logger.warning(
                    f"Ignoring auth overrides for non-database event type {self.trigger.event_type}"
                )
            return EventContext(**fields)

        return DatabaseEventContext(
            **fields,
            auth=overrides.auth,
            authType=overrides.authType or AuthType.UNAUTHENTICATED,
        )
