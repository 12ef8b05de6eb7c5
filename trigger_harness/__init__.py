"""
Invoke event-triggered handlers outside their hosting runtime.
"""

from .core.exceptions import ConfigError, HarnessError, MissingParamError, PathMismatchError
from .lifecycle import HarnessSession
from .main import (
    WrappedHandler,
    clear_config,
    compile_resource,
    extract_params,
    get_config,
    is_valid_match,
    make_change,
    make_data_snapshot,
    mock_config,
    wrap,
)
from .models.change import Change
from .models.context import AuthType, DatabaseEventContext, EventContext
from .models.snapshot import DataSnapshot
from .models.trigger import RegisteredHandler, TriggerMetadata, register_trigger

__all__ = [
    "AuthType",
    "Change",
    "ConfigError",
    "DataSnapshot",
    "DatabaseEventContext",
    "EventContext",
    "HarnessError",
    "HarnessSession",
    "MissingParamError",
    "PathMismatchError",
    "RegisteredHandler",
    "TriggerMetadata",
    "WrappedHandler",
    "clear_config",
    "compile_resource",
    "extract_params",
    "get_config",
    "is_valid_match",
    "make_change",
    "make_data_snapshot",
    "mock_config",
    "register_trigger",
    "wrap",
]
