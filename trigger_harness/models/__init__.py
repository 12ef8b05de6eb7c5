"""
Data model definitions package.

Aggregates Pydantic models and value objects for use in other modules.
"""

from .change import Change
from .context import AuthType, ContextOverrides, DatabaseEventContext, EventContext, EventResource
from .snapshot import DataSnapshot, KeyedPath, PathBearing
from .trigger import RegisteredHandler, TriggerMetadata, register_trigger

__all__ = [
    "AuthType",
    "Change",
    "ContextOverrides",
    "DataSnapshot",
    "DatabaseEventContext",
    "EventContext",
    "EventResource",
    "KeyedPath",
    "PathBearing",
    "RegisteredHandler",
    "TriggerMetadata",
    "register_trigger",
]
