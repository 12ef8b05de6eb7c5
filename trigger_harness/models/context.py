"""
Invocation context models.

Field names keep the camelCase shape the hosting runtime hands to handlers.
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class AuthType(str, Enum):
    ADMIN = "ADMIN"
    USER = "USER"
    UNAUTHENTICATED = "UNAUTHENTICATED"


class EventResource(BaseModel):
    """Resource that emitted the event."""

    model_config = ConfigDict(frozen=True)

    service: str
    name: str


class EventContext(BaseModel):
    """
    Context passed to a handler alongside its data.

    Constructed once per invocation and frozen before handoff.
    """

    model_config = ConfigDict(frozen=True)

    eventId: str
    timestamp: str
    eventType: str
    resource: EventResource
    params: Dict[str, str] = Field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


class DatabaseEventContext(EventContext):
    """Context for database-family handlers, carrying auth information."""

    auth: Optional[Dict[str, Any]] = None
    authType: AuthType = AuthType.UNAUTHENTICATED


class ContextOverrides(BaseModel):
    """Caller-supplied partial context. Unset fields keep their defaults."""

    model_config = ConfigDict(extra="forbid")

    eventId: Optional[str] = None
    timestamp: Optional[str] = None
    params: Optional[Dict[str, str]] = None
    auth: Optional[Dict[str, Any]] = None
    authType: Optional[AuthType] = None
