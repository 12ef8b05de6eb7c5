"""
Trigger registration models.

A handler is registered together with its trigger metadata as one explicit
record instead of attributes stapled onto the function object.
"""

from dataclasses import dataclass
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field

DATABASE_EVENT_MARKER = "firebase.database"

HandlerFunc = Callable[[Any, Any], Any]


class TriggerMetadata(BaseModel):
    """Static trigger description attached at registration time."""

    model_config = ConfigDict(frozen=True)

    resource_template: str = Field(..., description="Resource path template with {wildcards}")
    service: str = Field(..., description="Service owning the resource")
    event_type: str = Field(..., description="Event type the handler reacts to")

    def is_database(self, marker: str = DATABASE_EVENT_MARKER) -> bool:
        """True when the event type belongs to the database family."""
        return marker in self.event_type


@dataclass(frozen=True)
class RegisteredHandler:
    """
    A handler execution entry point paired with its trigger metadata.

    Calling the record directly forwards the input to `run` without a context,
    mirroring a direct call of the deployed function.
    """

    run: HandlerFunc
    trigger: TriggerMetadata

    @property
    def name(self) -> str:
        return getattr(self.run, "__name__", repr(self.run))

    def __call__(self, data: Any) -> Any:
        return self.run(data, None)


def register_trigger(resource: str, service: str, event_type: str):
    """
    Decorator that registers a (data, context) function for a trigger.

    Usage:
        @register_trigger("ref/{id}", service="firebaseio.com",
                          event_type="google.firebase.database.ref.write")
        def on_write(data, context):
            return data.val()
    """

    def decorator(func: HandlerFunc) -> RegisteredHandler:
        return RegisteredHandler(
            run=func,
            trigger=TriggerMetadata(
                resource_template=resource, service=service, event_type=event_type
            ),
        )

    return decorator
