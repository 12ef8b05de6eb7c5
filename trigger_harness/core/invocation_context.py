"""
Invocation context tracking.
Use ContextVar to expose the event id of the invocation in flight to loggers.
"""

from contextvars import ContextVar, Token
from typing import Optional

# Context variable for the event id of the running invocation.
_event_id_var: ContextVar[Optional[str]] = ContextVar("event_id", default=None)


def get_event_id() -> Optional[str]:
    """Get the current event id."""
    return _event_id_var.get()


def set_event_id(event_id: str) -> Token:
    """
    Set the event id for the current context.

    Returns:
        Token to pass to reset_event_id
    """
    return _event_id_var.set(event_id)


def reset_event_id(token: Token) -> None:
    """Restore the event id that was current before set_event_id."""
    _event_id_var.reset(token)
