"""
Path-bearing payloads.

A payload takes part in path reconciliation when it implements PathBearing.
Anything else is passed to the handler untouched.
"""

import copy
import json
from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class PathBearing(Protocol):
    def get_path(self) -> str: ...

    def set_path(self, path: str) -> None: ...


@runtime_checkable
class KeyedPath(PathBearing, Protocol):
    def derived_key(self) -> Optional[str]: ...


def normalize_path(path: str) -> str:
    return path.strip("/")


class DataSnapshot:
    """
    Immutable view of the value stored at a database path.

    The path is the only mutable part: it is rewritten when the snapshot is
    handed to a wrapped handler with concrete params.
    """

    def __init__(self, value: Any, path: str, instance: Optional[str] = None):
        self._value = value
        self._path = normalize_path(path)
        self.instance = instance

    def get_path(self) -> str:
        return self._path

    def set_path(self, path: str) -> None:
        self._path = normalize_path(path)

    def derived_key(self) -> Optional[str]:
        """Last non-empty path segment, or None at the root."""
        segments = [s for s in self._path.split("/") if s]
        return segments[-1] if segments else None

    @property
    def key(self) -> Optional[str]:
        return self.derived_key()

    @property
    def ref(self) -> str:
        if self.instance:
            return f"{self.instance.rstrip('/')}/{self._path}"
        return f"/{self._path}"

    def val(self) -> Any:
        return copy.deepcopy(self._value)

    def exists(self) -> bool:
        return self._value is not None

    def child(self, child_path: str) -> "DataSnapshot":
        """Snapshot of a descendant; missing children have a None value."""
        value = self._value
        for segment in normalize_path(child_path).split("/"):
            if not segment:
                continue
            value = value.get(segment) if isinstance(value, dict) else None
        path = f"{self._path}/{normalize_path(child_path)}".strip("/")
        return DataSnapshot(value, path, instance=self.instance)

    def has_child(self, child_path: str) -> bool:
        return self.child(child_path).exists()

    def to_json(self) -> str:
        return json.dumps(self._value)

    def __repr__(self) -> str:
        return f"DataSnapshot(path={self._path!r}, value={self._value!r})"
