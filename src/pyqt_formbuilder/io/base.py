"""Protocols and in-memory implementation for state stores."""

from typing import Dict, Optional, Protocol


class StateStore(Protocol):
    """Generic key/value store holding serialized application state."""

    def get_blob(self, key: str) -> Optional[str]:
        ...

    def set_blob(self, key: str, blob: str) -> None:
        ...


class MemoryStore:
    """Dict-backed StateStore, for tests and throwaway sessions."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get_blob(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set_blob(self, key: str, blob: str) -> None:
        self._data[key] = blob
