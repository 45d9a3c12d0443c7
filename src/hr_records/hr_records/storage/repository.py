from __future__ import annotations

from typing import Optional, Protocol


class KeyValueStorage(Protocol):
    """Interface for the device-local key/value store holding the aggregate.

    Note (DIP): the aggregate repository depends on this interface, not on a concrete backend.
    """

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError
