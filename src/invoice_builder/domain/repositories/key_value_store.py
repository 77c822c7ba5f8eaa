from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class PersistentStore(Protocol):
    """Key-value store for serialized records.

    Implementations must not raise: a failed read returns None and a failed
    write returns False.
    """

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> bool:
        ...
