from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional


logger = logging.getLogger(__name__)


class InMemoryKeyValueStore:
    """Simple in-memory store backed by a dict."""

    def __init__(self, initial: Optional[Mapping[str, str]] = None, *, read_only: bool = False) -> None:
        self._values: Dict[str, str] = dict(initial or {})
        self.read_only = read_only

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> bool:
        if self.read_only:
            logger.warning("store.write_denied key=%s", key)
            return False
        self._values[key] = value
        return True
