from __future__ import annotations

import logging
from typing import Any, Callable, List


logger = logging.getLogger(__name__)


class Signal:
    """Minimal observer list; presentation code connects, the session emits."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._receivers: List[Callable[..., Any]] = []

    def connect(self, receiver: Callable[..., Any]) -> Callable[..., Any]:
        if receiver not in self._receivers:
            self._receivers.append(receiver)
        return receiver

    def disconnect(self, receiver: Callable[..., Any]) -> None:
        if receiver in self._receivers:
            self._receivers.remove(receiver)

    def emit(self, *args: Any) -> None:
        for receiver in list(self._receivers):
            try:
                receiver(*args)
            except Exception:
                logger.exception("signal.receiver_failed signal=%s", self.name)
