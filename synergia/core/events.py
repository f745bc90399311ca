"""
Process-wide "data changed" broadcast.

Raised after bulk mutations (restore completion) so that anything caching
read results knows it must re-read. The signal carries no payload; receivers
only learn that the store changed, and ``version`` lets polling clients
detect it.
"""

from threading import RLock
from typing import Callable, List

import structlog

logger = structlog.get_logger(__name__)

Receiver = Callable[[], None]


class DataChangedSignal:
    def __init__(self) -> None:
        self._lock = RLock()
        self._receivers: List[Receiver] = []
        self._version = 0

    @property
    def version(self) -> int:
        with self._lock:
            return self._version

    def connect(self, receiver: Receiver) -> None:
        with self._lock:
            if receiver not in self._receivers:
                self._receivers.append(receiver)

    def disconnect(self, receiver: Receiver) -> None:
        with self._lock:
            if receiver in self._receivers:
                self._receivers.remove(receiver)

    def send(self) -> None:
        with self._lock:
            self._version += 1
            receivers = list(self._receivers)
            version = self._version

        logger.info("Data changed", version=version, receivers=len(receivers))
        for receiver in receivers:
            try:
                receiver()
            except Exception:
                # Remaining receivers still run
                logger.exception("Data-changed receiver failed", receiver=repr(receiver))


data_changed = DataChangedSignal()
