import logging
import time
from typing import Callable, List

from .store import RoomStore

DEFAULT_MAX_AGE_SEC = 30 * 60
DEFAULT_INTERVAL_SEC = 30 * 60


class ExpirySweeper:
    """Periodically delete rooms older than ``max_age`` seconds.

    Age is measured from room creation, not last activity, so a long running
    match is reclaimed as well. Members of a reclaimed room are not notified.
    """

    def __init__(
        self,
        store: RoomStore,
        max_age: float = DEFAULT_MAX_AGE_SEC,
        interval: float = DEFAULT_INTERVAL_SEC,
        clock: Callable[[], float] = time.time,
        logger: logging.Logger = None,
    ):
        if interval <= 0:
            raise ValueError('interval must be > 0')
        self.store = store
        self.max_age = max_age
        self.interval = interval
        self.clock = clock
        self.logger = logger or logging.getLogger('relay')
        self._running = False
        self._task = None

    @property
    def running(self) -> bool:
        return self._running

    def sweep(self, now: float = None) -> List[str]:
        """Run one pass. Returns the codes that were deleted."""
        now = self.clock() if now is None else now
        removed = []
        with self.store.locked():
            for room in self.store.snapshot():
                if now - room.created_at > self.max_age and self.store.remove(room.code) is not None:
                    removed.append(room.code)
                    self.logger.info(f"[sweep] code={room.code} age={int(now - room.created_at)}s removed")
        if removed:
            self.logger.info(f"[sweep] removed={len(removed)} remaining={len(self.store)}")
        return removed

    def start(self, socketio) -> None:
        """Run the sweep loop as a Socket.IO background task."""
        if self._running:
            return
        self._running = True
        self.logger.info(f"[sweep-start] interval={self.interval}s max_age={self.max_age}s")
        self._task = socketio.start_background_task(self._worker, socketio)

    def stop(self) -> None:
        self._running = False

    def _worker(self, socketio) -> None:
        while self._running:
            socketio.sleep(self.interval)
            if not self._running:
                break
            try:
                self.sweep()
            except Exception:
                self.logger.exception('[sweep-error] pass failed, retrying next interval')
