"""Per-application relay state, created once by ``create_app``."""

import threading
import time

from flask import current_app

from relay.services.rooms.codes import RoomCodeGenerator
from relay.services.rooms.lifecycle import RoomLifecycleManager
from relay.services.rooms.store import RoomStore
from relay.services.rooms.sweeper import ExpirySweeper

EXTENSION_KEY = 'relay'


class ConnectionRegistry:
    """Socket.IO session ids currently connected."""

    def __init__(self):
        self._sids = set()
        self._lock = threading.Lock()

    def add(self, sid):
        with self._lock:
            self._sids.add(sid)

    def discard(self, sid):
        with self._lock:
            self._sids.discard(sid)

    def __len__(self):
        return len(self._sids)


class RelayRuntime:
    def __init__(self, config, notify, logger, clock=time.time):
        self.clock = clock
        self.started_at = clock()
        self.store = RoomStore()
        self.connections = ConnectionRegistry()
        self.rooms = RoomLifecycleManager(
            self.store,
            notify,
            generator=RoomCodeGenerator(length=int(config.get('ROOM_CODE_LENGTH', 4))),
            clock=clock,
            logger=logger,
        )
        self.sweeper = ExpirySweeper(
            self.store,
            max_age=int(config.get('ROOM_MAX_AGE_SEC', 1800)),
            interval=int(config.get('ROOM_SWEEP_INTERVAL_SEC', 1800)),
            clock=clock,
            logger=logger,
        )


def get_runtime() -> RelayRuntime:
    return current_app.extensions[EXTENSION_KEY]
