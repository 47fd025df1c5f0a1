"""In-memory room storage shared by every connection and the sweeper."""

from __future__ import annotations

from contextlib import contextmanager
import threading
from typing import Dict, Iterator, List, Optional

from relay.models import Room


class RoomStore:
    """Thread-safe mapping of room code to Room.

    Every read-modify-write on a room (membership, state) must happen inside
    ``locked()``. The lock is re-entrant so helpers can nest.
    """

    def __init__(self) -> None:
        self._rooms: Dict[str, Room] = {}
        self._lock = threading.RLock()

    @contextmanager
    def locked(self) -> Iterator[None]:
        with self._lock:
            yield

    def __len__(self) -> int:
        return len(self._rooms)

    def __contains__(self, code) -> bool:
        return code in self._rooms

    def get(self, code: str) -> Optional[Room]:
        return self._rooms.get(code)

    def put_if_absent(self, room: Room) -> bool:
        with self._lock:
            if room.code in self._rooms:
                return False
            self._rooms[room.code] = room
            return True

    def remove(self, code: str) -> Optional[Room]:
        """Delete a room. Removing an absent code is a no-op returning None."""
        with self._lock:
            return self._rooms.pop(code, None)

    def rooms_of(self, member_id: str) -> List[str]:
        with self._lock:
            return [code for code, room in self._rooms.items() if room.has_member(member_id)]

    def snapshot(self) -> List[Room]:
        """Point-in-time copies, safe to read after the lock is released."""
        with self._lock:
            return [room.copy() for room in self._rooms.values()]
