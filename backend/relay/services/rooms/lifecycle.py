import logging
import time
from typing import Any, Callable, Dict, List, Tuple

from relay import protocol
from relay.models import Room
from .codes import RoomCodeGenerator
from .errors import RoomFull, RoomNotFound
from .store import RoomStore

# (recipient connection id, event name, positional payload args)
Outbound = Tuple[str, str, tuple]


class RoomLifecycleManager:
    """Create, join, relay and tear down rooms.

    All checks and mutations for one operation happen under a single
    acquisition of the store lock, so an operation either applies fully or
    not at all. Outbound messages are collected while the lock is held and
    delivered after it is released. Delivery is best effort and at most
    once: a failing send is logged and dropped, never retried.
    """

    def __init__(
        self,
        store: RoomStore,
        notify: Callable[..., Any],
        generator: RoomCodeGenerator = None,
        clock: Callable[[], float] = time.time,
        logger: logging.Logger = None,
    ):
        self.store = store
        self.notify = notify
        self.generator = generator or RoomCodeGenerator()
        self.clock = clock
        self.logger = logger or logging.getLogger('relay')

    # ---- operations ----

    def create_room(self, host_id: str) -> str:
        with self.store.locked():
            code = self.generator.generate(self.store)
            outbox = self._leave_everywhere_locked(host_id)
            self.store.put_if_absent(Room(code, host_id, self.clock()))
        self.logger.info(f"[room-create] code={code} host={host_id}")
        self._deliver(outbox)
        return code

    def join_room(self, code: str, guest_id: str) -> Dict[str, Any]:
        with self.store.locked():
            room = self.store.get(code)
            if room is None:
                raise RoomNotFound()
            if room.has_member(guest_id):
                return room.to_dict(self.clock())
            if room.is_full:
                raise RoomFull()
            outbox = self._leave_everywhere_locked(guest_id)
            peers = list(room.members)
            room.add_member(guest_id)
            outbox.extend(
                (peer, protocol.OPPONENT_JOINED, ({'opponentId': guest_id},)) for peer in peers
            )
            snapshot = room.to_dict(self.clock())
        self.logger.info(f"[room-join] code={code} guest={guest_id} members={len(snapshot['members'])}")
        self._deliver(outbox)
        return snapshot

    def update_state(self, code: str, author_id: str, state: Any) -> bool:
        """Store and broadcast a state snapshot. Unknown rooms are a silent no-op."""
        with self.store.locked():
            room = self.store.get(code)
            if room is None:
                return False
            room.game_state = state
            room.last_update_at = self.clock()
            outbox = [(peer, protocol.GAME_STATE_UPDATE, (state,)) for peer in room.others(author_id)]
        self._deliver(outbox)
        return True

    def relay_action(self, code: str, author_id: str, action: Any) -> bool:
        with self.store.locked():
            room = self.store.get(code)
            if room is None:
                return False
            outbox = [(peer, protocol.GAME_ACTION, (action,)) for peer in room.others(author_id)]
        self._deliver(outbox)
        return True

    def leave(self, code: str, member_id: str) -> bool:
        """Remove member_id from the room. Repeating it is a no-op."""
        with self.store.locked():
            room = self.store.get(code)
            if room is None or not room.has_member(member_id):
                return False
            outbox = self._leave_locked(room, member_id)
        self._deliver(outbox)
        return True

    def disconnect_all(self, member_id: str) -> List[str]:
        """Apply leave to every room holding member_id. Returns the codes left."""
        with self.store.locked():
            codes = self.store.rooms_of(member_id)
            outbox = self._leave_everywhere_locked(member_id)
        self._deliver(outbox)
        return codes

    # ---- helpers (store lock held) ----

    def _leave_locked(self, room: Room, member_id: str) -> List[Outbound]:
        room.remove_member(member_id)
        self.logger.info(f"[room-leave] code={room.code} member={member_id} remaining={len(room.members)}")
        if room.is_empty:
            self.store.remove(room.code)
            self.logger.info(f"[room-delete] code={room.code} reason=empty")
            return []
        return [(peer, protocol.OPPONENT_LEFT, ()) for peer in room.members]

    def _leave_everywhere_locked(self, member_id: str) -> List[Outbound]:
        outbox = []
        for code in self.store.rooms_of(member_id):
            outbox.extend(self._leave_locked(self.store.get(code), member_id))
        return outbox

    def _deliver(self, outbox: List[Outbound]) -> None:
        for recipient, event, args in outbox:
            try:
                self.notify(recipient, event, *args)
            except Exception:
                self.logger.exception(f"[broadcast-drop] to={recipient} event={event}")
