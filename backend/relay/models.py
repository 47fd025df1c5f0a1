MAX_ROOM_MEMBERS = 2


class Room:
    """One live match session pairing at most two connections."""

    def __init__(self, code, host_id, created_at):
        self.code = code
        self.host_id = host_id
        self.members = [host_id]
        self.game_state = None
        self.created_at = created_at
        self.last_update_at = created_at

    def __repr__(self):
        return f"<Room {self.code} members={len(self.members)}>"

    @property
    def is_full(self):
        return len(self.members) >= MAX_ROOM_MEMBERS

    @property
    def is_empty(self):
        return not self.members

    def has_member(self, member_id):
        return member_id in self.members

    def add_member(self, member_id):
        if self.is_full:
            raise ValueError(f"room {self.code} already has {MAX_ROOM_MEMBERS} members")
        self.members.append(member_id)

    def remove_member(self, member_id):
        """Drop member_id if present. Returns True when something was removed."""
        if member_id not in self.members:
            return False
        self.members = [m for m in self.members if m != member_id]
        return True

    def others(self, member_id):
        return [m for m in self.members if m != member_id]

    def age(self, now):
        return max(0.0, now - self.created_at)

    def copy(self):
        clone = Room(self.code, self.host_id, self.created_at)
        clone.members = list(self.members)
        clone.game_state = self.game_state
        clone.last_update_at = self.last_update_at
        return clone

    def to_dict(self, now):
        return {
            'code': self.code,
            'host_id': self.host_id,
            'members': list(self.members),
            'created_at': self.created_at,
            'last_update_at': self.last_update_at,
            'age': self.age(now),
            'game_state': self.game_state,
        }

    def summary(self, now):
        """Redacted view for the presence listing: no state, shortened host id."""
        return {
            'code': self.code,
            'players': len(self.members),
            'host': redact_id(self.host_id),
            'age': f"{int(self.age(now))}s",
        }


def redact_id(connection_id, keep=4):
    if not connection_id:
        return None
    if len(connection_id) <= keep:
        return '*' * len(connection_id)
    return connection_id[:keep] + '*' * 4
