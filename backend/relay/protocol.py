"""Socket.IO wire protocol: inbound message variants and outbound event names."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from relay.services.rooms.errors import ValidationError

# client -> server
CREATE_ROOM = 'createRoom'
JOIN_ROOM = 'joinRoom'
UPDATE_GAME_STATE = 'updateGameState'
GAME_ACTION = 'gameAction'
LEAVE_ROOM = 'leaveRoom'

# server -> client
ROOM_CREATED = 'roomCreated'
ROOM_JOINED = 'roomJoined'
ROOM_ERROR = 'roomError'
OPPONENT_JOINED = 'opponentJoined'
OPPONENT_LEFT = 'opponentLeft'
GAME_STATE_UPDATE = 'gameStateUpdate'
# gameAction is relayed under the same name it arrives with


@dataclass(frozen=True)
class CreateRoom:
    pass


@dataclass(frozen=True)
class JoinRoom:
    room_code: str


@dataclass(frozen=True)
class UpdateGameState:
    room_code: str
    game_state: Any


@dataclass(frozen=True)
class GameAction:
    room_code: str
    action: Any


@dataclass(frozen=True)
class LeaveRoom:
    room_code: str


InboundMessage = Union[CreateRoom, JoinRoom, UpdateGameState, GameAction, LeaveRoom]

INBOUND_EVENTS = (CREATE_ROOM, JOIN_ROOM, UPDATE_GAME_STATE, GAME_ACTION, LEAVE_ROOM)


def _payload(event: str, data: Any) -> dict:
    if not isinstance(data, dict):
        raise ValidationError(f'{event} expects an object payload')
    return data


def _room_code(event: str, data: dict) -> str:
    code = data.get('roomCode')
    if not isinstance(code, str) or not code:
        raise ValidationError(f'{event} requires roomCode')
    return code


def _require(event: str, data: dict, key: str) -> Any:
    if key not in data:
        raise ValidationError(f'{event} requires {key}')
    return data[key]


def parse_message(event: str, data: Any = None) -> InboundMessage:
    """Turn a raw Socket.IO event into one of the inbound message variants.

    The opaque parts (gameState, action) are passed through untouched.
    """
    if event == CREATE_ROOM:
        return CreateRoom()
    if event == JOIN_ROOM:
        data = _payload(event, data)
        return JoinRoom(room_code=_room_code(event, data))
    if event == UPDATE_GAME_STATE:
        data = _payload(event, data)
        return UpdateGameState(
            room_code=_room_code(event, data),
            game_state=_require(event, data, 'gameState'),
        )
    if event == GAME_ACTION:
        data = _payload(event, data)
        return GameAction(
            room_code=_room_code(event, data),
            action=_require(event, data, 'action'),
        )
    if event == LEAVE_ROOM:
        data = _payload(event, data)
        return LeaveRoom(room_code=_room_code(event, data))
    raise ValidationError(f'Unknown message kind: {event}')
