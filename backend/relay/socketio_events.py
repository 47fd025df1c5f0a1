from flask import current_app, request
from flask_socketio import emit

from relay import protocol, socketio
from relay.protocol import CreateRoom, GameAction, JoinRoom, LeaveRoom, UpdateGameState
from relay.runtime import get_runtime
from relay.services.rooms.errors import RelayError


def _get_sid() -> str:
    return request.sid


def make_notifier(namespace: str = '/'):
    """Send one event to one connection. Fire and forget: no ack is awaited."""
    def notify(sid, event, *args):
        socketio.emit(event, *args, to=sid, namespace=namespace)
    return notify


def handle_connect(auth=None):
    sid = _get_sid()
    get_runtime().connections.add(sid)
    current_app.logger.info(f"[connect] sid={sid}")


def handle_disconnect(reason=None):
    sid = _get_sid()
    runtime = get_runtime()
    left = runtime.rooms.disconnect_all(sid)
    runtime.connections.discard(sid)
    current_app.logger.info(f"[disconnect] sid={sid} reason={reason} rooms_left={left}")


def dispatch(message: protocol.InboundMessage, sid: str, rooms) -> None:
    """Apply one inbound message on behalf of connection ``sid``."""
    if isinstance(message, CreateRoom):
        code = rooms.create_room(sid)
        emit(protocol.ROOM_CREATED, {'roomCode': code})
    elif isinstance(message, JoinRoom):
        rooms.join_room(message.room_code, sid)
        emit(protocol.ROOM_JOINED, {'roomCode': message.room_code})
    elif isinstance(message, UpdateGameState):
        rooms.update_state(message.room_code, sid, message.game_state)
    elif isinstance(message, GameAction):
        rooms.relay_action(message.room_code, sid, message.action)
    elif isinstance(message, LeaveRoom):
        rooms.leave(message.room_code, sid)
    else:
        raise TypeError(f"Unhandled message: {message!r}")


def _make_handler(event: str):
    def handler(data=None):
        sid = _get_sid()
        try:
            message = protocol.parse_message(event, data)
            dispatch(message, sid, get_runtime().rooms)
        except RelayError as exc:
            current_app.logger.info(f"[room-error] sid={sid} event={event} message={exc.message}")
            emit(protocol.ROOM_ERROR, {'message': exc.message})

    handler.__name__ = f"handle_{event}"
    return handler


def handle_error(exc):
    # Anything that is not a RelayError lands here
    current_app.logger.exception(f"[dispatch-error] sid={_get_sid()} error={exc!r}")
    emit(protocol.ROOM_ERROR, {'message': 'Internal server error'})


def register_socketio_handlers(namespace: str = '/') -> None:
    """Register Socket.IO event handlers on ``namespace``."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    for event in protocol.INBOUND_EVENTS:
        socketio.on_event(event, _make_handler(event), namespace=namespace)
    socketio.on_error_default(handle_error)
