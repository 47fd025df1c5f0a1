class RelayError(Exception):
    """Base class for relay errors reported back to the requesting connection."""

    message = 'Room error'

    def __init__(self, message=None):
        super().__init__(message or self.message)
        self.message = message or self.message


class RoomNotFound(RelayError):
    """Raised when a room code does not match any live room."""

    message = 'Room not found'


class RoomFull(RelayError):
    """Raised when joining a room that already has two members."""

    message = 'Room is full'


class ValidationError(RelayError):
    """Raised when an inbound payload is malformed."""

    message = 'Invalid message'


class CodeSpaceExhausted(RelayError):
    """Raised when every room code of the configured length is in use."""

    message = 'No room codes available, try again later'
