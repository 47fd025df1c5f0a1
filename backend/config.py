import os


def _env_flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '3000'))
    # Comma separated list, or '*' for any origin
    CORS_ALLOWED_ORIGINS = os.environ.get('CORS_ALLOWED_ORIGINS', '*')
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/')
    # Room codes are typed by hand, keep them short
    ROOM_CODE_LENGTH = int(os.environ.get('ROOM_CODE_LENGTH', '4'))
    # Rooms older than this are reclaimed by the sweeper (seconds)
    ROOM_MAX_AGE_SEC = int(os.environ.get('ROOM_MAX_AGE_SEC', '1800'))
    ROOM_SWEEP_INTERVAL_SEC = int(os.environ.get('ROOM_SWEEP_INTERVAL_SEC', '1800'))
    SWEEPER_ENABLED = _env_flag('SWEEPER_ENABLED', True)
    # Optional: built client bundle served as a single-page app
    STATIC_FOLDER = os.environ.get('STATIC_FOLDER') or None
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
