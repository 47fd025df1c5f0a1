from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

socketio = SocketIO(async_mode=None)


def _allowed_origins(value):
    if not value or value == '*':
        return '*'
    if isinstance(value, str):
        return [origin.strip() for origin in value.split(',') if origin.strip()]
    return list(value)


def create_app(config_class=Config, start_sweeper=True):
    flask_app = Flask(__name__, static_folder=None)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = _allowed_origins(flask_app.config.get('CORS_ALLOWED_ORIGINS', '*'))
    namespace = flask_app.config.get('SOCKETIO_NAMESPACE', '/')
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One room store per app; handlers reach it through current_app
    from relay.runtime import EXTENSION_KEY, RelayRuntime
    from relay.socketio_events import make_notifier, register_socketio_handlers

    runtime = RelayRuntime(flask_app.config, make_notifier(namespace), flask_app.logger)
    flask_app.extensions[EXTENSION_KEY] = runtime

    from relay.main import main
    flask_app.register_blueprint(main)

    register_socketio_handlers(namespace=namespace)

    sweeper_enabled = flask_app.config.get('SWEEPER_ENABLED', True) and not flask_app.config.get('TESTING')
    if start_sweeper and sweeper_enabled:
        runtime.sweeper.start(socketio)

    return flask_app
