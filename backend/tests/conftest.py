import os
import sys
import pytest

# Ensure the backend root (containing the `relay` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from relay import create_app, socketio
from relay.runtime import EXTENSION_KEY
from relay.services.rooms.lifecycle import RoomLifecycleManager
from relay.services.rooms.store import RoomStore


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    CORS_ALLOWED_ORIGINS = '*'
    SOCKETIO_NAMESPACE = '/'
    ROOM_CODE_LENGTH = 4
    ROOM_MAX_AGE_SEC = 1800
    ROOM_SWEEP_INTERVAL_SEC = 1800
    SWEEPER_ENABLED = False
    STATIC_FOLDER = None
    LOG_LEVEL = 'DEBUG'


class FakeClock:
    def __init__(self, now=1_000_000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class Recorder:
    """Stands in for the Socket.IO notifier and keeps what would have been sent."""

    def __init__(self):
        self.sent = []

    def __call__(self, to, event, *args):
        self.sent.append((to, event, args))

    def to(self, recipient):
        return [(event, args) for to, event, args in self.sent if to == recipient]

    def events(self, recipient):
        return [event for event, _ in self.to(recipient)]

    def clear(self):
        self.sent.clear()


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def recorder():
    return Recorder()


@pytest.fixture()
def store():
    return RoomStore()


@pytest.fixture()
def manager(store, recorder, clock):
    return RoomLifecycleManager(store, recorder, clock=clock)


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def runtime(flask_app):
    return flask_app.extensions[EXTENSION_KEY]


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def make_sio_client(flask_app):
    created = []

    def _make():
        test_client = socketio.test_client(
            flask_app,
            flask_test_client=flask_app.test_client(),
            namespace='/'
        )
        created.append(test_client)
        return test_client

    yield _make
    for test_client in created:
        if test_client.is_connected('/'):
            test_client.disconnect(namespace='/')


@pytest.fixture()
def sio_client(make_sio_client):
    return make_sio_client()


@pytest.fixture()
def app_factory():
    def _make(**overrides):
        return create_app(type('OverrideConfig', (TestConfig,), overrides))
    return _make
