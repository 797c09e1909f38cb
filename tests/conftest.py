import pytest

from config import Config
from netstatus import create_app, socketio


@pytest.fixture
def app(tmp_path):
    class TestConfig(Config):
        TESTING = True
        SOCKETIO_ASYNC_MODE = 'threading'
        AUDIT_LOG_DIR = str(tmp_path / 'logs')

    app = create_app(TestConfig)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app, client):
    sio_client = socketio.test_client(app, flask_test_client=client)
    yield sio_client
    if sio_client.is_connected():
        sio_client.disconnect()


@pytest.fixture
def scanner(app):
    return app.extensions['network_scanner']


@pytest.fixture
def local_ip(monkeypatch):
    """Pretend the host's interface address is 10.0.0.5"""
    monkeypatch.setattr('netstatus.routes.get_local_ip', lambda: '10.0.0.5')
    return '10.0.0.5'

