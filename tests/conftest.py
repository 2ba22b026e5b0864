import pytest

from playground import create_app, socketio
from playground.config import TestingConfig
from playground.services.errors import CompileServiceUnavailable


class FakeCompileClient:
    """Stands in for WandboxClient; returns a canned payload or raises."""

    def __init__(self, payload=None, exc=None):
        self.payload = payload if payload is not None else {'status': '0'}
        self.exc = exc
        self.calls = []

    def compile(self, code):
        self.calls.append(code)
        if self.exc is not None:
            raise self.exc
        return self.payload


@pytest.fixture
def compile_client():
    return FakeCompileClient()


@pytest.fixture
def app(compile_client):
    return create_app(TestingConfig, compile_client=compile_client)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app):
    sc = socketio.test_client(app)
    yield sc
    if sc.is_connected():
        sc.disconnect()


@pytest.fixture
def unavailable_client():
    return FakeCompileClient(exc=CompileServiceUnavailable('connection refused'))
