"""
Pytest fixtures for wordle_engine tests.
"""

import os
import tempfile

# Keep test logs out of the working directory; must run before the logger is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='wordle_engine_logs_'))

import pytest

from wordle_engine import create_app
from wordle_engine.config import TestingConfig
from wordle_engine.game import GameSession, set_default_word_source
from wordle_engine.services import game_service as game_service_module
from wordle_engine.services.game_service import initialize_game_service


class StubWordSource:
    """Word source with a fixed secret word and a switchable dictionary check."""

    def __init__(self, word: str = "APPLE", valid: bool = True):
        self.word = word
        self.valid = valid
        self.checked = []

    def get_word(self) -> str:
        return self.word

    def is_word(self, candidate: str) -> bool:
        self.checked.append(candidate)
        return self.valid


@pytest.fixture(autouse=True)
def reset_default_word_source():
    """Restore the bundled word source after every test."""
    yield
    set_default_word_source(None)


@pytest.fixture
def word_source() -> StubWordSource:
    return StubWordSource()


@pytest.fixture
def session(word_source) -> GameSession:
    """A six-guess session whose secret word is APPLE."""
    return GameSession(word_source=word_source)


@pytest.fixture
def service(word_source):
    """Fresh global game service backed by the stub word source."""
    service = initialize_game_service(word_source=word_source, config_class=TestingConfig)
    yield service
    game_service_module._game_service = None


@pytest.fixture
def app(service):
    app, _ = create_app(TestingConfig)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app):
    client = app.socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()
