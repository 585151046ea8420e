import os
import sys
import tempfile

import pytest

# Ensure the server root (containing the `wordscramble` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
SERVER_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if SERVER_ROOT not in sys.path:
    sys.path.insert(0, SERVER_ROOT)

# Keep test logs out of the working tree; read when the package is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='wordscramble-logs-'))

from wordscramble import create_app
from wordscramble.config import TestingConfig
from wordscramble.services import RandomSelector, RoundState, WordValidator
from wordscramble.services.game_service import initialize_game_service


TEACUP_WORDS = {'cup', 'cape', 'eat', 'tea', 'ace', 'cat', 'pact', 'cute', 'eel', 'teacup'}


class FakeDictionary:
    """Fixed word list that records every lookup."""

    def __init__(self, words=TEACUP_WORDS):
        self.words = set(words)
        self.lookups = []

    def is_real_word(self, word, locale):
        self.lookups.append((word, locale))
        return word in self.words


@pytest.fixture()
def dictionary():
    return FakeDictionary()


@pytest.fixture()
def validator(dictionary):
    return WordValidator(dictionary)


@pytest.fixture()
def round_state(validator):
    state = RoundState(validator, RandomSelector(seed=7), game_id='test-game')
    state.start(['teacup'])
    return state


@pytest.fixture()
def make_app():
    def _make_app(word_pool=('teacup',), words=TEACUP_WORDS):
        initialize_game_service(TestingConfig, word_pool=list(word_pool), dictionary=FakeDictionary(words))
        return create_app(TestingConfig)
    return _make_app


@pytest.fixture()
def flask_app(make_app):
    application, _ = make_app()
    yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = flask_app.socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client()
    )
    yield test_client
    if test_client.is_connected():
        test_client.disconnect()
