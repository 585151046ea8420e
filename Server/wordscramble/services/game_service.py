"""
Game Service

Keeps every active Word Scramble session in memory and routes player
actions to the session's RoundState.
"""

import random
import threading
import uuid
from typing import Dict, List, Optional, Tuple

from ..config.app_config import Config
from ..models.game import RoundSnapshot, SubmissionResult
from .dictionary import DictionaryChecker, StaticDictionary
from .round_state import RoundState
from .word_pool import RandomSelector, load_word_pool
from .word_validator import WordValidator


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Session management with unique game IDs
    - Root word selection from the shared word pool
    - Word submission and round restarts

    The word pool and dictionary are loaded once, before any session exists.
    Each session has its own lock since Flask may serve its requests from
    several threads.
    """

    def __init__(self, word_pool: List[str], dictionary: DictionaryChecker,
                 locale: str = Config.DICTIONARY_LOCALE,
                 min_length: int = Config.MIN_WORD_LENGTH,
                 seed: Optional[int] = None):
        self.games: Dict[str, RoundState] = {}  # Store active games by game_id
        self.word_pool = list(word_pool)
        self.validator = WordValidator(dictionary, locale=locale, min_length=min_length)
        self._seeds = random.Random(seed) if seed is not None else None
        self._locks: Dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def _new_selector(self) -> RandomSelector:
        if self._seeds is None:
            return RandomSelector()
        # A configured seed reproduces the root words of every session
        return RandomSelector(self._seeds.getrandbits(32))

    def _session(self, game_id: str) -> Optional[Tuple[RoundState, threading.Lock]]:
        with self._registry_lock:
            if game_id not in self.games:
                return None
            return self.games[game_id], self._locks[game_id]

    def create_new_game(self) -> str:
        """
        Creates a new session and starts its first round.

        Returns:
            str: Unique game ID for this session

        Raises:
            EmptyWordPool: If there is no root word to start with
        """
        game_id = str(uuid.uuid4())
        round_state = RoundState(self.validator, self._new_selector(), game_id=game_id)
        round_state.start(self.word_pool)

        with self._registry_lock:
            self.games[game_id] = round_state
            self._locks[game_id] = threading.Lock()
        return game_id

    def get_game_state(self, game_id: str) -> Optional[RoundSnapshot]:
        """
        Returns the current state of a session, or None if game not found.
        """
        session = self._session(game_id)
        if session is None:
            return None
        round_state, lock = session
        with lock:
            return round_state.snapshot()

    def submit_word(self, game_id: str, word: str) -> Optional[SubmissionResult]:
        """
        Submits a word to the session's current round.

        Returns:
            SubmissionResult or None if game not found

        Raises:
            RoundNotStarted: If the last restart found an empty word pool
        """
        session = self._session(game_id)
        if session is None:
            return None
        round_state, lock = session
        with lock:
            return round_state.submit_word(word)

    def restart_game(self, game_id: str) -> Optional[RoundSnapshot]:
        """
        Starts a new round in an existing session, keeping its total score.

        Raises:
            EmptyWordPool: If there is no root word to restart with
        """
        session = self._session(game_id)
        if session is None:
            return None
        round_state, lock = session
        with lock:
            round_state.restart(self.word_pool)
            return round_state.snapshot()

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._registry_lock:
            if game_id in self.games:
                del self.games[game_id]
                del self._locks[game_id]
                return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(config_class=Config, word_pool: Optional[List[str]] = None,
                            dictionary: Optional[DictionaryChecker] = None) -> GameService:
    """
    Initialize the global game service instance.

    Resources not passed in are loaded as configured in ``config_class``:
    the word pool from WORD_POOL_PATH (or the bundled list) and the
    dictionary from DICTIONARY_DIR (or the wordfreq lists).

    Raises:
        ResourceLoadError: If the word pool or dictionary cannot be loaded
    """
    global _game_service
    if word_pool is None:
        word_pool = load_word_pool(config_class.WORD_POOL_PATH)
    if dictionary is None:
        locales = [config_class.DICTIONARY_LOCALE]
        if config_class.DICTIONARY_DIR:
            dictionary = StaticDictionary.from_files(config_class.DICTIONARY_DIR, locales)
        else:
            dictionary = StaticDictionary.from_wordfreq(locales, config_class.DICTIONARY_SIZE)
    _game_service = GameService(
        word_pool,
        dictionary,
        locale=config_class.DICTIONARY_LOCALE,
        min_length=config_class.MIN_WORD_LENGTH,
        seed=config_class.RANDOM_SEED,
    )
    return _game_service
