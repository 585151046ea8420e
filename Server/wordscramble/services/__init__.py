"""
Services Package

Contains all business logic and service classes.
"""

from .dictionary import DictionaryChecker, StaticDictionary
from .game_service import GameService, get_game_service, initialize_game_service
from .round_state import RoundState, RoundNotStarted
from .word_pool import EmptyWordPool, ResourceLoadError, RandomSelector, load_word_pool
from .word_validator import WordValidator, normalize_word, is_derivable

__all__ = [
    'DictionaryChecker', 'StaticDictionary',
    'GameService', 'get_game_service', 'initialize_game_service',
    'RoundState', 'RoundNotStarted',
    'EmptyWordPool', 'ResourceLoadError', 'RandomSelector', 'load_word_pool',
    'WordValidator', 'normalize_word', 'is_derivable'
]
