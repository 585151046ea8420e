"""
Word Pool Service

Loads the pool of root words from a text resource and picks the root word
for each round.
"""

import logging
import random
from typing import List, Optional, Sequence

from ..config.game_settings import WORD_POOL_FILE

logger = logging.getLogger(__name__)


class EmptyWordPool(ValueError):
    """Raised when a root word is requested from an empty pool."""

    def __init__(self, message: str = "Word pool is empty, cannot choose a root word"):
        super().__init__(message)


class ResourceLoadError(OSError):
    """Raised when a bundled or configured word resource cannot be read."""


def read_word_lines(path: str, skip_blank: bool = True) -> List[str]:
    """
    Read a one-word-per-line text file.

    Words are stripped and lowercased. Blank lines are dropped unless
    ``skip_blank`` is False.

    Raises:
        ResourceLoadError: If the file is missing, unreadable or not UTF-8
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            lines = f.read().split('\n')
    except FileNotFoundError as e:
        raise ResourceLoadError(f"Word resource not found: {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceLoadError(f"Failed to read word resource {path}: {e}") from e

    words = [line.strip().lower() for line in lines]
    if skip_blank:
        words = [word for word in words if word]
    return words


def load_word_pool(path: Optional[str] = None, skip_blank: bool = True) -> List[str]:
    """
    Load the pool of candidate root words.

    Args:
        path: Text file with one word per line, defaults to the bundled words.txt
        skip_blank: Drop empty lines (a trailing newline would otherwise
            produce an empty root word)

    Returns:
        List[str]: Lowercase words in file order

    Raises:
        ResourceLoadError: If the file cannot be read
    """
    path = path or WORD_POOL_FILE
    words = read_word_lines(path, skip_blank=skip_blank)
    logger.debug("Loaded %d root words from %s", len(words), path)
    return words


class RandomSelector:
    """
    Uniform random choice over a word pool.

    Owns its own ``random.Random`` so a seed pins the sequence of root words
    without touching the global generator.
    """

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def pick(self, pool: Sequence[str]) -> str:
        if not pool:
            raise EmptyWordPool()
        return self._random.choice(pool)
