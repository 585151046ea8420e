"""
Game Configuration Constants Module

Defines the rules constants for Word Scramble and the locations of the
bundled word resources. Loading the resources themselves is done by
``services.word_pool`` and ``services.dictionary``.
"""

import os
from typing import Dict, Final, List

CONFIG_DIR: Final[str] = os.path.dirname(os.path.abspath(__file__))

# Candidate words shorter than this are rejected as TooShort
MIN_WORD_LENGTH: Final[int] = 3

DEFAULT_LOCALE: Final[str] = "en"

WORD_POOL_FILE: Final[str] = os.path.join(CONFIG_DIR, "words.txt")
"""
Bundled pool of root words, one per line.
"""

DICTIONARY_FILE_PATTERN: Final[str] = "dictionary_{locale}.txt"

# Most frequent wordfreq entries accepted as real words
DICTIONARY_SIZE: Final[int] = 200_000


def dictionary_path(locale: str, directory: str) -> str:
    """Path of the dictionary word list for ``locale`` inside ``directory``."""
    return os.path.join(directory, DICTIONARY_FILE_PATTERN.format(locale=locale))


def get_word_statistics(word_pool: List[str]) -> Dict:
    """
    Summarizes a word pool for the health endpoint.

    Returns:
        dict: total_words, average and longest root word length, and
        the five most common letters across the pool
    """
    if not word_pool:
        return {"total_words": 0}

    letter_frequency: Dict[str, int] = {}
    for word in word_pool:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(word_pool),
        "avg_word_length": round(sum(len(word) for word in word_pool) / len(word_pool), 2),
        "longest_word": max(len(word) for word in word_pool),
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }
