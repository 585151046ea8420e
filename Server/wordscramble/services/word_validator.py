"""
Word Validator

Pure rules engine deciding whether a candidate word may be played against a
root word. Holds no game state; everything it needs is passed in.
"""

from collections import Counter
from typing import Collection

from ..config.game_settings import DEFAULT_LOCALE, MIN_WORD_LENGTH
from ..models.game import RejectionReason, ValidationResult
from .dictionary import DictionaryChecker


def normalize_word(raw: str) -> str:
    """Lowercase and strip surrounding whitespace."""
    return (raw or "").strip().lower()


def is_derivable(candidate: str, root_word: str) -> bool:
    """
    True if every letter of ``candidate`` can be taken from ``root_word``,
    each letter occurrence of the root being usable at most once.
    """
    available = Counter(root_word)
    needed = Counter(candidate)
    return all(available[letter] >= count for letter, count in needed.items())


class WordValidator:
    """
    Classifies candidate words.

    Checks run in a fixed order and the first failure decides the reason:
    1. TooShort: fewer than ``min_length`` letters
    2. IsRootWord: same as the root word
    3. AlreadyUsed: already accepted this round
    4. NotDerivable: letters cannot be drawn from the root word
    5. NotARealWord: the dictionary does not know it

    The dictionary is consulted last, so it is only hit for candidates that
    passed every local check.
    """

    def __init__(self, dictionary: DictionaryChecker, locale: str = DEFAULT_LOCALE,
                 min_length: int = MIN_WORD_LENGTH):
        self.dictionary = dictionary
        self.locale = locale
        self.min_length = min_length

    def validate(self, candidate: str, root_word: str,
                 used_words: Collection[str]) -> ValidationResult:
        """
        Validate ``candidate`` against ``root_word`` and the words already used.

        Args:
            candidate: Raw or normalized candidate, normalized again here
            root_word: The round's root word
            used_words: Words accepted so far in the round

        Returns:
            ValidationResult with ``reason`` None when the word is accepted
        """
        word = normalize_word(candidate)
        root = normalize_word(root_word)

        if len(word) < self.min_length:
            return ValidationResult(word, RejectionReason.TOO_SHORT)

        if word == root:
            return ValidationResult(word, RejectionReason.IS_ROOT_WORD)

        if word in used_words:
            return ValidationResult(word, RejectionReason.ALREADY_USED)

        if not is_derivable(word, root):
            return ValidationResult(word, RejectionReason.NOT_DERIVABLE)

        if not self.dictionary.is_real_word(word, self.locale):
            return ValidationResult(word, RejectionReason.NOT_A_REAL_WORD)

        return ValidationResult(word)
