"""
Dictionary Service

Answers whether a word is a real word in a given locale. The rules engine
only depends on the ``is_real_word`` capability, so any object providing it
can stand in for the default word lists.
"""

import logging
from typing import Dict, Iterable, Protocol, Set

from wordfreq import top_n_list

from ..config.game_settings import DEFAULT_LOCALE, DICTIONARY_SIZE, dictionary_path
from .word_pool import ResourceLoadError, read_word_lines

logger = logging.getLogger(__name__)


class DictionaryChecker(Protocol):
    def is_real_word(self, word: str, locale: str) -> bool:
        ...


class StaticDictionary:
    """
    Dictionary backed by in-memory word sets, one per locale.
    """

    def __init__(self, words_by_locale: Dict[str, Iterable[str]]):
        self._words: Dict[str, Set[str]] = {
            locale: {word.strip().lower() for word in words if word.strip()}
            for locale, words in words_by_locale.items()
        }
        self._warned_locales: Set[str] = set()

    @classmethod
    def from_wordfreq(cls, locales: Iterable[str] = (DEFAULT_LOCALE,),
                      n_words: int = DICTIONARY_SIZE) -> "StaticDictionary":
        """
        Build the dictionary from the ``n_words`` most frequent words of each
        locale in the wordfreq lists. Tokens with non-letters are skipped.

        Raises:
            ResourceLoadError: If wordfreq has no list for a locale
        """
        words_by_locale = {}
        for locale in locales:
            try:
                words = top_n_list(locale, n_words, wordlist='best')
            except LookupError as e:
                raise ResourceLoadError(f"No word frequency list for locale '{locale}': {e}") from e
            words_by_locale[locale] = [word for word in words if word.isalpha()]
            if not words_by_locale[locale]:
                raise ResourceLoadError(f"Word frequency list for locale '{locale}' is empty")
            logger.debug("Loaded %d dictionary words for locale '%s' from wordfreq",
                         len(words_by_locale[locale]), locale)
        return cls(words_by_locale)

    @classmethod
    def from_files(cls, directory: str,
                   locales: Iterable[str] = (DEFAULT_LOCALE,)) -> "StaticDictionary":
        """
        Load ``dictionary_<locale>.txt`` from ``directory`` for each locale.

        Raises:
            ResourceLoadError: If any of the files cannot be read
        """
        words_by_locale = {}
        for locale in locales:
            words_by_locale[locale] = read_word_lines(dictionary_path(locale, directory))
            logger.debug("Loaded %d dictionary words for locale '%s'",
                         len(words_by_locale[locale]), locale)
        return cls(words_by_locale)

    @property
    def locales(self) -> Set[str]:
        return set(self._words)

    def is_real_word(self, word: str, locale: str = DEFAULT_LOCALE) -> bool:
        words = self._words.get(locale)
        if words is None:
            if locale not in self._warned_locales:
                self._warned_locales.add(locale)
                logger.warning("No dictionary loaded for locale '%s', every word will be rejected", locale)
            return False
        return word.lower() in words
