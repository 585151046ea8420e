"""
Round State

Mutable controller for one player's session: the active root word, the words
accepted this round, the per-round score history and the running total.
"""

import logging
from typing import List, Optional, Sequence

from ..models.game import RoundSnapshot, SubmissionResult, WordScoreEntry
from .word_pool import EmptyWordPool, RandomSelector
from .word_validator import WordValidator, normalize_word

logger = logging.getLogger(__name__)


class RoundNotStarted(RuntimeError):
    """Raised when a word is submitted before any round was started."""


class RoundState:
    """
    Session controller.

    Not reentrant: callers serving several threads must serialize access to
    an instance themselves.
    """

    def __init__(self, validator: WordValidator, selector: Optional[RandomSelector] = None,
                 game_id: Optional[str] = None):
        self.validator = validator
        self.selector = selector or RandomSelector()
        self.game_id = game_id

        self._root_word: Optional[str] = None
        self._used_words: List[str] = []  # newest first
        self._score_history: List[WordScoreEntry] = []  # newest first
        self._total_score = 0

    @property
    def root_word(self) -> Optional[str]:
        return self._root_word

    @property
    def used_words(self) -> List[str]:
        return list(self._used_words)

    @property
    def score_history(self) -> List[WordScoreEntry]:
        return [WordScoreEntry(entry.word, entry.score) for entry in self._score_history]

    @property
    def total_score(self) -> int:
        return self._total_score

    @property
    def round_number(self) -> int:
        return len(self._score_history)

    @property
    def is_started(self) -> bool:
        return self._root_word is not None

    def start(self, word_pool: Sequence[str]) -> str:
        """
        Begin a new round with a random root word from ``word_pool``.

        The total score and earlier history entries are kept.

        Raises:
            EmptyWordPool: If ``word_pool`` is empty. The current round is
                ended (no root word, no used words) while the score history
                and total are kept; a later successful start resumes play.
        """
        try:
            root_word = normalize_word(self.selector.pick(word_pool))
        except EmptyWordPool:
            self._root_word = None
            self._used_words = []
            logger.warning("Game %s: no root word available, round ended", self.game_id)
            raise

        self._root_word = root_word
        self._used_words = []
        self._score_history.insert(0, WordScoreEntry(word=root_word, score=0))

        logger.debug("Game %s: round %d started with root word '%s'",
                     self.game_id, self.round_number, root_word)
        return root_word

    def restart(self, word_pool: Sequence[str]) -> str:
        """Discard the current round and start a fresh one."""
        return self.start(word_pool)

    def submit_word(self, raw: str) -> SubmissionResult:
        """
        Validate and, if accepted, score a submitted word.

        The Nth accepted word of a round scores N times its letter count.
        Rejections leave the state untouched.

        Raises:
            RoundNotStarted: If no round is in play
        """
        if self._root_word is None:
            raise RoundNotStarted("Start a round before submitting words")

        candidate = normalize_word(raw)
        verdict = self.validator.validate(candidate, self._root_word, self._used_words)
        if not verdict.accepted:
            return SubmissionResult(accepted=False, word=verdict.word, reason=verdict.reason,
                                    total_score=self._total_score)

        word = verdict.word
        self._used_words.insert(0, word)

        score = len(self._used_words) * len(word)
        self._score_history[0].score += score
        self._total_score += score

        return SubmissionResult(accepted=True, word=word, score_delta=score,
                                total_score=self._total_score)

    def snapshot(self) -> RoundSnapshot:
        return RoundSnapshot(
            game_id=self.game_id,
            root_word=self._root_word,
            round_number=self.round_number,
            total_score=self._total_score,
            used_words=[{"word": word, "letter_count": len(word)} for word in self._used_words],
            score_history=[entry.to_dict() for entry in self._score_history],
        )
