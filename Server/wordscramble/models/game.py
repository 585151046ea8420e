"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class RejectionReason(Enum):
    """Why a candidate word was refused, in the order the checks run."""
    TOO_SHORT = "TooShort"
    IS_ROOT_WORD = "IsRootWord"
    ALREADY_USED = "AlreadyUsed"
    NOT_DERIVABLE = "NotDerivable"
    NOT_A_REAL_WORD = "NotARealWord"


@dataclass(frozen=True)
class ValidationResult:
    """Verdict of the word validator for one normalized candidate."""
    word: str
    reason: Optional[RejectionReason] = None

    @property
    def accepted(self) -> bool:
        return self.reason is None


@dataclass
class WordScoreEntry:
    """Cumulative score of one round, keyed to that round's root word."""
    word: str
    score: int = 0

    @property
    def letter_count(self) -> int:
        return len(self.word)

    def to_dict(self) -> Dict:
        return {
            "word": self.word,
            "score": self.score,
            "letter_count": self.letter_count,
        }


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome of submitting a word to a round."""
    accepted: bool
    word: str
    score_delta: int = 0
    total_score: int = 0
    reason: Optional[RejectionReason] = None

    def to_dict(self) -> Dict:
        if self.accepted:
            return {
                "accepted": True,
                "word": self.word,
                "score_delta": self.score_delta,
                "total_score": self.total_score,
            }
        return {
            "accepted": False,
            "word": self.word,
            "reason": self.reason.value,
        }


@dataclass
class RoundSnapshot:
    """Server-side session state representation, safe to render."""
    game_id: Optional[str]
    root_word: Optional[str]
    round_number: int
    total_score: int
    used_words: List[Dict] = field(default_factory=list)  # [{"word", "letter_count"}], newest first
    score_history: List[Dict] = field(default_factory=list)  # WordScoreEntry.to_dict(), newest first
