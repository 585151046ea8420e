"""
Player-Facing Messages

Title/message pairs shown to the player for each rejected word.
"""

from typing import Dict, Optional, Tuple

from ..models.game import RejectionReason, SubmissionResult

REJECTION_MESSAGES: Dict[RejectionReason, Tuple[str, str]] = {
    RejectionReason.TOO_SHORT: (
        "Word too short", "Words shorter than three letters are not allowed."
    ),
    RejectionReason.IS_ROOT_WORD: (
        "Root word detected", "You can't use the root word."
    ),
    RejectionReason.ALREADY_USED: (
        "Word used already", "Be more original"
    ),
    RejectionReason.NOT_DERIVABLE: (
        "Word not possible", "You can't spell that word from '{root_word}'!"
    ),
    RejectionReason.NOT_A_REAL_WORD: (
        "Word not recognized", "You can't just make them up, you know!"
    ),
}


def rejection_message(reason: RejectionReason, root_word: Optional[str] = None) -> Dict[str, str]:
    """Title and message for ``reason``, with the root word filled in."""
    title, message = REJECTION_MESSAGES[reason]
    return {
        'title': title,
        'message': message.format(root_word=root_word or ''),
    }


def present_submission(result: SubmissionResult, root_word: Optional[str] = None) -> Dict:
    """Submission payload for the client, with alert text for rejections."""
    payload = result.to_dict()
    if not result.accepted:
        payload.update(rejection_message(result.reason, root_word))
    return payload
