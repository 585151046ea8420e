"""
Game Logger

Writes one JSON object per line for every player action, server response,
game event and error, to a dated file under ``LOG_DIR``.
"""

import logging
import json
from collections import Counter
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config.app_config import Config
from .helpers import get_user_identity

# Entry type -> key in get_log_stats()
_STAT_KEYS = {
    'USER_ACTION': 'user_actions',
    'SERVER_RESPONSE_SUCCESS': 'server_responses',
    'SERVER_RESPONSE_ERROR': 'server_responses',
    'GAME_EVENT': 'game_events',
    'ERROR': 'errors',
}


class GameLogger:
    """Structured JSON-lines log for the game server."""

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = logging.getLevelName(level.upper()) if isinstance(level, str) else level
        self.logger = self._setup_logger()

    @property
    def log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _setup_logger(self) -> logging.Logger:
        logger = logging.getLogger('wordscramble_game')
        logger.setLevel(self.level)

        # Re-initialising replaces the handlers of the previous instance
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

        file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
        file_handler.setLevel(self.level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s', datefmt='%Y-%m-%d %H:%M:%S'
        ))

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)
        return logger

    def _write(self, level: int, entry_type: str, action: str,
               user: Dict[str, str], details: Dict[str, Any]):
        entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': entry_type,
            'action': action,
            'user': user,
            'details': details
        }
        self.logger.log(level, json.dumps(entry, ensure_ascii=False, default=str))

    def log_user_action(self, request, action: str, game_id: Optional[str] = None, **kwargs):
        """Record an incoming request or socket event (``new_game``, ``submit_word``...)."""
        details = {
            'game_id': game_id,
            'endpoint': getattr(request, 'endpoint', None),
            'method': getattr(request, 'method', None),
            **kwargs
        }
        self._write(logging.INFO, 'USER_ACTION', action, get_user_identity(request), details)

    def log_server_response(self, request, action: str, success: bool,
                            response_data: Dict[str, Any], game_id: Optional[str] = None, **kwargs):
        """Record what was sent back; failures are logged at ERROR level."""
        details = {
            'game_id': game_id,
            'success': success,
            'response_data': self._summarize(response_data),
            **kwargs
        }
        if success:
            self._write(logging.INFO, 'SERVER_RESPONSE_SUCCESS', action,
                        get_user_identity(request), details)
        else:
            self._write(logging.ERROR, 'SERVER_RESPONSE_ERROR', action,
                        get_user_identity(request), details)

    def log_game_event(self, game_id: Optional[str], event: str, user_ip: str, **kwargs):
        """Record a change in game state, e.g. ``round_started`` or ``word_accepted``."""
        self._write(logging.INFO, 'GAME_EVENT', event,
                    {'user_ip': user_ip or 'unknown'}, {'game_id': game_id, **kwargs})

    def log_error(self, request, error: Exception, action: str, game_id: Optional[str] = None):
        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }
        self._write(logging.ERROR, 'ERROR', action, get_user_identity(request), details)

    @staticmethod
    def _summarize(data: Dict[str, Any]) -> Dict[str, Any]:
        """Replace a full round snapshot with its headline fields."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        summary = dict(data)
        state = summary.get('state')
        if isinstance(state, dict):
            summary['state'] = {
                'root_word': state.get('root_word'),
                'round_number': state.get('round_number'),
                'total_score': state.get('total_score'),
                'used_words_count': len(state.get('used_words', []))
            }
        return summary

    def get_log_stats(self) -> Dict[str, Any]:
        """Entry counts by type for today's log file."""
        log_file = self.log_file
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        counts = Counter()
        try:
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    payload = line.split(' | ', 2)[-1]
                    if not payload.strip():
                        continue
                    counts['total_entries'] += 1
                    try:
                        entry_type = json.loads(payload).get('event_type')
                    except ValueError:
                        continue
                    if entry_type in _STAT_KEYS:
                        counts[_STAT_KEYS[entry_type]] += 1
        except OSError as e:
            return {'error': f'Failed to get stats: {e}'}

        stats = {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': counts['total_entries'],
        }
        stats.update({key: counts[key] for key in sorted(set(_STAT_KEYS.values()))})
        return stats


game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)
