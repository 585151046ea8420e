"""
WebSocket Event Handlers

Socket.IO events mirroring the HTTP game endpoints, so a client can play
a round over a single connection.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit
from ..services.game_service import get_game_service
from ..services.round_state import RoundNotStarted
from ..services.word_pool import EmptyWordPool
from ..utils.decorators import websocket_game_required
from ..utils.game_logger import game_logger
from ..utils.messages import present_submission


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('start_round')
    def handle_start_round(data=None):
        """Create a new session and send its first round."""
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        try:
            game_id = game_service.create_new_game()
        except EmptyWordPool as e:
            game_logger.log_error(request, e, 'start_round')
            emit('error', {'error': str(e), 'error_type': 'EmptyWordPool'})
            return

        state = game_service.get_game_state(game_id)
        game_logger.log_game_event(
            game_id, 'round_started', request.remote_addr,
            root_word=state.root_word, round_number=state.round_number, channel='websocket'
        )
        emit('round_state', {'success': True, 'game_id': game_id, 'state': asdict(state)})

    @socketio.on('submit_word')
    @websocket_game_required
    def handle_submit_word(data, game_service=None, game_id=None):
        """Validate and score a word, answering with an accepted or rejected event."""
        word = data.get('word')
        if not isinstance(word, str):
            emit('error', {'error': 'Word is required', 'game_id': game_id})
            return

        game_logger.log_user_action(request, 'submit_word', game_id, word=word, channel='websocket')

        try:
            result = game_service.submit_word(game_id, word)
            if result is None:
                emit('error', {'error': 'Game not found', 'game_id': game_id})
                return

            state = game_service.get_game_state(game_id)
            payload = {
                'game_id': game_id,
                'result': present_submission(result, state.root_word if state else None),
                'state': asdict(state) if state else None
            }

            if result.accepted:
                game_logger.log_game_event(
                    game_id, 'word_accepted', request.remote_addr,
                    word=result.word, score_delta=result.score_delta, total_score=result.total_score
                )
                emit('word_accepted', payload)
            else:
                emit('word_rejected', payload)

        except RoundNotStarted as e:
            emit('error', {'error': str(e), 'error_type': 'RoundNotStarted', 'game_id': game_id})
        except Exception as e:
            game_logger.log_error(request, e, 'submit_word', game_id)
            emit('error', {'error': str(e), 'game_id': game_id})

    @socketio.on('restart_round')
    @websocket_game_required
    def handle_restart_round(data, game_service=None, game_id=None):
        """Start a new round in an existing session."""
        try:
            state = game_service.restart_game(game_id)
        except EmptyWordPool as e:
            game_logger.log_error(request, e, 'restart_round', game_id)
            emit('error', {'error': str(e), 'error_type': 'EmptyWordPool', 'game_id': game_id})
            return

        game_logger.log_game_event(
            game_id, 'round_started', request.remote_addr,
            root_word=state.root_word, round_number=state.round_number, channel='websocket'
        )
        emit('round_state', {'success': True, 'game_id': game_id, 'state': asdict(state)})
