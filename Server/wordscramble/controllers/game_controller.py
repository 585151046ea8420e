"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..config.game_settings import get_word_statistics
from ..services.round_state import RoundNotStarted
from ..services.word_pool import EmptyWordPool
from ..utils.decorators import require_game_service
from ..utils.game_logger import game_logger
from ..utils.messages import present_submission

game_bp = Blueprint('game', __name__)


def _empty_pool_response(action, error, game_id=None):
    error_response = {
        'success': False,
        'error': str(error),
        'error_type': 'EmptyWordPool'
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 503


def _not_found_response(action, game_id):
    error_response = {
        'success': False,
        'error': 'Game not found'
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 404


@game_bp.route('/new_game', methods=['POST'])
@require_game_service
def new_game(game_service):
    """Create a new game session and start its first round."""
    try:
        game_logger.log_user_action(request, 'new_game')

        try:
            game_id = game_service.create_new_game()
        except EmptyWordPool as e:
            return _empty_pool_response('new_game', e)

        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(request, 'new_game', True, response_data, game_id)
        game_logger.log_game_event(
            game_id, 'round_started', request.remote_addr,
            root_word=state.root_word, round_number=state.round_number
        )

        return jsonify(response_data), 201

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game_service
def get_state(game_id, game_service):
    """Get current game state."""
    try:
        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            return _not_found_response('get_state', game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            round_number=state.round_number, total_score=state.total_score
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_state', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/word', methods=['POST'])
@require_game_service
def submit_word(game_id, game_service):
    """Submit a word for validation and scoring."""
    try:
        data = request.get_json(silent=True)
        if not data or not isinstance(data.get('word'), str):
            error_response = {
                'success': False,
                'error': 'Word is required'
            }
            game_logger.log_server_response(request, 'submit_word', False, error_response, game_id)
            return jsonify(error_response), 400

        word = data['word']
        game_logger.log_user_action(request, 'submit_word', game_id, word=word)

        try:
            result = game_service.submit_word(game_id, word)
        except RoundNotStarted as e:
            error_response = {
                'success': False,
                'error': str(e),
                'error_type': 'RoundNotStarted'
            }
            game_logger.log_server_response(request, 'submit_word', False, error_response, game_id)
            return jsonify(error_response), 409

        if result is None:
            return _not_found_response('submit_word', game_id)

        state = game_service.get_game_state(game_id)
        response_data = {
            'success': result.accepted,
            'result': present_submission(result, state.root_word),
            'state': asdict(state)
        }

        if not result.accepted:
            game_logger.log_server_response(
                request, 'submit_word', False, response_data, game_id,
                rejection_reason=result.reason.value, attempted_word=result.word
            )
            return jsonify(response_data), 400

        game_logger.log_server_response(
            request, 'submit_word', True, response_data, game_id,
            word=result.word, score_delta=result.score_delta
        )
        game_logger.log_game_event(
            game_id, 'word_accepted', request.remote_addr,
            word=result.word, score_delta=result.score_delta, total_score=result.total_score
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_word', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_word', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/restart', methods=['POST'])
@require_game_service
def restart_game(game_id, game_service):
    """Start a new round, keeping the total score."""
    try:
        game_logger.log_user_action(request, 'restart', game_id)

        try:
            state = game_service.restart_game(game_id)
        except EmptyWordPool as e:
            return _empty_pool_response('restart', e, game_id)

        if state is None:
            return _not_found_response('restart', game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(request, 'restart', True, response_data, game_id)
        game_logger.log_game_event(
            game_id, 'round_started', request.remote_addr,
            root_word=state.root_word, round_number=state.round_number
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'restart', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'restart', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@require_game_service
def delete_game(game_id, game_service):
    """Delete a game session."""
    try:
        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)

        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)
            return jsonify(response_data)

        return jsonify(response_data), 404

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'delete_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/health', methods=['GET'])
@require_game_service
def health_check(game_service):
    """Health check endpoint."""
    try:
        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': len(game_service.games),
            'word_pool_size': len(game_service.word_pool),
            'word_pool': get_word_statistics(game_service.word_pool),
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
