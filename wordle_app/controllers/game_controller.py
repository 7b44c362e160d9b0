"""
Game Controller

Handles all game-related HTTP endpoints of the authority.
"""

from flask import Blueprint, current_app, request, jsonify
from ..models.errors import ValidationError
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def _not_found(action, game_id):
    error_response = {
        'success': False,
        'error': 'Game not found'
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 404


@game_bp.route('/wordle/game', methods=['POST'])
def new_game():
    """Create a new game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'new_game')

        game_id = game_service.create_new_game()
        state = game_service.get_game_state(game_id)

        response_data = game_service.to_payload(
            game_id, state, reveal_solution=current_app.config.get('DEBUG', False)
        )
        response_data['message'] = 'Guess the 5-letter word!'

        game_logger.log_server_response(request, 'new_game', True, response_data, game_id)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/wordle/game/<game_id>', methods=['GET'])
def get_state(game_id):
    """Get current game state."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            return _not_found('get_state', game_id)

        response_data = game_service.to_payload(game_id, state)
        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            current_round=response_data['currentRound'], game_over=response_data['gameOver']
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


@game_bp.route('/wordle/game/<game_id>/key-statuses', methods=['GET'])
def get_key_statuses(game_id):
    """Get the keyboard statuses set so far, as a plain {letter: status} object."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_key_statuses', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            return _not_found('get_key_statuses', game_id)

        response_data = game_service.key_statuses_payload(state)
        game_logger.log_server_response(
            request, 'get_key_statuses', True, {'keys_set': len(response_data)}, game_id
        )
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_key_statuses', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_key_statuses', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/wordle/game/<game_id>/guess', methods=['POST'])
def make_guess(game_id):
    """Submit a guess for evaluation."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = request.get_json(silent=True)
        if not data or 'guess' not in data:
            error_response = {
                'success': False,
                'error': 'Guess is required'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
            return jsonify(error_response), 400

        guess = data['guess']
        game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess)

        try:
            result = game_service.make_guess(game_id, guess)
        except ValidationError as validation_error:
            error_response = {
                'success': False,
                'error': str(validation_error)
            }
            game_logger.log_server_response(
                request, 'submit_guess', False, error_response, game_id,
                validation_error=str(validation_error), attempted_guess=guess
            )
            return jsonify(error_response), 400

        if result is None:
            return _not_found('submit_guess', game_id)

        response_data = game_service.to_payload(game_id, result.state)
        response_data['message'] = result.message

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            guess=guess, round=response_data['currentRound'], game_over=response_data['gameOver']
        )

        if response_data['gameOver']:
            event = 'game_won' if response_data['won'] else 'game_lost'
            game_logger.log_game_event(
                game_id, event, request.remote_addr,
                rounds_used=response_data['currentRound'], target_word=result.state.solution,
                final_guess=guess
            )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/wordle/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

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
def health_check():
    """Health check endpoint."""
    game_service = get_game_service()
    game_logger.log_user_action(request, 'health_check')

    response_data = {
        'status': 'healthy' if game_service else 'degraded',
        'active_games': len(game_service.games) if game_service else 0,
        'log_stats': game_logger.get_log_stats()
    }
    game_logger.log_server_response(request, 'health_check', True, response_data)
    return jsonify(response_data)
