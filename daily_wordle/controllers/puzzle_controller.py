"""
Puzzle Controller

Handles the daily puzzle HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from ..models.errors import Rejection, StorageError, UserNotFoundError
from ..services.puzzle_service import get_puzzle_engine
from ..utils.decorators import require_auth
from ..utils.game_logger import game_logger

puzzle_bp = Blueprint('puzzle', __name__)
health_bp = Blueprint('health', __name__)


def _engine_unavailable():
    return jsonify({
        'success': False,
        'error': 'Puzzle service unavailable'
    }), 500


@puzzle_bp.route('/today', methods=['GET'])
@require_auth
def get_today_puzzle():
    """Return today's session for the caller, creating it on first visit."""
    try:
        engine = get_puzzle_engine()
        if not engine:
            return _engine_unavailable()

        game_logger.log_user_action(request, 'get_today')

        view = engine.get_or_create_today_session(request.user_id)
        response_data = view.to_response()

        game_logger.log_server_response(
            request, 'get_today', True, response_data,
            date=view.date, attempts=len(view.guesses)
        )
        return jsonify(response_data)

    except UserNotFoundError as e:
        game_logger.log_error(request, e, 'get_today')
        return jsonify({'success': False, 'error': 'User not found'}), 404
    except StorageError as e:
        game_logger.log_error(request, e, 'get_today')
        error_response = {
            'success': False,
            'error': "Failed to fetch today's puzzle"
        }
        game_logger.log_server_response(request, 'get_today', False, error_response)
        return jsonify(error_response), 503
    except Exception as e:
        game_logger.log_error(request, e, 'get_today')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_today', False, error_response)
        return jsonify(error_response), 500


@puzzle_bp.route('/guess', methods=['POST'])
@require_auth
def submit_guess():
    """Submit a guess for today's puzzle."""
    try:
        engine = get_puzzle_engine()
        if not engine:
            return _engine_unavailable()

        data = request.get_json(silent=True)
        if not data or 'guess' not in data:
            error_response = {
                'success': False,
                'error': 'Guess is required'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response)
            return jsonify(error_response), 400

        guess = data['guess']

        game_logger.log_user_action(request, 'submit_guess', guess=guess)

        result = engine.submit_guess(request.user_id, guess)

        if isinstance(result, Rejection):
            error_response = result.to_response()
            game_logger.log_server_response(
                request, 'submit_guess', False, error_response,
                validation_error=result.reason.value, attempted_guess=guess
            )
            return jsonify(error_response), 400

        response_data = result.to_response()
        game_logger.log_server_response(
            request, 'submit_guess', True, response_data,
            attempts=result.attempts, solved=result.is_solved, failed=result.is_failed
        )
        return jsonify(response_data)

    except UserNotFoundError as e:
        game_logger.log_error(request, e, 'submit_guess')
        return jsonify({'success': False, 'error': 'User not found'}), 404
    except StorageError as e:
        game_logger.log_error(request, e, 'submit_guess')
        error_response = {
            'success': False,
            'error': 'Guess submission failed'
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response)
        return jsonify(error_response), 503
    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response)
        return jsonify(error_response), 500


@puzzle_bp.route('/calendar', methods=['GET'])
@require_auth
def get_streak_calendar():
    """Dates on which the caller solved the puzzle, for the streak heatmap."""
    try:
        engine = get_puzzle_engine()
        if not engine:
            return _engine_unavailable()

        game_logger.log_user_action(request, 'get_calendar')

        response_data = {'streakDates': engine.get_solved_dates(request.user_id)}

        game_logger.log_server_response(request, 'get_calendar', True, response_data)
        return jsonify(response_data)

    except StorageError as e:
        game_logger.log_error(request, e, 'get_calendar')
        return jsonify({'success': False, 'error': 'Failed to fetch calendar data'}), 503
    except Exception as e:
        game_logger.log_error(request, e, 'get_calendar')
        return jsonify({'success': False, 'error': str(e)}), 500


@health_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    engine = get_puzzle_engine()

    response_data = {
        'status': 'healthy' if engine else 'degraded',
        'puzzle_available': engine is not None,
        'word_count': len(engine.word_list) if engine else 0,
        'log_stats': game_logger.get_log_stats()
    }
    return jsonify(response_data), 200 if engine else 503
