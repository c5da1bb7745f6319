"""
Profile Controller

Handles the statistics profile and the hard-mode setting endpoints.
"""

from flask import Blueprint, request, jsonify
from ..models.errors import StorageError, UserNotFoundError
from ..services.stats_service import get_stats_service
from ..utils.decorators import require_auth
from ..utils.game_logger import game_logger

profile_bp = Blueprint('profile', __name__)


def _stats_unavailable():
    return jsonify({
        'success': False,
        'error': 'Statistics service unavailable'
    }), 500


@profile_bp.route('/profile', methods=['GET'])
@require_auth
def get_profile():
    """Return streaks, win rate and average guesses for the caller."""
    try:
        stats_service = get_stats_service()
        if not stats_service:
            return _stats_unavailable()

        game_logger.log_user_action(request, 'get_profile')

        response_data = stats_service.get_profile(request.user_id)

        game_logger.log_server_response(request, 'get_profile', True, response_data)
        return jsonify(response_data)

    except UserNotFoundError as e:
        game_logger.log_error(request, e, 'get_profile')
        return jsonify({'success': False, 'error': 'User not found'}), 404
    except StorageError as e:
        game_logger.log_error(request, e, 'get_profile')
        return jsonify({'success': False, 'error': 'Failed to fetch user'}), 503
    except Exception as e:
        game_logger.log_error(request, e, 'get_profile')
        return jsonify({'success': False, 'error': str(e)}), 500


@profile_bp.route('/settings/hard-mode', methods=['GET'])
@require_auth
def get_hard_mode():
    """Return only the caller's hard-mode preference."""
    try:
        stats_service = get_stats_service()
        if not stats_service:
            return _stats_unavailable()

        return jsonify({'hardMode': stats_service.get_hard_mode(request.user_id)})

    except UserNotFoundError as e:
        game_logger.log_error(request, e, 'get_hard_mode')
        return jsonify({'success': False, 'error': 'User not found'}), 404
    except StorageError as e:
        game_logger.log_error(request, e, 'get_hard_mode')
        return jsonify({'success': False, 'error': 'Failed to fetch settings'}), 503
    except Exception as e:
        game_logger.log_error(request, e, 'get_hard_mode')
        return jsonify({'success': False, 'error': str(e)}), 500


@profile_bp.route('/settings', methods=['PATCH'])
@require_auth
def update_settings():
    """Update the caller's settings. Only ``hardMode`` is supported."""
    try:
        stats_service = get_stats_service()
        if not stats_service:
            return _stats_unavailable()

        data = request.get_json(silent=True)
        if not data or not isinstance(data.get('hardMode'), bool):
            error_response = {
                'success': False,
                'error': 'hardMode must be true or false'
            }
            game_logger.log_server_response(request, 'update_settings', False, error_response)
            return jsonify(error_response), 400

        game_logger.log_user_action(request, 'update_settings', hard_mode=data['hardMode'])

        hard_mode = stats_service.set_hard_mode(request.user_id, data['hardMode'])
        response_data = {'success': True, 'hardMode': hard_mode}

        game_logger.log_server_response(request, 'update_settings', True, response_data)
        return jsonify(response_data)

    except UserNotFoundError as e:
        game_logger.log_error(request, e, 'update_settings')
        return jsonify({'success': False, 'error': 'User not found'}), 404
    except StorageError as e:
        game_logger.log_error(request, e, 'update_settings')
        return jsonify({'success': False, 'error': 'Failed to update settings'}), 503
    except Exception as e:
        game_logger.log_error(request, e, 'update_settings')
        return jsonify({'success': False, 'error': str(e)}), 500
