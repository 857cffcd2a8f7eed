"""
Password Vault Controller

Handles all Password Vault HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..errors import GameNotFound
from ..services.password_service import get_password_service
from ..utils.decorators import require_service
from ..utils.game_logger import game_logger

password_bp = Blueprint('password', __name__)


def _vault_response(action, vault_id, operation):
    """Run a vault operation and wrap its state in the standard response."""
    try:
        state = operation()
    except GameNotFound:
        error_response = {
            'success': False,
            'error': 'Vault not found'
        }
        game_logger.log_server_response(request, action, False, error_response, vault_id)
        return jsonify(error_response), 404
    except Exception as e:
        game_logger.log_error(request, e, action, vault_id)
        return jsonify({'success': False, 'error': str(e)}), 500

    response_data = {
        'success': True,
        'state': asdict(state)
    }
    game_logger.log_server_response(
        request, action, True, response_data, vault_id,
        level=state.level_index, attempts=state.attempts, solved=state.solved
    )
    return jsonify(response_data)


@password_bp.route('/password/new', methods=['POST'])
@require_service(get_password_service, 'Password')
def new_vault(service):
    """Start the vault at level one."""
    game_logger.log_user_action(request, 'new_vault')
    vault_id = service.create_vault()
    return _vault_response('new_vault', vault_id, lambda: service.get_state(vault_id))


@password_bp.route('/password/<vault_id>', methods=['GET'])
@require_service(get_password_service, 'Password')
def get_vault(vault_id, service):
    """Get current vault state."""
    game_logger.log_user_action(request, 'get_vault', vault_id)
    return _vault_response('get_vault', vault_id, lambda: service.get_state(vault_id))


@password_bp.route('/password/<vault_id>/guess', methods=['POST'])
@require_service(get_password_service, 'Password')
def guess_password(vault_id, service):
    """Submit a password guess."""
    data = request.get_json(silent=True) or {}
    guess = data.get('guess', '')
    if not isinstance(guess, str):
        return jsonify({
            'success': False,
            'error': 'Guess must be a string'
        }), 400

    # The guess itself is not logged; it may be a real password
    game_logger.log_user_action(request, 'guess_password', vault_id, guess_length=len(guess))
    return _vault_response('guess_password', vault_id, lambda: service.guess(vault_id, guess))


@password_bp.route('/password/<vault_id>/next', methods=['POST'])
@require_service(get_password_service, 'Password')
def next_level(vault_id, service):
    """Advance to the next level when one exists."""
    game_logger.log_user_action(request, 'next_level', vault_id)
    return _vault_response('next_level', vault_id, lambda: service.next_level(vault_id))


@password_bp.route('/password/<vault_id>/restart', methods=['POST'])
@require_service(get_password_service, 'Password')
def restart_vault(vault_id, service):
    """Go back to level one."""
    game_logger.log_user_action(request, 'restart_vault', vault_id)
    return _vault_response('restart_vault', vault_id, lambda: service.restart(vault_id))


@password_bp.route('/password/<vault_id>', methods=['DELETE'])
@require_service(get_password_service, 'Password')
def delete_vault(vault_id, service):
    """Delete a vault."""
    game_logger.log_user_action(request, 'delete_vault', vault_id)
    success = service.delete_vault(vault_id)
    response_data = {
        'success': success
    }
    game_logger.log_server_response(request, 'delete_vault', success, response_data, vault_id)
    return jsonify(response_data)
