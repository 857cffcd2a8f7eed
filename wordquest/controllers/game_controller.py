"""
Game Controller

Handles all Word Quest HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..config.game_settings import get_word_statistics
from ..errors import (
    GameNotFound, RemoteScoringFailure, SessionBusy, SessionTerminated, ValidationError
)
from ..services.game_service import GAME_MODES, get_game_service
from ..services.password_service import get_password_service
from ..utils.decorators import require_service
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)

# Status codes for errors a player can recover from
ERROR_STATUS = (
    (GameNotFound, 404),
    (ValidationError, 400),
    (SessionTerminated, 409),
    (SessionBusy, 409),
    (RemoteScoringFailure, 502),
)


def _game_error_response(action, error, game_id=None):
    """Build and log the JSON response for a game error."""
    status_code = next(code for error_type, code in ERROR_STATUS if isinstance(error, error_type))
    error_response = {
        'success': False,
        'error': str(error),
        'error_type': type(error).__name__,
        'retryable': error.retryable
    }
    if isinstance(error, ValidationError):
        error_response['reason'] = error.reason.value
    if isinstance(error, RemoteScoringFailure):
        game_logger.log_remote_failure(game_id, error)
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), status_code


def _unexpected_error_response(action, error, game_id=None):
    game_logger.log_error(request, error, action, game_id)
    error_response = {
        'success': False,
        'error': str(error)
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 500


def _log_game_end(game_id, state, final_guess):
    if not state.game_over:
        return
    game_logger.log_game_event(
        game_id, 'game_won' if state.won else 'game_lost', request.remote_addr,
        rounds_used=state.current_round, game_mode=state.game_mode,
        target_word=state.answer, final_guess=final_guess
    )


@game_bp.route('/new_game', methods=['POST'])
@require_service(get_game_service, 'Game')
def new_game(service):
    """Create a new game session."""
    try:
        data = request.get_json(silent=True) or {}
        game_mode = data.get('game_mode') or service.config.DEFAULT_GAME_MODE

        # Validate game mode
        if game_mode not in GAME_MODES:
            return jsonify({
                'success': False,
                'error': 'Invalid game mode. Must be "local" or "remote"'
            }), 400

        # Log user action
        game_logger.log_user_action(request, 'new_game', game_mode=game_mode)

        game_id = service.create_new_game(game_mode)
        state = service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        # Log successful response
        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=service.config.WORD_LENGTH, max_rounds=state.max_rounds,
            word_source_fallback=getattr(service.word_source, 'fallback_used', False)
        )

        return jsonify(response_data)

    except Exception as e:
        return _unexpected_error_response('new_game', e)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_service(get_game_service, 'Game')
def get_state(game_id, service):
    """Get current game state."""
    try:
        # Log user action
        game_logger.log_user_action(request, 'get_state', game_id)

        state = service.get_game_state(game_id)
        if state is None:
            return _game_error_response('get_state', GameNotFound(game_id), game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            current_round=state.current_round, game_over=state.game_over
        )

        return jsonify(response_data)

    except Exception as e:
        return _unexpected_error_response('get_state', e, game_id)


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
@require_service(get_game_service, 'Game')
def make_guess(game_id, service):
    """Submit a guess for validation and evaluation."""
    try:
        data = request.get_json(silent=True)
        if not data or 'guess' not in data:
            error_response = {
                'success': False,
                'error': 'Guess is required'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
            return jsonify(error_response), 400

        guess = data['guess']

        # Log user action
        game_logger.log_user_action(
            request, 'submit_guess', game_id,
            guess=guess, guess_length=len(guess) if isinstance(guess, str) else None
        )

        try:
            outcome = service.make_guess(game_id, guess)
        except (GameNotFound, ValidationError, SessionTerminated, SessionBusy, RemoteScoringFailure) as e:
            return _game_error_response('submit_guess', e, game_id)

        state = service.get_game_state(game_id)
        response_data = {
            'success': True,
            'results': [result.value for result in outcome.results],
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            guess=outcome.guess, round=state.current_round, game_over=state.game_over
        )
        _log_game_end(game_id, state, outcome.guess)

        return jsonify(response_data)

    except Exception as e:
        return _unexpected_error_response('submit_guess', e, game_id)


@game_bp.route('/game/<game_id>/key', methods=['POST'])
@require_service(get_game_service, 'Game')
def press_key(game_id, service):
    """Type a letter, delete a letter or commit the row."""
    try:
        data = request.get_json(silent=True)
        if not data or not isinstance(data.get('key'), str):
            return jsonify({
                'success': False,
                'error': 'Key is required'
            }), 400

        key = data['key']
        game_logger.log_user_action(request, 'press_key', game_id, key=key)

        try:
            outcome = service.press_key(game_id, key)
        except (GameNotFound, ValidationError, SessionTerminated, SessionBusy, RemoteScoringFailure) as e:
            return _game_error_response('press_key', e, game_id)

        state = service.get_game_state(game_id)
        response_data = {
            'success': True,
            'state': asdict(state)
        }
        if outcome is not None:
            response_data['results'] = [result.value for result in outcome.results]
            _log_game_end(game_id, state, outcome.guess)

        game_logger.log_server_response(request, 'press_key', True, response_data, game_id)
        return jsonify(response_data)

    except Exception as e:
        return _unexpected_error_response('press_key', e, game_id)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@require_service(get_game_service, 'Game')
def delete_game(game_id, service):
    """Delete a game session."""
    try:
        game_logger.log_user_action(request, 'delete_game', game_id)

        success = service.delete_game(game_id)

        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        return _unexpected_error_response('delete_game', e, game_id)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()
        password_service = get_password_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': len(game_service.games) if game_service else 0,
            'active_vaults': len(password_service.vaults) if password_service else 0,
            'word_source': {
                'name': game_service.word_source.name,
                'words': len(game_service.word_source.words),
                'fallback_used': game_service.word_source.fallback_used,
                'statistics': get_word_statistics(game_service.word_source.words)
            } if game_service else None,
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
