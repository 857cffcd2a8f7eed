"""
WebSocket Event Handlers

Real-time counterpart of the game endpoints. Each game gets its own room so
that every open tab of the same game receives the state after a guess.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit, join_room, leave_room
from ..errors import RemoteScoringFailure, WordQuestError
from ..services.game_service import GAME_MODES, get_game_service
from ..utils.game_logger import game_logger


def _room(game_id):
    return f"game_{game_id}"


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        game_logger.logger.info(f"WebSocket connected: {request.sid}")

    @socketio.on('disconnect')
    def handle_disconnect(*args):
        """Handle WebSocket disconnection. Sessions are left for the idle cleanup worker."""
        game_logger.logger.info(f"WebSocket disconnected: {request.sid}")

    @socketio.on('new_game')
    def handle_new_game(data=None):
        """Create a game and join its room."""
        game_service = get_game_service()
        if not game_service:
            emit('game_error', {'error': 'Game service unavailable'})
            return

        data = data or {}
        game_mode = data.get('game_mode') or game_service.config.DEFAULT_GAME_MODE
        if game_mode not in GAME_MODES:
            emit('game_error', {'error': 'Invalid game mode. Must be "local" or "remote"'})
            return

        previous_game_id = data.get('previous_game_id')
        if previous_game_id:
            # Starting over discards the previous session
            game_service.delete_game(previous_game_id)
            leave_room(_room(previous_game_id))

        game_id = game_service.create_new_game(game_mode)
        join_room(_room(game_id))
        game_logger.log_user_action(request, 'ws_new_game', game_id, game_mode=game_mode)
        emit('game_state', {'game_id': game_id, 'state': asdict(game_service.get_game_state(game_id))})

    @socketio.on('join_game')
    def handle_join_game(data):
        """Join the room of an existing game, e.g. after a reconnect."""
        game_service = get_game_service()
        game_id = (data or {}).get('game_id')
        if not game_service or not game_id:
            emit('game_error', {'error': 'Game ID is required'})
            return

        state = game_service.get_game_state(game_id)
        if state is None:
            emit('game_error', {'game_id': game_id, 'error': 'Game not found'})
            return

        join_room(_room(game_id))
        emit('game_state', {'game_id': game_id, 'state': asdict(state)})

    def _apply(event, data, operation, **log_details):
        game_service = get_game_service()
        game_id = (data or {}).get('game_id')
        if not game_service or not game_id:
            emit('game_error', {'error': 'Game ID is required'})
            return

        game_logger.log_user_action(request, event, game_id, **log_details)
        try:
            outcome = operation(game_service, game_id)
        except WordQuestError as e:
            if isinstance(e, RemoteScoringFailure):
                game_logger.log_remote_failure(game_id, e)
            emit('game_error', {
                'game_id': game_id,
                'error': str(e),
                'error_type': type(e).__name__,
                'retryable': e.retryable
            })
            return

        payload = {'game_id': game_id, 'state': asdict(game_service.get_game_state(game_id))}
        if outcome is not None:
            payload['results'] = [result.value for result in outcome.results]
        socketio.emit('game_state', payload, room=_room(game_id))

    @socketio.on('submit_guess')
    def handle_submit_guess(data):
        """Score a whole word."""
        guess = (data or {}).get('guess')
        _apply('ws_submit_guess', data, lambda service, game_id: service.make_guess(game_id, guess), guess=guess)

    @socketio.on('press_key')
    def handle_press_key(data):
        """Type, delete or commit through the on-screen keyboard."""
        key = (data or {}).get('key')
        _apply('ws_press_key', data, lambda service, game_id: service.press_key(game_id, key), key=key)
