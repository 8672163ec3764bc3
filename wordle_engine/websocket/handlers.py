"""
WebSocket Event Handlers

Handles WebSocket events so a client can play a game over a single
Socket.IO connection instead of the HTTP endpoints.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit
from ..game.errors import GuessError
from ..services.game_service import get_game_service
from ..utils.decorators import websocket_game_required
from ..utils.game_logger import game_logger

# Games started over each connection, keyed by socket id
connection_games = {}  # sid -> set of game_ids


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        game_logger.log_user_action(request, 'connect')

    @socketio.on('disconnect')
    def handle_disconnect(*args):
        """Drop the games this connection started."""
        game_ids = connection_games.pop(request.sid, set())
        game_service = get_game_service()
        if not game_service:
            return

        for game_id in game_ids:
            if game_service.delete_game(game_id):
                game_logger.log_game_event(game_id, 'game_abandoned', request.remote_addr or 'unknown')

    @socketio.on('new_game')
    def handle_new_game(data=None):
        """Start a new game for this connection."""
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        max_guesses = data.get('max_guesses') if isinstance(data, dict) else None
        game_logger.log_user_action(request, 'new_game', max_guesses=max_guesses)

        try:
            game_id = game_service.create_new_game(max_guesses)
        except ValueError as e:
            emit('error', {'error': str(e)})
            return

        connection_games.setdefault(request.sid, set()).add(game_id)

        state = game_service.get_game_state(game_id)
        response_data = {'game_id': game_id, 'state': asdict(state)}
        game_logger.log_server_response(request, 'new_game', True, response_data, game_id)
        emit('game_created', response_data)

    @socketio.on('get_state')
    @websocket_game_required
    def handle_get_state(data, game_service=None):
        """Send the current state of a game."""
        game_id = data['game_id']
        state = game_service.get_game_state(game_id)
        emit('game_state', {'game_id': game_id, 'state': asdict(state)})

    @socketio.on('submit_guess')
    @websocket_game_required
    def handle_submit_guess(data, game_service=None):
        """Submit a guess and push the updated state back to the player."""
        game_id = data['game_id']
        guess = data.get('guess')
        if not isinstance(guess, str):
            emit('error', {'error': 'Guess is required', 'error_code': 'GUESS_REQUIRED'})
            return

        game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess)

        try:
            state = game_service.make_guess(game_id, guess)
        except GuessError as e:
            error_response = {'error': str(e), 'error_code': e.error_code}
            game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
            emit('error', error_response)
            return

        response_data = {'game_id': game_id, 'state': asdict(state)}
        game_logger.log_server_response(request, 'submit_guess', True, response_data, game_id)
        emit('game_state', response_data)

        if state.game_over:
            game_logger.log_game_event(
                game_id, 'game_won' if state.solved else 'game_lost', request.remote_addr,
                guesses_used=state.current_guess, target_word=state.answer
            )
            emit('game_over', {
                'game_id': game_id,
                'solved': state.solved,
                'answer': state.answer
            })
