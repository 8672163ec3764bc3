"""
Service Decorators

Contains decorators for HTTP endpoints and WebSocket handlers that need the
game service.
"""

from functools import wraps
from flask import jsonify
from flask_socketio import emit


def require_game_service(f):
    """
    Decorator for HTTP endpoints that need the game service.

    The service is passed to the endpoint as the ``game_service`` keyword.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        kwargs['game_service'] = game_service
        return f(*args, **kwargs)

    return decorated_function


def websocket_game_required(f):
    """Decorator for WebSocket handlers that act on an existing game."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        data = args[0] if args else None
        if not isinstance(data, dict) or not data.get('game_id'):
            emit('error', {'error': 'Game ID is required'})
            return

        if game_service.get_session(data['game_id']) is None:
            emit('error', {'error': 'Game not found', 'error_code': 'GAME_NOT_FOUND'})
            return

        kwargs['game_service'] = game_service
        return f(*args, **kwargs)

    return decorated_function
