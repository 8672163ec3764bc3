"""
Services Package

Contains all business logic and service classes.
"""

from .game_service import GameService, get_game_service, initialize_game_service

__all__ = ['GameService', 'get_game_service', 'initialize_game_service']
