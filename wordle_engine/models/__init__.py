"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GameState, Guess, Letter, LetterStatus

__all__ = ['GameState', 'Guess', 'Letter', 'LetterStatus']
