"""
Game Engine Package

The rules of a single game live here, independent of the web layer.
"""

from .errors import (
    GameAlreadySolvedError, GameNotFoundError, GuessError,
    InvalidLengthError, OutOfGuessesError, UnknownWordError
)
from .session import GameSession, build_letter
from .words import WordListSource, WordSource, get_default_word_source, set_default_word_source

__all__ = [
    'GameSession', 'build_letter',
    'WordSource', 'WordListSource', 'get_default_word_source', 'set_default_word_source',
    'GuessError', 'OutOfGuessesError', 'InvalidLengthError', 'UnknownWordError',
    'GameAlreadySolvedError', 'GameNotFoundError'
]
