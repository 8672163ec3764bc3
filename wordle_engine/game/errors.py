"""
Guess Submission Errors

Raised synchronously by GameSession.submit_guess. Every error signals an
invalid call; the session state is left untouched when one is raised.
"""


class GuessError(ValueError):
    """Base class for rejected guess submissions."""

    error_code = "INVALID_GUESS"


class OutOfGuessesError(GuessError):
    """All guess slots of the session are already filled."""

    error_code = "OUT_OF_GUESSES"


class InvalidLengthError(GuessError):
    """The submitted word is not exactly five characters long."""

    error_code = "INVALID_LENGTH"


class UnknownWordError(GuessError):
    """The word source does not recognize the submitted word."""

    error_code = "UNKNOWN_WORD"


class GameAlreadySolvedError(GuessError):
    """Raised only when the session refuses guesses after being solved."""

    error_code = "GAME_SOLVED"


class GameNotFoundError(LookupError):
    """No game session is registered under the given id."""

    error_code = "GAME_NOT_FOUND"
