"""
Game Service

Keeps every active game session isolated behind its own game id and turns
sessions into serializable state snapshots for the HTTP and WebSocket layers.
"""

import uuid
from typing import Dict, List, Optional

from ..config.app_config import Config
from ..config.game_settings import MAX_GUESSES_LIMIT
from ..game.errors import GameNotFoundError
from ..game.session import GameSession
from ..game.words import WordSource
from ..models.game import GameState, Guess, LetterStatus

# Keyboard status can only move forward in this order
_STATUS_PRIORITY = {
    LetterStatus.EMPTY: 0,
    LetterStatus.ABSENT: 1,
    LetterStatus.PRESENT: 2,
    LetterStatus.CORRECT: 3,
}


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Guess submission through each session's own rules
    - Game state snapshots without exposing answers to clients
    """

    def __init__(self, word_source: Optional[WordSource] = None,
                 max_guesses: int = Config.MAX_GUESSES,
                 allow_guesses_after_solve: bool = Config.ALLOW_GUESSES_AFTER_SOLVE):
        self.games: Dict[str, GameSession] = {}  # Store active games by game_id
        self.word_source = word_source
        self.max_guesses = max_guesses
        self.allow_guesses_after_solve = allow_guesses_after_solve

    def create_new_game(self, max_guesses: Optional[int] = None) -> str:
        """
        Creates a new game session with a secret word from the word source.

        Args:
            max_guesses: Number of guesses allowed, defaults to the service setting

        Returns:
            str: Unique game ID for this session

        Raises:
            ValueError: If max_guesses is not a positive integer
                or exceeds MAX_GUESSES_LIMIT
        """
        if isinstance(max_guesses, int) and max_guesses > MAX_GUESSES_LIMIT:
            raise ValueError(f"max_guesses cannot exceed {MAX_GUESSES_LIMIT}, got {max_guesses}")

        session = GameSession(
            max_guesses=self.max_guesses if max_guesses is None else max_guesses,
            word_source=self.word_source,
            allow_guesses_after_solve=self.allow_guesses_after_solve,
        )
        game_id = str(uuid.uuid4())
        self.games[game_id] = session
        return game_id

    def get_session(self, game_id: str) -> Optional[GameSession]:
        return self.games.get(game_id)

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session (without revealing the answer).

        Args:
            game_id: Unique game identifier

        Returns:
            GameState object or None if game not found
        """
        session = self.games.get(game_id)
        if session is None:
            return None

        submitted = session.submitted_guesses
        game_over = session.should_end_game()

        return GameState(
            game_id=game_id,
            current_guess=session.current_guess,
            max_guesses=session.max_guesses,
            game_over=game_over,
            solved=session.is_solved(),
            guesses=[''.join(letter.letter for letter in guess) for guess in submitted],
            guess_results=[[(letter.letter, letter.status.value) for letter in guess] for guess in submitted],
            letter_status=self._build_letter_status(submitted),
            answer=session.word if game_over else None,
        )

    def make_guess(self, game_id: str, guess: str) -> GameState:
        """
        Processes a guess and returns the updated game state.

        Args:
            game_id: Unique game identifier
            guess: The 5-letter word guess

        Raises:
            GameNotFoundError: If no game is registered under game_id
            GuessError: If the session rejects the guess
        """
        session = self.games.get(game_id)
        if session is None:
            raise GameNotFoundError("Game not found")

        session.submit_guess(guess.strip().upper())
        return self.get_game_state(game_id)

    def _build_letter_status(self, guesses: List[Guess]) -> Dict[str, str]:
        """
        Builds the keyboard letter status from every submitted guess.
        """
        letter_status = {letter: LetterStatus.EMPTY for letter in "ABCDEFGHIJKLMNOPQRSTUVWXYZ"}
        for guess in guesses:
            for letter in guess:
                current = letter_status.get(letter.letter, LetterStatus.EMPTY)
                if _STATUS_PRIORITY[letter.status] > _STATUS_PRIORITY[current]:
                    letter_status[letter.letter] = letter.status
        return {letter: status.value for letter, status in letter_status.items()}

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(word_source: Optional[WordSource] = None,
                            config_class=Config) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(
        word_source=word_source,
        max_guesses=config_class.MAX_GUESSES,
        allow_guesses_after_solve=config_class.ALLOW_GUESSES_AFTER_SOLVE,
    )
    return _game_service
