"""
Game Session

Core rules of a single word-guessing game: the secret word, a fixed number
of guess slots filled in order, letter-by-letter evaluation, and the two
end-of-game predicates.
"""

import logging
from typing import List, Optional

from ..config.game_settings import MAX_GUESSES, WORD_LENGTH
from ..models.game import Guess, Letter, LetterStatus
from .errors import GameAlreadySolvedError, InvalidLengthError, OutOfGuessesError, UnknownWordError
from .words import WordSource, get_default_word_source

logger = logging.getLogger(__name__)


def build_letter(letter: str, status: LetterStatus) -> Letter:
    """Create an evaluated letter."""
    return Letter(letter=letter, status=status)


class GameSession:
    """
    State of one game instance.

    The session is mutated only through submit_guess. ``current_guess``
    always equals the number of filled slots in ``guesses`` and never
    decreases.

    Args:
        max_guesses: Number of guess slots, must be positive
        word_source: Dictionary collaborator; the default provider is used
            when omitted
        allow_guesses_after_solve: When False, guesses submitted after the
            secret word was found are rejected
    """

    def __init__(self, max_guesses: int = MAX_GUESSES,
                 word_source: Optional[WordSource] = None,
                 allow_guesses_after_solve: bool = True):
        if isinstance(max_guesses, bool) or not isinstance(max_guesses, int) or max_guesses < 1:
            raise ValueError(f"max_guesses must be a positive integer, got {max_guesses!r}")

        self.word_source = word_source if word_source is not None else get_default_word_source()
        self.word = self.word_source.get_word().upper()
        if len(self.word) != WORD_LENGTH:
            raise ValueError(f"Secret word must be {WORD_LENGTH} letters long")

        self.max_guesses = max_guesses
        self.allow_guesses_after_solve = allow_guesses_after_solve
        self.guesses: List[Optional[Guess]] = [None] * max_guesses
        self.current_guess = 0

    @property
    def remaining_guesses(self) -> int:
        return self.max_guesses - self.current_guess

    @property
    def submitted_guesses(self) -> List[Guess]:
        return [guess for guess in self.guesses[:self.current_guess] if guess is not None]

    def evaluate_guess(self, word: str) -> Guess:
        """
        Evaluate a five-letter word against the secret word.

        A letter in the right position is CORRECT, a letter found anywhere
        else in the secret word is PRESENT, anything else is ABSENT.
        Repeated letters are judged independently of how many times they
        occur in the secret word.
        """
        word = word.upper()
        letters = []
        for i, char in enumerate(word):
            if char == self.word[i]:
                status = LetterStatus.CORRECT
            elif char in self.word:
                status = LetterStatus.PRESENT
            else:
                status = LetterStatus.ABSENT
            letters.append(build_letter(char, status))
        return tuple(letters)

    def submit_guess(self, word: str) -> Guess:
        """
        Validate, evaluate and record a guess in the next free slot.

        Returns:
            The evaluated guess

        Raises:
            OutOfGuessesError: Every slot is already filled
            GameAlreadySolvedError: The game is solved and the session
                does not allow further guesses
            InvalidLengthError: The word is not five characters long
            UnknownWordError: The word source does not know the word
        """
        if self.current_guess >= self.max_guesses:
            raise OutOfGuessesError(f"No guesses left (maximum is {self.max_guesses})")

        if not self.allow_guesses_after_solve and self.is_solved():
            raise GameAlreadySolvedError("The word has already been guessed")

        if len(word) != WORD_LENGTH:
            raise InvalidLengthError(f"Guess must be exactly {WORD_LENGTH} letters, got {len(word)}")

        word = word.upper()
        if not self.word_source.is_word(word):
            raise UnknownWordError(f"'{word}' is not in the word list")

        guess = self.evaluate_guess(word)
        self.guesses[self.current_guess] = guess
        self.current_guess += 1

        logger.debug("Guess %d/%d accepted: %s", self.current_guess, self.max_guesses, word)
        return guess

    def is_solved(self) -> bool:
        """Whether the most recent guess matches the secret word."""
        if self.current_guess == 0:
            return False
        latest = self.guesses[self.current_guess - 1]
        return all(letter.status == LetterStatus.CORRECT for letter in latest)

    def should_end_game(self) -> bool:
        return self.is_solved() or self.current_guess >= self.max_guesses
