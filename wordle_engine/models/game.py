"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple


class LetterStatus(Enum):
    """Letter evaluation status for a single position of a guess."""
    CORRECT = "CORRECT"
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    EMPTY = "EMPTY"


@dataclass(frozen=True)
class Letter:
    """One evaluated character of a guess."""
    letter: str
    status: LetterStatus


# A guess is always exactly five letters, in submission order
Guess = Tuple[Letter, ...]


@dataclass
class GameState:
    """Serializable snapshot of a single game session."""
    game_id: str
    current_guess: int
    max_guesses: int
    game_over: bool
    solved: bool
    guesses: List[str]
    guess_results: List[List[Tuple[str, str]]]  # Letter status as string for JSON serialization
    letter_status: Dict[str, str]
    answer: Optional[str] = None  # Only included when game is over
