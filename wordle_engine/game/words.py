"""
Word Sources

A GameSession only ever talks to its dictionary through the WordSource
protocol: one call to pick the secret word and one call to check that a
guess is a real word. WordListSource is the implementation backed by the
bundled word list.
"""

import random
from typing import Iterable, Optional, Protocol


class WordSource(Protocol):
    """Supplies secret words and validates guesses."""

    def get_word(self) -> str:
        ...

    def is_word(self, candidate: str) -> bool:
        ...


class WordListSource:
    """
    Word source backed by an in-memory list of words.

    Args:
        words: Candidate words, any case
        rng: Random generator used to pick the secret word; a private
            ``random.Random`` instance is used when omitted
    """

    def __init__(self, words: Iterable[str], rng: Optional[random.Random] = None):
        self.words = [word.upper() for word in words]
        if not self.words:
            raise ValueError("Word list cannot be empty")
        self._lookup = frozenset(self.words)
        self._rng = rng or random.Random()

    def get_word(self) -> str:
        return self._rng.choice(self.words)

    def is_word(self, candidate: str) -> bool:
        return candidate.upper() in self._lookup

    def __len__(self) -> int:
        return len(self.words)


# Process-wide default provider
_default_word_source: Optional[WordSource] = None


def get_default_word_source() -> WordSource:
    """Get the default word source, building it from WORD_LIST on first use."""
    global _default_word_source
    if _default_word_source is None:
        from ..config.game_settings import WORD_LIST
        _default_word_source = WordListSource(WORD_LIST)
    return _default_word_source


def set_default_word_source(source: Optional[WordSource]) -> None:
    """Replace the default word source. ``None`` restores the bundled list."""
    global _default_word_source
    _default_word_source = source
