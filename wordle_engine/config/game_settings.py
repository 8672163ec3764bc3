"""
Game Configuration Constants Module

All game parameters are centralized here: the word length, the default
number of guesses, and the bundled word list that backs the default
word source.
"""

import json
import os
from typing import Dict, Final, List, Optional

WORD_LENGTH: Final[int] = 5
"""Number of letters in the secret word and in every guess."""

MAX_GUESSES: Final[int] = 6
"""Default number of guess slots in a game session."""

MAX_GUESSES_LIMIT: Final[int] = 20
"""Largest number of guess slots a client may request for one game."""


def _load_word_list(json_file_path: Optional[str] = None) -> List[str]:
    """
    Load the word list from a JSON array file.

    Args:
        json_file_path: Path of the JSON file. Defaults to the bundled
            wordles.json next to this module.

    Returns:
        List[str]: List of uppercase 5-letter words

    Raises:
        FileNotFoundError: If the JSON file is not found
        ValueError: If the file is malformed, empty or contains invalid words
    """
    if json_file_path is None:
        config_dir = os.path.dirname(os.path.abspath(__file__))
        json_file_path = os.path.join(config_dir, 'wordles.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {json_file_path}: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not word_list:
        raise ValueError("Word list cannot be empty")

    uppercase_words = [str(word).upper() for word in word_list]

    for word in uppercase_words:
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word '{word}' is not {WORD_LENGTH} characters long")
        if not word.isalpha():
            raise ValueError(f"Word '{word}' contains non-alphabetic characters")

    return uppercase_words


# Curated word database loaded from JSON file
WORD_LIST: Final[List[str]] = _load_word_list()


def validate_word_list_integrity(words: Optional[List[str]] = None) -> bool:
    """
    Validates the integrity and consistency of a word database.

    Checks that every word is exactly WORD_LENGTH alphabetic uppercase
    characters and that there are no duplicate entries.

    Args:
        words: Word list to check, defaults to WORD_LIST

    Returns:
        bool: True if the word list passes all validation checks

    Raises:
        ValueError: If any validation check fails
    """
    if words is None:
        words = WORD_LIST

    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")

    if len(words) != len(set(words)):
        seen = set()
        duplicates = sorted({word for word in words if word in seen or seen.add(word)})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics(words: Optional[List[str]] = None) -> Dict:
    """Summarize a word list: size, vowel density and most common letters."""
    if words is None:
        words = WORD_LIST

    if not words:
        return {"error": "Word list is empty"}

    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    letter_frequency: Dict[str, int] = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":
    try:
        validate_word_list_integrity()
        print(" Word list validation passed")
        print(f" Game statistics: {get_word_statistics()}")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        raise SystemExit(1)
