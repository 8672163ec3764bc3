"""
Tests for the game session rules.

Tests:
- Letter construction
- Session construction and defaults
- Letter-by-letter guess evaluation
- Guess submission and validation
- Solved and end-of-game predicates
"""

import dataclasses

import pytest

from wordle_engine.game import (
    GameAlreadySolvedError,
    GameSession,
    InvalidLengthError,
    OutOfGuessesError,
    UnknownWordError,
    build_letter,
)
from wordle_engine.models import Letter, LetterStatus

from .conftest import StubWordSource


def statuses(guess):
    return [letter.status for letter in guess]


class TestBuildLetter:
    """Tests for build_letter."""

    def test_returns_letter(self):
        assert build_letter('A', LetterStatus.CORRECT) == Letter(letter='A', status=LetterStatus.CORRECT)

    def test_letter_is_immutable(self):
        letter = build_letter('A', LetterStatus.ABSENT)
        with pytest.raises(dataclasses.FrozenInstanceError):
            letter.status = LetterStatus.CORRECT


class TestConstruction:
    """Tests for constructing a new session."""

    def test_max_guesses_defaults_to_six(self, session):
        assert session.max_guesses == 6

    def test_max_guesses_from_argument(self, word_source):
        session = GameSession(10, word_source=word_source)
        assert session.max_guesses == 10
        assert len(session.guesses) == 10

    def test_guesses_has_max_guesses_empty_slots(self, session):
        assert len(session.guesses) == 6
        assert all(slot is None for slot in session.guesses)

    def test_current_guess_starts_at_zero(self, session):
        assert session.current_guess == 0

    def test_word_comes_from_word_source(self, session):
        assert session.word == 'APPLE'

    def test_secret_word_is_uppercased(self):
        session = GameSession(word_source=StubWordSource('apple'))
        assert session.word == 'APPLE'

    @pytest.mark.parametrize("max_guesses", [0, -1, "6", 2.5, True])
    def test_rejects_invalid_max_guesses(self, word_source, max_guesses):
        with pytest.raises(ValueError):
            GameSession(max_guesses, word_source=word_source)

    def test_rejects_secret_of_wrong_length(self):
        with pytest.raises(ValueError):
            GameSession(word_source=StubWordSource('APPLES'))

    def test_uses_default_word_source(self):
        from wordle_engine.game import set_default_word_source

        set_default_word_source(StubWordSource('CRANE'))
        assert GameSession().word == 'CRANE'


class TestEvaluateGuess:
    """Tests for letter-by-letter evaluation against APPLE."""

    def test_correct_letter(self, session):
        assert session.evaluate_guess('A____')[0].status == LetterStatus.CORRECT

    def test_present_letter(self, session):
        assert session.evaluate_guess('E____')[0].status == LetterStatus.PRESENT

    def test_absent_letter(self, session):
        assert session.evaluate_guess('Z____')[0].status == LetterStatus.ABSENT

    def test_mixed_guess(self, session):
        guess = session.evaluate_guess('PAPER')
        assert [letter.letter for letter in guess] == ['P', 'A', 'P', 'E', 'R']
        assert statuses(guess) == [
            LetterStatus.PRESENT,
            LetterStatus.PRESENT,
            LetterStatus.CORRECT,
            LetterStatus.PRESENT,
            LetterStatus.ABSENT,
        ]

    def test_repeated_letters_are_not_limited_by_secret_count(self, session):
        # APPLE has two Ps, but every P off position still reads PRESENT
        guess = session.evaluate_guess('PPPPP')
        assert statuses(guess) == [
            LetterStatus.PRESENT,
            LetterStatus.CORRECT,
            LetterStatus.CORRECT,
            LetterStatus.PRESENT,
            LetterStatus.PRESENT,
        ]

    def test_lowercase_input_is_uppercased(self, session):
        guess = session.evaluate_guess('apple')
        assert ''.join(letter.letter for letter in guess) == 'APPLE'
        assert all(status == LetterStatus.CORRECT for status in statuses(guess))

    def test_does_not_change_state(self, session):
        session.evaluate_guess('GUESS')
        assert session.current_guess == 0
        assert session.guesses == [None] * 6


class TestSubmitGuess:
    """Tests for making a guess."""

    def test_raises_when_no_guesses_left(self, word_source):
        session = GameSession(1, word_source=word_source)
        session.submit_guess('HELLO')
        with pytest.raises(OutOfGuessesError):
            session.submit_guess('HELLO')

    def test_raises_on_the_extra_guess(self, session):
        for _ in range(6):
            session.submit_guess('GUESS')
        with pytest.raises(OutOfGuessesError):
            session.submit_guess('GUESS')
        assert session.current_guess == 6

    @pytest.mark.parametrize("word", ['THREES', 'FOUR', ''])
    def test_raises_when_length_is_not_five(self, session, word):
        with pytest.raises(InvalidLengthError):
            session.submit_guess(word)

    def test_raises_when_not_a_word(self, session, word_source):
        word_source.valid = False
        with pytest.raises(UnknownWordError):
            session.submit_guess('GUESS')

    def test_increments_current_guess(self, session):
        session.submit_guess('GUESS')
        assert session.current_guess == 1
        session.submit_guess('HELLO')
        assert session.current_guess == 2

    def test_stores_guess_in_next_slot(self, session):
        guess = session.submit_guess('GUESS')
        assert session.guesses[0] == guess
        assert session.guesses[1] is None
        assert session.submitted_guesses == [guess]
        assert session.remaining_guesses == 5

    def test_checks_uppercased_word(self, session, word_source):
        session.submit_guess('guess')
        assert word_source.checked == ['GUESS']

    def test_failed_submission_leaves_state_unchanged(self, session, word_source):
        session.submit_guess('GUESS')
        before = list(session.guesses)

        with pytest.raises(InvalidLengthError):
            session.submit_guess('TOOLONG')
        word_source.valid = False
        with pytest.raises(UnknownWordError):
            session.submit_guess('XXXXX')

        assert session.current_guess == 1
        assert session.guesses == before

    def test_out_of_guesses_is_checked_before_length(self, word_source):
        session = GameSession(1, word_source=word_source)
        session.submit_guess('GUESS')
        with pytest.raises(OutOfGuessesError):
            session.submit_guess('NOPE')


class TestIsSolved:
    """Tests for the solved predicate."""

    def test_false_before_any_guess(self, session):
        assert session.is_solved() is False

    def test_true_after_secret_word(self, session):
        session.submit_guess('APPLE')
        assert session.is_solved() is True

    def test_false_after_other_word(self, session):
        session.submit_guess('SMILE')
        assert session.is_solved() is False

    def test_follows_latest_guess(self, session):
        session.submit_guess('APPLE')
        session.submit_guess('SMILE')
        assert session.is_solved() is False


class TestSolvedPolicy:
    """Tests for guesses submitted after the word was found."""

    def test_allowed_by_default(self, session):
        session.submit_guess('APPLE')
        session.submit_guess('GUESS')
        assert session.current_guess == 2

    def test_rejected_when_disabled(self, word_source):
        session = GameSession(word_source=word_source, allow_guesses_after_solve=False)
        session.submit_guess('APPLE')
        with pytest.raises(GameAlreadySolvedError):
            session.submit_guess('GUESS')
        assert session.current_guess == 1
        assert session.is_solved() is True


class TestShouldEndGame:
    """Tests for the end-of-game predicate."""

    def test_true_when_solved(self, session):
        session.submit_guess('APPLE')
        assert session.should_end_game() is True

    def test_true_when_no_guesses_left(self, word_source):
        session = GameSession(1, word_source=word_source)
        session.submit_guess('SMILE')
        assert session.should_end_game() is True

    def test_false_before_any_guess(self, session):
        assert session.should_end_game() is False

    def test_false_with_guesses_left_and_unsolved(self, session):
        session.submit_guess('GUESS')
        assert session.should_end_game() is False


def test_full_game():
    session = GameSession(6, word_source=StubWordSource('APPLE'))

    session.submit_guess('GUESS')
    assert session.current_guess == 1
    assert session.is_solved() is False
    assert session.should_end_game() is False

    session.submit_guess('APPLE')
    assert session.current_guess == 2
    assert session.is_solved() is True
    assert session.should_end_game() is True
