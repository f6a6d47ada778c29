"""
Tests for the engine core.

Tests:
- Session value invariants
- Guess evaluation verdicts and attempt counting
- Target generation range and uniformity
"""

import random

import pytest

from ..engine_core.state import GameSession, SessionStatus
from ..engine_core.evaluator import GuessEvaluator, Verdict, evaluate, format_message
from ..engine_core.rng import RandomNumberGenerator
from ..engine_core.errors import EntropyUnavailable, InvalidGuess, SessionComplete
from .conftest import FixedSource


class TestGameSession:
    """Tests for the session value."""

    def test_new_session_is_active(self):
        session = GameSession.new(17)

        assert session.target == 17
        assert session.attempts == 0
        assert session.status == SessionStatus.ACTIVE
        assert session.is_active

    @pytest.mark.parametrize("target", [0, 101, -5])
    def test_target_out_of_range_rejected(self, target):
        with pytest.raises(ValueError):
            GameSession.new(target)

    def test_negative_attempts_rejected(self):
        with pytest.raises(ValueError):
            GameSession(target=10, attempts=-1)

    def test_updates_return_new_values(self, session_42):
        updated = session_42.with_attempt()

        assert updated.attempts == 1
        assert session_42.attempts == 0
        assert updated.target == session_42.target

    def test_target_cannot_be_replaced(self, session_42):
        with pytest.raises(ValueError):
            session_42._copy_with(target=7)


class TestGuessEvaluator:
    """Tests for guess evaluation."""

    def test_verdict_for_every_target(self):
        """Verdict follows the ordering of guess and target across the range."""
        evaluator = GuessEvaluator()
        for target in range(1, 101):
            session = GameSession.new(target)
            for guess in {1, target - 1, target, target + 1, 100}:
                if not 1 <= guess <= 100:
                    continue
                result = evaluator.evaluate(session, guess)
                if guess < target:
                    assert result.verdict == Verdict.TOO_LOW
                elif guess > target:
                    assert result.verdict == Verdict.TOO_HIGH
                else:
                    assert result.verdict == Verdict.CORRECT
                assert result.attempts == 1

    def test_too_low_message(self, session_42):
        result = evaluate(session_42, 10)

        assert result.message == "Too low, try again"
        assert result.session.is_active

    def test_too_high_message(self, session_42):
        result = evaluate(session_42, 90)

        assert result.message == "Too high, try again"
        assert result.session.is_active

    def test_correct_marks_won(self, session_42):
        result = evaluate(session_42, 42)

        assert result.is_correct
        assert result.session.status == SessionStatus.WON
        assert result.message == "Congratulations! You guessed the number in 1 attempts"

    def test_attempts_count_every_evaluation(self, session_42):
        session = session_42
        guesses = [1, 99, 50, 25, 30, 41]
        for guess in guesses:
            session = evaluate(session, guess).session

        assert session.attempts == len(guesses)
        assert session.is_active

    def test_won_session_rejects_guesses(self, session_42):
        won = evaluate(session_42, 42).session

        with pytest.raises(SessionComplete):
            evaluate(won, 42)

    @pytest.mark.parametrize("guess", ["42", 42.0, None, True])
    def test_non_integer_guess_rejected(self, session_42, guess):
        with pytest.raises(InvalidGuess) as exc_info:
            evaluate(session_42, guess)
        assert exc_info.value.error_code == "INVALID_GUESS"

    def test_invalid_guess_does_not_count(self, session_42):
        with pytest.raises(InvalidGuess):
            evaluate(session_42, "ten")

        assert session_42.attempts == 0

    def test_format_message_uses_attempts(self):
        assert format_message(Verdict.CORRECT, 7) == (
            "Congratulations! You guessed the number in 7 attempts"
        )


class TestRandomNumberGenerator:
    """Tests for target generation."""

    def test_values_stay_in_range(self):
        rng = RandomNumberGenerator()
        values = [rng.generate() for _ in range(2000)]

        assert min(values) >= 1
        assert max(values) <= 100

    @staticmethod
    def _chi_square(rng, trials=10_000):
        counts = [0] * 100
        for _ in range(trials):
            value = rng.generate()
            assert 1 <= value <= 100
            counts[value - 1] += 1

        expected = trials / 100
        return sum((observed - expected) ** 2 / expected for observed in counts)

    def test_distribution_is_uniform(self):
        """Chi-square over 10,000 seeded draws stays under the 99-dof critical value."""
        # critical value for 99 degrees of freedom at p=0.0001 is ~159
        assert self._chi_square(RandomNumberGenerator(seed=2024)) < 159

    def test_os_entropy_distribution_is_uniform(self):
        """Same check on the default source; fails by chance about once in 10,000 runs."""
        assert self._chi_square(RandomNumberGenerator()) < 159

    def test_seed_is_reproducible(self):
        first = RandomNumberGenerator(seed=7)
        second = RandomNumberGenerator(seed=7)

        assert [first.generate() for _ in range(20)] == [second.generate() for _ in range(20)]
        assert first.is_deterministic

    def test_default_source_is_os_entropy(self):
        assert not RandomNumberGenerator().is_deterministic

    def test_injected_source(self):
        rng = RandomNumberGenerator(source=FixedSource(42))

        assert rng.generate() == 42

    def test_unavailable_source_raises(self, broken_rng):
        with pytest.raises(EntropyUnavailable):
            broken_rng.generate()

    def test_out_of_range_source_raises(self):
        rng = RandomNumberGenerator(source=FixedSource(0))

        with pytest.raises(EntropyUnavailable):
            rng.generate()

    def test_seed_and_source_are_exclusive(self):
        with pytest.raises(ValueError):
            RandomNumberGenerator(seed=1, source=random.Random(1))
