"""
Guess Validation - Range check applied before a guess is evaluated.
"""

from __future__ import annotations
from typing import Any

from .errors import InvalidGuess
from .state import MIN_TARGET, MAX_TARGET


INVALID_GUESS_MESSAGE = f"Please enter a valid number between {MIN_TARGET} and {MAX_TARGET}"


def validate_guess(value: Any, allow_text: bool = False) -> int:
    """
    Check a raw guess and return it as an int.

    With allow_text, integer strings (terminal input) are parsed first.
    Anything else that is not an int, and any value outside
    [MIN_TARGET, MAX_TARGET], raises InvalidGuess.
    """
    if allow_text and isinstance(value, str):
        try:
            value = int(value.strip(), 10)
        except ValueError:
            raise InvalidGuess(INVALID_GUESS_MESSAGE, details={"guess": value}) from None

    # bool is an int subclass but never a meaningful guess
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidGuess(INVALID_GUESS_MESSAGE, details={"guess": repr(value)})

    if not MIN_TARGET <= value <= MAX_TARGET:
        raise InvalidGuess(INVALID_GUESS_MESSAGE, details={"guess": value})

    return value
