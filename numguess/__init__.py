"""
numguess - Number Guessing Game Engine

A small, deterministic-by-injection engine for a single-player guessing game.
The engine provides:
- Target generation over [1, 100] without modulo bias
- Guess evaluation with attempt tracking
- Caller-held sessions (no server-side state)
- A REST API and terminal CLI exposing start_game / make_guess
"""

__version__ = "0.1.0"
