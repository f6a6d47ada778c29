"""
numguess CLI - Command-line interface for the engine.

Usage:
    numguess play [--seed N]              Play in the terminal
    numguess serve [--host H] [--port P]  Run the REST API
"""

import argparse
import sys

from .config import NUMGUESS_HOST, NUMGUESS_PORT, configure_logging


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="numguess - Number Guessing Game",
        prog="numguess",
    )
    parser.add_argument("--log-level", help="Override NUMGUESS_LOG_LEVEL")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a game in the terminal")
    play_parser.add_argument("--seed", type=int, help="Seed for a reproducible target")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the REST API")
    serve_parser.add_argument("--host", default=NUMGUESS_HOST, help="Bind address")
    serve_parser.add_argument("--port", type=int, default=NUMGUESS_PORT, help="Bind port")

    args = parser.parse_args(argv)

    if args.command == "play":
        configure_logging(args.log_level)
        cmd_play(args)
    elif args.command == "serve":
        cmd_serve(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_play(args, input_fn=input, output_fn=print):
    """Interactive game loop. Returns the number of games won."""
    from .engine_core import RandomNumberGenerator, GameError, EntropyUnavailable, MIN_TARGET, MAX_TARGET
    from .session import SessionLifecycle
    from .engine_core.validation import validate_guess

    lifecycle = SessionLifecycle(rng=RandomNumberGenerator(seed=args.seed))
    games_won = 0

    while True:
        try:
            session = lifecycle.start()
        except EntropyUnavailable as e:
            output_fn(f"Error: {e.message}")
            sys.exit(1)

        output_fn(f"Game started! Guess a number between {MIN_TARGET} and {MAX_TARGET}")

        while session.is_active:
            try:
                raw = input_fn("Your guess: ")
            except EOFError:
                output_fn("")
                return games_won

            try:
                result = lifecycle.guess(session, validate_guess(raw, allow_text=True))
            except GameError as e:
                output_fn(e.message)
                continue

            session = result.session
            output_fn(result.message)
            output_fn(f"Attempts: {result.attempts}")

        games_won += 1

        try:
            again = input_fn("Play again? [y/N] ")
        except EOFError:
            return games_won
        if again.strip().lower() not in {"y", "yes"}:
            return games_won


def cmd_serve(args):
    """Run the REST API under uvicorn."""
    import uvicorn

    configure_logging(args.log_level)
    uvicorn.run("numguess.api.app:app", host=args.host, port=args.port)


if __name__ == "__main__":
    main()
