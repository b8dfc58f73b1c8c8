"""
Guessr CLI - Command-line interface for the engine.

Usage:
    guessr play [--seed N] [--strict]     Play in the terminal
    guessr serve [--host H] [--port P]    Run the HTTP API
"""

import argparse
import logging
import random
import sys

from .config import GUESSR_LOG_LEVEL, GameConfig

logger = logging.getLogger(__name__)

QUIT_WORDS = {"q", "quit", "exit"}


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Guessr - Number Guessing Game",
        prog="guessr",
    )
    parser.add_argument(
        "--log-level",
        default=GUESSR_LOG_LEVEL,
        help="Logging level (default: %(default)s)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument("--seed", type=int, default=None, help="Seed for the target draw")
    play_parser.add_argument(
        "--strict", action="store_true",
        help="Let the engine reject out-of-range guesses too",
    )

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Bind port")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "play":
        cmd_play(args)
    elif args.command == "serve":
        cmd_serve(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_play(args, input_fn=None, print_fn=None):
    """
    Play one game interactively.

    Input outside the range is rejected here, before it reaches the engine.
    Returns the number of attempts if the game was won, else None.
    """
    input_fn = input_fn or input
    print_fn = print_fn or print

    from .api import APIService, StartGameRequest, MakeGuessRequest, ErrorResponse, GuessOutcome
    from .session import SessionManager

    config = GameConfig(strict_range=args.strict)
    rng = random.Random(args.seed) if args.seed is not None else None
    service = APIService(session_manager=SessionManager(config=config, rng=rng))

    started = service.start_game(StartGameRequest())
    print_fn(started.message)
    print_fn("(type 'q' to quit)")

    while True:
        try:
            raw = input_fn("Your guess: ").strip()
        except EOFError:
            print_fn("")
            raw = "q"

        if raw.lower() in QUIT_WORDS:
            service.end_session(started.session_id, reason="quit")
            print_fn("Bye!")
            return None

        try:
            value = int(raw)
        except ValueError:
            value = None
        if value is None or not config.in_range(value):
            print_fn(f"Please enter a valid number between {config.min_value} and {config.max_value}")
            continue

        response = service.make_guess(
            MakeGuessRequest(session_id=started.session_id, guess=value)
        )
        if isinstance(response, ErrorResponse):
            print_fn(response.error)
            continue

        print_fn(response.message)
        print_fn(f"Attempts: {response.attempts}")
        if response.outcome == GuessOutcome.CORRECT:
            service.end_session(started.session_id, reason="completed")
            return response.attempts


def cmd_serve(args):
    """Run the HTTP API with uvicorn."""
    import uvicorn

    logger.info("Serving Guessr API on %s:%d", args.host, args.port)
    uvicorn.run(
        "guessr.api.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
    )


if __name__ == "__main__":
    main()
