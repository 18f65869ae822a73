"""CLI entry point for Ollama Performance Chat."""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from .config.settings import ChatSettings
from .session import ChatSession


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Chat with a local Ollama model and measure response performance"
    )
    parser.add_argument('--model', help='Model to connect to at startup (skips the selection menu)')
    parser.add_argument('--base-url', help='OpenAI-compatible endpoint (default: http://localhost:11434/v1)')
    parser.add_argument('--timeout', type=float, help='HTTP timeout in seconds')
    parser.add_argument('--models', help='Comma-separated list of models for the selection menu')
    parser.add_argument('--reset-stats-on-switch', action='store_true', default=None,
                        help='Clear session statistics when switching to a different model')
    parser.add_argument('--log-level', help='Logging level (DEBUG, INFO, WARNING, ERROR)')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI function."""
    load_dotenv()
    args = build_parser().parse_args(argv)

    try:
        settings = ChatSettings.from_env(
            base_url=args.base_url,
            timeout=args.timeout,
            models=args.models.split(",") if args.models else None,
            reset_stats_on_switch=args.reset_stats_on_switch,
            log_level=args.log_level
        )
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    session = ChatSession(settings)
    try:
        asyncio.run(session.run(initial_model=args.model))
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    except KeyboardInterrupt:
        # Ctrl-C while a request was in flight
        session.show_summary()
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
