# Area: Shared
"""
hackman_bot.cli — Command-line interface
========================================

Provides CLI entry point for running the demo bot against the engine.

Usage:
    hackman-bot                          # Pass every turn as bixie
    hackman-bot --character bixiette     # Pick the other character
    hackman-bot --config config.json     # Run with config file
    python -m hackman_bot --strict       # Stop on the first malformed line

Settings are read, lowest precedence first, from:
    1. Config file (--config)
    2. Environment variables, including a .env file in the working directory
    3. CLI flags
"""

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv

from .demo_ai import DemoAI
from .runner import BotRunner
from .types import CharacterChoice

ENV_MAPPINGS = {
    "HACKMAN_LOG_FILE": "log_file",
    "HACKMAN_LOG_LEVEL": "log_level",
    "HACKMAN_STRICT": "strict",
    "HACKMAN_PROTOCOL_TRACE": "protocol_trace",
    "HACKMAN_CHARACTER": "character",
}

BOOLEAN_KEYS = {"strict", "protocol_trace"}


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Hack Man bot - answer engine commands on stdin/stdout",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  hackman-bot
  hackman-bot --config config.json
  hackman-bot --strict --log-file bot.log
  HACKMAN_PROTOCOL_TRACE=true hackman-bot
        """,
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to JSON config file",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Terminate on a malformed line instead of skipping it",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        help="Write JSON log records to this file",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        help="DEBUG, INFO, WARNING, ERROR or CRITICAL (default: INFO)",
    )

    parser.add_argument(
        "--character",
        choices=[choice.value for choice in CharacterChoice],
        help="Character the demo bot picks (default: bixie)",
    )

    parser.add_argument(
        "--trace",
        action="store_true",
        default=None,
        help="Trace every protocol line on stderr",
    )

    return parser.parse_args(argv)


def parse_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes")


def load_config(config_path: Optional[str]) -> Dict[str, Any]:
    """Load config from file, then override from the environment."""
    config: Dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if path.exists():
            with open(path, encoding="utf-8") as f:
                config = json.load(f)

    load_dotenv(find_dotenv(usecwd=True))

    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            value: Any = os.environ[env_key]
            if config_key in BOOLEAN_KEYS:
                value = parse_bool(value)
            config[config_key] = value

    return config


def apply_args(config: Dict[str, Any], args: argparse.Namespace) -> Dict[str, Any]:
    """Apply CLI flags on top of the loaded config."""
    overrides = {
        "strict": args.strict,
        "log_file": args.log_file,
        "log_level": args.log_level,
        "character": args.character,
        "protocol_trace": args.trace,
    }
    return {**config, **{k: v for k, v in overrides.items() if v is not None}}


def main(argv=None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)
    config = apply_args(load_config(args.config), args)

    try:
        character = CharacterChoice(config.get("character", CharacterChoice.BIXIE.value))
        runner = BotRunner(config=config, ai=DemoAI(character=character))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    runner.run()
    return 0
