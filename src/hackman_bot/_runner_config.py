# Area: Shared
"""
hackman_bot._runner_config — Runner Configuration
=================================================

Configuration validation and constants for BotRunner.
"""

import logging

from .types import CharacterChoice

logger = logging.getLogger("hackman_bot")

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

DEFAULT_CONFIG = {
    "log_file": None,
    "log_level": "INFO",
    "strict": False,
    "protocol_trace": False,
    "character": CharacterChoice.BIXIE.value,
}


def validate_config(config: dict) -> dict:
    """
    Validate runner configuration and fill in defaults.

    Args:
        config: Configuration dict

    Returns:
        A new dict with every known key present

    Raises:
        ValueError: If a value is out of range
    """
    unknown = sorted(set(config) - set(DEFAULT_CONFIG))
    if unknown:
        logger.warning(f"Ignoring unknown config keys: {unknown}")

    merged = {**DEFAULT_CONFIG, **{k: v for k, v in config.items() if k in DEFAULT_CONFIG}}

    level = str(merged["log_level"]).upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Invalid log_level: {merged['log_level']!r}")
    merged["log_level"] = level

    characters = {choice.value for choice in CharacterChoice}
    if merged["character"] not in characters:
        raise ValueError(
            f"Invalid character: {merged['character']!r} (expected one of {sorted(characters)})"
        )

    merged["strict"] = bool(merged["strict"])
    merged["protocol_trace"] = bool(merged["protocol_trace"])
    return merged

