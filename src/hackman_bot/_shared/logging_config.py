# Area: Shared
"""
hackman_bot._shared.logging_config — Structured logging setup
=============================================================

Configures dual logging: terminal (colored) + file (JSON lines).
Provides error logging and termination functions.

stdout belongs to the engine protocol, so every terminal handler
writes to stderr.
"""

from __future__ import annotations
import logging
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from ..errors import HackManBotError

# Package logger
logger = logging.getLogger("hackman_bot")


class TerminalFormatter(logging.Formatter):
    """Colored formatter for terminal output."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Color a copy so the file handler still sees the plain level name
        record = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, self.RESET)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


class JSONFormatter(logging.Formatter):
    """JSON formatter for file output."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in ("error_type", "protocol_line"):
            if hasattr(record, key):
                log_data[key] = getattr(record, key)
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def setup_logging(
    log_file_path: Optional[str] = None,
    level: Union[int, str] = logging.INFO,
) -> None:
    """
    Configure logging for the package.

    Parameters
    ----------
    log_file_path : str, optional
        Path to a JSON-lines log file. No file logging when omitted.
    level : int or str
        Logging level, e.g. logging.DEBUG or "DEBUG". Defaults to INFO.
    """
    pkg_logger = logging.getLogger("hackman_bot")
    pkg_logger.setLevel(level)

    pkg_logger.handlers.clear()

    terminal_handler = logging.StreamHandler(sys.stderr)
    terminal_handler.setLevel(level)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    pkg_logger.addHandler(terminal_handler)

    if log_file_path:
        try:
            log_path = Path(log_file_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(JSONFormatter())
            pkg_logger.addHandler(file_handler)
        except OSError as e:
            pkg_logger.warning(f"Could not create log file: {e}")

    pkg_logger.propagate = False


def log_error(error: "HackManBotError") -> None:
    """
    Log an error in the structured block format.

    The block goes straight to stderr for exact formatting; a one-line
    record goes through the logger for the log file.
    """
    print(error.format_error_log(), file=sys.stderr)

    logger.error(
        f"{error.__class__.__name__}: {error}",
        extra={
            "error_type": error.__class__.__name__,
            "protocol_line": getattr(error, "line", None),
        },
    )


def log_and_terminate(error: "HackManBotError", exit_code: int = 1) -> None:
    """
    Log the error and terminate the process.

    stdout is flushed first so responses already written reach the engine.
    """
    log_error(error)
    logger.critical("Process terminated due to error")
    sys.stdout.flush()
    sys.exit(exit_code)
