"""
hackman_bot.runner — Main event loop
====================================

The BotRunner is what bot authors instantiate and call .run() on.
It reads protocol lines, routes them, and writes one flushed
response line per action request, in a single blocking loop that
ends when the input stream does.
"""

from __future__ import annotations
import logging
import sys
from typing import Any, Dict, Iterable, Optional, TextIO

from ._message_router import MessageRouter
from ._runner_config import validate_config
from ._shared.logging_config import log_and_terminate, setup_logging
from ._shared.protocol_logger import get_protocol_logger
from ._state import Game
from .callbacks import BotAI
from .errors import HackManBotError, IncompleteLine

logger = logging.getLogger("hackman_bot")


class BotRunner:
    """
    Main entry point for bot authors.

    Usage
    -----
        from hackman_bot import BotRunner
        from my_bot import MyBot

        config = {
            "log_file": "hackman_bot.log",
            "log_level": "INFO",
            "strict": False,
        }

        runner = BotRunner(config=config, ai=MyBot())
        runner.run()

    Error policy
    ------------
    Incomplete lines, unknown verbs and unknown keys are ignored.
    A malformed token or a field of the wrong size is logged and the
    line is skipped, leaving the Game unchanged. With ``strict`` set,
    either one terminates the process after flushing pending output.
    """

    def __init__(
        self,
        config: Dict[str, Any],
        ai: BotAI,
        input_stream: Optional[Iterable[str]] = None,
        output_stream: Optional[TextIO] = None,
    ):
        self.config = validate_config(config)
        self.ai = ai
        self.input_stream = input_stream
        self.output_stream = output_stream

        setup_logging(
            log_file_path=self.config["log_file"],
            level=self.config["log_level"],
        )
        get_protocol_logger().set_enabled(self.config["protocol_trace"])

        self.game = Game()
        self.router = MessageRouter(ai=ai, game=self.game)
        self.strict = self.config["strict"]

    # ── Main loop ─────────────────────────────────────────────

    def run(self) -> None:
        """
        Process lines until the input stream is exhausted.
        """
        source = self.input_stream if self.input_stream is not None else sys.stdin

        logger.info("Hack Man bot starting" + (" (strict)" if self.strict else ""))

        for line in source:
            self.process_line(line)

        logger.info(f"Input closed after round {self.game.round}. Bot stopped.")

    def process_line(self, line: str) -> Optional[str]:
        """Route one line and write its response, if any."""
        try:
            response = self.router.route(line)
        except IncompleteLine as e:
            logger.debug(f"Ignoring incomplete line: {e}")
            return None
        except HackManBotError as e:
            self._handle_error(e)
            return None
        except Exception as e:
            if self.strict:
                self._flush()
                raise
            logger.error(f"Unexpected error handling line {line!r}: {e}", exc_info=True)
            return None

        if response is not None:
            self._write(response)
        return response

    # ── Output ───────────────────────────────────────────────

    def _write(self, response: str) -> None:
        out = self.output_stream if self.output_stream is not None else sys.stdout
        out.write(response + "\n")
        out.flush()
        get_protocol_logger().log_sent(response)

    def _flush(self) -> None:
        out = self.output_stream if self.output_stream is not None else sys.stdout
        out.flush()

    def _handle_error(self, error: HackManBotError) -> None:
        if self.strict:
            self._flush()
            log_and_terminate(error)
        logger.warning(
            f"Skipped line: {error}",
            extra={"error_type": error.__class__.__name__,
                   "protocol_line": getattr(error, "line", None)},
        )
        get_protocol_logger().log_error(f"Skipped line: {error}")
