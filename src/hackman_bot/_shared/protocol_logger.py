# Area: Shared
"""
hackman_bot._shared.protocol_logger — Protocol line tracing
===========================================================

One colored line per received command, sent response and callback
invocation. Off by default; written to stderr because stdout carries
the responses themselves.
"""

from __future__ import annotations
import sys
from datetime import datetime
from typing import Optional, TextIO

# ══════════════════════════════════════════════════════════════
# ANSI COLOR CODES
# ══════════════════════════════════════════════════════════════

GREEN = "\033[32m"         # Protocol lines
ORANGE = "\033[38;5;208m"  # Callbacks
RED = "\033[31m"           # Errors
RESET = "\033[0m"

# ══════════════════════════════════════════════════════════════
# COMMAND → DISPLAY NAME MAPPINGS
# ══════════════════════════════════════════════════════════════

RECEIVE_DISPLAY_NAMES = {
    "settings": "SETTINGS",
    "update": "UPDATE",
    "action character": "ASK-CHARACTER",
    "action move": "ASK-MOVE",
}

# Expected response for each received command
EXPECTED_RESPONSES = {
    "settings": "None",
    "update": "None",
    "action character": "bixie|bixiette",
    "action move": "direction|pass",
}

CALLBACK_DISPLAY_NAMES = {
    "choose_character": "pick_character",
    "choose_move": "pick_move",
}

# Long field strings are cut to this many characters
MAX_DETAIL_LENGTH = 60


def command_name(tokens) -> str:
    """Display key for a tokenized line: verb, plus sub-verb for actions."""
    if not tokens:
        return ""
    if tokens[0] == "action" and len(tokens) > 1:
        return f"action {tokens[1]}"
    return tokens[0]


class ProtocolLogger:
    """Tracer for protocol lines and callbacks."""

    def __init__(self, enabled: bool = False, stream: Optional[TextIO] = None):
        self.enabled = enabled
        self._stream = stream
        self._round = 0

    def set_enabled(self, enabled: bool) -> None:
        self.enabled = enabled

    def set_round(self, round_number: int) -> None:
        """Set current round for logging context."""
        self._round = round_number

    @property
    def stream(self) -> TextIO:
        return self._stream or sys.stderr

    def _now_ms(self) -> str:
        return datetime.now().strftime("%H:%M:%S:%f")[:-3]

    def _emit(self, line: str) -> None:
        if self.enabled:
            print(line, file=self.stream)

    def log_received(self, command: str, detail: str = "") -> None:
        """Log a received protocol line."""
        display = RECEIVE_DISPLAY_NAMES.get(command, command.upper())
        expected = EXPECTED_RESPONSES.get(command, "Unknown")
        if len(detail) > MAX_DETAIL_LENGTH:
            detail = detail[:MAX_DETAIL_LENGTH - 3] + "..."
        self._emit(
            f"{GREEN}{self._now_ms()} | ROUND: {self._round:4} | RECEIVED | "
            f"{display:14} | EXPECTED-RESPONSE: {expected:15} | {detail}{RESET}"
        )

    def log_sent(self, response: str) -> None:
        """Log a sent response line."""
        self._emit(
            f"{GREEN}{self._now_ms()} | ROUND: {self._round:4} | SENT     | "
            f"{response}{RESET}"
        )

    def log_callback_call(self, callback_name: str) -> None:
        display = CALLBACK_DISPLAY_NAMES.get(callback_name, callback_name)
        self._emit(f"{ORANGE}{self._now_ms()} | CALLBACK: {display:16} | CALL{RESET}")

    def log_callback_response(self, callback_name: str) -> None:
        display = CALLBACK_DISPLAY_NAMES.get(callback_name, callback_name)
        self._emit(f"{ORANGE}{self._now_ms()} | CALLBACK: {display:16} | RESPONSE{RESET}")

    def log_error(self, description: str) -> None:
        self._emit(f"{RED}[ERROR] {self._now_ms()} | {description}{RESET}")


# Global singleton instance
_protocol_logger: Optional[ProtocolLogger] = None


def get_protocol_logger() -> ProtocolLogger:
    """Get or create the global protocol logger instance."""
    global _protocol_logger
    if _protocol_logger is None:
        _protocol_logger = ProtocolLogger()
    return _protocol_logger
