# Area: Shared
"""
Shared utilities used by the router, the runner and the executor.

This package contains:
- Logging configuration
- Protocol vocabulary, tokenizer and response encoder
- Protocol line tracer
"""

from .logging_config import (
    setup_logging,
    log_error,
    log_and_terminate,
)
from .protocol import (
    tokenize,
    encode_character,
    encode_move,
)
from .protocol_logger import get_protocol_logger, ProtocolLogger

__all__ = [
    "setup_logging",
    "log_error",
    "log_and_terminate",
    "tokenize",
    "encode_character",
    "encode_move",
    "get_protocol_logger",
    "ProtocolLogger",
]
