# Area: Shared
"""
hackman_bot.callback_executor — Safe callback execution
=======================================================

Wraps BotAI callback invocation with:
1. Protocol trace of the call and its response
2. Return type validation (InvalidResponseError on mismatch)

Exceptions raised by the callback itself propagate unchanged; the
runner decides whether to skip the action or stop.

No deadline is enforced here: the time budget is only passed on.
"""

from __future__ import annotations
from typing import Any, Callable, Tuple, Type
import logging

from .errors import InvalidResponseError
from ._shared.protocol_logger import get_protocol_logger

logger = logging.getLogger("hackman_bot.executor")


def execute_callback(
    callback_fn: Callable[..., Any],
    callback_name: str,
    args: Tuple[Any, ...],
    expected_type: Type,
) -> Any:
    """
    Execute a callback and check the type of what it returns.

    Parameters
    ----------
    callback_fn : Callable
        The BotAI method to call.
    callback_name : str
        Name of the callback (for logs and error messages).
    args : tuple
        Positional arguments for the callback.
    expected_type : type
        The type the result must be an instance of.

    Raises
    ------
    InvalidResponseError
        If the callback returns anything but ``expected_type``.
    """
    logger.debug(f"[CALLBACK] Executing {callback_name}")
    protocol_logger = get_protocol_logger()
    protocol_logger.log_callback_call(callback_name)

    result = callback_fn(*args)

    if not isinstance(result, expected_type):
        raise InvalidResponseError(
            callback_name=callback_name,
            expected=expected_type.__name__,
            raw_output=result,
        )

    logger.debug(f"[CALLBACK] {callback_name} returned {result!r}")
    protocol_logger.log_callback_response(callback_name)
    return result
