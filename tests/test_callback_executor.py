# Area: Shared Tests
"""Tests for callback execution and return type checks."""

import pytest
from unittest.mock import patch

from hackman_bot.callback_executor import execute_callback
from hackman_bot.errors import InvalidResponseError
from hackman_bot.types import CharacterChoice, Direction, Move


class TestExecuteCallback:
    """Tests for execute_callback."""

    def test_returns_valid_result(self):
        result = execute_callback(
            callback_fn=lambda budget: CharacterChoice.BIXIETTE,
            callback_name="choose_character",
            args=(1000,),
            expected_type=CharacterChoice,
        )
        assert result is CharacterChoice.BIXIETTE

    def test_passes_arguments(self):
        received = []

        def choose_move(game, budget):
            received.append((game, budget))
            return Move(Direction.UP)

        execute_callback(choose_move, "choose_move", ("game", 200), Move)
        assert received == [("game", 200)]

    def test_wrong_type_raises(self):
        with pytest.raises(InvalidResponseError) as exc_info:
            execute_callback(lambda budget: "bixie", "choose_character", (1,), CharacterChoice)
        error = exc_info.value
        assert error.callback_name == "choose_character"
        assert error.expected == "CharacterChoice"
        assert error.raw_output_type == "str"

    def test_none_is_wrong_type(self):
        with pytest.raises(InvalidResponseError):
            execute_callback(lambda game, budget: None, "choose_move", (None, 1), Move)

    def test_callback_exception_propagates(self):
        def failing(budget):
            raise ValueError("bot code broke")

        with pytest.raises(ValueError, match="bot code broke"):
            execute_callback(failing, "choose_character", (1,), CharacterChoice)

    def test_traces_call_and_response(self):
        with patch("hackman_bot.callback_executor.get_protocol_logger") as get_logger:
            execute_callback(lambda b: CharacterChoice.BIXIE, "choose_character", (1,),
                             CharacterChoice)
            tracer = get_logger.return_value
            tracer.log_callback_call.assert_called_once_with("choose_character")
            tracer.log_callback_response.assert_called_once_with("choose_character")
