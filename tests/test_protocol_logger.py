# Area: Shared Tests
"""Tests for the protocol line tracer."""

import io

from hackman_bot._shared.protocol_logger import (
    MAX_DETAIL_LENGTH,
    ProtocolLogger,
    command_name,
    get_protocol_logger,
)


class TestCommandName:
    """Tests for command_name()."""

    def test_actions_include_sub_verb(self):
        assert command_name(["action", "move", "100"]) == "action move"

    def test_other_verbs(self):
        assert command_name(["update", "game", "round", "3"]) == "update"

    def test_empty(self):
        assert command_name([]) == ""


class TestProtocolLogger:
    """Tests for ProtocolLogger output."""

    def test_disabled_by_default(self):
        stream = io.StringIO()
        tracer = ProtocolLogger(stream=stream)
        tracer.log_sent("pass")
        tracer.log_error("boom")
        assert stream.getvalue() == ""

    def test_received_line(self):
        stream = io.StringIO()
        tracer = ProtocolLogger(enabled=True, stream=stream)
        tracer.set_round(7)
        tracer.log_received("action move", "move 500")
        output = stream.getvalue()
        assert "ASK-MOVE" in output
        assert "ROUND:    7" in output
        assert "direction|pass" in output

    def test_long_detail_truncated(self):
        stream = io.StringIO()
        tracer = ProtocolLogger(enabled=True, stream=stream)
        detail = "game field " + ",".join(["."] * 100)
        tracer.log_received("update", detail)
        assert detail[:MAX_DETAIL_LENGTH - 3] + "..." in stream.getvalue()
        assert detail not in stream.getvalue()

    def test_callback_display_names(self):
        stream = io.StringIO()
        tracer = ProtocolLogger(enabled=True, stream=stream)
        tracer.log_callback_call("choose_character")
        tracer.log_callback_response("choose_move")
        output = stream.getvalue()
        assert "pick_character" in output
        assert "pick_move" in output

    def test_singleton(self):
        assert get_protocol_logger() is get_protocol_logger()
