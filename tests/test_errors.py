# Area: Shared Tests
"""Tests for the exception hierarchy and error blocks."""

from hackman_bot.errors import (
    DimensionMismatch,
    HackManBotError,
    IncompleteLine,
    InvalidResponseError,
    MalformedToken,
    ProtocolError,
)


class TestHierarchy:
    """Tests for exception base classes."""

    def test_protocol_errors(self):
        for error in (
            MalformedToken("Q9", "unknown"),
            DimensionMismatch(5, 3),
            IncompleteLine("settings", 3, 2),
        ):
            assert isinstance(error, ProtocolError)
            assert isinstance(error, HackManBotError)

    def test_invalid_response_is_not_protocol_error(self):
        error = InvalidResponseError("choose_move", "Move", "up")
        assert isinstance(error, HackManBotError)
        assert not isinstance(error, ProtocolError)


class TestMessages:
    """Tests for error messages."""

    def test_dimension_mismatch_with_width_only(self):
        assert "multiple of width 3" in str(DimensionMismatch(5, 3))

    def test_dimension_mismatch_with_height(self):
        assert "3x2=6" in str(DimensionMismatch(5, 3, 2))

    def test_incomplete_line(self):
        error = IncompleteLine("update", 4, 2)
        assert str(error) == "'update' needs 4 tokens, got 2"


class TestFormatErrorLog:
    """Tests for structured error blocks."""

    def test_protocol_error_block(self):
        error = MalformedToken("Q9", "unknown cell type 'Q'",
                               line="update game field Q9")
        block = error.format_error_log()
        assert "MALFORMED_TOKEN" in block
        assert "update game field Q9" in block
        assert "Malformed token 'Q9'" in block

    def test_block_without_line(self):
        block = DimensionMismatch(5, 3).format_error_log()
        assert "DIMENSION_MISMATCH" in block
        assert "INPUT LINE" not in block

    def test_long_line_is_elided(self):
        line = "update game field " + ",".join(["."] * 400)
        block = DimensionMismatch(400, 3, line=line).format_error_log()
        assert " ... " in block
        assert line not in block

    def test_invalid_response_block(self):
        block = InvalidResponseError("choose_move", "Move", "up").format_error_log()
        assert "INVALID_RESPONSE" in block
        assert "callback choose_move" in block
