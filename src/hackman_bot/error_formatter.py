# Area: Shared
"""Error formatting for structured protocol error logs."""

from __future__ import annotations
from datetime import datetime, timezone
from typing import List, Optional


def format_error_block(
    error_type: str,
    source: str,
    line: Optional[str],
    details: Optional[List[str]],
) -> str:
    """Format a structured error block for stderr and the log file."""
    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " HACKMAN BOT ERROR",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        f" Source:       {source}",
    ]

    if line is not None:
        lines.append("")
        lines.append(" ── INPUT LINE " + "─" * 49)
        lines.append(indent_line(line))

    if details:
        lines.append("")
        lines.append(" ── DETAILS " + "─" * 52)
        for detail in details:
            lines.append(f" • {detail}")

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def indent_line(text: str, width: int = 120) -> str:
    """Indent a raw protocol line, eliding the middle of very long fields."""
    if len(text) > width:
        half = width // 2
        text = f"{text[:half]} ... {text[-half:]}"
    return " " + text
