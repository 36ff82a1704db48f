# Area: Core
"""
hackman_bot._grammar — Cell-type token grammar
==============================================

Decodes one cell-type token (no ``;`` or ``,``) into a CellType and
back. Two rule sets are tried in order:

1. Exact-match table (``.``, ``x``, ``S``, ``Gl``, ``Gr``, ``B``, ``C``)
2. Leading character + decimal suffix (``P3``, ``S7``, ``E2``, ``B4``)

The sets overlap on ``S`` and ``B``: a bare ``S`` is a spawn point with
timer 0 and a bare ``B`` is a mine to pick up, while ``S<n>`` and
``B<n>`` carry a timer.
"""

from __future__ import annotations
from typing import Callable, Dict

from .errors import MalformedToken
from .types import (
    Blocked,
    CellType,
    CollectibleSnippet,
    Empty,
    GateLeft,
    GateRight,
    Hazard,
    Mine,
    Occupant,
    PickupMine,
    SpawnPoint,
)

EXACT_TOKENS: Dict[str, CellType] = {
    ".": Empty(),
    "x": Blocked(),
    "S": SpawnPoint(0),
    "Gl": GateLeft(),
    "Gr": GateRight(),
    "B": PickupMine(),
    "C": CollectibleSnippet(),
}

PREFIX_RULES: Dict[str, Callable[[int], CellType]] = {
    "P": Occupant,
    "S": SpawnPoint,
    "E": Hazard,
    "B": Mine,
}

# Largest value the engine sends: an unsigned 64-bit counter
MAX_NUMBER = 2 ** 64 - 1


def _to_number(digits: str, token: str, reason: str) -> int:
    if not digits or not digits.isascii() or not digits.isdigit():
        raise MalformedToken(token, reason)
    significant = digits.lstrip("0") or "0"
    if len(significant) > len(str(MAX_NUMBER)) or int(significant) > MAX_NUMBER:
        raise MalformedToken(token, f"value exceeds {MAX_NUMBER}")
    return int(significant)


def parse_number(text: str) -> int:
    """
    Parse a non-negative decimal integer.

    Only ASCII digits are accepted: no sign, whitespace or underscores,
    which ``int()`` alone would let through. Values above MAX_NUMBER
    are rejected as overflow.
    """
    return _to_number(text, text, "expected a non-negative integer")


def parse_cell_type(token: str) -> CellType:
    """
    Decode a single cell-type token.

    Raises
    ------
    MalformedToken
        Empty token, unknown leading character, or a suffix that is not
        a non-negative integer no larger than MAX_NUMBER.
    """
    exact = EXACT_TOKENS.get(token)
    if exact is not None:
        return exact

    if not token:
        raise MalformedToken(token, "empty cell type")

    rule = PREFIX_RULES.get(token[0])
    if rule is None:
        raise MalformedToken(token, f"unknown cell type '{token[0]}'")

    return rule(_to_number(token[1:], token, f"'{token[0]}' must be followed by digits"))


def encode_cell_type(cell_type: CellType) -> str:
    """Render a CellType back to its wire token."""
    if isinstance(cell_type, Occupant):
        return f"P{cell_type.player_id}"
    if isinstance(cell_type, SpawnPoint):
        if cell_type.rounds_before_spawn == 0:
            return "S"
        return f"S{cell_type.rounds_before_spawn}"
    if isinstance(cell_type, Hazard):
        return f"E{cell_type.ai_type}"
    if isinstance(cell_type, Mine):
        return f"B{cell_type.rounds_before_explode}"

    for token, value in EXACT_TOKENS.items():
        if value == cell_type:
            return token
    raise ValueError(f"Cannot encode cell type {cell_type!r}")
