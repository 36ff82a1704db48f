"""
hackman_bot.types — Value types shared by the protocol and the bot AI
=====================================================================

This module documents the board representation handed to BotAI
callbacks and the choices they return. All types are exported from
the main package:

    from hackman_bot import Field, Cell, Occupant, Move, Direction, ...

Cells and fields are immutable values: a new Field is decoded from
every ``update game field`` line and replaces the previous one.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Tuple, Type

Coords = Tuple[int, int]


# ============================================
# Cell-type facets
# ============================================

@dataclass(frozen=True)
class CellType:
    """One facet of a board position (terrain, occupant, hazard, ...)."""


@dataclass(frozen=True)
class Empty(CellType):
    """Open floor. Token ``.``"""


@dataclass(frozen=True)
class Blocked(CellType):
    """Inaccessible terrain. Token ``x``"""


@dataclass(frozen=True)
class Occupant(CellType):
    """A player standing on the cell. Token ``P<n>``"""
    player_id: int


@dataclass(frozen=True)
class SpawnPoint(CellType):
    """Bug spawn point. Token ``S`` (timer 0) or ``S<n>``"""
    rounds_before_spawn: int = 0


@dataclass(frozen=True)
class GateLeft(CellType):
    """Left-hand side gate. Token ``Gl``"""


@dataclass(frozen=True)
class GateRight(CellType):
    """Right-hand side gate. Token ``Gr``"""


@dataclass(frozen=True)
class Hazard(CellType):
    """A bug, payload is its AI type. Token ``E<n>``"""
    ai_type: int


@dataclass(frozen=True)
class Mine(CellType):
    """An armed mine. Token ``B<n>``"""
    rounds_before_explode: int


@dataclass(frozen=True)
class PickupMine(CellType):
    """A mine lying on the floor, ready to be collected. Token ``B``"""


@dataclass(frozen=True)
class CollectibleSnippet(CellType):
    """A code snippet. Token ``C``"""


# ============================================
# Cells and the field
# ============================================

@dataclass(frozen=True)
class Cell:
    """All facets of one board position, in wire order."""
    types: Tuple[CellType, ...]

    def has(self, kind: Type[CellType]) -> bool:
        return any(isinstance(t, kind) for t in self.types)

    def has_snippet(self) -> bool:
        return self.has(CollectibleSnippet)

    def is_blocked(self) -> bool:
        return self.has(Blocked)

    def player_ids(self) -> List[int]:
        return [t.player_id for t in self.types if isinstance(t, Occupant)]


@dataclass(frozen=True)
class Field:
    """
    Decoded game board for the current round.

    Fields
    ------
    cells : tuple of rows
        Row-major grid, ``cells[row][col]``.
    snippets : tuple of (row, col)
        Every cell holding a code snippet.
    me : (row, col) or None
        Where our own bot stands, None until it appears on the board.
    others : tuple of (row, col)
        Every other occupant on the board.
    """
    cells: Tuple[Tuple[Cell, ...], ...] = ()
    snippets: Tuple[Coords, ...] = ()
    me: Optional[Coords] = None
    others: Tuple[Coords, ...] = ()

    @property
    def height(self) -> int:
        return len(self.cells)

    @property
    def width(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def cell_at(self, row: int, col: int) -> Cell:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"({row}, {col}) is outside a {self.height}x{self.width} field")
        return self.cells[row][col]

    def __iter__(self) -> Iterator[Tuple[Coords, Cell]]:
        for row, cells in enumerate(self.cells):
            for col, cell in enumerate(cells):
                yield (row, col), cell


# ============================================
# Responses
# ============================================

class CharacterChoice(Enum):
    """Answer to ``action character``."""
    BIXIE = "bixie"
    BIXIETTE = "bixiette"


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Move:
    """
    Answer to ``action move``.

    A Move without a direction is a pass. A bomb can only be dropped
    together with a direction.

    >>> Move(Direction.RIGHT, drop_bomb=3)
    >>> Move.pass_turn()
    """
    direction: Optional[Direction] = None
    drop_bomb: Optional[int] = field(default=None)

    def __post_init__(self):
        if self.direction is not None and not isinstance(self.direction, Direction):
            raise ValueError(f"direction must be a Direction, got {self.direction!r}")
        if self.drop_bomb is not None:
            if self.direction is None:
                raise ValueError("cannot drop a bomb while passing")
            if isinstance(self.drop_bomb, bool) or not isinstance(self.drop_bomb, int):
                raise ValueError(f"bomb fuse must be an int, got {self.drop_bomb!r}")
            if self.drop_bomb < 0:
                raise ValueError(f"bomb fuse must be non-negative, got {self.drop_bomb}")

    @classmethod
    def pass_turn(cls) -> "Move":
        return cls()

    @property
    def is_pass(self) -> bool:
        return self.direction is None


__all__ = [
    "Coords",
    "CellType",
    "Empty",
    "Blocked",
    "Occupant",
    "SpawnPoint",
    "GateLeft",
    "GateRight",
    "Hazard",
    "Mine",
    "PickupMine",
    "CollectibleSnippet",
    "Cell",
    "Field",
    "CharacterChoice",
    "Direction",
    "Move",
]
