# Area: Core
"""
hackman_bot._field — Field decoder
==================================

Turns the flat ``update game field`` string into a Field:
cells are separated by ``,`` and the facets of one cell by ``;``.
Rows are rebuilt from the known width; the snippet, own-bot and
opponent positions are collected in the same pass.
"""

from __future__ import annotations
import logging
from typing import List, Optional, Tuple

from ._grammar import encode_cell_type, parse_cell_type
from .errors import DimensionMismatch
from .types import Cell, Coords, Field

logger = logging.getLogger("hackman_bot.field")


def parse_cell(text: str) -> Cell:
    """Decode one ``;``-separated cell, keeping facet order."""
    return Cell(tuple(parse_cell_type(token) for token in text.split(";")))


def index_to_coords(index: int, width: int) -> Coords:
    return (index // width, index % width)


def parse_field(
    text: str,
    width: int,
    my_id: Optional[int] = None,
    height: Optional[int] = None,
) -> Field:
    """
    Decode a flat field string.

    Parameters
    ----------
    text : str
        Comma-separated cells, e.g. ``".,x,P0;C,S"``.
    width : int
        Number of cells per row.
    my_id : int, optional
        Our own player id; the occupant with this id becomes ``Field.me``,
        every other occupant goes to ``Field.others``.
    height : int, optional
        When given and positive, the cell count must equal width * height.

    Raises
    ------
    DimensionMismatch
        Width is not positive, or the cell count does not fit the dimensions.
    MalformedToken
        Any cell token fails to decode.
    """
    raw_cells = text.split(",")
    count = len(raw_cells)

    if width <= 0 or count % width != 0:
        raise DimensionMismatch(count, width, height)
    if height and count != width * height:
        raise DimensionMismatch(count, width, height)

    cells: List[Cell] = []
    snippets: List[Coords] = []
    others: List[Coords] = []
    me: Optional[Coords] = None

    for index, raw in enumerate(raw_cells):
        cell = parse_cell(raw)
        cells.append(cell)

        if cell.has_snippet():
            snippets.append(index_to_coords(index, width))

        for player_id in cell.player_ids():
            if my_id is not None and player_id == my_id:
                me = index_to_coords(index, width)
            else:
                others.append(index_to_coords(index, width))

    rows: Tuple[Tuple[Cell, ...], ...] = tuple(
        tuple(cells[start:start + width]) for start in range(0, count, width)
    )
    logger.debug(
        f"Decoded {len(rows)}x{width} field: "
        f"{len(snippets)} snippets, me={me}, {len(others)} others"
    )
    return Field(cells=rows, snippets=tuple(snippets), me=me, others=tuple(others))


def encode_cell(cell: Cell) -> str:
    return ";".join(encode_cell_type(t) for t in cell.types)


def encode_field(field: Field) -> str:
    """Render a Field back to the flat wire string."""
    return ",".join(encode_cell(cell) for row in field.cells for cell in row)
