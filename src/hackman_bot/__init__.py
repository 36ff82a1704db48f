"""
hackman_bot — Hack Man Bot Client Package
=========================================

Speaks the engine's line protocol on stdin/stdout, keeps the decoded
game state up to date and asks your bot for a character and a move
whenever the engine requests one.

Quick Start (no implementation needed):
    from hackman_bot import DemoAI, BotRunner
    runner = BotRunner(config={}, ai=DemoAI())
    runner.run()

Custom Implementation:
    from hackman_bot import BotAI, BotRunner
    class MyBot(BotAI): ...  # Implement 2 methods
    runner = BotRunner(config={}, ai=MyBot())
    runner.run()

Type Definitions
----------------
The board and response types are available for import:

    from hackman_bot import (
        Game, Field, Cell, Occupant, CollectibleSnippet,
        Move, Direction, CharacterChoice,
    )
"""

from .callbacks import BotAI
from .demo_ai import DemoAI
from .runner import BotRunner
from ._state import Game, Settings, Player
from ._grammar import parse_cell_type, encode_cell_type
from ._field import parse_field, encode_field
from .errors import (
    HackManBotError,
    ProtocolError,
    MalformedToken,
    DimensionMismatch,
    IncompleteLine,
    InvalidResponseError,
)
from .types import (
    # Board types
    CellType,
    Empty,
    Blocked,
    Occupant,
    SpawnPoint,
    GateLeft,
    GateRight,
    Hazard,
    Mine,
    PickupMine,
    CollectibleSnippet,
    Cell,
    Field,
    # Response types
    CharacterChoice,
    Direction,
    Move,
)

__all__ = [
    # Main classes
    "BotAI",
    "DemoAI",
    "BotRunner",
    # Game state
    "Game",
    "Settings",
    "Player",
    # Codecs
    "parse_cell_type",
    "encode_cell_type",
    "parse_field",
    "encode_field",
    # Errors
    "HackManBotError",
    "ProtocolError",
    "MalformedToken",
    "DimensionMismatch",
    "IncompleteLine",
    "InvalidResponseError",
    # Board types
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
    # Response types
    "CharacterChoice",
    "Direction",
    "Move",
]
__version__ = "1.0.0"
