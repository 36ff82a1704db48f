# Area: Bot Callbacks
"""
hackman_bot.callbacks — The 2 callback functions bot authors implement
======================================================================

Subclass BotAI and implement the 2 methods.

The package calls these methods when the engine sends an ``action``
line. Bot authors never see raw protocol lines: they get the decoded
Game and return typed choices, which the package encodes.

Type Definitions
----------------
All input/output types are defined in types.py and can be imported:

    from hackman_bot import Game, Field, Move, Direction, CharacterChoice
"""

from abc import ABC, abstractmethod

from ._state import Game
from .types import CharacterChoice, Move


class BotAI(ABC):
    """
    Abstract base class for a Hack Man bot.

    Subclass this and implement both methods. The package will call
    each method when the corresponding action request arrives.

    The time budget is informational: the package does not interrupt
    a slow callback, the engine does.
    """

    # ──────────────────────────────────────────────────────────────
    # CALLBACK 1: Pick a character
    # ──────────────────────────────────────────────────────────────
    @abstractmethod
    def choose_character(self, time_budget: int) -> CharacterChoice:
        """
        Called once per game on ``action character <time>``.

        Parameters
        ----------
        time_budget : int
            Milliseconds left in the time bank.

        Returns
        -------
        CharacterChoice
            CharacterChoice.BIXIE or CharacterChoice.BIXIETTE

        Example
        -------
        >>> def choose_character(self, time_budget):
        ...     return CharacterChoice.BIXIETTE
        """
        ...

    # ──────────────────────────────────────────────────────────────
    # CALLBACK 2: Pick a move
    # ──────────────────────────────────────────────────────────────
    @abstractmethod
    def choose_move(self, game: Game, time_budget: int) -> Move:
        """
        Called every round on ``action move <time>``.

        Parameters
        ----------
        game : Game
            Everything received so far:
            game.settings      one-time settings (field size, own id, ...)
            game.round         current round number
            game.field         decoded board, with field.me, field.others
                               and field.snippets precomputed
            game.players       name -> Player(snippets, bombs)

        time_budget : int
            Milliseconds left in the time bank.

        Returns
        -------
        Move
            Move(Direction.UP), Move(Direction.LEFT, drop_bomb=3),
            or Move.pass_turn()

        Example
        -------
        >>> def choose_move(self, game, time_budget):
        ...     if game.me and game.me.bombs and game.field.others:
        ...         return Move(Direction.UP, drop_bomb=2)
        ...     return Move.pass_turn()
        """
        ...
