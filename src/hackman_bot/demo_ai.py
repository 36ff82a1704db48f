# Area: Shared
"""
hackman_bot.demo_ai — Demo Bot AI Implementation
================================================

A ready-to-use BotAI that works out of the box: it picks a fixed
character and passes every turn. Useful to check the protocol plumbing
against the engine before writing a real bot.

Usage:
    from hackman_bot import DemoAI, BotRunner

    runner = BotRunner(config={}, ai=DemoAI())
    runner.run()
"""

import logging

from ._state import Game
from .callbacks import BotAI
from .types import CharacterChoice, Move

logger = logging.getLogger("hackman_bot.demo_ai")


class DemoAI(BotAI):
    """Always the same character, always ``pass``."""

    def __init__(self, character: CharacterChoice = CharacterChoice.BIXIE):
        self.character = character

    def choose_character(self, time_budget: int) -> CharacterChoice:
        return self.character

    def choose_move(self, game: Game, time_budget: int) -> Move:
        logger.debug(f"Round {game.round}: passing ({time_budget}ms left)")
        return Move.pass_turn()
