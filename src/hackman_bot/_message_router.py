"""
hackman_bot.message_router — Line → State → Callback → Response
===============================================================

The heart of the package. Classifies each input line by its leading
verb, applies ``settings``/``update`` lines to the Game, calls the
bot's callbacks for ``action`` lines and returns the encoded response.
"""

from __future__ import annotations
import logging
from typing import List, Optional

from ._grammar import parse_number
from ._shared.protocol import (
    ACTION,
    CHARACTER,
    MOVE,
    REQUIRED_TOKENS,
    SETTINGS,
    UPDATE,
    encode_character,
    encode_move,
    tokenize,
)
from ._shared.protocol_logger import command_name, get_protocol_logger
from ._state import Game
from .callback_executor import execute_callback
from .callbacks import BotAI
from .errors import IncompleteLine, ProtocolError
from .types import CharacterChoice, Move

logger = logging.getLogger("hackman_bot.router")


class MessageRouter:
    """
    Stateful line router for one game.

    Given a raw input line:
    1. Splits it into tokens
    2. Updates the Game for ``settings`` and ``update`` lines
    3. Calls the BotAI callback for ``action`` lines
    4. Returns the response line to write, or None

    Raises ProtocolError subclasses for lines it cannot apply; the
    Game is left unchanged in that case. Unknown verbs and sub-verbs
    are ignored.
    """

    def __init__(self, ai: BotAI, game: Optional[Game] = None):
        self.ai = ai
        self.game = game if game is not None else Game()
        self.protocol_logger = get_protocol_logger()

    def route(self, line: str) -> Optional[str]:
        tokens = tokenize(line)
        verb = tokens[0]

        required = REQUIRED_TOKENS.get(verb)
        if required is None:
            if verb:
                logger.debug(f"No handler for verb={verb}")
            return None
        if len(tokens) < required:
            raise IncompleteLine(verb, required, len(tokens), line=line)

        self.protocol_logger.log_received(command_name(tokens), " ".join(tokens[1:]))

        try:
            if verb == SETTINGS:
                self.game.apply_setting(tokens[1], tokens[2])
                return None

            if verb == UPDATE:
                self.game.apply_update(tokens[1], tokens[2], tokens[3])
                self.protocol_logger.set_round(self.game.round)
                return None

            return self._handle_action(tokens)
        except ProtocolError as e:
            if e.line is None:
                e.line = line
            raise

    # ── action character / action move ───────────────────────

    def _handle_action(self, tokens: List[str]) -> Optional[str]:
        sub_verb = tokens[1]

        if sub_verb == CHARACTER:
            time_budget = parse_number(tokens[2])
            choice = execute_callback(
                callback_fn=self.ai.choose_character,
                callback_name="choose_character",
                args=(time_budget,),
                expected_type=CharacterChoice,
            )
            response = encode_character(choice)

        elif sub_verb == MOVE:
            time_budget = parse_number(tokens[2])
            move = execute_callback(
                callback_fn=self.ai.choose_move,
                callback_name="choose_move",
                args=(self.game, time_budget),
                expected_type=Move,
            )
            response = encode_move(move)

        else:
            logger.debug(f"No handler for {ACTION} {sub_verb}")
            return None

        logger.info(f"Round {self.game.round}: {ACTION} {sub_verb} -> {response}")
        return response
