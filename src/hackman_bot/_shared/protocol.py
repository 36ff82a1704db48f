# Area: Shared
"""
hackman_bot._shared.protocol — Protocol helpers for line formatting
===================================================================

Vocabulary of the engine's line protocol, the tokenizer for incoming
lines and the encoder for outgoing responses.

Incoming:
    settings <key> <value>
    update <game|player> <key> <value>
    action character <time-ms>
    action move <time-ms>

Outgoing (one line per action request):
    bixie | bixiette
    up | down | left | right | pass
    <direction>;drop_bomb <rounds>
"""

from typing import List

from ..types import CharacterChoice, Move

# Verbs
SETTINGS = "settings"
UPDATE = "update"
ACTION = "action"

# Action sub-verbs
CHARACTER = "character"
MOVE = "move"

PASS = "pass"
DROP_BOMB = "drop_bomb"

# Tokens required per verb, the verb itself included
REQUIRED_TOKENS = {
    SETTINGS: 3,
    UPDATE: 4,
    ACTION: 3,
}


def tokenize(line: str) -> List[str]:
    """Split a raw line on single spaces, dropping the line terminator.

    No quoting or escaping: consecutive spaces yield empty tokens.
    """
    return line.rstrip("\r\n").split(" ")


def encode_character(choice: CharacterChoice) -> str:
    return choice.value


def encode_move(move: Move) -> str:
    """Build the response line for a move.

    Format: direction[;drop_bomb rounds] or pass
    """
    if move.direction is None:
        return PASS
    if move.drop_bomb is None:
        return move.direction.value
    return f"{move.direction.value};{DROP_BOMB} {move.drop_bomb}"
