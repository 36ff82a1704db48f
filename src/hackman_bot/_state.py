# Area: Core
"""
hackman_bot.state — Game state tracker
======================================

Holds everything the engine has told us so far: the one-time game
settings, the current round, the latest decoded field and per-player
stats. Every ``settings`` and ``update`` line lands here.

Updates are all-or-nothing: a value is parsed and validated before
anything is replaced, so a malformed line leaves the state untouched.
"""

from __future__ import annotations
from dataclasses import dataclass, field as dc_field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple
import logging

from pydantic import BaseModel, ConfigDict, NonNegativeInt

from ._field import index_to_coords, parse_field
from ._grammar import parse_number
from .types import Coords, Field

logger = logging.getLogger("hackman_bot.state")


class Settings(BaseModel):
    """One-time game configuration, sent before the first round."""

    model_config = ConfigDict(frozen=True)

    timebank: NonNegativeInt = 0
    time_per_move: NonNegativeInt = 0
    player_names: List[str] = []
    my_bot: str = ""
    my_bot_id: NonNegativeInt = 0
    field_width: NonNegativeInt = 0
    field_height: NonNegativeInt = 0
    max_rounds: NonNegativeInt = 0

    def index_to_coords(self, index: int) -> Coords:
        return index_to_coords(index, self.field_width)


class Player(BaseModel):
    """Stats for one player, as last reported by the engine."""

    model_config = ConfigDict(frozen=True)

    snippets: NonNegativeInt = 0
    bombs: NonNegativeInt = 0


class SettingKey(str, Enum):
    TIMEBANK = "timebank"
    TIME_PER_MOVE = "time_per_move"
    PLAYER_NAMES = "player_names"
    YOUR_BOT = "your_bot"
    YOUR_BOTID = "your_botid"
    FIELD_WIDTH = "field_width"
    FIELD_HEIGHT = "field_height"
    MAX_ROUNDS = "max_rounds"


class PlayerKey(str, Enum):
    SNIPPETS = "snippets"
    BOMBS = "bombs"


class GameKey(str, Enum):
    ROUND = "round"
    FIELD = "field"


def _split_names(value: str) -> List[str]:
    return [name for name in value.split(",") if name]


def _keep(value: str) -> str:
    return value


# wire key → (Settings attribute, value parser)
SETTING_FIELDS: Dict[SettingKey, Tuple[str, Callable[[str], Any]]] = {
    SettingKey.TIMEBANK: ("timebank", parse_number),
    SettingKey.TIME_PER_MOVE: ("time_per_move", parse_number),
    SettingKey.PLAYER_NAMES: ("player_names", _split_names),
    SettingKey.YOUR_BOT: ("my_bot", _keep),
    SettingKey.YOUR_BOTID: ("my_bot_id", parse_number),
    SettingKey.FIELD_WIDTH: ("field_width", parse_number),
    SettingKey.FIELD_HEIGHT: ("field_height", parse_number),
    SettingKey.MAX_ROUNDS: ("max_rounds", parse_number),
}

PLAYER_FIELDS: Dict[PlayerKey, str] = {
    PlayerKey.SNIPPETS: "snippets",
    PlayerKey.BOMBS: "bombs",
}


def setting_update(key: str, value: str) -> Optional[Dict[str, Any]]:
    """
    Map one ``settings`` line to the Settings fields it changes.

    Returns None for keys this client does not know.

    Raises
    ------
    MalformedToken
        A numeric setting is not a non-negative integer.
    """
    try:
        setting = SettingKey(key)
    except ValueError:
        return None
    attribute, parser = SETTING_FIELDS[setting]
    return {attribute: parser(value)}


@dataclass
class Game:
    """
    Root aggregate: one instance per process lifetime.

    Created empty before the first line is read; every later line
    either extends or replaces one of its members.
    """
    settings: Settings = dc_field(default_factory=Settings)
    round: int = 0
    players: Dict[str, Player] = dc_field(default_factory=dict)
    field: Field = dc_field(default_factory=Field)

    # ── settings ─────────────────────────────────────────────

    def apply_setting(self, key: str, value: str) -> None:
        update = setting_update(key, value)
        if update is None:
            logger.debug(f"Ignoring unknown setting: {key}")
            return

        self.settings = Settings.model_validate({**self.settings.model_dump(), **update})
        logger.debug(f"Setting {key} = {value}")

        if key == SettingKey.PLAYER_NAMES.value:
            for name in self.settings.player_names:
                self.players[name] = Player()

    # ── updates ──────────────────────────────────────────────

    def apply_update(self, scope: str, key: str, value: str) -> None:
        if scope == "game":
            self._update_game(key, value)
        else:
            self._update_player(scope, key, value)

    def _update_game(self, key: str, value: str) -> None:
        if key == GameKey.ROUND.value:
            self.round = parse_number(value)
            logger.debug(f"Round {self.round}")
        elif key == GameKey.FIELD.value:
            self.field = parse_field(
                value,
                width=self.settings.field_width,
                my_id=self.settings.my_bot_id,
                height=self.settings.field_height,
            )
        else:
            logger.debug(f"Ignoring unknown game update: {key}")

    def _update_player(self, name: str, key: str, value: str) -> None:
        try:
            attribute = PLAYER_FIELDS[PlayerKey(key)]
        except ValueError:
            logger.debug(f"Ignoring unknown player update: {name} {key}")
            return

        number = parse_number(value)
        player = self.players.get(name, Player())
        self.players[name] = player.model_copy(update={attribute: number})

    # ── lookups for the bot AI ───────────────────────────────

    @property
    def me(self) -> Optional[Player]:
        return self.players.get(self.settings.my_bot)

    @property
    def opponents(self) -> Dict[str, Player]:
        return {
            name: player for name, player in self.players.items()
            if name != self.settings.my_bot
        }
