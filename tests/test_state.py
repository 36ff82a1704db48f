# Area: Core Tests
"""Tests for the Game aggregate."""

import pytest
from pydantic import ValidationError

from hackman_bot._state import Game, Player, Settings, setting_update
from hackman_bot.errors import DimensionMismatch, MalformedToken
from hackman_bot.types import Field


def make_game(width=3, height=2, my_id=0):
    game = Game()
    game.apply_setting("player_names", "player0,player1")
    game.apply_setting("your_bot", "player0")
    game.apply_setting("your_botid", str(my_id))
    game.apply_setting("field_width", str(width))
    game.apply_setting("field_height", str(height))
    return game


class TestDefaults:
    """Tests for a freshly constructed Game."""

    def test_all_zero(self):
        game = Game()
        assert game.round == 0
        assert game.field == Field()
        assert game.players == {}
        assert game.settings == Settings()

    def test_settings_defaults(self):
        settings = Settings()
        assert settings.timebank == 0
        assert settings.player_names == []
        assert settings.my_bot == ""

    def test_games_do_not_share_state(self):
        a, b = Game(), Game()
        a.apply_update("alice", "bombs", "1")
        assert b.players == {}

    def test_default_field_per_game(self):
        a, b = Game(), Game()
        assert a.field == Field()
        a.apply_setting("field_width", "1")
        a.apply_update("game", "field", "x")
        assert b.field == Field()


class TestApplySetting:
    """Tests for settings lines."""

    @pytest.mark.parametrize("key, attribute", [
        ("timebank", "timebank"),
        ("time_per_move", "time_per_move"),
        ("your_botid", "my_bot_id"),
        ("field_width", "field_width"),
        ("field_height", "field_height"),
        ("max_rounds", "max_rounds"),
    ])
    def test_numeric_settings(self, key, attribute):
        game = Game()
        game.apply_setting(key, "42")
        assert getattr(game.settings, attribute) == 42

    def test_your_bot(self):
        game = Game()
        game.apply_setting("your_bot", "player1")
        assert game.settings.my_bot == "player1"

    def test_player_names_creates_players(self):
        game = Game()
        game.apply_setting("player_names", "alice,bob")
        assert game.settings.player_names == ["alice", "bob"]
        assert game.players == {"alice": Player(), "bob": Player()}

    def test_empty_player_names_dropped(self):
        """Doubled or trailing commas do not create a nameless player."""
        game = Game()
        game.apply_setting("player_names", "alice,,bob,")
        assert game.settings.player_names == ["alice", "bob"]
        assert "" not in game.players

    def test_player_names_again_resets_listed_players(self):
        game = Game()
        game.apply_setting("player_names", "alice,bob")
        game.apply_update("alice", "snippets", "5")
        game.apply_setting("player_names", "alice,bob")
        assert game.players["alice"] == Player()

    def test_other_settings_keep_player_stats(self):
        game = Game()
        game.apply_setting("player_names", "alice,bob")
        game.apply_update("alice", "snippets", "5")
        game.apply_setting("timebank", "10000")
        assert game.players["alice"].snippets == 5

    def test_unknown_key_ignored(self):
        game = Game()
        before = game.settings
        game.apply_setting("gravity", "9")
        assert game.settings == before

    def test_malformed_number_leaves_settings_unchanged(self):
        game = Game()
        game.apply_setting("timebank", "10000")
        with pytest.raises(MalformedToken):
            game.apply_setting("timebank", "lots")
        assert game.settings.timebank == 10000

    def test_negative_number_rejected(self):
        game = Game()
        with pytest.raises(MalformedToken):
            game.apply_setting("field_width", "-3")

    def test_setting_update_mapping(self):
        assert setting_update("your_bot", "p0") == {"my_bot": "p0"}
        assert setting_update("max_rounds", "250") == {"max_rounds": 250}
        assert setting_update("unknown", "1") is None

    def test_settings_are_read_only(self):
        settings = Settings()
        with pytest.raises(ValidationError):
            settings.timebank = 5

    def test_index_to_coords(self):
        game = make_game(width=19, height=15)
        assert game.settings.index_to_coords(20) == (1, 1)


class TestApplyUpdateGame:
    """Tests for ``update game`` lines."""

    def test_round(self):
        game = Game()
        game.apply_update("game", "round", "7")
        assert game.round == 7

    def test_malformed_round(self):
        game = Game()
        game.apply_update("game", "round", "3")
        with pytest.raises(MalformedToken):
            game.apply_update("game", "round", "four")
        assert game.round == 3

    def test_field_uses_settings(self):
        game = make_game(width=3, height=2, my_id=0)
        game.apply_update("game", "field", "P0,.,C,x,P1,.")
        assert game.field.height == 2
        assert game.field.me == (0, 0)
        assert game.field.others == ((1, 1),)
        assert game.field.snippets == ((0, 2),)

    def test_field_is_replaced_wholesale(self):
        game = make_game(width=2, height=1)
        game.apply_update("game", "field", "C,C")
        game.apply_update("game", "field", ".,.")
        assert game.field.snippets == ()

    def test_same_field_twice_is_identical(self):
        game = make_game()
        game.apply_update("game", "field", "P0,.,C,x,P1,.")
        first = game.field
        game.apply_update("game", "field", "P0,.,C,x,P1,.")
        assert game.field == first

    def test_wrong_size_leaves_field_unchanged(self):
        game = make_game(width=3, height=2)
        game.apply_update("game", "field", ".,.,.,.,.,.")
        before = game.field
        with pytest.raises(DimensionMismatch):
            game.apply_update("game", "field", ".,.,.")
        assert game.field is before

    def test_malformed_cell_leaves_field_unchanged(self):
        game = make_game(width=3, height=2)
        with pytest.raises(MalformedToken):
            game.apply_update("game", "field", ".,.,.,.,.,Q")
        assert game.field == Field()

    def test_field_before_width_is_dimension_error(self):
        game = Game()
        with pytest.raises(DimensionMismatch):
            game.apply_update("game", "field", ".,.")

    def test_unknown_game_key_ignored(self):
        game = Game()
        game.apply_update("game", "weather", "rain")
        assert game.round == 0


class TestApplyUpdatePlayer:
    """Tests for per-player update lines."""

    def test_snippets_on_declared_player(self):
        game = Game()
        game.apply_setting("player_names", "alice,bob")
        game.apply_update("alice", "snippets", "5")
        assert game.players["alice"] == Player(snippets=5, bombs=0)
        assert game.players["bob"] == Player()

    def test_bombs(self):
        game = Game()
        game.apply_update("alice", "bombs", "2")
        assert game.players["alice"].bombs == 2

    def test_unknown_player_created_lazily(self):
        game = Game()
        game.apply_update("carol", "snippets", "1")
        assert "carol" in game.players

    def test_unknown_key_ignored_without_parsing(self):
        game = Game()
        game.apply_update("alice", "mood", "happy")
        assert game.players == {}

    def test_malformed_value_leaves_player_unchanged(self):
        game = Game()
        game.apply_update("alice", "bombs", "2")
        with pytest.raises(MalformedToken):
            game.apply_update("alice", "bombs", "two")
        assert game.players["alice"].bombs == 2

    def test_malformed_value_does_not_create_player(self):
        game = Game()
        with pytest.raises(MalformedToken):
            game.apply_update("dave", "bombs", "x")
        assert "dave" not in game.players


class TestLookups:
    """Tests for Game.me and Game.opponents."""

    def test_me(self):
        game = make_game()
        game.apply_update("player0", "bombs", "1")
        assert game.me == Player(bombs=1)

    def test_me_unknown(self):
        assert Game().me is None

    def test_opponents(self):
        game = make_game()
        assert list(game.opponents) == ["player1"]
