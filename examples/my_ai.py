"""
my_ai.py — YOUR AI IMPLEMENTATION
=================================

This is the ONLY file you need to edit.

Implement the 2 methods below:
- choose_character(time_budget): called once, before the first round
- choose_move(game, time_budget): called every round

``game`` is the current hackman_bot.Game: settings, round number,
player stats and the decoded field. The package handles everything
else: reading engine lines, updating state, writing your answers.

This example steps toward the nearest code snippet and never drops
bombs. Replace it with your own logic.
"""

from hackman_bot import BotAI, CharacterChoice, Direction, Move

STEPS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


def distance(a, b):
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


class SnippetChaserAI(BotAI):

    def choose_character(self, time_budget):
        return CharacterChoice.BIXIETTE

    def choose_move(self, game, time_budget):
        field = game.field
        if field.me is None or not field.snippets:
            return Move.pass_turn()

        row, col = field.me
        target = min(field.snippets, key=lambda pos: distance(field.me, pos))
        best = None
        best_distance = distance(field.me, target)

        for direction, (d_row, d_col) in STEPS.items():
            pos = (row + d_row, col + d_col)
            if not (0 <= pos[0] < field.height and 0 <= pos[1] < field.width):
                continue
            if field.cell_at(*pos).is_blocked():
                continue
            if distance(pos, target) < best_distance:
                best, best_distance = direction, distance(pos, target)

        return Move(best) if best is not None else Move.pass_turn()
