import random

import pytest

from tictactoe.ai.strategy_minimax import MinimaxStrategy
from tictactoe.ai.strategy_random import RandomStrategy
from tictactoe.libs.board import Board
from tictactoe.libs.types import Symbol, GameLevel
from tictactoe.utils.selfplay_utils import SelfPlayUtils


def _board_from_rows(rows: list[str]) -> Board:
    """Build a board from rows like "XO.", "." being an empty cell."""
    board = Board(len(rows))
    for row, cells in enumerate(rows):
        for col, char in enumerate(cells):
            if char != ".":
                board.apply_move((row, col), Symbol.from_label(char))
    return board


###############################################################################
#   RandomStrategy
#


@pytest.mark.parametrize("seed", range(10))
def test_random_strategy_returns_empty_cell(seed):
    board = _board_from_rows(["XO.", ".X.", "O.O"])
    strategy = RandomStrategy(rng=random.Random(seed))

    move = strategy.choose_move(board, Symbol.X)

    assert board.is_empty_at(move)


def test_random_strategy_is_uniform_over_empty_cells():
    board = _board_from_rows(["X.O", ".O.", "X.."])
    empty_positions = board.empty_positions()
    strategy = RandomStrategy(rng=random.Random(42))

    draw_count = 5000
    counts = {position: 0 for position in empty_positions}
    for _ in range(draw_count):
        move = strategy.choose_move(board, Symbol.X)
        assert move in counts, f"occupied cell returned: {move}"
        counts[move] += 1

    # 1000 expected per cell, the standard deviation is about 28
    expected = draw_count / len(empty_positions)
    for position, count in counts.items():
        assert abs(count - expected) < 0.15 * expected, f"{position} drawn {count} times"


def test_random_strategy_single_empty_cell():
    board = _board_from_rows(["XOX", "XOO", "OX."])
    assert RandomStrategy().choose_move(board, Symbol.X) == (2, 2)


def test_random_strategy_full_board_raises():
    board = _board_from_rows(["XOX", "XOO", "OXX"])
    with pytest.raises(ValueError):
        RandomStrategy().choose_move(board, Symbol.O)


def test_random_strategy_ignores_level():
    strategy = RandomStrategy()
    strategy.set_level(GameLevel.EXPERT)
    assert strategy.get_level() == GameLevel.EXPERT
    assert Board(3).is_empty_at(strategy.choose_move(Board(3), Symbol.X))


###############################################################################
#   MinimaxStrategy
#


def test_minimax_takes_immediate_win():
    board = _board_from_rows(["XX.", "OO.", "..."])
    strategy = MinimaxStrategy(GameLevel.MASTER)
    assert strategy.choose_move(board, Symbol.X) == (0, 2)


def test_minimax_blocks_opponent_win():
    board = _board_from_rows(["OO.", "X..", "..X"])
    strategy = MinimaxStrategy(GameLevel.MASTER)
    assert strategy.choose_move(board, Symbol.X) == (0, 2)


def test_minimax_level_zero_sees_only_immediate_win():
    # at depth 0 every non winning move scores 0, so the first empty cell is kept
    board = _board_from_rows(["OO.", "X..", "..X"])
    strategy = MinimaxStrategy(GameLevel.EASY)
    assert strategy.choose_move(board, Symbol.X) == (0, 2)

    board = _board_from_rows(["...", "OO.", "X.X"])
    assert strategy.choose_move(board, Symbol.X) == (2, 1)

    board = _board_from_rows(["X..", "OO.", "..X"])
    assert strategy.choose_move(board, Symbol.X) == (0, 1)


def test_minimax_tie_break_keeps_first_cell():
    # on an empty 2x2 board every move wins eventually for the first player: all scores are equal
    strategy = MinimaxStrategy(GameLevel.MASTER)
    assert strategy.choose_move(Board(2), Symbol.O) == (0, 0)


def test_minimax_does_not_modify_board():
    board = _board_from_rows(["X..", ".O.", "..."])
    before = board.clone()
    MinimaxStrategy(GameLevel.MASTER).choose_move(board, Symbol.X)
    assert board == before


@pytest.mark.parametrize(
    "rows, depth, expected",
    [
        (["XXX", "OO.", "..."], 0, 10),  # already won
        (["OOO", "XX.", "X.."], 0, -10),  # already lost
        (["XOX", "XOO", "OXX"], 3, 0),  # tie
        (["XO.", "...", "..."], 0, 0),  # horizon
    ],
)
def test_minimax_terminal_scores(rows, depth, expected):
    board = _board_from_rows(rows)
    assert MinimaxStrategy().minimax(board, depth, True, Symbol.X) == expected


def test_minimax_full_board_raises():
    board = _board_from_rows(["XOX", "XOO", "OXX"])
    with pytest.raises(ValueError):
        MinimaxStrategy(GameLevel.MASTER).choose_move(board, Symbol.X)


def test_minimax_self_play_is_a_tie():
    winner = SelfPlayUtils.play_strategies(MinimaxStrategy(9), MinimaxStrategy(9), board_size=3)
    assert winner == Symbol.NONE


@pytest.mark.parametrize("seed", range(8))
def test_minimax_never_loses_against_random(seed):
    # random opens: the minimax side answers as O
    minimax = MinimaxStrategy(GameLevel.MASTER)
    opponent = RandomStrategy(rng=random.Random(seed))

    winner = SelfPlayUtils.play_strategies(opponent, minimax, board_size=3)

    assert winner in (Symbol.O, Symbol.NONE)


def test_minimax_never_loses_against_random_when_opening():
    minimax = MinimaxStrategy(GameLevel.MASTER)
    opponent = RandomStrategy(rng=random.Random(1234))

    winner = SelfPlayUtils.play_strategies(minimax, opponent, board_size=3)

    assert winner in (Symbol.X, Symbol.NONE)
