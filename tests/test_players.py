import pytest

from tictactoe.ai.strategy_minimax import MinimaxStrategy
from tictactoe.ai.strategy_random import RandomStrategy
from tictactoe.libs.board import Board
from tictactoe.libs.types import Symbol, AI_TYPE, GameLevel
from tictactoe.players.player_computer import ComputerPlayer
from tictactoe.players.player_human import HumanPlayer


###############################################################################
#   HumanPlayer
#


def test_human_move_applies_position():
    board = Board(3)
    human = HumanPlayer(Symbol.X)

    assert human.make_move((1, 2), board) is True
    assert board.get_cell((1, 2)) == Symbol.X
    assert human.get_last_move() == (1, 2)


@pytest.mark.parametrize("position", [None, (3, 0), (-1, 1), (0,), (0, 0, 0)])
def test_human_invalid_position_fails(position):
    board = Board(3)
    human = HumanPlayer(Symbol.O)

    assert human.make_move(position, board) is False
    assert board == Board(3)
    assert human.get_last_move() is None


def test_human_occupied_cell_keeps_last_move():
    board = Board(3)
    human = HumanPlayer(Symbol.O)
    human.make_move((0, 0), board)

    assert human.make_move((0, 0), board) is False
    assert human.get_last_move() == (0, 0)


def test_human_change_strategy_is_noop():
    human = HumanPlayer(Symbol.O)
    assert human.change_strategy(AI_TYPE.RANDOM) is True
    assert human.change_strategy("unknown") is True
    assert human.get_strategy() is None


def test_human_set_level_fails_without_strategy(caplog):
    human = HumanPlayer(Symbol.O)
    assert human.set_level(GameLevel.HARD) is False
    assert "Invalid strategy" in caplog.text


def test_symbol_label():
    player = HumanPlayer(Symbol.X)
    assert player.get_symbol_label() == "X"
    player.set_symbol(Symbol.O)
    assert player.get_symbol_label() == "O"
    player.set_symbol(Symbol.NONE)
    assert player.get_symbol_label() == "no val"
    player.set_symbol(42)
    assert player.get_symbol_label() == "Unknown"


###############################################################################
#   ComputerPlayer
#


def test_computer_move_ignores_position():
    board = Board(3)
    board.apply_move((0, 0), Symbol.O)
    computer = ComputerPlayer(Symbol.X, MinimaxStrategy())

    assert computer.make_move((0, 0), board) is True

    move = computer.get_last_move()
    assert move is not None and move != (0, 0)
    assert board.get_cell(move) == Symbol.X
    assert len(board.empty_positions()) == 7


def test_computer_without_strategy_fails(caplog):
    board = Board(3)
    computer = ComputerPlayer(Symbol.X, None)

    assert computer.make_move(None, board) is False
    assert board == Board(3)
    assert "Invalid strategy" in caplog.text


def test_computer_on_full_board_fails():
    board = Board(1)
    board.apply_move((0, 0), Symbol.O)
    computer = ComputerPlayer(Symbol.X, RandomStrategy())

    assert computer.make_move(None, board) is False
    assert computer.get_last_move() is None


def test_computer_change_strategy_keeps_level():
    computer = ComputerPlayer(Symbol.X, RandomStrategy(), level=GameLevel.HARD)

    assert computer.change_strategy(AI_TYPE.MINIMAX) is True

    strategy = computer.get_strategy()
    assert isinstance(strategy, MinimaxStrategy)
    assert strategy.get_level() == GameLevel.HARD


def test_computer_change_strategy_unknown_type_keeps_previous(caplog):
    previous = RandomStrategy()
    computer = ComputerPlayer(Symbol.X, previous)

    assert computer.change_strategy("alphabeta") is False
    assert computer.get_strategy() is previous
    assert "Strategy creation failed" in caplog.text


def test_computer_set_level_forwards_to_strategy():
    computer = ComputerPlayer(Symbol.O, MinimaxStrategy(), level=GameLevel.MASTER)
    assert computer.get_strategy().get_level() == GameLevel.MASTER

    assert computer.set_level(GameLevel.MEDIUM) is True
    assert computer.get_level() == GameLevel.MEDIUM
    assert computer.get_strategy().get_level() == GameLevel.MEDIUM
