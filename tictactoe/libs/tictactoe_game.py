# stdlib imports
import logging

# local imports
from .board import Board
from .types import Symbol, PlayerType, AI_TYPE, GameLevel, GameStatus, position_t, DEFAULT_BOARD_SIZE
from ..players.player_abc import Player
from ..players.player_human import HumanPlayer
from ..players.player_computer import ComputerPlayer
from ..utils.strategy_utils import StrategyUtils


class TicTacToeGame:
    """
    One game session between a human and the computer.

    The caller drives the turns: it calls `make_move` for the human with a position, then for
    the computer, and checks `check_for_winner` / `is_board_full` in between. Nothing here
    schedules the next move. Not thread-safe: a single caller must own an instance.
    """

    def __init__(
        self,
        board_size: int = DEFAULT_BOARD_SIZE,
        ai_type: str = AI_TYPE.MINIMAX,
        level: int = GameLevel.MASTER,
        logger: logging.Logger | None = None,
    ):
        self._logger = logger if logger is not None else logging.getLogger(__name__)
        if board_size < 1:
            self._logger.error(f"Invalid board size: {board_size}, using {DEFAULT_BOARD_SIZE}")
            board_size = DEFAULT_BOARD_SIZE
        self._board = Board(board_size, logger=self._logger)
        self._ai_type = ai_type
        self._current_player: Player | None = None
        self._last_actor: int | None = None

        strategy = StrategyUtils.create_strategy(ai_type, level=level, logger=self._logger)
        if strategy is None:
            self._logger.error("AI creation failed")

        human_symbol = Symbol.O
        self._players: dict[int, Player] = {
            PlayerType.HUMAN: HumanPlayer(human_symbol, level=level, logger=self._logger),
            PlayerType.COMPUTER: ComputerPlayer(Symbol.opponent(human_symbol), strategy, level=level, logger=self._logger),
        }

    ###############################################################################
    #   game lifecycle
    #

    def start_new_game(self, human_symbol: int, ai_type: str, board_size: int) -> bool:
        """
        Reset the board, swap the computer strategy if `ai_type` changed and assign the symbols.
        The human plays next.

        Returns:
            bool: False if the symbol, the board size or the AI type is invalid.
        """
        if human_symbol not in (Symbol.X, Symbol.O):
            self._logger.error(f"Invalid human symbol: {human_symbol}")
            return False

        if board_size < 1:
            self._logger.error(f"Invalid board size: {board_size}")
            return False

        if not self.set_ai_type_computer(ai_type):
            return False

        self._board.reset(board_size)

        self._players[PlayerType.HUMAN].set_symbol(human_symbol)
        self._players[PlayerType.COMPUTER].set_symbol(Symbol.opponent(human_symbol))

        self._current_player = self._players[PlayerType.HUMAN]
        self._last_actor = None
        return True

    def make_move(self, position: position_t | None, player_type: int) -> bool:
        """
        Play a move for `player_type`. The position is required for the human and ignored for the computer.
        """
        if self._current_player is None:
            self._logger.error("Invalid current player: start a new game first")
            return False

        player = self._players.get(player_type)
        if player is None:
            self._logger.error(f"Invalid player type: {player_type}")
            return False

        self._current_player = player
        if not player.make_move(position, self._board):
            return False

        self._last_actor = player_type
        return True

    ###############################################################################
    #   queries
    #

    def check_for_winner(self) -> int:
        """
        Returns:
            int: PlayerType.HUMAN or PlayerType.COMPUTER for the owner of a complete line, else PlayerType.UNKNOWN.
        """
        symbol = self._board.evaluate()
        if symbol == Symbol.NONE:
            return PlayerType.UNKNOWN
        elif self._players[PlayerType.HUMAN].get_symbol() == symbol:
            return PlayerType.HUMAN
        elif self._players[PlayerType.COMPUTER].get_symbol() == symbol:
            return PlayerType.COMPUTER
        else:
            return PlayerType.UNKNOWN

    def is_board_full(self) -> bool:
        return self._board.is_full()

    def get_status(self) -> str:
        if self._current_player is None:
            return GameStatus.IDLE
        if self._board.evaluate() != Symbol.NONE:
            return GameStatus.FINISHED_WINNER
        if self._board.is_full():
            return GameStatus.FINISHED_TIE
        if self._last_actor == PlayerType.HUMAN:
            return GameStatus.COMPUTER_TURN
        return GameStatus.HUMAN_TURN

    def get_current_player_symbol_label(self) -> str:
        if self._current_player is None:
            self._logger.error("Invalid current player")
            return ""
        return self._current_player.get_symbol_label()

    def get_last_computer_move(self) -> position_t | None:
        return self._players[PlayerType.COMPUTER].get_last_move()

    def get_player_symbol(self, player_type: int) -> int:
        player = self._players.get(player_type)
        if player is None:
            return Symbol.NONE
        return player.get_symbol()

    def get_board(self) -> Board:
        return self._board

    def get_ai_type(self) -> str:
        return self._ai_type

    def get_computer_player(self) -> Player:
        return self._players[PlayerType.COMPUTER]

    ###############################################################################
    #   configuration
    #

    def set_game_level(self, level: int) -> bool:
        """Set the search depth of the computer strategy."""
        if level < 0:
            self._logger.error(f"Invalid game level: {level}")
            return False
        return self._players[PlayerType.COMPUTER].set_level(level)

    def get_game_level(self) -> int:
        return self._players[PlayerType.COMPUTER].get_level()

    def set_ai_type_computer(self, ai_type: str) -> bool:
        """
        Swap the computer strategy for one of type `ai_type`. No-op if the type is unchanged
        and a strategy is in place.
        """
        computer = self._players[PlayerType.COMPUTER]
        if ai_type == self._ai_type and computer.get_strategy() is not None:
            return True

        if not computer.change_strategy(ai_type):
            return False

        self._ai_type = ai_type
        return True
