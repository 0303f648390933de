# local imports
from ..libs.board import Board
from ..libs.types import position_t
from ..utils.strategy_utils import StrategyUtils
from .player_abc import Player


class ComputerPlayer(Player):
    def make_move(self, position: position_t | None, board: Board) -> bool:
        """
        Ask the strategy for a move and apply it. `position` is ignored.
        """
        if self._strategy is None:
            self._logger.error("Invalid strategy: failed to make a move")
            return False

        if board.is_full():
            self._logger.error("Board is full: failed to make a move")
            return False

        move = self._strategy.choose_move(board, self._symbol)
        if not board.apply_move(move, self._symbol):
            return False

        self._last_move = move
        return True

    def change_strategy(self, ai_type: str) -> bool:
        """
        Replace the strategy with a new one of type `ai_type`, keeping the current level.
        On an unknown type the previous strategy stays active.
        """
        strategy = StrategyUtils.create_strategy(ai_type, level=self._level, logger=self._logger)
        if strategy is None:
            self._logger.error("Strategy creation failed")
            return False

        self._strategy = strategy
        return True
