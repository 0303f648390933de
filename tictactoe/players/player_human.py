# local imports
from ..libs.board import Board
from ..libs.types import position_t
from .player_abc import Player


class HumanPlayer(Player):
    def make_move(self, position: position_t | None, board: Board) -> bool:
        if not HumanPlayer._is_position(position):
            self._logger.error(f"Human move requires a (row, col) position, got {position!r}")
            return False

        if not board.apply_move(position, self._symbol):
            return False

        self._last_move = position
        return True

    def change_strategy(self, ai_type: str) -> bool:
        # moves come from the caller, there is nothing to swap
        return True

    @staticmethod
    def _is_position(position: object) -> bool:
        return (
            isinstance(position, tuple)
            and len(position) == 2
            and all(isinstance(value, int) and not isinstance(value, bool) for value in position)
        )
