# stdlib imports
import random

# local imports
from ..libs.board import Board
from ..libs.types import position_t
from .strategy_abc import AIStrategy


class RandomStrategy(AIStrategy):
    def __init__(self, level: int = 0, rng: random.Random | None = None):
        super().__init__(level)
        self._rng = rng if rng is not None else random.Random()

    def choose_move(self, board: Board, symbol: int) -> position_t:
        # level is ignored: any empty cell is as good as another
        empty_positions = board.empty_positions()
        if len(empty_positions) == 0:
            raise ValueError("Cannot choose a move on a full board.")
        return self._rng.choice(empty_positions)
