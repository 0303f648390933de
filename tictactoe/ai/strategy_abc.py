from __future__ import annotations
from abc import ABC, abstractmethod

from ..libs.board import Board
from ..libs.types import position_t


class AIStrategy(ABC):
    """Move selection strategy for a computer player. Holds no board reference, only a level."""

    def __init__(self, level: int = 0):
        self._level = level

    @abstractmethod
    def choose_move(self, board: Board, symbol: int) -> position_t:
        """
        Given a board with at least one empty cell, return the (row, col) to play for `symbol`.

        Raises:
            ValueError: if the board has no empty cell.
        """
        pass

    def set_level(self, level: int) -> None:
        self._level = level

    def get_level(self) -> int:
        return self._level
