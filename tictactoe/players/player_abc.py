from __future__ import annotations
from abc import ABC, abstractmethod
import logging

from ..ai.strategy_abc import AIStrategy
from ..libs.board import Board
from ..libs.types import Symbol, position_t, GameLevel


class Player(ABC):
    """A symbol bound to a source of moves: external input for a human, a strategy for the computer."""

    def __init__(
        self,
        symbol: int,
        strategy: AIStrategy | None = None,
        level: int = GameLevel.MASTER,
        logger: logging.Logger | None = None,
    ):
        self._logger = logger if logger is not None else logging.getLogger(__name__)
        self._symbol = symbol
        self._strategy = strategy
        self._level = level
        self._last_move: position_t | None = None

        if self._strategy is not None:
            self._strategy.set_level(level)

    @abstractmethod
    def make_move(self, position: position_t | None, board: Board) -> bool:
        """Play one move on `board`. Returns False if no move was made."""
        pass

    @abstractmethod
    def change_strategy(self, ai_type: str) -> bool:
        """Swap the decision strategy. Returns False if `ai_type` is not supported."""
        pass

    def get_symbol(self) -> int:
        return self._symbol

    def set_symbol(self, symbol: int) -> None:
        self._symbol = symbol

    def get_symbol_label(self) -> str:
        return Symbol.to_label(self._symbol)

    def get_strategy(self) -> AIStrategy | None:
        return self._strategy

    def get_last_move(self) -> position_t | None:
        return self._last_move

    def get_level(self) -> int:
        return self._level

    def set_level(self, level: int) -> bool:
        self._level = level
        if self._strategy is None:
            self._logger.error("Invalid strategy: cannot set the level")
            return False

        self._strategy.set_level(level)
        return True
