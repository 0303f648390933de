# stdlib imports
import logging

# local imports
from ..ai.strategy_abc import AIStrategy
from ..ai.strategy_random import RandomStrategy
from ..ai.strategy_minimax import MinimaxStrategy
from ..libs.types import AI_TYPE, GameLevel

_logger = logging.getLogger(__name__)


class StrategyUtils:
    @staticmethod
    def get_supported_ai_types() -> list[str]:
        # get supported types from AI_TYPE class
        supported_types = [value for name, value in vars(AI_TYPE).items() if not name.startswith("__") and not callable(value)]
        return supported_types

    @staticmethod
    def create_strategy(ai_type: str, level: int = GameLevel.MASTER, logger: logging.Logger | None = None) -> AIStrategy | None:
        """
        Build a new strategy for `ai_type`.

        Returns:
            AIStrategy | None: the strategy, or None if `ai_type` is not supported.
        """
        logger = logger if logger is not None else _logger

        if ai_type == AI_TYPE.RANDOM:
            strategy = RandomStrategy(level)
        elif ai_type == AI_TYPE.MINIMAX:
            strategy = MinimaxStrategy(level)
        else:
            logger.error(f"Invalid AI type: {ai_type!r}, supported: {StrategyUtils.get_supported_ai_types()}")
            return None

        return strategy
