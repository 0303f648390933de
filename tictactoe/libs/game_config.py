# stdlib imports
from __future__ import annotations
import dataclasses
import os

# pip imports
import dotenv

# local imports
from .types import Symbol, AI_TYPE, GameLevel, DEFAULT_BOARD_SIZE
from ..utils.strategy_utils import StrategyUtils


@dataclasses.dataclass
class GameConfig:
    """
    Game defaults, overridable from the environment or a .env file:
    - TICTACTOE_BOARD_SIZE: side of the board, >= 1
    - TICTACTOE_AI_TYPE: "random" or "minimax"
    - TICTACTOE_GAME_LEVEL: minimax depth in ply, or a preset name (easy, medium, hard, expert, master)
    - TICTACTOE_HUMAN_SYMBOL: "X" or "O"
    - TICTACTOE_LOG_LEVEL: python logging level name
    """

    board_size: int = DEFAULT_BOARD_SIZE
    ai_type: str = AI_TYPE.MINIMAX
    game_level: int = GameLevel.MASTER
    human_symbol: int = Symbol.O
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.board_size < 1:
            raise ValueError(f"Invalid board size: {self.board_size}")
        supported_ai_types = StrategyUtils.get_supported_ai_types()
        if self.ai_type not in supported_ai_types:
            raise ValueError(f"Invalid AI type: {self.ai_type!r}, supported: {supported_ai_types}")
        if self.game_level < 0:
            raise ValueError(f"Invalid game level: {self.game_level}")
        if self.human_symbol not in (Symbol.X, Symbol.O):
            raise ValueError(f"Invalid human symbol: {self.human_symbol}")

    @staticmethod
    def from_env(dotenv_path: str | None = None) -> GameConfig:
        """
        Build the config from environment variables, after loading `dotenv_path` (or the nearest .env file).
        Variables already set in the environment win over the .env file.

        Raises:
            ValueError: if a variable holds an invalid value.
        """
        dotenv.load_dotenv(dotenv_path)

        config = GameConfig()
        kwargs = {}

        board_size = os.getenv("TICTACTOE_BOARD_SIZE")
        if board_size is not None:
            kwargs["board_size"] = GameConfig._parse_int("TICTACTOE_BOARD_SIZE", board_size)

        ai_type = os.getenv("TICTACTOE_AI_TYPE")
        if ai_type is not None:
            kwargs["ai_type"] = ai_type.strip().lower()

        game_level = os.getenv("TICTACTOE_GAME_LEVEL")
        if game_level is not None:
            kwargs["game_level"] = GameConfig.parse_level(game_level)

        human_symbol = os.getenv("TICTACTOE_HUMAN_SYMBOL")
        if human_symbol is not None:
            kwargs["human_symbol"] = Symbol.from_label(human_symbol)

        log_level = os.getenv("TICTACTOE_LOG_LEVEL")
        if log_level is not None:
            kwargs["log_level"] = log_level.strip().upper()

        return dataclasses.replace(config, **kwargs)

    @staticmethod
    def parse_level(value: str) -> int:
        """Accept either a depth ("5") or a preset name ("hard")."""
        level_names = GameLevel.get_names()
        normalized = value.strip().lower()
        if normalized in level_names:
            return level_names[normalized]
        return GameConfig._parse_int("game level", normalized)

    @staticmethod
    def _parse_int(name: str, value: str) -> int:
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"Invalid value for {name}: {value!r}, expected an integer") from None
