#!/usr/bin/env python3

# stdlib imports
import argparse
import random
import time

# pip imports
import numpy as np
import tqdm

# local imports
from tictactoe.ai.strategy_random import RandomStrategy
from tictactoe.libs.game_config import GameConfig
from tictactoe.libs.tictactoe_game import TicTacToeGame
from tictactoe.libs.types import Symbol, PlayerType
from tictactoe.utils.log_utils import LogUtils
from tictactoe.utils.selfplay_utils import SelfPlayUtils
from tictactoe.utils.strategy_utils import StrategyUtils
from tictactoe.utils.termcolor_utils import TermcolorUtils


def positive_int(value: str) -> int:
    count = int(value)
    if count < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {count}")
    return count


class BenchCommand:
    @staticmethod
    def bench(
        game: TicTacToeGame,
        ai_type: str,
        level: int,
        board_size: int,
        game_count: int,
        seed: int | None = None,
    ) -> dict[str, float]:
        """
        Play `game_count` games of the computer against a random opponent.
        The random opponent moves first in even games, the computer in odd games.

        Returns:
            dict[str, float]: win/tie/loss rates from the computer point of view, and timing statistics.
        """
        if game_count < 1:
            raise ValueError(f"game_count must be >= 1, got {game_count}")

        opponent = RandomStrategy(rng=random.Random(seed))
        game.set_game_level(level)

        outcomes = np.zeros(game_count, dtype=np.int8)
        durations = np.zeros(game_count, dtype=np.float64)
        for game_index in tqdm.tqdm(range(game_count), desc="Playing games", ncols=80):
            human_symbol = Symbol.X if game_index % 2 == 0 else Symbol.O
            time_start = time.perf_counter()
            winner = SelfPlayUtils.play_against_computer(
                game,
                opponent,
                human_symbol=human_symbol,
                ai_type=ai_type,
                board_size=board_size,
                human_starts=game_index % 2 == 0,
            )
            durations[game_index] = time.perf_counter() - time_start
            outcomes[game_index] = winner

        return {
            "win_rate": float(np.mean(outcomes == PlayerType.COMPUTER)),
            "tie_rate": float(np.mean(outcomes == PlayerType.UNKNOWN)),
            "loss_rate": float(np.mean(outcomes == PlayerType.HUMAN)),
            "duration_mean": float(np.mean(durations)),
            "duration_std": float(np.std(durations)),
            "duration_max": float(np.max(durations)),
        }


###############################################################################
#   Main entry point
#
if __name__ == "__main__":
    config = GameConfig.from_env()

    # Parse command line arguments
    argParser = argparse.ArgumentParser(
        description="Benchmark a computer strategy against a random opponent.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    argParser.add_argument(
        "--ai_type",
        "-ai",
        type=str,
        choices=StrategyUtils.get_supported_ai_types(),
        default=config.ai_type,
        help="Strategy of the computer",
    )
    argParser.add_argument("--level", "-l", type=str, default=str(config.game_level), help="Search depth in ply, or a preset name")
    argParser.add_argument("--board_size", "-bs", type=int, default=config.board_size, help="Side of the square board")
    argParser.add_argument("--game_count", "-gc", type=positive_int, default=20, help="Number of games to play")
    argParser.add_argument("--seed", type=int, default=None, help="Seed of the random opponent")
    args = argParser.parse_args()

    logger = LogUtils.setup_logging(config.log_level)
    level = GameConfig.parse_level(args.level)

    game = TicTacToeGame(board_size=args.board_size, ai_type=args.ai_type, level=level, logger=logger)
    stats = BenchCommand.bench(game, args.ai_type, level, args.board_size, args.game_count, seed=args.seed)

    win_str = f"{stats['win_rate']:.1%}"
    loss_str = f"{stats['loss_rate']:.1%}"
    print(f"Strategy {TermcolorUtils.cyan(args.ai_type)} level {level} on a {args.board_size}x{args.board_size} board, {args.game_count} games")
    print(f"Win: {TermcolorUtils.green(win_str)}  Tie: {stats['tie_rate']:.1%}  Loss: {TermcolorUtils.red(loss_str)}")
    print(f"Game duration: mean {stats['duration_mean']:.3f}s, std {stats['duration_std']:.3f}s, max {stats['duration_max']:.3f}s")
