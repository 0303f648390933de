#!/usr/bin/env python3

# stdlib imports
import argparse
import time

# pip imports
import colorama

# local imports
from tictactoe.libs.game_config import GameConfig
from tictactoe.libs.tictactoe_game import TicTacToeGame
from tictactoe.libs.types import Symbol, PlayerType, GameText
from tictactoe.utils.board_utils import BoardUtils
from tictactoe.utils.log_utils import LogUtils
from tictactoe.utils.strategy_utils import StrategyUtils
from tictactoe.utils.termcolor_utils import TermcolorUtils


class PlayCommand:

    ###############################################################################
    ###############################################################################
    # 	 Play a game of tic-tac-toe between a human (in the terminal) and the computer.
    ###############################################################################
    ###############################################################################

    @staticmethod
    def play_game(game: TicTacToeGame, config: GameConfig) -> int:
        """
        Play one game in the terminal. The human always moves first.

        Returns:
            int: the winner PlayerType, PlayerType.UNKNOWN for a tie.
        """
        if not game.start_new_game(config.human_symbol, config.ai_type, config.board_size):
            raise ValueError("Failed to start a new game, see the logs.")
        game.set_game_level(config.game_level)

        human_symbol = game.get_player_symbol(PlayerType.HUMAN)
        computer_symbol = game.get_player_symbol(PlayerType.COMPUTER)
        print(f"Human: {TermcolorUtils.symbol(human_symbol)}")
        print(f"Computer: {TermcolorUtils.symbol(computer_symbol)} ({config.ai_type}, level {game.get_game_level()})")
        print(BoardUtils.board_to_string(game.get_board()))

        ###############################################################################
        #   Play the game
        #
        while True:
            # display the separator between boards
            print(TermcolorUtils.magenta("-" * 30))

            # human move - reprompt until the board accepts it
            print(GameText.CLICK_CELL)
            while True:
                position = BoardUtils.parse_position(input(f"Enter your move for {Symbol.to_label(human_symbol)} (row col): "))
                if position is not None and game.make_move(position, PlayerType.HUMAN):
                    break
                print(TermcolorUtils.red(GameText.INVALID_MOVE))

            print(BoardUtils.board_to_string(game.get_board(), highlight=position))
            if PlayCommand._is_game_over(game):
                break

            # computer move
            print(TermcolorUtils.magenta("-" * 30))
            print(GameText.PC_CALC)
            time_start = time.perf_counter()
            if not game.make_move(None, PlayerType.COMPUTER):
                raise ValueError("The computer could not make a move, see the logs.")
            time_elapsed = time.perf_counter() - time_start

            computer_move = game.get_last_computer_move()
            print(f"Computer played {TermcolorUtils.cyan(computer_move)} in {time_elapsed:.2f} seconds")
            print(BoardUtils.board_to_string(game.get_board(), highlight=computer_move))
            if PlayCommand._is_game_over(game):
                break

        return game.check_for_winner()

    @staticmethod
    def _is_game_over(game: TicTacToeGame) -> bool:
        winner = game.check_for_winner()
        if winner == PlayerType.HUMAN:
            print(TermcolorUtils.green(GameText.PLAYER_WON))
            return True
        elif winner == PlayerType.COMPUTER:
            print(TermcolorUtils.red(GameText.PLAYER_LOST))
            return True
        elif game.is_board_full():
            print(TermcolorUtils.cyan(GameText.TIE))
            return True
        return False


###############################################################################
###############################################################################
# 	 Main Entry Point
###############################################################################
###############################################################################

if __name__ == "__main__":
    colorama.just_fix_windows_console()

    # Load defaults from the environment and .env file
    config = GameConfig.from_env()

    ###############################################################################
    #   Parse command line arguments
    #
    argParser = argparse.ArgumentParser(
        description="Play a game of tic-tac-toe against the computer.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    argParser.add_argument("--board_size", "-bs", type=int, default=config.board_size, help="Side of the square board")
    argParser.add_argument(
        "--ai_type",
        "-ai",
        type=str,
        choices=StrategyUtils.get_supported_ai_types(),
        default=config.ai_type,
        help="Strategy of the computer",
    )
    argParser.add_argument(
        "--level",
        "-l",
        type=str,
        default=str(config.game_level),
        help="Search depth in ply, or a preset name: easy, medium, hard, expert, master",
    )
    argParser.add_argument("--symbol", "-s", type=str, choices=["X", "O"], default=Symbol.to_label(config.human_symbol), help="Symbol of the human")
    argParser.add_argument("--play_again", "-pa", action="store_true", help="Offer a new game when one ends")
    argParser.add_argument("--debug", action="store_true", help="Enable debug mode with verbose output")
    args = argParser.parse_args()

    logger = LogUtils.setup_logging("DEBUG" if args.debug else config.log_level)
    if args.debug:
        print(f"Arguments: {args}")
        print("Debug mode is ON")

    config = GameConfig(
        board_size=args.board_size,
        ai_type=args.ai_type,
        game_level=GameConfig.parse_level(args.level),
        human_symbol=Symbol.from_label(args.symbol),
        log_level=config.log_level,
    )

    ###############################################################################
    #   Play
    #
    game = TicTacToeGame(board_size=config.board_size, ai_type=config.ai_type, level=config.game_level, logger=logger)
    while True:
        PlayCommand.play_game(game, config)
        if not args.play_again:
            break
        answer = input("Play again? [y/N] ").strip().lower()
        if answer != "y":
            break
