# local imports
from ..ai.strategy_abc import AIStrategy
from ..libs.board import Board
from ..libs.tictactoe_game import TicTacToeGame
from ..libs.types import Symbol, PlayerType, DEFAULT_BOARD_SIZE


class SelfPlayUtils:
    @staticmethod
    def play_strategies(
        strategy_x: AIStrategy,
        strategy_o: AIStrategy,
        board_size: int = DEFAULT_BOARD_SIZE,
        first_symbol: int = Symbol.X,
    ) -> int:
        """
        Play a full game between two strategies on a fresh board.

        Returns:
            int: the winning symbol, or Symbol.NONE for a tie.
        """
        board = Board(board_size)
        strategies = {Symbol.X: strategy_x, Symbol.O: strategy_o}
        symbol = first_symbol

        while board.evaluate() == Symbol.NONE and not board.is_full():
            move = strategies[symbol].choose_move(board, symbol)
            board.apply_move(move, symbol)
            symbol = Symbol.opponent(symbol)

        return board.evaluate()

    @staticmethod
    def play_against_computer(
        game: TicTacToeGame,
        opponent: AIStrategy,
        human_symbol: int,
        ai_type: str,
        board_size: int = DEFAULT_BOARD_SIZE,
        human_starts: bool = True,
    ) -> int:
        """
        Play a full game through `game`, with `opponent` choosing the positions of the human side.

        Returns:
            int: PlayerType.HUMAN or PlayerType.COMPUTER for the winner, PlayerType.UNKNOWN for a tie.
        """
        if not game.start_new_game(human_symbol, ai_type, board_size):
            raise ValueError("Failed to start a new game")

        board = game.get_board()
        player_type = PlayerType.HUMAN if human_starts else PlayerType.COMPUTER

        while game.check_for_winner() == PlayerType.UNKNOWN and not game.is_board_full():
            if player_type == PlayerType.HUMAN:
                position = opponent.choose_move(board, game.get_player_symbol(PlayerType.HUMAN))
                player_type_next = PlayerType.COMPUTER
            else:
                position = None
                player_type_next = PlayerType.HUMAN

            if not game.make_move(position, player_type):
                raise RuntimeError(f"Move rejected for player type {player_type}")
            player_type = player_type_next

        return game.check_for_winner()
