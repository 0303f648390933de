# stdlib imports
import math

# local imports
from ..libs.board import Board
from ..libs.types import Symbol, position_t, DEFAULT_MAX_SCORE, DEFAULT_MIN_SCORE
from .strategy_abc import AIStrategy


class MinimaxStrategy(AIStrategy):
    """
    Depth-bounded minimax search, without pruning.

    The level is the search depth in ply below the candidate move. Positions at the horizon
    that are neither won nor full score 0, so a shallow search only sees immediate wins and losses.
    With a level >= the number of cells the search is exhaustive.
    """

    def choose_move(self, board: Board, symbol: int) -> position_t:
        """
        Score every empty cell (row-major) and return the best one.
        On equal scores the first cell encountered wins.
        """
        best_score = -math.inf
        best_move: position_t | None = None

        for position in board.empty_positions():
            child_board = board.clone()
            child_board.apply_move(position, symbol)
            score = self.minimax(child_board, self._level, False, symbol)
            if score > best_score:
                best_score = score
                best_move = position

        if best_move is None:
            raise ValueError("Cannot choose a move on a full board.")

        return best_move

    def minimax(self, board: Board, depth: int, is_maximizing: bool, symbol: int) -> int:
        """
        Score `board` from the point of view of `symbol`.

        Args:
            board (Board): position to score, it is not modified.
            depth (int): remaining ply. 0 stops the search on a neutral score.
            is_maximizing (bool): True if `symbol` is to play, False if its opponent is.
            symbol (int): the symbol the score is computed for.
        Returns:
            int: DEFAULT_MAX_SCORE if `symbol` wins, DEFAULT_MIN_SCORE if its opponent wins, 0 otherwise.
        """
        winner = board.evaluate()
        if winner != Symbol.NONE:
            return self.score(winner, symbol)

        if board.is_full():
            return 0  # tie

        if depth == 0:
            return 0  # horizon

        acting_symbol = symbol if is_maximizing else Symbol.opponent(symbol)
        best_score = -math.inf if is_maximizing else math.inf
        for position in board.empty_positions():
            child_board = board.clone()
            child_board.apply_move(position, acting_symbol)
            score = self.minimax(child_board, depth - 1, not is_maximizing, symbol)
            if is_maximizing:
                best_score = max(best_score, score)
            else:
                best_score = min(best_score, score)

        return int(best_score)

    @staticmethod
    def score(winner: int, symbol: int) -> int:
        if winner == symbol:
            return DEFAULT_MAX_SCORE
        elif winner == Symbol.opponent(symbol):
            return DEFAULT_MIN_SCORE
        else:
            return 0
