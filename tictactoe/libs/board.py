# stdlib imports
from __future__ import annotations
import copy
import functools
import logging

# local imports
from .types import Symbol, position_t, DEFAULT_BOARD_SIZE


class Board:
    """
    Square tic-tac-toe board of side `size`.

    Cells are kept in a flat row-major list so that `clone()` is a plain value copy,
    which the minimax search relies on to keep sibling branches independent.
    Only full-length lines (rows, columns and the two main diagonals) are winning lines,
    whatever the board size.
    """

    def __init__(self, size: int = DEFAULT_BOARD_SIZE, logger: logging.Logger | None = None):
        if size < 1:
            raise ValueError(f"Board size must be >= 1, got {size}")
        self._logger = logger if logger is not None else logging.getLogger(__name__)
        self._size = size
        self._cells: list[int] = [Symbol.NONE] * (size * size)

    def reset(self, size: int) -> bool:
        """
        Start a new game on this board. Reallocates only if the size changed, otherwise clears in place.

        Returns:
            bool: False if the size is invalid, in which case the board is left untouched.
        """
        if size < 1:
            self._logger.error(f"Invalid board size: {size}")
            return False

        if size != self._size:
            self._size = size
            self._cells = [Symbol.NONE] * (size * size)
            return True

        for index in range(len(self._cells)):
            self._cells[index] = Symbol.NONE
        return True

    def clone(self) -> Board:
        board = copy.copy(self)
        board._cells = self._cells.copy()
        return board

    def get_size(self) -> int:
        return self._size

    def _in_bounds(self, pos: position_t) -> bool:
        row, col = pos
        return 0 <= row < self._size and 0 <= col < self._size

    def apply_move(self, pos: position_t, symbol: int) -> bool:
        """
        Place `symbol` at `pos`.

        Returns:
            bool: True if the move was applied. False if the position is out of bounds,
                  the cell is occupied or the symbol is not X/O. The board is unchanged on failure.
        """
        if symbol not in (Symbol.X, Symbol.O):
            self._logger.error(f"Failed to make a move: invalid symbol {symbol}")
            return False
        if not self.is_empty_at(pos):
            self._logger.error(f"Failed to make a move at {pos}")
            return False

        row, col = pos
        self._cells[row * self._size + col] = symbol
        return True

    def get_cell(self, pos: position_t) -> int:
        if not self._in_bounds(pos):
            raise IndexError(f"Position {pos} out of board of size {self._size}")
        row, col = pos
        return self._cells[row * self._size + col]

    def evaluate(self) -> int:
        """
        Return the symbol owning a complete line, or Symbol.NONE.

        Rows are checked first, then columns, then the main diagonal, then the anti-diagonal.
        A full board with no complete line (a tie) also gives Symbol.NONE.
        """
        cells = self._cells
        for line in Board._winning_lines(self._size):
            first = cells[line[0]]
            if first == Symbol.NONE:
                continue
            if all(cells[index] == first for index in line):
                return first
        return Symbol.NONE

    def is_full(self) -> bool:
        return Symbol.NONE not in self._cells

    def is_empty_at(self, pos: position_t) -> bool:
        return self._in_bounds(pos) and self._cells[pos[0] * self._size + pos[1]] == Symbol.NONE

    def empty_positions(self) -> list[position_t]:
        """All empty cells, in row-major order."""
        size = self._size
        return [divmod(index, size) for index, cell in enumerate(self._cells) if cell == Symbol.NONE]

    def opponent(self, symbol: int) -> int:
        return Symbol.opponent(symbol)

    def to_list(self) -> list[list[int]]:
        size = self._size
        return [self._cells[row * size : (row + 1) * size] for row in range(size)]

    @staticmethod
    @functools.lru_cache(maxsize=None)
    def _winning_lines(size: int) -> tuple[tuple[int, ...], ...]:
        rows = [tuple(row * size + col for col in range(size)) for row in range(size)]
        cols = [tuple(row * size + col for row in range(size)) for col in range(size)]
        diagonal = tuple(index * size + index for index in range(size))
        anti_diagonal = tuple(index * size + (size - 1 - index) for index in range(size))
        return tuple(rows + cols + [diagonal, anti_diagonal])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._size == other._size and self._cells == other._cells

    def __str__(self) -> str:
        lines = []
        for row in self.to_list():
            lines.append(" ".join(Symbol.LABELS[cell] if cell != Symbol.NONE else "." for cell in row))
        return "\n".join(lines)
