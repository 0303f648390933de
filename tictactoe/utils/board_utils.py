# local imports
from ..libs.board import Board
from ..libs.types import Symbol
from .termcolor_utils import TermcolorUtils


class BoardUtils:
    """
    Text rendering of a Board for the terminal tools.
    """

    @staticmethod
    def board_to_string(board: Board, colored: bool = True, highlight: tuple[int, int] | None = None) -> str:
        """
        Render the board with row/column indices.

        Args:
            board (Board): board to render.
            colored (bool): color the symbols with colorama.
            highlight (tuple[int, int] | None): cell to mark with brackets, e.g. the last computer move.
        Returns:
            str: the board, one line per row.
        """
        size = board.get_size()
        cell_width = 3

        header = " " * 3 + "".join(f"{col:^{cell_width}}" for col in range(size))
        lines = [header]
        for row, cells in enumerate(board.to_list()):
            rendered_cells = []
            for col, cell in enumerate(cells):
                label = Symbol.to_label(cell) if cell != Symbol.NONE else "."
                label = f"[{label}]" if highlight == (row, col) else f" {label} "
                if colored:
                    label = TermcolorUtils.symbol(cell, label)
                rendered_cells.append(label)
            lines.append(f"{row:>2} " + "".join(rendered_cells))
        return "\n".join(lines)

    @staticmethod
    def parse_position(text: str) -> tuple[int, int] | None:
        """
        Parse "row col" or "row,col" typed by a user.

        Returns:
            tuple[int, int] | None: the position, or None if the text is not two integers.
        """
        parts = text.replace(",", " ").split()
        if len(parts) != 2:
            return None
        try:
            return (int(parts[0]), int(parts[1]))
        except ValueError:
            return None
