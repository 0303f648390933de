# (row, col) on the board
position_t = tuple[int, int]

DEFAULT_BOARD_SIZE = 3
DEFAULT_MAX_SCORE = 10
DEFAULT_MIN_SCORE = -10


class Symbol:
    NONE = 0
    X = 1
    O = 2

    LABELS = {NONE: "no val", X: "X", O: "O"}
    UNKNOWN_LABEL = "Unknown"

    @staticmethod
    def to_label(symbol: int) -> str:
        return Symbol.LABELS.get(symbol, Symbol.UNKNOWN_LABEL)

    @staticmethod
    def from_label(label: str) -> int:
        """
        Parse "X" or "O" (case insensitive) into a symbol.

        Raises:
            ValueError: if the label is not a player symbol.
        """
        normalized = label.strip().upper()
        if normalized == "X":
            return Symbol.X
        if normalized == "O":
            return Symbol.O
        raise ValueError(f"Invalid symbol label: {label!r}, expected 'X' or 'O'")

    @staticmethod
    def opponent(symbol: int) -> int:
        if symbol == Symbol.X:
            return Symbol.O
        elif symbol == Symbol.O:
            return Symbol.X
        else:
            return Symbol.NONE  # no opponent for NONE


class PlayerType:
    COMPUTER = 0
    HUMAN = 1
    UNKNOWN = 2


class AI_TYPE:
    RANDOM = "random"
    MINIMAX = "minimax"


class GameLevel:
    """Named difficulty presets, expressed as minimax search depth in ply."""

    EASY = 0
    MEDIUM = 1
    HARD = 5
    EXPERT = 10
    MASTER = 20

    @staticmethod
    def get_names() -> dict[str, int]:
        return {name.lower(): value for name, value in vars(GameLevel).items() if name.isupper()}


class GameStatus:
    IDLE = "idle"
    HUMAN_TURN = "human_turn"
    COMPUTER_TURN = "computer_turn"
    FINISHED_WINNER = "finished_winner"
    FINISHED_TIE = "finished_tie"


class GameText:
    TIE = "Tie Game!"
    PLAYER_WON = "You Won!"
    PLAYER_LOST = "You Lost!"
    CLICK_CELL = "Click Cell"
    INVALID_MOVE = "Invalid"
    PC_CALC = "Thinking !"
