# pip imports
import colorama

# local imports
from ..libs.types import Symbol


class TermcolorUtils:
    @staticmethod
    def red(value: str | int | float) -> str:
        return TermcolorUtils._colorize(colorama.Fore.RED, value)

    @staticmethod
    def green(value: str | int | float) -> str:
        return TermcolorUtils._colorize(colorama.Fore.GREEN, value)

    @staticmethod
    def cyan(value: str | int | float) -> str:
        return TermcolorUtils._colorize(colorama.Fore.CYAN, value)

    @staticmethod
    def magenta(value: str | int | float) -> str:
        return TermcolorUtils._colorize(colorama.Fore.MAGENTA, value)

    @staticmethod
    def symbol(symbol: int, text: str | None = None) -> str:
        """Color `text` (the symbol label by default) with the color of `symbol`: X in cyan, O in magenta."""
        text = text if text is not None else Symbol.to_label(symbol)
        if symbol == Symbol.X:
            return TermcolorUtils.cyan(text)
        elif symbol == Symbol.O:
            return TermcolorUtils.magenta(text)
        return text

    @staticmethod
    def _colorize(color: str, value: str | int | float) -> str:
        return color + str(value) + colorama.Style.RESET_ALL
