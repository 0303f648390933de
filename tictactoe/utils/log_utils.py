# stdlib imports
import logging

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


class LogUtils:
    @staticmethod
    def setup_logging(level: str | int = logging.WARNING) -> logging.Logger:
        """
        Configure the root handler for the command line tools and return the package logger.
        """
        logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
        return logging.getLogger("tictactoe")
