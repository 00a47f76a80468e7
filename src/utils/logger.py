import logging
import sys
from typing import Union

from colorama import init, Fore, Style

# Initialize colorama
init(autoreset=True)

# Root of all loggers created by get_logger
ROOT_LOGGER_NAME = "src"

# Define color mapping for different log levels
LOG_COLORS = {
    logging.DEBUG: Fore.BLUE,
    logging.INFO: Fore.GREEN,
    logging.WARNING: Fore.YELLOW,
    logging.ERROR: Fore.RED,
    logging.CRITICAL: Fore.MAGENTA + Style.BRIGHT,
}


class ColoredFormatter(logging.Formatter):
    """
    Formatter coloring the whole formatted line by log level.
    """

    def format(self, record):
        line = super().format(record)
        log_color = LOG_COLORS.get(record.levelno, "")
        return f"{log_color}{line}{Style.RESET_ALL}" if log_color else line


def _root_logger() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(
            ColoredFormatter(
                fmt="[%(asctime)s] [%(levelname)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root.addHandler(console_handler)
        root.setLevel(logging.INFO)
    return root


def get_logger(name: str, level=None) -> logging.Logger:
    """
    Returns a logger writing through the shared colorized console handler.

    Loggers of modules outside the `src` package are nested under it, so that
    `set_log_level` controls them as well.
    """
    _root_logger()
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger


def set_log_level(level: Union[int, str]) -> None:
    """Set the level of all project loggers, e.g. 'DEBUG' or logging.WARNING."""
    if isinstance(level, str):
        level = level.upper()
    _root_logger().setLevel(level)
