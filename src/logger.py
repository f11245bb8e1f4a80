"""Logging configuration for the information schema catalog."""

import logging
from enum import StrEnum

from src import settings


class ConsoleColour(StrEnum):
    """ANSI escape codes used to tint console log lines.

    <https://en.wikipedia.org/wiki/ANSI_escape_code#Select_Graphic_Rendition_parameters>
    """

    RESET = "\033[0m"
    BLACK = "\033[30m"
    RED = "\033[31m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    LIGHT_GREY = "\033[37m"
    HIGHLIGHT_RED = "\033[41m"
    BOLD = "\033[1m"


class PlainConsoleFormatter(logging.Formatter):
    """Console formatter without colour."""

    fmt = "{asctime} - {name} - {levelname} - {message}"

    def __init__(self) -> None:
        super().__init__(self.fmt, style="{", validate=True)


class ColourConsoleFormatter(PlainConsoleFormatter):
    """Console formatter that colours each line by record level."""

    COLOURS = {
        logging.DEBUG: ConsoleColour.LIGHT_GREY,
        logging.INFO: ConsoleColour.BLUE,
        logging.WARNING: ConsoleColour.YELLOW,
        logging.ERROR: ConsoleColour.RED,
        logging.CRITICAL: ConsoleColour.BOLD + ConsoleColour.HIGHLIGHT_RED + ConsoleColour.BLACK,
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format the record, wrapping it in the level's colour."""
        colour = self.COLOURS.get(record.levelno, ConsoleColour.RESET)
        return f"{colour}{super().format(record)}{ConsoleColour.RESET}"


_stream_handler = logging.StreamHandler()
_stream_handler.setLevel(settings.LOG_LEVEL)

if settings.LOG_COLOUR_ENABLED:  # pragma: nocover
    _stream_handler.setFormatter(ColourConsoleFormatter())
else:  # pragma: nocover
    _stream_handler.setFormatter(PlainConsoleFormatter())


LOGGER = logging.getLogger(settings.LOGGER_NAME)
LOGGER.setLevel(settings.LOG_LEVEL)
LOGGER.addHandler(_stream_handler)
