import logging
import os

from rich.logging import RichHandler

LOG_FORMAT = "[%(name)s]  %(message)s"


class CenteredFormatter(logging.Formatter):
    """Pads logger names to the widest name seen so far, so messages line up."""

    name_width = 14

    def __init__(self, fmt=None, datefmt=None, style="%", initial_width=14):
        super().__init__(fmt, datefmt, style)
        CenteredFormatter.name_width = max(CenteredFormatter.name_width, initial_width)

    def format(self, record):
        CenteredFormatter.name_width = max(CenteredFormatter.name_width, len(record.name))
        # format a copy, other handlers should still see the raw name
        record = logging.makeLogRecord(record.__dict__)
        record.name = record.name.center(CenteredFormatter.name_width)
        return super().format(record)


def log_level() -> int:
    return logging.DEBUG if os.getenv("DEBUG") else logging.INFO


def get_logger(name=None) -> logging.Logger:
    """
    Return a logger writing through a RichHandler.
    Level is DEBUG when the DEBUG env var is set, INFO otherwise.
    """
    logger = logging.getLogger(name or "catalog")
    level = log_level()
    logger.setLevel(level)

    if not logger.handlers:
        handler = RichHandler(
            show_time=True,
            show_level=True,
            show_path=False,
            rich_tracebacks=True,
            log_time_format="[%X]",
        )
        handler.setFormatter(CenteredFormatter(LOG_FORMAT))
        handler.setLevel(level)
        logger.addHandler(handler)

        logger.propagate = False
        logger.debug(f"Logger for '{logger.name}' initialized with RichHandler.")

    return logger
