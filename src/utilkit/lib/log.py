from typing import Any
import os
import logging

import rich.logging

__all__ = 'debug', 'info', 'warning', 'error', 'logger', 'setup_logger'

LOGGER_NAME = "utilkit"


class UtilkitLogFormatter(logging.Formatter):
    """Formatter used by the plain (non-rich) handler"""

    def format(self, record: logging.LogRecord) -> str:
        if record.args:
            record.msg = record.msg % record.args
            record.args = ()
        return super().format(record)


def setup_logger(level: str | None = None, color: bool | None = None) -> logging.Logger:
    """
    Configure and return the project logger.

    :param level: Log level name, defaults to the ``UTILKIT_LOG_LEVEL`` environment variable or WARNING
    :param color: Use rich colored output, defaults to False if ``UTILKIT_NO_COLOR_LOG=1``
    :return: The configured logger
    """
    level = level or os.environ.get("UTILKIT_LOG_LEVEL", "WARNING")
    if color is None:
        color = os.environ.get("UTILKIT_NO_COLOR_LOG", "") != "1"

    log = logging.getLogger(LOGGER_NAME)
    # Remove existing handlers before adding new one
    if log.hasHandlers():
        log.handlers.clear()

    log.setLevel(getattr(logging, level.upper(), logging.WARNING))
    if color:
        handler: logging.Handler = rich.logging.RichHandler(
            show_time=True,
            show_level=True,
            omit_repeated_times=False,
            markup=False,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%Y-%m-%d %H:%M:%S]"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(UtilkitLogFormatter(
            "%(asctime)s %(levelname)-7s %(message)s",
            datefmt="[%Y-%m-%d %H:%M:%S%z]")
        )
    log.addHandler(handler)
    return log


logger = setup_logger()


def debug(msg: str, *args: Any) -> None:
    """
    Log a debug message.

    :param msg: Message format string
    :param args: Arguments to format the message
    """
    logger.debug(msg, *args)


def info(msg: str, *args: Any) -> None:
    """
    Log an info message.

    :param msg: Message format string
    :param args: Arguments to format the message
    """
    logger.info(msg, *args)


def warning(msg: str, *args: Any) -> None:
    """
    Log a warning message.

    :param msg: Message format string
    :param args: Arguments to format the message
    """
    logger.warning(msg, *args)


def error(msg: str, *args: Any) -> None:
    """
    Log an error message.

    :param msg: Message format string
    :param args: Arguments to format the message
    """
    logger.error(msg, *args)
