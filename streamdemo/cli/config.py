import logging
import sys
from typing import IO, Optional


def setup_logging(level: int = logging.WARNING, stream: Optional[IO[str]] = None):
    """
    Configure logging for the application.

    Records go to stderr by default so that stdout carries only program output.
    The root logger is reconfigured on every call.

    Parameters:
        level (int): Minimum level for emitted records.
        stream (IO[str], optional): Destination stream. Defaults to the current sys.stderr.
    """
    stream_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    logging.basicConfig(
        handlers=[stream_handler],
        format=(
            "{asctime:^} | {levelname: ^8} | {filename: ^14} {lineno: <4} | {message}"
        ),
        style="{",
        datefmt="%d.%m.%Y %H:%M:%S",
        level=level,
        force=True,
    )


def get_logger(name: str = None) -> logging.Logger:
    """
    Retrieve a logger instance with the given name.

    Parameters:
        name (str, optional): The name of the logger. Defaults to None for the root logger.

    Returns:
        logging.Logger: The configured logger.
    """
    return logging.getLogger(name)
