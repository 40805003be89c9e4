# utils/logging_config.py
import logging
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Set up logging with a console handler and optionally a file handler.

    Args:
        level: Logging level (e.g., logging.INFO, "DEBUG").
        log_file: Optional path to a file for logging output.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level: {level}")

    logger = logging.getLogger()
    logger.setLevel(level)

    # Clear existing handlers to avoid duplicates
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    # Console handler
    ch = logging.StreamHandler()
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    # Optional file handler
    if log_file:
        fh = logging.FileHandler(log_file)
        fh.setFormatter(formatter)
        logger.addHandler(fh)


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Retrieve a logger with the given name. When `level` is omitted the
    logger inherits the root level chosen by setup_logging().
    """
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger
