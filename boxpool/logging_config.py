"""Logging setup for the box pool engine and CLI."""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

ROOT_LOGGER = 'boxpool'

FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
CONSOLE_FORMAT = '%(levelname)s: %(message)s'


def _file_handler(log_dir: Path, level: int) -> logging.Handler:
    log_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    handler = logging.FileHandler(log_dir / f'boxpool_{stamp}.log', encoding='utf-8')
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    return handler


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def setup_logging(
    log_dir: Optional[Path] = None,
    level: int = logging.INFO,
    log_to_file: bool = True,
    log_to_console: bool = True,
) -> logging.Logger:
    """
    Configure the `boxpool` logger tree.

    Every module logs to `boxpool.<module>`, so handlers installed here
    see grid recomputes, sheet parsing and file I/O alike. Calling this
    again replaces the earlier handlers.

    Args:
        log_dir: Directory for timestamped log files (default: ./logs)
        level: Logging level (default: INFO)
        log_to_file: Whether to log to file (default: True)
        log_to_console: Whether to log to stdout (default: True)

    Example:
        from boxpool.logging_config import setup_logging
        logger = setup_logging(log_to_file=False)
        logger.info("Applying score update")
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_to_file:
        logger.addHandler(_file_handler(log_dir or Path('logs'), level))
    if log_to_console:
        logger.addHandler(_console_handler(level))

    return logger


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Get a logger in the `boxpool` tree (unconfigured until setup_logging runs)."""
    return logging.getLogger(name)
