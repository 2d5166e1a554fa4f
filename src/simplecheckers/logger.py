"""
Logging setup.

The library only ever calls get_logger(); handlers are installed by the
console entry point through setup_logger().
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

ROOT_LOGGER = 'simplecheckers'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logger(
    name: str = ROOT_LOGGER,
    level: str = 'INFO',
    log_file: Optional[str] = None,
    log_dir: str = 'logs',
    max_size: int = 5,  # MB
    backup_count: int = 3,
    console_output: bool = True,
) -> logging.Logger:
    """
    Configure a logger with console and optional rotating file output.

    Args:
        name: Logger name
        level: Log level name
        log_file: File name inside log_dir, or None for no file output
        log_dir: Directory for log files
        max_size: Maximum log file size in MB before rotating
        backup_count: Number of rotated files to keep
        console_output: Whether to log to stderr

    Returns:
        logging.Logger: The configured logger
    """
    logger = logging.getLogger(name)

    log_level = getattr(logging, str(level).upper(), logging.INFO)
    logger.setLevel(log_level)

    # Already configured: only the level may change
    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(log_level)
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_path / log_file,
            maxBytes=max_size * 1024 * 1024,
            backupCount=backup_count,
            encoding='utf-8',
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get the package logger, or a child of it."""
    if not name:
        return logging.getLogger(ROOT_LOGGER)
    return logging.getLogger(f'{ROOT_LOGGER}.{name}')
