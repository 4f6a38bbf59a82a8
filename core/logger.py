"""
======================================================
Centralized logging configuration for the query builder.
======================================================

Provides consistent logging setup across all modules with:
- File and console output
- Configurable log levels (from core.config)
- Colored console output with emojis
- Module-specific loggers

Example:
    >>> from core.logger import get_logger, setup_logging
    >>>
    >>> # Setup logging at application start
    >>> setup_logging(log_level='DEBUG', log_file='queries.log')
    >>>
    >>> # Get module logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendered statement: %s", rendered)
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from core.config import config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class ColoredFormatter(logging.Formatter):
    """Custom formatter with color support for console output.

    Attributes:
        COLORS: Dict mapping log levels to ANSI color codes
        EMOJI: Dict mapping log levels to emoji indicators
    """

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'        # Reset
    }

    EMOJI = {
        'DEBUG': '🔍',
        'INFO': 'ℹ️ ',
        'WARNING': '⚠️ ',
        'ERROR': '❌',
        'CRITICAL': '🔥'
    }

    def format(self, record):
        """Format log record with colors and emojis.

        The record is copied so other handlers still see the plain level name.
        """
        record = logging.makeLogRecord(record.__dict__)
        levelname = record.levelname
        record.emoji = self.EMOJI.get(levelname, '')
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.COLORS['RESET']}"
        return super().format(record)


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Get a logger instance for the specified module.

    Args:
        name: Logger name (typically __name__ of calling module)
        level: Optional logging level override (DEBUG/INFO/WARNING/ERROR/CRITICAL)

    Returns:
        Configured Logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> debug_logger = get_logger(__name__, level='DEBUG')
    """
    logger = logging.getLogger(name)

    if level:
        logger.setLevel(getattr(logging, level.upper()))

    return logger


def setup_logging(
    log_level: str = 'INFO',
    log_file: Optional[str] = None,
    log_dir: Optional[str] = None,
    console_output: bool = True,
    use_colors: bool = True
) -> None:
    """Setup centralized logging configuration.

    Configures the root logger with console and/or file handlers.
    Should be called once at application startup.

    Args:
        log_level: Logging level (DEBUG/INFO/WARNING/ERROR/CRITICAL)
        log_file: Optional log file name (e.g., 'queries.log')
        log_dir: Optional log directory path (defaults to config log_dir)
        console_output: If True, output to console (stdout)
        use_colors: If True, use colored output for console
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper()))

    # Clear existing handlers
    root_logger.handlers.clear()

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(getattr(logging, log_level.upper()))

        if use_colors:
            console_formatter = ColoredFormatter(
                '%(emoji)s ' + LOG_FORMAT,
                datefmt=DATE_FORMAT
            )
        else:
            console_formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

        console_handler.setFormatter(console_formatter)
        root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_dir) if log_dir else config.log_dir
        log_path.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(
            log_path / log_file,
            encoding='utf-8'
        )
        file_handler.setLevel(getattr(logging, log_level.upper()))
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(file_handler)


def _init_default_logging():
    """Initialize logging from core.config if not already setup.

    Called automatically on module import to ensure basic logging
    is always available even if setup_logging() is not called explicitly.
    """
    if not logging.getLogger().handlers:
        setup_logging(
            log_level=config.log_level,
            log_file=config.log_file,
            log_dir=str(config.log_dir),
            console_output=True,
            use_colors=config.use_colors
        )


# Auto-initialize on import
_init_default_logging()
