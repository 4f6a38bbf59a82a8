"""
================================================
Configuration management for the query builder.
================================================

Loads diagnostic settings from environment variables (.env file) and provides
a centralized Config singleton for application-wide access.

Query building itself is never configurable: statement text and parameters
depend only on the sequence of builder calls. The configuration only controls
where and how diagnostic output (such as ``QueryBuilder.debug()``) is logged.
Invalid values never stop an import: they are reported as a warning and the
default is used instead.

Environment variables:
    FLUENT_SQL_LOG_LEVEL: Root logging level (default: INFO)
    FLUENT_SQL_LOG_FILE: Optional log file name written under the log directory
    FLUENT_SQL_LOG_DIR: Log directory (default: ./logs in the working directory)
    FLUENT_SQL_LOG_COLORS: Colored console output, true/false (default: true)

Example:
    >>> from core.config import config
    >>>
    >>> print(f"Log level: {config.log_level}, directory: {config.log_dir}")
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

# Load environment variables from the nearest .env file, searching from the working directory
load_dotenv(dotenv_path=find_dotenv(usecwd=True))

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = 'INFO'

_TRUE_VALUES = ('1', 'true', 'yes', 'on')
_FALSE_VALUES = ('0', 'false', 'no', 'off')


def _parse_log_level(value: str) -> str:
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning(
            "Unknown FLUENT_SQL_LOG_LEVEL %r, falling back to %s", value, DEFAULT_LOG_LEVEL
        )
        return DEFAULT_LOG_LEVEL
    return level


def _parse_bool(name: str, value: str, default: bool) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    logger.warning("%s must be a boolean flag, got %r; using %s", name, value, default)
    return default


@dataclass
class LoggingConfig:
    """Logging configuration settings.

    Attributes:
        level: Logging level name (DEBUG/INFO/WARNING/ERROR/CRITICAL)
        log_file: Optional log file name, None for console only
        log_dir: Directory the log file is written to
        use_colors: Whether console output uses ANSI colors
    """

    level: str
    log_file: Optional[str]
    log_dir: Path
    use_colors: bool


class Config:
    """Centralized configuration manager.

    Attributes:
        logging: LoggingConfig instance with diagnostic output settings

    Example:
        >>> config = Config()
        >>> config.log_level
        'INFO'
    """

    def __init__(self):
        """Initialize configuration from environment variables."""
        log_dir = os.getenv('FLUENT_SQL_LOG_DIR')
        self.logging = LoggingConfig(
            level=_parse_log_level(os.getenv('FLUENT_SQL_LOG_LEVEL', DEFAULT_LOG_LEVEL)),
            log_file=os.getenv('FLUENT_SQL_LOG_FILE') or None,
            log_dir=Path(log_dir) if log_dir else Path.cwd() / 'logs',
            use_colors=_parse_bool(
                'FLUENT_SQL_LOG_COLORS',
                os.getenv('FLUENT_SQL_LOG_COLORS', 'true'),
                default=True
            )
        )

    @property
    def log_level(self) -> str:
        """Get configured logging level name."""
        return self.logging.level

    @property
    def log_file(self) -> Optional[str]:
        """Get configured log file name."""
        return self.logging.log_file

    @property
    def log_dir(self) -> Path:
        """Get configured log directory."""
        return self.logging.log_dir

    @property
    def use_colors(self) -> bool:
        """Get whether console logging is colored."""
        return self.logging.use_colors


# Global configuration instance
config = Config()
