"""
===================================================
Core infrastructure package for the query builder.
===================================================

This package provides centralized configuration management and logging
infrastructure used by the fluent_sql package.

Modules:
    config: Configuration management from environment variables
    logger: Centralized logging configuration and utilities

Example:
    >>> from core.config import config
    >>> from core.logger import get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> logger.info(f"Logging at {config.log_level}")
"""

__version__ = "0.1.0"
__all__ = [
    'get_logger', 'setup_logging', 'config', 'Config'
]

from core.config import Config, config
from core.logger import get_logger, setup_logging
