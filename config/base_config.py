"""Base configuration class and core settings.

This module provides the base Config class with caching mechanism and core
settings like version and logging.
"""
import logging
import os
import time
from pathlib import Path

logger = logging.getLogger(__name__)


class BaseConfig:
    """Base configuration class with caching mechanism."""

    def __init__(self):
        self._cache = {}
        self._cache_timestamp = 0
        self._cache_duration = 30
        self._version = None

    def _get_cached_value(self, key: str, default=None):
        """Get cached value from environment."""
        current_time = time.time()
        if current_time - self._cache_timestamp > self._cache_duration:
            self._cache.clear()
            self._cache_timestamp = current_time
        if key not in self._cache:
            self._cache[key] = os.environ.get(key, default)
        return self._cache[key]

    def refresh(self) -> None:
        """Drop cached environment values so the next read hits os.environ."""
        self._cache.clear()
        self._cache_timestamp = 0

    @property
    def version(self) -> str:
        """
        Package version - read from VERSION file (single source of truth).
        Cached after first read.
        """
        if self._version is None:
            try:
                version_file = Path(__file__).parent.parent / 'VERSION'
                self._version = version_file.read_text(encoding='utf-8').strip()
            except OSError as e:
                logger.warning("Failed to read VERSION file: %s", e)
                self._version = "0.0.0"
        return self._version

    @property
    def debug(self) -> bool:
        """Debug mode setting."""
        return self._get_cached_value('DEBUG', 'False').lower() == 'true'

    @property
    def log_level(self) -> str:
        """Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."""
        level = self._get_cached_value('LOG_LEVEL', 'INFO').upper()
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if level not in valid_levels:
            logger.warning("Invalid LOG_LEVEL '%s', using INFO", level)
            return 'INFO'
        return level
