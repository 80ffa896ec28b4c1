"""
Logging configuration for the Aliyun SMS connector.

Handles:
- Unified formatter with ANSI colors
- Logger levels for external HTTP libraries
- httpx request log reformatting
"""

import os
import sys
import logging
import re
from typing import Literal, Optional
from urllib.parse import urlparse
from config.settings import config


class UnifiedFormatter(logging.Formatter):
    """Unified logging formatter with ANSI color support."""

    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARN': '\033[33m',     # Yellow
        'ERROR': '\033[31m',    # Red
        'CRIT': '\033[35m',     # Magenta
        'RESET': '\033[0m',     # Reset
        'BOLD': '\033[1m',      # Bold
    }

    LEVEL_MAP = {
        'DEBUG': 'DEBUG',
        'INFO': 'INFO',
        'WARNING': 'WARN',
        'ERROR': 'ERROR',
        'CRITICAL': 'CRIT'
    }

    def __init__(self, fmt=None, datefmt=None, style: Literal['%', '{', '$'] = '%', validate=True, use_colors=True):
        super().__init__(fmt=fmt, datefmt=datefmt, style=style, validate=validate)
        self.use_colors = use_colors

    @staticmethod
    def abbreviate_source(name: str) -> str:
        """Four-letter source tag for a logger name."""
        if name == '__main__':
            source = 'MAIN'
        elif name.startswith('services.aliyun_sms'):
            source = 'ASMS'
        elif name.startswith('services.connectors'):
            source = 'CONN'
        elif name.startswith('services'):
            source = 'SERV'
        elif name.startswith('config'):
            source = 'CONF'
        elif name.startswith('httpx') or name.startswith('httpcore'):
            source = 'HTTP'
        elif name.startswith('scripts'):
            source = 'SCRP'
        else:
            source = name[:4].upper()
        return source.ljust(4)

    def format(self, record):
        timestamp = self.formatTime(record, '%H:%M:%S')

        level_name = self.LEVEL_MAP.get(record.levelname, record.levelname)

        if self.use_colors:
            color = self.COLORS.get(level_name, '')
            reset = self.COLORS['RESET']
            if level_name == 'CRIT':
                level = f"{self.COLORS['BOLD']}{color}{level_name.ljust(5)}{reset}"
            else:
                level = f"{color}{level_name.ljust(5)}{reset}"
        else:
            level = level_name.ljust(5)

        source = self.abbreviate_source(record.name)

        # Add process ID to identify worker
        pid = os.getpid()

        message = record.getMessage().lstrip()
        message = re.sub(r' +', ' ', message)
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"

        return f"[{timestamp}] {level} | {source} | [{pid}] {message}"


class AliyunHTTPLogFilter(logging.Filter):
    """Filter to reformat httpx request logs to match project log format.

    - 'HTTP Request: POST https://dysmsapi.aliyuncs.com/ "HTTP/1.1 200 OK"'
      → 'Aliyun API: POST / → 200 OK'
    """

    PATTERN = re.compile(
        r'HTTP Request:\s+(\w+)\s+(https?://[^\s"]+)\s+"HTTP/[\d.]+\s+(\d+)\s*([^"]*)"'
    )

    def _reformat(self, message: str) -> str:
        match = self.PATTERN.match(message)
        if not match:
            return message
        method, url, status_code, status_text = match.groups()
        parsed = urlparse(url)
        api_name = 'Aliyun' if 'aliyuncs.com' in parsed.netloc else parsed.netloc
        endpoint = parsed.path or '/'
        return f"{api_name} API: {method} {endpoint} → {status_code} {status_text}".rstrip()

    def filter(self, record):
        message = record.getMessage()
        reformatted = self._reformat(message)
        if reformatted != message:
            record.msg = reformatted
            record.args = ()
        return True


def setup_logging(level: Optional[str] = None, use_colors: Optional[bool] = None) -> logging.Logger:
    """
    Configure logging for the connector.

    Args:
        level: Log level name; defaults to DEBUG when DEBUG=true, else LOG_LEVEL
        use_colors: ANSI colors; defaults to True when stdout is a TTY

    Returns:
        Module logger
    """
    if use_colors is None:
        use_colors = hasattr(sys.stdout, 'isatty') and sys.stdout.isatty()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(UnifiedFormatter(use_colors=use_colors))

    if level is None:
        level = 'DEBUG' if config.debug else config.log_level
    log_level_str = level.upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    # Use force=True to replace any existing configuration
    logging.basicConfig(level=log_level, handlers=[handler], force=True)

    # Only show httpx/httpcore DEBUG/INFO logs when explicitly enabled via HTTP_DEBUG
    http_debug_enabled = os.getenv('HTTP_DEBUG', '').lower() in ('1', 'true', 'yes')
    http_level = logging.DEBUG if http_debug_enabled else logging.WARNING
    httpx_logger = logging.getLogger('httpx')
    httpx_logger.setLevel(http_level)
    logging.getLogger('httpcore').setLevel(http_level)
    if not any(isinstance(f, AliyunHTTPLogFilter) for f in httpx_logger.filters):
        httpx_logger.addFilter(AliyunHTTPLogFilter())

    logger = logging.getLogger(__name__)
    logger.debug("Logging initialized: %s (v%s)", log_level_str, config.version)
    return logger
