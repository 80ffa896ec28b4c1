"""
Logging Configuration Tests
===========================

Tests for the unified formatter and httpx log reformatting.
"""

import logging

from config.settings import Config
from services.infrastructure.utils import logging_config
from services.infrastructure.utils.logging_config import (
    AliyunHTTPLogFilter,
    UnifiedFormatter,
    setup_logging,
)


def _record(name, level, msg, *args):
    return logging.LogRecord(name, level, __file__, 1, msg, args, None)


class TestUnifiedFormatter:
    """Test formatted output."""

    def test_plain_format(self):
        formatter = UnifiedFormatter(use_colors=False)
        output = formatter.format(_record('services.aliyun_sms.connector', logging.WARNING, 'sent %s', 'x'))
        assert '| ASMS |' in output
        assert 'WARN ' in output
        assert output.endswith('sent x')
        assert '\033[' not in output

    def test_colored_level(self):
        formatter = UnifiedFormatter(use_colors=True)
        output = formatter.format(_record('config.sms_config', logging.ERROR, 'bad'))
        assert '\033[31m' in output
        assert '| CONF |' in output

    def test_source_abbreviations(self):
        assert UnifiedFormatter.abbreviate_source('services.connectors.utils') == 'CONN'
        assert UnifiedFormatter.abbreviate_source('httpx') == 'HTTP'
        assert UnifiedFormatter.abbreviate_source('__main__') == 'MAIN'
        assert UnifiedFormatter.abbreviate_source('xy') == 'XY  '


class TestAliyunHTTPLogFilter:
    """Test httpx request log reformatting."""

    def test_reformats_aliyun_request(self):
        record = _record(
            'httpx', logging.INFO, 'HTTP Request: %s %s "%s %d %s"',
            'POST', 'https://dysmsapi.aliyuncs.com/', 'HTTP/1.1', 200, 'OK'
        )
        assert AliyunHTTPLogFilter().filter(record)
        assert record.getMessage() == 'Aliyun API: POST / → 200 OK'

    def test_leaves_other_messages_alone(self):
        record = _record('httpx', logging.INFO, 'something else')
        assert AliyunHTTPLogFilter().filter(record)
        assert record.getMessage() == 'something else'


def test_setup_logging_sets_levels():
    setup_logging('DEBUG', use_colors=False)
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger('httpx').level in (logging.DEBUG, logging.WARNING)


def test_setup_logging_debug_flag_selects_debug_level(monkeypatch):
    monkeypatch.setenv('DEBUG', 'true')
    monkeypatch.setenv('LOG_LEVEL', 'WARNING')
    monkeypatch.setattr(logging_config, 'config', Config())

    setup_logging(use_colors=False)

    assert logging.getLogger().level == logging.DEBUG


def test_setup_logging_uses_log_level_without_debug_flag(monkeypatch):
    monkeypatch.delenv('DEBUG', raising=False)
    monkeypatch.setenv('LOG_LEVEL', 'WARNING')
    monkeypatch.setattr(logging_config, 'config', Config())

    setup_logging(use_colors=False)

    assert logging.getLogger().level == logging.WARNING


def test_setup_logging_attaches_single_http_filter():
    for _ in range(3):
        setup_logging('INFO', use_colors=False)

    filters = [f for f in logging.getLogger('httpx').filters if isinstance(f, AliyunHTTPLogFilter)]
    assert len(filters) == 1
