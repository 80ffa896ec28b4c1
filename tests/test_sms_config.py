"""
SMS Configuration Tests
=======================

Tests for the environment-backed Aliyun SMS settings and config resolver.

@author lycosa9527
@made_by MindSpring Team

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""

import json
from pathlib import Path

import pytest

from config.settings import Config
from config.sms_config import ALIYUN_SMS_CONNECTOR_ID


TEMPLATES = [
    {'usageType': 'Register', 'templateCode': 'SMS_1', 'intlTemplateCode': 'SMS_2'},
    {'usageType': 'SignIn', 'templateCode': 'SMS_3', 'intlTemplateCode': 'SMS_4'},
    {'usageType': 'ForgotPassword', 'templateCode': 'SMS_5', 'intlTemplateCode': 'SMS_6'},
]


@pytest.fixture
def env(monkeypatch):
    """Populate ALIYUN_SMS_* variables and return a fresh Config."""
    monkeypatch.setenv('ALIYUN_SMS_ACCESS_KEY_ID', ' id ')
    monkeypatch.setenv('ALIYUN_SMS_ACCESS_KEY_SECRET', 'secret')
    monkeypatch.setenv('ALIYUN_SMS_SIGN_NAME', 'Sign')
    monkeypatch.setenv('ALIYUN_SMS_TEMPLATES', json.dumps(TEMPLATES))
    monkeypatch.delenv('ALIYUN_SMS_TIMEOUT', raising=False)
    return Config()


class TestBaseConfig:
    """Test shared settings."""

    def test_version_read_from_version_file(self):
        version_file = Path(__file__).resolve().parent.parent / 'VERSION'
        assert Config().version == version_file.read_text(encoding='utf-8').strip()

    @pytest.mark.parametrize("value, expected", [
        ('true', True),
        ('True', True),
        ('false', False),
        ('1', False),
    ])
    def test_debug_flag(self, monkeypatch, value, expected):
        monkeypatch.setenv('DEBUG', value)
        assert Config().debug is expected

    def test_debug_defaults_off(self, monkeypatch):
        monkeypatch.delenv('DEBUG', raising=False)
        assert Config().debug is False


class TestAliyunSmsConfigMixin:
    """Test property parsing and defaults."""

    def test_credentials_are_stripped(self, env):
        assert env.ALIYUN_SMS_ACCESS_KEY_ID == 'id'
        assert env.is_aliyun_sms_configured

    def test_templates_parsed_from_json(self, env):
        assert env.ALIYUN_SMS_TEMPLATES == TEMPLATES

    def test_invalid_templates_json_falls_back_to_empty(self, monkeypatch, env):
        monkeypatch.setenv('ALIYUN_SMS_TEMPLATES', '{not json')
        env.refresh()
        assert env.ALIYUN_SMS_TEMPLATES == []

    def test_templates_must_be_list(self, monkeypatch, env):
        monkeypatch.setenv('ALIYUN_SMS_TEMPLATES', '{"usageType": "SignIn"}')
        env.refresh()
        assert env.ALIYUN_SMS_TEMPLATES == []

    def test_timeout_default_and_invalid(self, monkeypatch, env):
        assert env.ALIYUN_SMS_TIMEOUT == 10.0
        monkeypatch.setenv('ALIYUN_SMS_TIMEOUT', 'abc')
        env.refresh()
        assert env.ALIYUN_SMS_TIMEOUT == 10.0
        monkeypatch.setenv('ALIYUN_SMS_TIMEOUT', '2.5')
        env.refresh()
        assert env.ALIYUN_SMS_TIMEOUT == 2.5

    def test_not_configured_without_secret(self, monkeypatch, env):
        monkeypatch.delenv('ALIYUN_SMS_ACCESS_KEY_SECRET')
        env.refresh()
        assert not env.is_aliyun_sms_configured


class TestGetConnectorConfig:
    """Test the environment config resolver."""

    def test_returns_wire_form_config(self, env):
        resolved = env.get_connector_config(ALIYUN_SMS_CONNECTOR_ID)
        assert resolved == {
            'accessKeyId': 'id',
            'accessKeySecret': 'secret',
            'signName': 'Sign',
            'templates': TEMPLATES,
        }

    def test_unknown_connector_id(self, env):
        with pytest.raises(KeyError):
            env.get_connector_config('some-other-connector')
