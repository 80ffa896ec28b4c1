"""
Pytest Configuration
====================

Ensures project root is in Python path for imports and provides shared
connector fixtures.

@author lycosa9527
@made_by MindSpring Team

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""

import sys
from pathlib import Path

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent.absolute()
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def sms_config():
    """Valid Aliyun SMS configuration in wire (camelCase) form."""
    return {
        'accessKeyId': 'testId',
        'accessKeySecret': 'testSecret',
        'signName': 'TestSign',
        'templates': [
            {'usageType': 'Register', 'templateCode': 'SMS_REG', 'intlTemplateCode': 'SMS_REG_INTL'},
            {'usageType': 'SignIn', 'templateCode': 'SMS_SIGNIN', 'intlTemplateCode': 'SMS_SIGNIN_INTL'},
            {'usageType': 'ForgotPassword', 'templateCode': 'SMS_FP', 'intlTemplateCode': 'SMS_FP_INTL'},
            {'usageType': 'Test', 'templateCode': 'SMS_TEST', 'intlTemplateCode': 'SMS_TEST_INTL'},
        ],
    }


@pytest.fixture
def fixed_nonce_and_timestamp(monkeypatch):
    """Pin SignatureNonce and Timestamp so signatures are reproducible."""
    monkeypatch.setattr('services.aliyun_sms.client.generate_nonce', lambda: '0.123456789')
    monkeypatch.setattr('services.aliyun_sms.client.generate_timestamp', lambda: '2024-01-01T00:00:00.000Z')
