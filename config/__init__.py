"""
Configuration Package

This package contains connector configuration:
- Settings: Environment variables (Config class and config instance)
- SMS: Aliyun SMS credentials, templates and the environment config resolver

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""

from .settings import Config, config
from .sms_config import ALIYUN_SMS_CONNECTOR_ID, AliyunSmsConfigMixin

__all__ = [
    'ALIYUN_SMS_CONNECTOR_ID',
    'AliyunSmsConfigMixin',
    'Config',
    'config',
]
