"""Aliyun SMS Connector Configuration Module.

This module provides centralized configuration management for the connector.
It handles environment variable loading and provides a clean interface
for accessing configuration values.

Features:
- Environment variable loading with .env support
- Property-based configuration access for real-time updates
- Default values for all optional settings

Environment Variables:
- ALIYUN_SMS_ACCESS_KEY_ID / ALIYUN_SMS_ACCESS_KEY_SECRET: Required for sending
- ALIYUN_SMS_SIGN_NAME: Required for sending
- ALIYUN_SMS_TEMPLATES: JSON list of message templates
- See env.example for complete configuration options

Usage:
    from config.settings import config
    resolver = config.get_connector_config
    is_ready = config.is_aliyun_sms_configured

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
import logging

from dotenv import load_dotenv

from config.base_config import BaseConfig
from config.sms_config import AliyunSmsConfigMixin

logger = logging.getLogger(__name__)

load_dotenv()  # Load environment variables from .env file


class Config(
    BaseConfig,
    AliyunSmsConfigMixin
):
    """
    Centralized configuration management for the Aliyun SMS connector.

    Combines all configuration mixins to provide a unified interface
    for accessing configuration values.
    """


# Create global configuration instance
config = Config()
