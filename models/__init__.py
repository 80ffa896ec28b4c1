"""
Connector Pydantic Models
=========================

Configuration, request and response models for type safety and validation.

Author: lycosa9527
Made by: MindSpring Team

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""

from .common import (
    ConnectorConfigFormItemType,
    ConnectorType,
    SmsTemplateType,
    UsageType,
)
from .connector import (
    ConnectorConfigFormItem,
    ConnectorMetadata,
    SendMessageData,
)
from .aliyun_sms import (
    REQUIRED_TEMPLATE_USAGE_TYPES,
    AliyunSmsConfig,
    SendSmsResponse,
    SmsTemplate,
)

__all__ = [
    # Enums
    'ConnectorConfigFormItemType',
    'ConnectorType',
    'SmsTemplateType',
    'UsageType',
    # Connector
    'ConnectorConfigFormItem',
    'ConnectorMetadata',
    'SendMessageData',
    # Aliyun SMS
    'REQUIRED_TEMPLATE_USAGE_TYPES',
    'AliyunSmsConfig',
    'SendSmsResponse',
    'SmsTemplate',
]
