"""
Common Pydantic Models and Enums
=================================

Shared enumerations used across connector models and services.

Author: lycosa9527
Made by: MindSpring Team

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
from enum import Enum, IntEnum



class ConnectorType(str, Enum):
    """Kinds of connectors a host platform can load"""
    EMAIL = "Email"
    SMS = "Sms"
    SOCIAL = "Social"


class ConnectorConfigFormItemType(str, Enum):
    """Input widget used to render a configuration form field"""
    TEXT = "Text"
    NUMBER = "Number"
    MULTILINE_TEXT = "MultilineText"
    SWITCH = "Switch"
    SELECT = "Select"
    JSON = "Json"


class UsageType(str, Enum):
    """Logical purpose of an outbound message"""
    REGISTER = "Register"
    SIGN_IN = "SignIn"
    FORGOT_PASSWORD = "ForgotPassword"
    GENERIC = "Generic"
    TEST = "Test"


class SmsTemplateType(IntEnum):
    """
    Aliyun template kind, as listed by QuerySmsTemplateList.

    Verification code SMS for passwordless sign-in/up and password reset
    use VERIFICATION_CODE, which is the default.
    """
    NOTIFICATION = 0
    PROMOTION = 1
    VERIFICATION_CODE = 2
    INTERNATIONAL_MESSAGE = 6
    PURE_NUMBER = 7
