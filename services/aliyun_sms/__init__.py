"""
Aliyun Short Message Service

Request signing, the signed HTTP client and the send-message connector.
"""

from .client import AliyunSmsClient
from .connector import (
    AliyunSmsConnector,
    create_aliyun_sms_connector,
    parse_response_string,
)
from .constants import DEFAULT_METADATA, ENDPOINT, STATIC_CONFIGS
from .signing import canonicalize_query, escape, get_signature

__all__ = [
    'AliyunSmsClient',
    'AliyunSmsConnector',
    'create_aliyun_sms_connector',
    'parse_response_string',
    'DEFAULT_METADATA',
    'ENDPOINT',
    'STATIC_CONFIGS',
    'canonicalize_query',
    'escape',
    'get_signature',
]
