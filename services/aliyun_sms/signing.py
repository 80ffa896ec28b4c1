"""
Aliyun RPC Signature
====================

Implements signature version 1.0 (HMAC-SHA1) used by Aliyun RPC-style APIs.
Reference: https://help.aliyun.com/document_detail/29442.html

The canonical query string is built by escaping every key and value, then
sorting the joined "key=value" strings. The sort runs over the joined
strings, not the keys, and must stay that way to match the provider.

@author lycosa9527
@made_by MindSpring Team

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
from typing import Mapping, Optional
from urllib.parse import quote
import base64
import hashlib
import hmac


# Characters encodeURIComponent leaves unescaped on top of the RFC 3986 set
_URI_COMPONENT_SAFE = "!*'()"

# Aliyun re-encodes these even where standard encoding keeps them
_ALIYUN_ESCAPES = (
    ("*", "%2A"),
    ("'", "%27"),
    ("!", "%21"),
    ('"', "%22"),
    ("(", "%28"),
    (")", "%29"),
    ("+", "%2B"),
)


def uri_component_escape(value: str) -> str:
    """Standard URI component percent-encoding (UTF-8, uppercase hex)"""
    return quote(value, safe=_URI_COMPONENT_SAFE)


def escape(value: str) -> str:
    """
    Percent-encode value with Aliyun's overrides.

    Args:
        value: Raw key, value or path

    Returns:
        Encoded string where only A-Z, a-z, 0-9, '-', '_', '.', '~' stay literal
    """
    escaped = uri_component_escape(value)
    for char, replacement in _ALIYUN_ESCAPES:
        escaped = escaped.replace(char, replacement)
    return escaped


def canonicalize_query(parameters: Mapping[str, Optional[str]]) -> str:
    """
    Build the canonical query string for parameters.

    Parameters whose value is None are left out.
    """
    pairs = [
        "" if value is None else f"{escape(key)}={escape(str(value))}"
        for key, value in parameters.items()
    ]
    return "&".join(sorted(pair for pair in pairs if pair))


def build_string_to_sign(parameters: Mapping[str, Optional[str]], method: str) -> str:
    """Build METHOD&%2F&escaped(canonical query)"""
    canonical_query = canonicalize_query(parameters)
    return f"{method.upper()}&{escape('/')}&{escape(canonical_query)}"


def get_signature(parameters: Mapping[str, Optional[str]], secret: str, method: str) -> str:
    """
    Compute the request signature.

    Args:
        parameters: All request parameters except Signature itself
        secret: AccessKey secret
        method: HTTP method the request is sent with

    Returns:
        base64(HMAC-SHA1(secret + "&", string_to_sign))
    """
    string_to_sign = build_string_to_sign(parameters, method)
    digest = hmac.new(
        f"{secret}&".encode("utf-8"),
        string_to_sign.encode("utf-8"),
        hashlib.sha1
    ).digest()
    return base64.b64encode(digest).decode("ascii")
