"""
Aliyun SMS HTTP Client

Native async HTTP calls to the Aliyun Short Message Service RPC API.
Each call gets a fresh nonce and timestamp, is signed with HMAC-SHA1 and
sent as a form-encoded POST. No retries happen at this layer.

@author lycosa9527
@made_by MindSpring Team

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
from datetime import datetime, timezone
from typing import Dict, Mapping, Optional
import logging
import random

import httpx

from services.aliyun_sms.constants import (
    DEFAULT_TIMEOUT_SECONDS,
    ENDPOINT,
    SEND_SMS_ACTION,
    STATIC_CONFIGS,
)
from services.aliyun_sms.signing import get_signature


logger = logging.getLogger(__name__)


def generate_nonce() -> str:
    """Random SignatureNonce, unique per request"""
    return str(random.random())


def generate_timestamp() -> str:
    """UTC ISO-8601 timestamp with milliseconds, e.g. 2024-01-01T00:00:00.000Z"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class AliyunSmsClient:
    """
    Signed transport for Aliyun RPC calls.

    An httpx.AsyncClient can be injected; otherwise one is created lazily
    and owned (closed by close()).
    """

    def __init__(
        self,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        endpoint: str = ENDPOINT
    ):
        self._client = http_client
        self._owns_client = http_client is None
        self._timeout = timeout
        self.endpoint = endpoint

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create async HTTP client (lazy initialization)"""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(self._timeout))
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        """Close HTTP client (owned clients only)"""
        if self._owns_client and self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def request(
        self,
        url: str,
        parameters: Mapping[str, Optional[str]],
        access_key_secret: str
    ) -> httpx.Response:
        """
        Sign parameters and POST them as a form body.

        Args:
            url: API endpoint
            parameters: Action, static and call parameters
            access_key_secret: Secret used as the HMAC key

        Returns:
            Raw HTTP response (2xx only)

        Raises:
            httpx.HTTPStatusError: On a non-2xx response (carries the response)
            httpx.TransportError: On network failures
        """
        final_parameters: Dict[str, str] = {
            key: value for key, value in parameters.items() if value is not None
        }
        final_parameters["SignatureNonce"] = generate_nonce()
        final_parameters["Timestamp"] = generate_timestamp()

        signature = get_signature(final_parameters, access_key_secret, "POST")

        client = await self._get_client()
        response = await client.post(
            url,
            headers={"Content-Type": "application/x-www-form-urlencoded"},
            data={**final_parameters, "Signature": signature},
        )
        logger.debug(
            "Aliyun %s returned %s",
            final_parameters.get("Action", "request"),
            response.status_code
        )
        response.raise_for_status()
        return response

    async def send_sms(
        self,
        parameters: Mapping[str, Optional[str]],
        access_key_secret: str
    ) -> httpx.Response:
        """
        Call SendSms.

        Reference: https://help.aliyun.com/document_detail/101414.html
        """
        return await self.request(
            self.endpoint,
            {"Action": SEND_SMS_ACTION, **STATIC_CONFIGS, **parameters},
            access_key_secret
        )
