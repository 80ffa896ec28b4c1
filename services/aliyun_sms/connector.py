"""
Aliyun SMS Connector
====================

Adapts the generic send-message call to Aliyun's SendSms API.

Flow for every call:
- Resolve configuration (explicit argument, else the injected resolver)
- Validate it (credentials, templates for Register/SignIn/ForgotPassword)
- Pick the template for the usage type and the domestic or international code
- Sign and POST the request, then interpret the response body

Configuration and template errors are raised before any network call.
Provider answers are mapped to InvalidResponseError or ProviderGeneralError;
transport errors propagate unchanged.

@author lycosa9527
@made_by MindSpring Team

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
from typing import Any, Mapping, Optional, Union
import json
import logging

import httpx

from models.aliyun_sms import AliyunSmsConfig, SendSmsResponse, SmsTemplate
from models.common import ConnectorType
from models.connector import SendMessageData
from services.aliyun_sms.client import AliyunSmsClient
from services.aliyun_sms.constants import (
    DEFAULT_METADATA,
    DEFAULT_TIMEOUT_SECONDS,
    HOME_COUNTRY_CODE,
    SUCCESS_CODE,
)
from services.connectors.base import BaseMessageConnector, ConfigMapping, GetConfig
from services.connectors.errors import (
    InvalidResponseError,
    ProviderGeneralError,
    TemplateNotFoundError,
)
from services.connectors.utils import parse_model, validate_config


logger = logging.getLogger(__name__)


def mask_phone(phone: str) -> str:
    """Mask the middle of a phone number for logs"""
    if len(phone) <= 7:
        return "****"
    return phone[:3] + "****" + phone[-4:]


def select_template_code(template: SmsTemplate, phone: str) -> str:
    """Domestic template code for +86 numbers, international code otherwise"""
    if phone.startswith(HOME_COUNTRY_CODE):
        return template.template_code
    return template.intl_template_code


def serialize_template_param(message: SendMessageData) -> Optional[str]:
    """
    Compact JSON for TemplateParam, keeping non-ASCII characters literal.

    An omitted payload yields None, so TemplateParam is left out of the
    signed parameters and the form body.
    """
    if 'payload' not in message.model_fields_set:
        return None
    return json.dumps(message.payload, ensure_ascii=False, separators=(',', ':'))


def parse_response_string(body: str) -> SendSmsResponse:
    """
    Parse and validate a SendSms response body.

    Raises:
        InvalidResponseError: If the body is not JSON or misses required fields
    """
    return parse_model(body, SendSmsResponse)


def _general_error(response: SendSmsResponse) -> ProviderGeneralError:
    extra = {}
    if response.BizId is not None:
        extra["BizId"] = response.BizId
    return ProviderGeneralError(
        response.Code,
        response.Message,
        request_id=response.RequestId,
        extra=extra
    )


class AliyunSmsConnector(BaseMessageConnector):
    """Aliyun Short Message Service connector"""

    metadata = DEFAULT_METADATA
    type = ConnectorType.SMS
    config_guard = AliyunSmsConfig

    def __init__(
        self,
        get_config: GetConfig,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS
    ):
        super().__init__(get_config)
        self._client = AliyunSmsClient(http_client=http_client, timeout=timeout)

    async def close(self) -> None:
        """Close HTTP client (call on shutdown)"""
        await self._client.close()

    async def send_message(
        self,
        data: Union[SendMessageData, Mapping[str, Any]],
        config: Optional[ConfigMapping] = None
    ) -> httpx.Response:
        """
        Send one SMS.

        Args:
            data: Destination ('to'), usage type ('type') and template payload
            config: Explicit configuration; resolved by connector id when None

        Returns:
            The provider's HTTP response when Code is 'OK'

        Raises:
            ConnectorConfigError: Configuration failed validation
            TemplateNotFoundError: No template for the usage type
            InvalidResponseError: Response body unparseable or incomplete
            ProviderGeneralError: Provider answered with a non-OK code
        """
        if isinstance(data, SendMessageData):
            message = data
        else:
            message = SendMessageData.model_validate(dict(data))

        raw_config = config if config is not None else await self.resolve_config()
        sms_config = validate_config(raw_config, AliyunSmsConfig)

        template = sms_config.find_template(message.type)
        if template is None:
            logger.error("No Aliyun SMS template for usage type: %s", message.type)
            raise TemplateNotFoundError(message.type)

        phone_masked = mask_phone(message.to)
        try:
            response = await self._client.send_sms(
                {
                    "AccessKeyId": sms_config.access_key_id,
                    "PhoneNumbers": message.to,
                    "SignName": sms_config.sign_name,
                    "TemplateCode": select_template_code(template, message.to),
                    "TemplateParam": serialize_template_param(message),
                },
                sms_config.access_key_secret
            )
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            try:
                result = parse_response_string(e.response.text)
            except InvalidResponseError:
                logger.error(
                    "Aliyun SMS HTTP %s with unreadable body for %s",
                    status_code,
                    phone_masked
                )
                raise
            logger.error(
                "Aliyun SMS HTTP %s for %s: %s - %s",
                status_code,
                phone_masked,
                result.Code,
                result.Message
            )
            raise _general_error(result) from e

        try:
            result = parse_response_string(response.text)
        except InvalidResponseError as e:
            logger.error("Invalid Aliyun SMS response for %s: %s", phone_masked, e.detail)
            raise

        if result.Code != SUCCESS_CODE:
            logger.error(
                "Aliyun SMS send failed for %s: %s - %s",
                phone_masked,
                result.Code,
                result.Message
            )
            raise _general_error(result)

        logger.info("SMS sent successfully to %s for %s", phone_masked, message.type)
        return response


async def create_aliyun_sms_connector(
    get_config: GetConfig,
    http_client: Optional[httpx.AsyncClient] = None,
    timeout: float = DEFAULT_TIMEOUT_SECONDS
) -> AliyunSmsConnector:
    """
    Create the connector with an injected configuration resolver.

    Args:
        get_config: Maps a connector id to its configuration (sync or async)
        http_client: Optional shared httpx.AsyncClient
        timeout: HTTP timeout when the connector creates its own client

    Returns:
        AliyunSmsConnector
    """
    return AliyunSmsConnector(get_config, http_client=http_client, timeout=timeout)
