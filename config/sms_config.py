"""Aliyun SMS configuration settings.

This module provides the environment-backed credentials and templates for the
Aliyun Short Message Service connector, and a resolver that turns them into a
connector configuration mapping.
"""
import json
import logging
from typing import TYPE_CHECKING, Any, Dict, List

logger = logging.getLogger(__name__)

ALIYUN_SMS_CONNECTOR_ID = 'aliyun-short-message-service'


class AliyunSmsConfigMixin:
    """Mixin class for Aliyun SMS configuration properties.

    This mixin expects the class to inherit from BaseConfig or provide
    a _get_cached_value method.
    """
    if TYPE_CHECKING:
        def _get_cached_value(self, _key: str, _default: Any = None) -> Any:
            """Type stub: method provided by BaseConfig."""
            return _default

    @property
    def ALIYUN_SMS_ACCESS_KEY_ID(self) -> str:
        """Aliyun AccessKey ID used to sign SendSms requests"""
        return self._get_cached_value('ALIYUN_SMS_ACCESS_KEY_ID', '').strip()

    @property
    def ALIYUN_SMS_ACCESS_KEY_SECRET(self) -> str:
        """Aliyun AccessKey secret (HMAC key, never logged)"""
        return self._get_cached_value('ALIYUN_SMS_ACCESS_KEY_SECRET', '').strip()

    @property
    def ALIYUN_SMS_SIGN_NAME(self) -> str:
        """Approved SMS signature name shown to recipients"""
        return self._get_cached_value('ALIYUN_SMS_SIGN_NAME', '').strip()

    @property
    def ALIYUN_SMS_TEMPLATES(self) -> List[Dict[str, Any]]:
        """
        Message templates as a JSON list.

        Example:
            [{"usageType": "SignIn", "templateCode": "SMS_1", "intlTemplateCode": "SMS_2"}]

        Malformed JSON is logged and treated as an empty list, which the
        connector then rejects as an incomplete configuration.
        """
        raw = self._get_cached_value('ALIYUN_SMS_TEMPLATES', '[]')
        try:
            templates = json.loads(raw)
        except (ValueError, TypeError) as e:
            logger.warning("Invalid ALIYUN_SMS_TEMPLATES JSON, using []: %s", e)
            return []
        if not isinstance(templates, list):
            logger.warning("ALIYUN_SMS_TEMPLATES must be a JSON list, using []")
            return []
        return templates

    @property
    def ALIYUN_SMS_TIMEOUT(self) -> float:
        """HTTP timeout for SendSms calls in seconds"""
        try:
            val = float(self._get_cached_value('ALIYUN_SMS_TIMEOUT', '10'))
            if val <= 0:
                logger.warning("ALIYUN_SMS_TIMEOUT %s must be positive, using 10", val)
                return 10.0
            return val
        except (ValueError, TypeError):
            logger.warning("Invalid ALIYUN_SMS_TIMEOUT, using 10")
            return 10.0

    @property
    def is_aliyun_sms_configured(self) -> bool:
        """Check whether Aliyun credentials and sign name are present"""
        return all([
            self.ALIYUN_SMS_ACCESS_KEY_ID,
            self.ALIYUN_SMS_ACCESS_KEY_SECRET,
            self.ALIYUN_SMS_SIGN_NAME,
        ])

    def get_connector_config(self, connector_id: str) -> Dict[str, Any]:
        """
        Resolve a connector configuration from the environment.

        Args:
            connector_id: Connector metadata id

        Returns:
            Configuration mapping in the connector's wire (camelCase) form

        Raises:
            KeyError: If no configuration is registered for connector_id
        """
        if connector_id != ALIYUN_SMS_CONNECTOR_ID:
            raise KeyError(f"No configuration registered for connector: {connector_id}")

        if not self.is_aliyun_sms_configured:
            logger.warning("Aliyun SMS credentials not fully configured")

        return {
            'accessKeyId': self.ALIYUN_SMS_ACCESS_KEY_ID,
            'accessKeySecret': self.ALIYUN_SMS_ACCESS_KEY_SECRET,
            'signName': self.ALIYUN_SMS_SIGN_NAME,
            'templates': self.ALIYUN_SMS_TEMPLATES,
        }
