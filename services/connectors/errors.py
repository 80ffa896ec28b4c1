"""
Connector-specific exceptions.

Every failure a connector reports to its caller is a ConnectorError carrying
a ConnectorErrorCode, so callers can branch on the kind of failure without
parsing messages. Transport errors from httpx are never wrapped.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ConnectorErrorCode(str, Enum):
    """Machine-readable connector error kinds"""
    GENERAL = "general"
    INVALID_CONFIG = "invalid_config"
    TEMPLATE_NOT_FOUND = "template_not_found"
    INVALID_RESPONSE = "invalid_response"


class ConnectorError(Exception):
    """Base exception for connector errors."""

    def __init__(
        self,
        message: str,
        code: ConnectorErrorCode = ConnectorErrorCode.GENERAL,
        data: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize connector error.

        Args:
            message: Human-readable error message
            code: Machine-readable error kind
            data: Additional context (provider code, validation detail, etc.)
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.data = data or {}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value!r}, message={self.message!r})"


class ConnectorConfigError(ConnectorError):
    """Raised when a connector configuration fails validation."""

    def __init__(self, detail: str, message: Optional[str] = None):
        super().__init__(
            message or f"Invalid connector config: {detail}",
            code=ConnectorErrorCode.INVALID_CONFIG,
            data={"detail": detail}
        )
        self.detail = detail


class TemplateNotFoundError(ConnectorError):
    """Raised when no template is configured for the requested usage type."""

    def __init__(self, usage_type: str, message: Optional[str] = None):
        super().__init__(
            message or "Cannot find template!",
            code=ConnectorErrorCode.TEMPLATE_NOT_FOUND,
            data={"usage_type": usage_type}
        )
        self.usage_type = usage_type


class InvalidResponseError(ConnectorError):
    """Raised when a provider response is not JSON or misses required fields."""

    def __init__(self, detail: str, body: Optional[str] = None, message: Optional[str] = None):
        super().__init__(
            message or f"Invalid provider response: {detail}",
            code=ConnectorErrorCode.INVALID_RESPONSE,
            data={"detail": detail, "body": body}
        )
        self.detail = detail
        self.body = body


class ProviderGeneralError(ConnectorError):
    """Raised when the provider answers with a well-formed, non-OK response."""

    def __init__(
        self,
        provider_code: str,
        error_description: str,
        request_id: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None
    ):
        data: Dict[str, Any] = {
            "errorDescription": error_description,
            "Code": provider_code,
        }
        if request_id is not None:
            data["RequestId"] = request_id
        data.update(extra or {})

        super().__init__(
            f"{provider_code}: {error_description}",
            code=ConnectorErrorCode.GENERAL,
            data=data
        )
        self.provider_code = provider_code
        self.error_description = error_description
        self.request_id = request_id
