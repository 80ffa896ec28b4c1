"""
Connector Kit

Error model, config validation helpers and the base interface shared by
message connectors.
"""

from .base import BaseMessageConnector, ConfigMapping, GetConfig
from .errors import (
    ConnectorConfigError,
    ConnectorError,
    ConnectorErrorCode,
    InvalidResponseError,
    ProviderGeneralError,
    TemplateNotFoundError,
)
from .utils import parse_json, parse_model, validate_config

__all__ = [
    'BaseMessageConnector',
    'ConfigMapping',
    'GetConfig',
    'ConnectorConfigError',
    'ConnectorError',
    'ConnectorErrorCode',
    'InvalidResponseError',
    'ProviderGeneralError',
    'TemplateNotFoundError',
    'parse_json',
    'parse_model',
    'validate_config',
]
