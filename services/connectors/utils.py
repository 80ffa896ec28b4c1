"""
Connector helpers for config validation and JSON parsing.

Both helpers translate library exceptions into ConnectorError subclasses so
connectors only ever surface the connector error model.
"""
from typing import Any, Mapping, Type, TypeVar
import json
import logging

from pydantic import BaseModel, ValidationError

from services.connectors.errors import ConnectorConfigError, InvalidResponseError

logger = logging.getLogger(__name__)

ModelT = TypeVar('ModelT', bound=BaseModel)


def validate_config(config: Any, guard: Type[ModelT]) -> ModelT:
    """
    Validate a raw connector configuration against its guard model.

    Args:
        config: Raw configuration mapping (or an already-built guard instance)
        guard: Pydantic model describing a valid configuration

    Returns:
        Validated configuration model

    Raises:
        ConnectorConfigError: If the configuration does not match the guard
    """
    if isinstance(config, guard):
        return config
    if not isinstance(config, Mapping):
        raise ConnectorConfigError(
            f"expected a mapping, got {type(config).__name__}"
        )
    try:
        return guard.model_validate(dict(config))
    except ValidationError as e:
        detail = _format_validation_error(e)
        logger.error("Connector config validation failed: %s", detail)
        raise ConnectorConfigError(detail) from e


def parse_json(text: str) -> Any:
    """
    Parse a JSON document, raising InvalidResponseError on malformed input.

    Args:
        text: Raw response body

    Returns:
        Decoded JSON value
    """
    try:
        return json.loads(text)
    except (ValueError, TypeError) as e:
        raise InvalidResponseError(f"body is not valid JSON: {e}", body=text) from e


def parse_model(text: str, model: Type[ModelT]) -> ModelT:
    """
    Parse a JSON body and validate it against model.

    Raises:
        InvalidResponseError: If the body is not JSON or fails validation
    """
    data = parse_json(text)
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise InvalidResponseError(_format_validation_error(e), body=text) from e


def _format_validation_error(error: ValidationError) -> str:
    """Flatten pydantic errors into 'field: message' pairs"""
    parts = []
    for item in error.errors():
        location = '.'.join(str(part) for part in item.get('loc', ())) or '<root>'
        parts.append(f"{location}: {item.get('msg', 'invalid')}")
    return '; '.join(parts)
