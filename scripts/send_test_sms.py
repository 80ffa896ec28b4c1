"""
Send one SMS through the Aliyun connector using the environment configuration.

Reads ALIYUN_SMS_* variables (or .env), builds the connector and sends a
message with the given usage type and JSON payload.

Usage:
    python scripts/send_test_sms.py --phone 8613800000000
    python scripts/send_test_sms.py --phone 8613800000000 --usage-type SignIn --payload '{"code": "123456"}'
"""
import argparse
import asyncio
import importlib
import json
import logging
import sys
from pathlib import Path

# Add project root to path before importing project modules
_project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_project_root))

# Dynamic import to avoid Ruff E402 warning
_settings = importlib.import_module('config.settings')
_logging_config = importlib.import_module('services.infrastructure.utils.logging_config')
_connector = importlib.import_module('services.aliyun_sms.connector')
_errors = importlib.import_module('services.connectors.errors')

config = _settings.config
setup_logging = _logging_config.setup_logging
create_aliyun_sms_connector = _connector.create_aliyun_sms_connector
ConnectorError = _errors.ConnectorError

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Send an SMS through Aliyun Short Message Service")
    parser.add_argument('--phone', required=True, help="Destination number with country code, e.g. 8613800000000")
    parser.add_argument('--usage-type', default='Test', help="Template usage type (default: Test)")
    parser.add_argument('--payload', default='{"code": "123456"}', help="Template parameters as JSON")
    parser.add_argument('--log-level', default=None, help="Override LOG_LEVEL")
    return parser.parse_args(argv)


async def send(phone: str, usage_type: str, payload) -> int:
    """Send the message and return a process exit code."""
    connector = await create_aliyun_sms_connector(
        config.get_connector_config,
        timeout=config.ALIYUN_SMS_TIMEOUT
    )
    try:
        response = await connector.send_message({'to': phone, 'type': usage_type, 'payload': payload})
    except ConnectorError as e:
        logger.error("Send failed [%s]: %s", e.code.value, e.message)
        return 1
    finally:
        await connector.close()

    logger.info("Provider response: %s", response.text)
    return 0


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)
    logger.info("Aliyun SMS connector v%s", config.version)

    try:
        payload = json.loads(args.payload)
    except ValueError as e:
        logger.error("--payload is not valid JSON: %s", e)
        return 2

    if not config.is_aliyun_sms_configured:
        logger.warning("ALIYUN_SMS_* credentials are incomplete; the send will be rejected")

    return asyncio.run(send(args.phone, args.usage_type, payload))


if __name__ == '__main__':
    sys.exit(main())
