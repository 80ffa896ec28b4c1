"""Services package for the Aliyun SMS connector.

This package contains:
- Connector kit (error model, config validation, connector interface)
- Aliyun SMS (request signing, HTTP client, connector)
- Infrastructure services (logging)

Import directly from subpackages:
    from services.aliyun_sms import create_aliyun_sms_connector
    from services.connectors import ConnectorError
"""

__all__ = []
