"""Connector interface.

Defines what a host platform expects from a loaded connector, and the
configuration resolver connectors are constructed with.

@author lycosa9527
@made_by MindSpring Team

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Mapping, Optional, Type, Union
import inspect

import httpx
from pydantic import BaseModel

from models.common import ConnectorType
from models.connector import ConnectorMetadata, SendMessageData


ConfigMapping = Mapping[str, Any]

# Sync or async function mapping a connector id to its raw configuration
GetConfig = Callable[[str], Union[ConfigMapping, Awaitable[ConfigMapping]]]


class BaseMessageConnector(ABC):
    """Abstract base class for connectors that deliver messages"""

    metadata: ConnectorMetadata
    type: ConnectorType
    config_guard: Type[BaseModel]

    def __init__(self, get_config: GetConfig):
        self._get_config = get_config

    async def resolve_config(self) -> ConfigMapping:
        """Fetch this connector's raw configuration from the injected resolver"""
        result = self._get_config(self.metadata.id)
        if inspect.isawaitable(result):
            result = await result
        return result

    @abstractmethod
    async def send_message(
        self,
        data: Union[SendMessageData, Mapping[str, Any]],
        config: Optional[ConfigMapping] = None
    ) -> httpx.Response:
        """Send one message, using config if given, else the resolved config"""

    async def close(self) -> None:
        """Release resources held by the connector"""
