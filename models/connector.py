"""Connector Models.

Pydantic models shared by all connectors: metadata describing the connector
and its configuration form, and the generic outbound message request.

@author lycosa9527
@made_by MindSpring Team

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from models.common import ConnectorConfigFormItemType


class ConnectorConfigFormItem(BaseModel):
    """One field of a connector configuration form."""
    model_config = ConfigDict(populate_by_name=True)

    key: str = Field(..., description="Configuration key the field writes to")
    label: str = Field(..., description="Human readable label")
    type: ConnectorConfigFormItemType = Field(..., description="Input widget type")
    required: bool = Field(False, description="Whether a value must be provided")
    placeholder: Optional[str] = Field(None, description="Placeholder text")
    default_value: Optional[Any] = Field(None, alias="defaultValue", description="Pre-filled value")


class ConnectorMetadata(BaseModel):
    """Static description of a connector."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Unique connector id, also the config lookup key")
    target: str = Field(..., description="Identity provider target name")
    platform: Optional[str] = Field(None, description="Platform restriction (None for any)")
    name: Dict[str, str] = Field(..., description="Localized display name, keyed by locale")
    logo: Optional[str] = Field(None, description="Logo path")
    logo_dark: Optional[str] = Field(None, alias="logoDark", description="Dark mode logo path")
    description: Dict[str, str] = Field(..., description="Localized description, keyed by locale")
    readme: Optional[str] = Field(None, description="Readme path")
    form_items: List[ConnectorConfigFormItem] = Field(
        default_factory=list,
        alias="formItems",
        description="Configuration form definition"
    )


class SendMessageData(BaseModel):
    """Generic outbound message request handed to a connector."""
    to: str = Field(..., min_length=1, description="Destination phone number with country code prefix")
    type: str = Field(..., description="Usage type tag, e.g. 'SignIn'")
    payload: Any = Field(None, description="Template parameters, serialized as JSON")
