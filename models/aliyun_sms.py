"""Aliyun SMS Models.

Pydantic models for the Aliyun Short Message Service connector configuration
and the SendSms API response.

@author lycosa9527
@made_by MindSpring Team

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from models.common import SmsTemplateType, UsageType


REQUIRED_TEMPLATE_USAGE_TYPES = [
    UsageType.REGISTER.value,
    UsageType.SIGN_IN.value,
    UsageType.FORGOT_PASSWORD.value,
]


class SmsTemplate(BaseModel):
    """Maps a usage type to the provider template codes."""
    model_config = ConfigDict(populate_by_name=True)

    type: SmsTemplateType = Field(
        SmsTemplateType.VERIFICATION_CODE,
        description="Aliyun template kind"
    )
    usage_type: str = Field(..., alias="usageType", description="Register, SignIn, ForgotPassword, Generic or Test")
    template_code: str = Field(..., alias="templateCode", description="Template code for mainland China numbers")
    intl_template_code: str = Field(..., alias="intlTemplateCode", description="Template code for international numbers")


class AliyunSmsConfig(BaseModel):
    """Connector configuration: credentials, sign name and templates."""
    model_config = ConfigDict(populate_by_name=True)

    access_key_id: str = Field(..., alias="accessKeyId", description="AccessKey ID")
    access_key_secret: str = Field(..., alias="accessKeySecret", description="AccessKey secret")
    sign_name: str = Field(..., alias="signName", description="Approved signature name")
    templates: List[SmsTemplate] = Field(..., description="Templates per usage type")

    @field_validator('templates')
    @classmethod
    def validate_required_usage_types(cls, v):
        """Require templates for every mandatory usage type"""
        provided = {template.usage_type for template in v}
        missing = [
            usage_type for usage_type in REQUIRED_TEMPLATE_USAGE_TYPES
            if usage_type not in provided
        ]
        if missing:
            raise ValueError(
                f"Template with UsageType ({', '.join(missing)}) should be provided!"
            )
        return v

    def find_template(self, usage_type: str) -> Optional[SmsTemplate]:
        """Return the first template configured for usage_type, if any"""
        return next(
            (template for template in self.templates if template.usage_type == usage_type),
            None
        )


class SendSmsResponse(BaseModel):
    """SendSms response body (fields keep the provider's casing)."""
    Code: str = Field(..., description="'OK' on success, otherwise an error code")
    Message: str = Field(..., description="Provider message")
    RequestId: str = Field(..., description="Provider request id")
    BizId: Optional[str] = Field(None, description="Delivery receipt id")
