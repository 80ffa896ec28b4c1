"""
Aliyun SMS Constants

Endpoint, static SendSms parameters and connector metadata.

@author lycosa9527
@made_by MindSpring Team

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
from config.sms_config import ALIYUN_SMS_CONNECTOR_ID
from models.common import ConnectorConfigFormItemType, UsageType
from models.connector import ConnectorConfigFormItem, ConnectorMetadata


# ============================================================================
# API settings
# ============================================================================

ENDPOINT = "https://dysmsapi.aliyuncs.com/"

SEND_SMS_ACTION = "SendSms"

STATIC_CONFIGS = {
    "Format": "json",
    "RegionId": "cn-hangzhou",
    "SignatureMethod": "HMAC-SHA1",
    "SignatureVersion": "1.0",
    "Version": "2017-05-25",
}

# Numbers with this prefix get the domestic template code
HOME_COUNTRY_CODE = "86"

SUCCESS_CODE = "OK"

DEFAULT_TIMEOUT_SECONDS = 10.0


# ============================================================================
# Connector metadata
# ============================================================================

_PLACEHOLDER_CODE = "<template-code>"

DEFAULT_METADATA = ConnectorMetadata(
    id=ALIYUN_SMS_CONNECTOR_ID,
    target="aliyun-sms",
    platform=None,
    name={
        "en": "Aliyun Short Message Service",
        "zh-CN": "阿里云短信服务",
        "tr-TR": "Aliyun SMS Servisi",
        "ko": "Aliyun Short 메세지 서비스",
    },
    logo=None,
    logo_dark=None,
    description={
        "en": "Aliyun provides cloud computing services to online businesses.",
        "zh-CN": "阿里云是全球性的云服务提供商。",
        "tr-TR": "Aliyun, çevrimiçi işletmelere bulut bilişim hizmetleri sunmaktadır.",
        "ko": "Aliyun는 온라인 비지니스를 위해 클라우딩 컴퓨팅 서비스를 제공합니다.",
    },
    readme="./README.md",
    form_items=[
        ConnectorConfigFormItem(
            key="accessKeyId",
            label="Access Key ID",
            type=ConnectorConfigFormItemType.TEXT,
            required=True,
            placeholder="<access-key-id>",
        ),
        ConnectorConfigFormItem(
            key="accessKeySecret",
            label="Access Key Secret",
            type=ConnectorConfigFormItemType.TEXT,
            required=True,
            placeholder="<access-key-secret>",
        ),
        ConnectorConfigFormItem(
            key="signName",
            label="Signature Name",
            type=ConnectorConfigFormItemType.TEXT,
            required=True,
            placeholder="<signature-name>",
        ),
        ConnectorConfigFormItem(
            key="templates",
            label="Templates",
            type=ConnectorConfigFormItemType.JSON,
            required=True,
            default_value=[
                {
                    "usageType": usage_type.value,
                    "templateCode": _PLACEHOLDER_CODE,
                    "intlTemplateCode": _PLACEHOLDER_CODE,
                }
                for usage_type in (
                    UsageType.SIGN_IN,
                    UsageType.REGISTER,
                    UsageType.FORGOT_PASSWORD,
                    UsageType.GENERIC,
                    UsageType.TEST,
                )
            ],
        ),
    ],
)
