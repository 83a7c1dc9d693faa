# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Amazon Pinpoint SMS and Voice V2 client (JSON 1.0 RPC)."""

from ..clients.base import AWSServiceClient
from ..models.enums import Protocol
from ..models.operation import rpc

SMS_VOICE_OPERATIONS = (
    rpc("AssociateOriginationIdentity"),
    rpc("CreateConfigurationSet"),
    rpc("CreateEventDestination"),
    rpc("CreateOptOutList"),
    rpc("CreatePool"),
    rpc("DeleteConfigurationSet"),
    rpc("DeleteDefaultMessageType"),
    rpc("DeleteDefaultSenderId"),
    rpc("DeleteEventDestination"),
    rpc("DeleteKeyword"),
    rpc("DeleteOptOutList"),
    rpc("DeleteOptedOutNumber"),
    rpc("DeletePool"),
    rpc("DeleteTextMessageSpendLimitOverride"),
    rpc("DeleteVoiceMessageSpendLimitOverride"),
    rpc("DescribeAccountAttributes"),
    rpc("DescribeAccountLimits"),
    rpc("DescribeConfigurationSets"),
    rpc("DescribeKeywords"),
    rpc("DescribeOptOutLists"),
    rpc("DescribeOptedOutNumbers"),
    rpc("DescribePhoneNumbers"),
    rpc("DescribePools"),
    rpc("DescribeSenderIds"),
    rpc("DescribeSpendLimits"),
    rpc("DisassociateOriginationIdentity"),
    rpc("ListPoolOriginationIdentities"),
    rpc("ListTagsForResource"),
    rpc("PutKeyword"),
    rpc("PutOptedOutNumber"),
    rpc("ReleasePhoneNumber"),
    rpc("RequestPhoneNumber"),
    rpc("SendTextMessage"),
    rpc("SendVoiceMessage"),
    rpc("SetDefaultMessageType"),
    rpc("SetDefaultSenderId"),
    rpc("SetTextMessageSpendLimitOverride"),
    rpc("SetVoiceMessageSpendLimitOverride"),
    rpc("TagResource"),
    rpc("UntagResource"),
    rpc("UpdateEventDestination"),
    rpc("UpdatePhoneNumber"),
    rpc("UpdatePool"),
)


class PinpointSMSVoiceV2Client(AWSServiceClient):
    """Client for Amazon Pinpoint SMS and Voice, version 2."""

    SERVICE_NAME = "sms-voice"
    BOTOCORE_SERVICE_NAME = "pinpoint-sms-voice-v2"
    SERVICE_CLIENT_NAME = "Pinpoint SMS Voice V2"
    PROTOCOL = Protocol.JSON
    OPERATIONS = SMS_VOICE_OPERATIONS
