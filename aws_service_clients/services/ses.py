# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Amazon SES client (query protocol, XML responses)."""

from ..clients.base import AWSServiceClient, QueryPresignMixin
from ..models.enums import Protocol
from ..models.operation import rpc

SES_OPERATIONS = (
    rpc("CloneReceiptRuleSet"),
    rpc("CreateConfigurationSet"),
    rpc("CreateConfigurationSetEventDestination"),
    rpc("CreateConfigurationSetTrackingOptions"),
    rpc("CreateCustomVerificationEmailTemplate"),
    rpc("CreateReceiptFilter"),
    rpc("CreateReceiptRule"),
    rpc("CreateReceiptRuleSet"),
    rpc("CreateTemplate"),
    rpc("DeleteConfigurationSet"),
    rpc("DeleteConfigurationSetEventDestination"),
    rpc("DeleteConfigurationSetTrackingOptions"),
    rpc("DeleteCustomVerificationEmailTemplate"),
    rpc("DeleteIdentity"),
    rpc("DeleteIdentityPolicy"),
    rpc("DeleteReceiptFilter"),
    rpc("DeleteReceiptRule"),
    rpc("DeleteReceiptRuleSet"),
    rpc("DeleteTemplate"),
    rpc("DeleteVerifiedEmailAddress"),
    rpc("DescribeActiveReceiptRuleSet"),
    rpc("DescribeConfigurationSet"),
    rpc("DescribeReceiptRule"),
    rpc("DescribeReceiptRuleSet"),
    rpc("GetAccountSendingEnabled"),
    rpc("GetCustomVerificationEmailTemplate"),
    rpc("GetIdentityDkimAttributes"),
    rpc("GetIdentityMailFromDomainAttributes"),
    rpc("GetIdentityNotificationAttributes"),
    rpc("GetIdentityPolicies"),
    rpc("GetIdentityVerificationAttributes"),
    rpc("GetSendQuota"),
    rpc("GetSendStatistics"),
    rpc("GetTemplate"),
    rpc("ListConfigurationSets"),
    rpc("ListCustomVerificationEmailTemplates"),
    rpc("ListIdentities"),
    rpc("ListIdentityPolicies"),
    rpc("ListReceiptFilters"),
    rpc("ListReceiptRuleSets"),
    rpc("ListTemplates"),
    rpc("ListVerifiedEmailAddresses"),
    rpc("PutConfigurationSetDeliveryOptions"),
    rpc("PutIdentityPolicy"),
    rpc("ReorderReceiptRuleSet"),
    rpc("SendBounce"),
    rpc("SendBulkTemplatedEmail"),
    rpc("SendCustomVerificationEmail"),
    rpc("SendEmail"),
    rpc("SendRawEmail"),
    rpc("SendTemplatedEmail"),
    rpc("SetActiveReceiptRuleSet"),
    rpc("SetIdentityDkimEnabled"),
    rpc("SetIdentityFeedbackForwardingEnabled"),
    rpc("SetIdentityHeadersInNotificationsEnabled"),
    rpc("SetIdentityMailFromDomain"),
    rpc("SetIdentityNotificationTopic"),
    rpc("SetReceiptRulePosition"),
    rpc("TestRenderTemplate"),
    rpc("UpdateAccountSendingEnabled"),
    rpc("UpdateConfigurationSetEventDestination"),
    rpc("UpdateConfigurationSetReputationMetricsEnabled"),
    rpc("UpdateConfigurationSetSendingEnabled"),
    rpc("UpdateConfigurationSetTrackingOptions"),
    rpc("UpdateCustomVerificationEmailTemplate"),
    rpc("UpdateReceiptRule"),
    rpc("UpdateTemplate"),
    rpc("VerifyDomainDkim"),
    rpc("VerifyDomainIdentity"),
    rpc("VerifyEmailAddress"),
    rpc("VerifyEmailIdentity"),
)


class SESClient(QueryPresignMixin, AWSServiceClient):
    """Client for Amazon Simple Email Service."""

    SERVICE_NAME = "email"
    BOTOCORE_SERVICE_NAME = "ses"
    SERVICE_CLIENT_NAME = "SES"
    PROTOCOL = Protocol.QUERY
    OPERATIONS = SES_OPERATIONS
