# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Amazon CloudWatch Events client (JSON 1.1 RPC)."""

from ..clients.base import AWSServiceClient
from ..models.enums import Protocol
from ..models.operation import rpc

EVENTS_OPERATIONS = (
    rpc("ActivateEventSource"),
    rpc("CancelReplay"),
    rpc("CreateApiDestination"),
    rpc("CreateArchive"),
    rpc("CreateConnection"),
    rpc("CreateEventBus"),
    rpc("CreatePartnerEventSource"),
    rpc("DeactivateEventSource"),
    rpc("DeauthorizeConnection"),
    rpc("DeleteApiDestination"),
    rpc("DeleteArchive"),
    rpc("DeleteConnection"),
    rpc("DeleteEventBus"),
    rpc("DeletePartnerEventSource"),
    rpc("DeleteRule"),
    rpc("DescribeApiDestination"),
    rpc("DescribeArchive"),
    rpc("DescribeConnection"),
    rpc("DescribeEventBus"),
    rpc("DescribeEventSource"),
    rpc("DescribePartnerEventSource"),
    rpc("DescribeReplay"),
    rpc("DescribeRule"),
    rpc("DisableRule"),
    rpc("EnableRule"),
    rpc("ListApiDestinations"),
    rpc("ListArchives"),
    rpc("ListConnections"),
    rpc("ListEventBuses"),
    rpc("ListEventSources"),
    rpc("ListPartnerEventSourceAccounts"),
    rpc("ListPartnerEventSources"),
    rpc("ListReplays"),
    rpc("ListRuleNamesByTarget"),
    rpc("ListRules"),
    rpc("ListTagsForResource"),
    rpc("ListTargetsByRule"),
    rpc("PutEvents"),
    rpc("PutPartnerEvents"),
    rpc("PutPermission"),
    rpc("PutRule"),
    rpc("PutTargets"),
    rpc("RemovePermission"),
    rpc("RemoveTargets"),
    rpc("StartReplay"),
    rpc("TagResource"),
    rpc("TestEventPattern"),
    rpc("UntagResource"),
    rpc("UpdateApiDestination"),
    rpc("UpdateArchive"),
    rpc("UpdateConnection"),
)


class CloudWatchEventsClient(AWSServiceClient):
    """Client for Amazon CloudWatch Events."""

    SERVICE_NAME = "events"
    BOTOCORE_SERVICE_NAME = "events"
    SERVICE_CLIENT_NAME = "CloudWatch Events"
    PROTOCOL = Protocol.JSON
    OPERATIONS = EVENTS_OPERATIONS
