# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Amazon CloudWatch client (query protocol, XML responses)."""

from ..clients.base import AWSServiceClient, QueryPresignMixin
from ..models.enums import Protocol
from ..models.operation import rpc

CLOUDWATCH_OPERATIONS = (
    rpc("DeleteAlarms"),
    rpc("DeleteAnomalyDetector"),
    rpc("DeleteDashboards"),
    rpc("DeleteInsightRules"),
    rpc("DeleteMetricStream"),
    rpc("DescribeAlarmHistory"),
    rpc("DescribeAlarms"),
    rpc("DescribeAlarmsForMetric"),
    rpc("DescribeAnomalyDetectors"),
    rpc("DescribeInsightRules"),
    rpc("DisableAlarmActions"),
    rpc("DisableInsightRules"),
    rpc("EnableAlarmActions"),
    rpc("EnableInsightRules"),
    rpc("GetDashboard"),
    rpc("GetInsightRuleReport"),
    rpc("GetMetricData"),
    rpc("GetMetricStatistics"),
    rpc("GetMetricStream"),
    rpc("GetMetricWidgetImage"),
    rpc("ListDashboards"),
    rpc("ListManagedInsightRules"),
    rpc("ListMetricStreams"),
    rpc("ListMetrics"),
    rpc("ListTagsForResource"),
    rpc("PutAnomalyDetector"),
    rpc("PutCompositeAlarm"),
    rpc("PutDashboard"),
    rpc("PutInsightRule"),
    rpc("PutManagedInsightRules"),
    rpc("PutMetricAlarm"),
    rpc("PutMetricData"),
    rpc("PutMetricStream"),
    rpc("SetAlarmState"),
    rpc("StartMetricStreams"),
    rpc("StopMetricStreams"),
    rpc("TagResource"),
    rpc("UntagResource"),
)


class CloudWatchClient(QueryPresignMixin, AWSServiceClient):
    """Client for Amazon CloudWatch."""

    SERVICE_NAME = "monitoring"
    BOTOCORE_SERVICE_NAME = "cloudwatch"
    SERVICE_CLIENT_NAME = "CloudWatch"
    PROTOCOL = Protocol.QUERY
    OPERATIONS = CLOUDWATCH_OPERATIONS
