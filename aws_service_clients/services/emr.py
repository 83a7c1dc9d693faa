# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Amazon EMR client (JSON 1.1 RPC)."""

from ..clients.base import AWSServiceClient
from ..models.enums import Protocol
from ..models.operation import rpc

EMR_OPERATIONS = (
    rpc("AddInstanceFleet"),
    rpc("AddInstanceGroups"),
    rpc("AddJobFlowSteps"),
    rpc("AddTags"),
    rpc("CancelSteps"),
    rpc("CreateSecurityConfiguration"),
    rpc("CreateStudio"),
    rpc("CreateStudioSessionMapping"),
    rpc("DeleteSecurityConfiguration"),
    rpc("DeleteStudio"),
    rpc("DeleteStudioSessionMapping"),
    rpc("DescribeCluster"),
    rpc("DescribeNotebookExecution"),
    rpc("DescribeReleaseLabel"),
    rpc("DescribeSecurityConfiguration"),
    rpc("DescribeStep"),
    rpc("DescribeStudio"),
    rpc("GetAutoTerminationPolicy"),
    rpc("GetBlockPublicAccessConfiguration"),
    rpc("GetManagedScalingPolicy"),
    rpc("GetStudioSessionMapping"),
    rpc("ListBootstrapActions"),
    rpc("ListClusters"),
    rpc("ListInstanceFleets"),
    rpc("ListInstanceGroups"),
    rpc("ListInstances"),
    rpc("ListNotebookExecutions"),
    rpc("ListReleaseLabels"),
    rpc("ListSecurityConfigurations"),
    rpc("ListSteps"),
    rpc("ListStudioSessionMappings"),
    rpc("ListStudios"),
    rpc("ModifyCluster"),
    rpc("ModifyInstanceFleet"),
    rpc("ModifyInstanceGroups"),
    rpc("PutAutoScalingPolicy"),
    rpc("PutAutoTerminationPolicy"),
    rpc("PutBlockPublicAccessConfiguration"),
    rpc("PutManagedScalingPolicy"),
    rpc("RemoveAutoScalingPolicy"),
    rpc("RemoveAutoTerminationPolicy"),
    rpc("RemoveManagedScalingPolicy"),
    rpc("RemoveTags"),
    rpc("RunJobFlow"),
    rpc("SetTerminationProtection"),
    rpc("SetVisibleToAllUsers"),
    rpc("StartNotebookExecution"),
    rpc("StopNotebookExecution"),
    rpc("TerminateJobFlows"),
    rpc("UpdateStudio"),
    rpc("UpdateStudioSessionMapping"),
)


class EMRClient(AWSServiceClient):
    """Client for Amazon EMR."""

    SERVICE_NAME = "elasticmapreduce"
    BOTOCORE_SERVICE_NAME = "emr"
    SERVICE_CLIENT_NAME = "EMR"
    PROTOCOL = Protocol.JSON
    OPERATIONS = EMR_OPERATIONS
