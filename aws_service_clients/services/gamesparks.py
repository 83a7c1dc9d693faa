# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""GameSparks client (REST-JSON, path dispatch)."""

from ..clients.base import AWSServiceClient
from ..models.enums import HttpMethod, Protocol
from ..models.operation import lit, param, rest

GET, POST, PUT, PATCH, DELETE = (
    HttpMethod.GET,
    HttpMethod.POST,
    HttpMethod.PUT,
    HttpMethod.PATCH,
    HttpMethod.DELETE,
)

GAMESPARKS_OPERATIONS = (
    rest("CreateGame", POST, lit("/game")),
    rest("CreateSnapshot", POST, lit("/game/"), param("GameName"), lit("/snapshot"), required=("GameName",)),
    rest("CreateStage", POST, lit("/game/"), param("GameName"), lit("/stage"), required=("GameName",)),
    rest("DeleteGame", DELETE, lit("/game/"), param("GameName"), required=("GameName",)),
    rest("DeleteStage", DELETE, lit("/game/"), param("GameName"), lit("/stage/"), param("StageName"), required=("GameName", "StageName")),
    rest("DisconnectPlayer", POST, lit("/runtime/game/"), param("GameName"), lit("/stage/"), param("StageName"), lit("/player/"), param("PlayerId"), lit("/disconnect"), required=("GameName", "PlayerId", "StageName")),
    rest("ExportSnapshot", GET, lit("/game/"), param("GameName"), lit("/snapshot/"), param("SnapshotId"), lit("/export"), required=("GameName", "SnapshotId")),
    rest("GetExtension", GET, lit("/extension/"), param("Namespace"), param("Name"), required=("Name", "Namespace")),
    rest("GetExtensionVersion", GET, lit("/extension/"), param("Namespace"), param("Name"), lit("/version/"), param("ExtensionVersion"), required=("ExtensionVersion", "Name", "Namespace")),
    rest("GetGame", GET, lit("/game/"), param("GameName"), required=("GameName",)),
    rest("GetGameConfiguration", GET, lit("/game/"), param("GameName"), lit("/configuration"), required=("GameName",)),
    rest("GetGeneratedCodeJob", GET, lit("/game/"), param("GameName"), lit("/snapshot/"), param("SnapshotId"), lit("/generated-sdk-code-job/"), param("JobId"), required=("GameName", "JobId", "SnapshotId")),
    rest("GetPlayerConnectionStatus", GET, lit("/runtime/game/"), param("GameName"), lit("/stage/"), param("StageName"), lit("/player/"), param("PlayerId"), lit("/connection"), required=("GameName", "PlayerId", "StageName")),
    rest("GetSnapshot", GET, lit("/game/"), param("GameName"), lit("/snapshot/"), param("SnapshotId"), required=("GameName", "SnapshotId")),
    rest("GetStage", GET, lit("/game/"), param("GameName"), lit("/stage/"), param("StageName"), required=("GameName", "StageName")),
    rest("GetStageDeployment", GET, lit("/game/"), param("GameName"), lit("/stage/"), param("StageName"), lit("/deployment"), required=("GameName", "StageName")),
    rest("ImportGameConfiguration", PUT, lit("/game/"), param("GameName"), lit("/configuration"), required=("GameName",)),
    rest("ListExtensionVersions", GET, lit("/extension/"), param("Namespace"), param("Name"), lit("/version"), required=("Name", "Namespace")),
    rest("ListExtensions", GET, lit("/extension")),
    rest("ListGames", GET, lit("/game")),
    rest("ListGeneratedCodeJobs", GET, lit("/game/"), param("GameName"), lit("/snapshot/"), param("SnapshotId"), lit("/generated-sdk-code-jobs"), required=("GameName", "SnapshotId")),
    rest("ListSnapshots", GET, lit("/game/"), param("GameName"), lit("/snapshot"), required=("GameName",)),
    rest("ListStageDeployments", GET, lit("/game/"), param("GameName"), lit("/stage/"), param("StageName"), lit("/deployments"), required=("GameName", "StageName")),
    rest("ListStages", GET, lit("/game/"), param("GameName"), lit("/stage"), required=("GameName",)),
    rest("ListTagsForResource", GET, lit("/tags/"), param("ResourceArn"), required=("ResourceArn",)),
    rest("StartGeneratedCodeJob", POST, lit("/game/"), param("GameName"), lit("/snapshot/"), param("SnapshotId"), lit("/generated-sdk-code-job"), required=("GameName", "SnapshotId")),
    rest("StartStageDeployment", POST, lit("/game/"), param("GameName"), lit("/stage/"), param("StageName"), lit("/deployment"), required=("GameName", "StageName")),
    rest("TagResource", POST, lit("/tags/"), param("ResourceArn"), required=("ResourceArn",)),
    rest("UntagResource", DELETE, lit("/tags/"), param("ResourceArn"), required=("ResourceArn", "TagKeys")),
    rest("UpdateGame", PATCH, lit("/game/"), param("GameName"), required=("GameName",)),
    rest("UpdateGameConfiguration", PATCH, lit("/game/"), param("GameName"), lit("/configuration"), required=("GameName",)),
    rest("UpdateSnapshot", PATCH, lit("/game/"), param("GameName"), lit("/snapshot/"), param("SnapshotId"), required=("GameName", "SnapshotId")),
    rest("UpdateStage", PATCH, lit("/game/"), param("GameName"), lit("/stage/"), param("StageName"), required=("GameName", "StageName")),
)


class GameSparksClient(AWSServiceClient):
    """Client for Amazon GameSparks."""

    SERVICE_NAME = "gamesparks"
    SERVICE_CLIENT_NAME = "GameSparks"
    PROTOCOL = Protocol.REST_JSON
    VALIDATE_REQUIRED = True
    OPERATIONS = GAMESPARKS_OPERATIONS
