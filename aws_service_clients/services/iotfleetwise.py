# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""AWS IoT FleetWise client (JSON 1.0 RPC)."""

from ..clients.base import AWSServiceClient
from ..models.enums import Protocol
from ..models.operation import rpc

IOTFLEETWISE_OPERATIONS = (
    rpc("AssociateVehicleFleet"),
    rpc("BatchCreateVehicle"),
    rpc("BatchUpdateVehicle"),
    rpc("CreateCampaign"),
    rpc("CreateDecoderManifest"),
    rpc("CreateFleet"),
    rpc("CreateModelManifest"),
    rpc("CreateSignalCatalog"),
    rpc("CreateVehicle"),
    rpc("DeleteCampaign"),
    rpc("DeleteDecoderManifest"),
    rpc("DeleteFleet"),
    rpc("DeleteModelManifest"),
    rpc("DeleteSignalCatalog"),
    rpc("DeleteVehicle"),
    rpc("DisassociateVehicleFleet"),
    rpc("GetCampaign"),
    rpc("GetDecoderManifest"),
    rpc("GetFleet"),
    rpc("GetLoggingOptions"),
    rpc("GetModelManifest"),
    rpc("GetRegisterAccountStatus"),
    rpc("GetSignalCatalog"),
    rpc("GetVehicle"),
    rpc("GetVehicleStatus"),
    rpc("ImportDecoderManifest"),
    rpc("ImportSignalCatalog"),
    rpc("ListCampaigns"),
    rpc("ListDecoderManifestNetworkInterfaces"),
    rpc("ListDecoderManifestSignals"),
    rpc("ListDecoderManifests"),
    rpc("ListFleets"),
    rpc("ListFleetsForVehicle"),
    rpc("ListModelManifestNodes"),
    rpc("ListModelManifests"),
    rpc("ListSignalCatalogNodes"),
    rpc("ListSignalCatalogs"),
    rpc("ListTagsForResource"),
    rpc("ListVehicles"),
    rpc("ListVehiclesInFleet"),
    rpc("PutLoggingOptions"),
    rpc("RegisterAccount"),
    rpc("TagResource"),
    rpc("UntagResource"),
    rpc("UpdateCampaign"),
    rpc("UpdateDecoderManifest"),
    rpc("UpdateFleet"),
    rpc("UpdateModelManifest"),
    rpc("UpdateSignalCatalog"),
    rpc("UpdateVehicle"),
)


class IoTFleetWiseClient(AWSServiceClient):
    """Client for AWS IoT FleetWise."""

    SERVICE_NAME = "iotfleetwise"
    BOTOCORE_SERVICE_NAME = "iotfleetwise"
    SERVICE_CLIENT_NAME = "IoTFleetWise"
    PROTOCOL = Protocol.JSON
    OPERATIONS = IOTFLEETWISE_OPERATIONS
