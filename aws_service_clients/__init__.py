"""Python clients for AWS DataBrew, EMR, SES, CloudWatch Events, GameSparks,
IoT FleetWise, CloudWatch and Pinpoint SMS Voice V2."""

__version__ = "0.1.0"

from .config import Settings, settings
from .models import AWSServiceError, CoreErrorType, Outcome, ServiceError, ServiceRequest
from .clients import AWSServiceClient, AsyncCallerContext, ClientFactory, UnknownOperationError
from .endpoints import EndpointProvider, EndpointResolutionError
from .services import (
    CLIENT_CLASSES,
    CloudWatchClient,
    CloudWatchEventsClient,
    EMRClient,
    GameSparksClient,
    GlueDataBrewClient,
    IoTFleetWiseClient,
    PinpointSMSVoiceV2Client,
    SESClient,
)

__all__ = [
    "__version__",
    "Settings",
    "settings",
    "AWSServiceError",
    "CoreErrorType",
    "Outcome",
    "ServiceError",
    "ServiceRequest",
    "AWSServiceClient",
    "AsyncCallerContext",
    "ClientFactory",
    "UnknownOperationError",
    "EndpointProvider",
    "EndpointResolutionError",
    "CLIENT_CLASSES",
    "CloudWatchClient",
    "CloudWatchEventsClient",
    "EMRClient",
    "GameSparksClient",
    "GlueDataBrewClient",
    "IoTFleetWiseClient",
    "PinpointSMSVoiceV2Client",
    "SESClient",
]
