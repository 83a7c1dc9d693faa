"""Service client classes and their operation tables."""

from .cloudwatch import CloudWatchClient
from .cloudwatch_events import CloudWatchEventsClient
from .databrew import GlueDataBrewClient
from .emr import EMRClient
from .gamesparks import GameSparksClient
from .iotfleetwise import IoTFleetWiseClient
from .pinpoint_sms_voice_v2 import PinpointSMSVoiceV2Client
from .ses import SESClient

# Service name -> client class
CLIENT_CLASSES = {
    cls.SERVICE_NAME: cls
    for cls in (
        GlueDataBrewClient,
        EMRClient,
        SESClient,
        CloudWatchEventsClient,
        GameSparksClient,
        IoTFleetWiseClient,
        CloudWatchClient,
        PinpointSMSVoiceV2Client,
    )
}

__all__ = [
    "CLIENT_CLASSES",
    "CloudWatchClient",
    "CloudWatchEventsClient",
    "GlueDataBrewClient",
    "EMRClient",
    "GameSparksClient",
    "IoTFleetWiseClient",
    "PinpointSMSVoiceV2Client",
    "SESClient",
]
