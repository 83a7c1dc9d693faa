"""Data models for the AWS service clients."""

from .enums import CoreErrorType, HttpMethod, Protocol, SignerType
from .endpoint import Endpoint
from .request import ServiceRequest
from .outcome import AWSServiceError, Outcome, ServiceError
from .operation import OperationSpec, PathLiteral, PathParam, lit, param, rest, rpc

__all__ = [
    "CoreErrorType",
    "HttpMethod",
    "Protocol",
    "SignerType",
    "Endpoint",
    "ServiceRequest",
    "AWSServiceError",
    "Outcome",
    "ServiceError",
    "OperationSpec",
    "PathLiteral",
    "PathParam",
    "lit",
    "param",
    "rest",
    "rpc",
]
