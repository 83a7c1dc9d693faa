"""HTTP transport and wire protocols."""

from .http import CredentialsProvider, HttpExecutor, StaticCredentialsProvider
from .protocols import (
    HttpRequest,
    MemberShapeValidator,
    ModeledProtocol,
    ProtocolHandler,
    ResponseParseError,
    RestJsonProtocol,
)

__all__ = [
    "CredentialsProvider",
    "HttpExecutor",
    "StaticCredentialsProvider",
    "HttpRequest",
    "MemberShapeValidator",
    "ModeledProtocol",
    "ProtocolHandler",
    "ResponseParseError",
    "RestJsonProtocol",
]
