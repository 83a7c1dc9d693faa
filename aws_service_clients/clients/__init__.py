"""Service client base classes and factory."""

from .base import AWSServiceClient, AsyncCallerContext, QueryPresignMixin, UnknownOperationError
from .factory import ClientFactory

__all__ = [
    "AWSServiceClient",
    "AsyncCallerContext",
    "QueryPresignMixin",
    "UnknownOperationError",
    "ClientFactory",
]
