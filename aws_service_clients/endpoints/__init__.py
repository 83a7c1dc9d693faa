"""Endpoint resolution module."""

from .provider import (
    EndpointProvider,
    EndpointResolutionError,
    PartitionEndpointProvider,
    RulesetEndpointProvider,
    compute_signer_region,
)

__all__ = [
    "EndpointProvider",
    "EndpointResolutionError",
    "PartitionEndpointProvider",
    "RulesetEndpointProvider",
    "compute_signer_region",
]
