# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Operation table entries.

Each service module declares its operations as a tuple of OperationSpec.
The path of a REST operation is a sequence of literal and member-bound
parts, appended to the resolved endpoint in declaration order.
"""

from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from .endpoint import Endpoint
from .enums import HttpMethod, SignerType
from .request import ServiceRequest


class PathLiteral(BaseModel):
    """Fixed path text, e.g. "/recipes/"."""

    model_config = ConfigDict(frozen=True)

    text: str


class PathParam(BaseModel):
    """Path segment taken from a request member, e.g. Name."""

    model_config = ConfigDict(frozen=True)

    member: str


PathPart = Union[PathLiteral, PathParam]


def lit(text: str) -> PathLiteral:
    return PathLiteral(text=text)


def param(member: str) -> PathParam:
    return PathParam(member=member)


class OperationSpec(BaseModel):
    """Static description of one API operation."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        description="API operation name (e.g. DescribeJobRun)"
    )
    http_method: HttpMethod = Field(
        default=HttpMethod.POST,
        description="HTTP verb"
    )
    path: tuple[PathPart, ...] = Field(
        default=(),
        description="Path parts appended to the endpoint, in order"
    )
    required: tuple[str, ...] = Field(
        default=(),
        description="Members that must be set before the request is sent"
    )
    signer: SignerType = Field(
        default=SignerType.SIGV4,
        description="Signer used for the request"
    )

    def path_params(self) -> list[str]:
        """Members bound into the request path."""
        return [part.member for part in self.path if isinstance(part, PathParam)]

    def missing_required(self, request: ServiceRequest) -> list[str]:
        """Required members not set on the request, in declared order."""
        return [name for name in self.required if not request.has_been_set(name)]

    def build_path(self, endpoint: Endpoint, request: ServiceRequest) -> Endpoint:
        """
        Append this operation's path parts to an endpoint.

        Args:
            endpoint: Resolved endpoint to extend
            request: Request supplying the member-bound segments

        Returns:
            The same endpoint with segments appended
        """
        for part in self.path:
            if isinstance(part, PathLiteral):
                endpoint.add_path_segments(part.text)
            else:
                endpoint.add_path_segment(request.get(part.member, ""))
        return endpoint


def rest(
    name: str,
    method: HttpMethod,
    *path: PathPart,
    required: tuple[str, ...] = (),
) -> OperationSpec:
    """Declare a path-dispatched operation."""
    return OperationSpec(name=name, http_method=method, path=path, required=required)


def rpc(name: str, signer: SignerType = SignerType.SIGV4) -> OperationSpec:
    """Declare a flat RPC operation (POST to the endpoint root)."""
    return OperationSpec(name=name, http_method=HttpMethod.POST, signer=signer)
