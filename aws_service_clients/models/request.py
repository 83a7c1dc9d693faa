# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Service request value object."""

import copy
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class ServiceRequest(BaseModel):
    """
    Immutable request for a single service operation.

    Parameters are keyed by the API member name (e.g. ``Name``,
    ``GameName``). A member counts as set when it is present and not None.
    The parameters are copied on construction and exposed read-only, so
    neither the caller nor a client can change a request once built.
    """

    model_config = ConfigDict(frozen=True)

    operation: str = Field(
        ...,
        description="API operation name (e.g. ListJobRuns)"
    )
    params: Mapping[str, Any] = Field(
        default_factory=dict,
        validate_default=True,
        description="Operation parameters keyed by API member name"
    )

    @field_validator("params", mode="after")
    @classmethod
    def _freeze_params(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(copy.deepcopy(dict(value)))

    @field_serializer("params")
    def _serialize_params(self, value: Mapping[str, Any]) -> dict[str, Any]:
        return dict(value)

    def has_been_set(self, name: str) -> bool:
        """
        Check whether a member has been set on this request.

        Args:
            name: API member name

        Returns:
            True if the member is present and not None
        """
        return self.params.get(name) is not None

    def get(self, name: str, default: Any = None) -> Any:
        """Get a member value, or default when it has not been set."""
        value = self.params.get(name)
        return default if value is None else value

    def with_param(self, name: str, value: Any) -> "ServiceRequest":
        """
        Return a copy of this request with one member set.

        Args:
            name: API member name
            value: Member value

        Returns:
            New ServiceRequest; this instance is left unchanged
        """
        params = dict(self.params)
        params[name] = value
        return ServiceRequest(operation=self.operation, params=params)

    def set_params(self) -> dict[str, Any]:
        """Members that have been set, in insertion order."""
        return {k: v for k, v in self.params.items() if v is not None}

    def endpoint_context_params(self) -> dict[str, Any]:
        """
        Per-request endpoint parameters.

        None of the supported services bind request members into endpoint
        resolution, so this is always empty.
        """
        return {}
