# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Operation outcome and error models."""

from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator

from .enums import CoreErrorType


class ServiceError(BaseModel):
    """Typed error produced by a service operation."""

    error_type: CoreErrorType = Field(
        ...,
        description="Error category"
    )
    exception_name: str = Field(
        ...,
        description="Error code as reported by the service or the client"
    )
    message: str = Field(
        default="",
        description="Human-readable error message"
    )
    retryable: bool = Field(
        default=False,
        description="Whether the request may succeed if retried"
    )
    response_code: Optional[int] = Field(
        default=None,
        description="HTTP status code, when a response was received"
    )
    request_id: Optional[str] = Field(
        default=None,
        description="Service request id, when a response was received"
    )
    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Response headers, when a response was received"
    )

    @classmethod
    def missing_parameter(cls, field_name: str) -> "ServiceError":
        """Build the error returned when a required member is unset."""
        return cls(
            error_type=CoreErrorType.MISSING_PARAMETER,
            exception_name="MISSING_PARAMETER",
            message=f"Missing required field [{field_name}]",
            retryable=False,
        )

    @classmethod
    def endpoint_resolution_failure(cls, message: str) -> "ServiceError":
        """Build the error returned when no endpoint could be resolved."""
        return cls(
            error_type=CoreErrorType.ENDPOINT_RESOLUTION_FAILURE,
            exception_name="ENDPOINT_RESOLUTION_FAILURE",
            message=message,
            retryable=False,
        )

    @classmethod
    def invalid_parameter(cls, message: str) -> "ServiceError":
        """Build the error returned when a member does not match its shape."""
        return cls(
            error_type=CoreErrorType.VALIDATION,
            exception_name="ParamValidationError",
            message=message,
            retryable=False,
        )


class AWSServiceError(Exception):
    """Raised when the result of a failed outcome is requested."""

    def __init__(self, operation: str, error: ServiceError):
        self.operation = operation
        self.error = error
        super().__init__(
            f"{operation} failed: {error.exception_name} - {error.message}"
        )


class Outcome(BaseModel):
    """
    Result of a single operation call.

    Exactly one of ``result`` and ``error`` is set. Outcomes are produced
    once per call and never reused.
    """

    operation: str = Field(
        ...,
        description="Operation that produced this outcome"
    )
    result: Optional[dict[str, Any]] = Field(
        default=None,
        description="Deserialized response payload on success"
    )
    error: Optional[ServiceError] = Field(
        default=None,
        description="Typed error on failure"
    )

    @model_validator(mode="after")
    def _check_exactly_one(self) -> "Outcome":
        if (self.result is None) == (self.error is None):
            raise ValueError("Outcome requires exactly one of result or error")
        return self

    @classmethod
    def success(cls, operation: str, result: dict[str, Any]) -> "Outcome":
        return cls(operation=operation, result=result)

    @classmethod
    def failure(cls, operation: str, error: ServiceError) -> "Outcome":
        return cls(operation=operation, error=error)

    @property
    def is_success(self) -> bool:
        return self.error is None

    def get_result(self) -> dict[str, Any]:
        """
        Get the success payload.

        Returns:
            Deserialized response payload

        Raises:
            AWSServiceError: If the outcome is an error
        """
        if self.error is not None:
            raise AWSServiceError(self.operation, self.error)
        return self.result

    def get_error(self) -> Optional[ServiceError]:
        return self.error
