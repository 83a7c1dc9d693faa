# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Request serializers and response parsers for the wire protocols.

Services with a botocore service model are spoken to through
``ModeledProtocol``, which hands serialization, member validation and
response parsing to botocore's serializers and parsers for the
model's protocol (rest-json, json or query).

``RestJsonProtocol`` serves the one service without a botocore model.
It is driven by the request parameters and the operation table alone,
so nested dicts are sent as JSON objects and response bodies are
returned as decoded.
"""

import base64
import json
import logging
from datetime import datetime, timezone
from typing import Any, Mapping, Optional
from urllib.parse import urlencode

from botocore.awsrequest import HeadersDict, prepare_request_dict
from botocore.parsers import ResponseParserError
from botocore.model import OperationModel, ServiceModel
from botocore.parsers import create_parser
from botocore.serialize import create_serializer
from botocore.utils import lowercase_dict, percent_encode_sequence
from botocore.validate import ParamValidationDecorator, ParamValidator, ValidationErrors

from ..models.endpoint import Endpoint
from ..models.enums import CoreErrorType, HttpMethod
from ..models.operation import OperationSpec
from ..models.outcome import ServiceError
from ..models.request import ServiceRequest

logger = logging.getLogger(__name__)


class ResponseParseError(Exception):
    """Raised when a response body cannot be deserialized."""
    pass


class HttpRequest:
    """A serialized, unsigned HTTP request."""

    def __init__(
        self,
        method: str,
        url: str,
        headers: Optional[dict[str, str]] = None,
        body: bytes = b"",
    ):
        self.method = method
        self.url = url
        self.headers = headers or {}
        self.body = body

    def __repr__(self) -> str:
        return f"HttpRequest(method={self.method!r}, url={self.url!r})"


# =============================================================================
# Error classification
# =============================================================================

THROTTLING_CODES = frozenset({
    "Throttling",
    "ThrottlingException",
    "ThrottledException",
    "RequestThrottledException",
    "RequestThrottled",
    "TooManyRequestsException",
    "ProvisionedThroughputExceededException",
    "RequestLimitExceeded",
    "BandwidthLimitExceeded",
    "SlowDown",
    "PriorRequestNotComplete",
})

ERROR_CODE_MAP: dict[str, tuple[CoreErrorType, bool]] = {
    "AccessDenied": (CoreErrorType.ACCESS_DENIED, False),
    "AccessDeniedException": (CoreErrorType.ACCESS_DENIED, False),
    "UnrecognizedClientException": (CoreErrorType.ACCESS_DENIED, False),
    "InvalidClientTokenId": (CoreErrorType.ACCESS_DENIED, False),
    "MissingAuthenticationToken": (CoreErrorType.ACCESS_DENIED, False),
    "IncompleteSignature": (CoreErrorType.INVALID_SIGNATURE, False),
    "SignatureDoesNotMatch": (CoreErrorType.INVALID_SIGNATURE, False),
    "InvalidSignatureException": (CoreErrorType.INVALID_SIGNATURE, False),
    "ValidationException": (CoreErrorType.VALIDATION, False),
    "ValidationError": (CoreErrorType.VALIDATION, False),
    "InvalidParameterValue": (CoreErrorType.VALIDATION, False),
    "InvalidParameterCombination": (CoreErrorType.VALIDATION, False),
    "InvalidQueryParameter": (CoreErrorType.VALIDATION, False),
    "MalformedQueryString": (CoreErrorType.VALIDATION, False),
    "MissingParameter": (CoreErrorType.VALIDATION, False),
    "SerializationException": (CoreErrorType.VALIDATION, False),
    "ResourceNotFound": (CoreErrorType.RESOURCE_NOT_FOUND, False),
    "ResourceNotFoundException": (CoreErrorType.RESOURCE_NOT_FOUND, False),
    "ServiceUnavailable": (CoreErrorType.SERVICE_UNAVAILABLE, True),
    "ServiceUnavailableException": (CoreErrorType.SERVICE_UNAVAILABLE, True),
    "InternalFailure": (CoreErrorType.INTERNAL_FAILURE, True),
    "InternalError": (CoreErrorType.INTERNAL_FAILURE, True),
    "InternalServerError": (CoreErrorType.INTERNAL_FAILURE, True),
    "InternalServerException": (CoreErrorType.INTERNAL_FAILURE, True),
    "InternalServiceError": (CoreErrorType.INTERNAL_FAILURE, True),
    "RequestExpired": (CoreErrorType.REQUEST_EXPIRED, True),
    "RequestTimeTooSkewed": (CoreErrorType.REQUEST_EXPIRED, True),
}


def classify_error(code: str, status_code: Optional[int]) -> tuple[CoreErrorType, bool]:
    """
    Map a service error code onto a core error type and retryability.

    Args:
        code: Error code reported by the service
        status_code: HTTP status of the response

    Returns:
        Tuple of (error type, retryable)
    """
    if code in THROTTLING_CODES:
        return CoreErrorType.THROTTLING, True
    if code in ERROR_CODE_MAP:
        return ERROR_CODE_MAP[code]
    if status_code == 429:
        return CoreErrorType.THROTTLING, True
    if status_code is not None and status_code >= 500:
        return CoreErrorType.UNKNOWN, True
    return CoreErrorType.UNKNOWN, False


def _error_from_parsed(
    parsed: Mapping[str, Any],
    status_code: int,
    headers: Mapping[str, str],
) -> ServiceError:
    """Build a ServiceError from a botocore-parsed error response."""
    error = parsed.get("Error") or {}
    code = error.get("Code") or str(status_code)
    error_type, retryable = classify_error(code, status_code)
    metadata = parsed.get("ResponseMetadata") or {}

    return ServiceError(
        error_type=error_type,
        exception_name=code,
        message=error.get("Message") or "",
        retryable=retryable,
        response_code=status_code,
        request_id=metadata.get("RequestId") or _request_id(headers),
        headers=dict(headers),
    )


def _request_id(headers: Mapping[str, str]) -> Optional[str]:
    for name in ("x-amzn-RequestId", "x-amzn-requestid", "x-amz-request-id"):
        if name in headers:
            return headers[name]
    return None


def _response_dict(
    operation_name: str,
    status_code: int,
    headers: Mapping[str, str],
    body: bytes,
) -> dict[str, Any]:
    return {
        "status_code": status_code,
        "headers": HeadersDict(headers),
        "body": body or b"",
        "context": {"operation_name": operation_name},
    }


def _empty_result(status_code: int, headers: Mapping[str, str]) -> dict[str, Any]:
    return {
        "ResponseMetadata": {
            "RequestId": _request_id(headers) or "",
            "HTTPStatusCode": status_code,
            "HTTPHeaders": lowercase_dict(headers),
        }
    }


# =============================================================================
# Protocols
# =============================================================================

class ProtocolHandler:
    """Base class for a wire protocol."""

    name = ""

    def serialize(
        self,
        operation: OperationSpec,
        request: ServiceRequest,
        endpoint: Endpoint,
    ) -> HttpRequest:
        raise NotImplementedError

    def parse_response(
        self,
        operation: OperationSpec,
        status_code: int,
        headers: Mapping[str, str],
        body: bytes,
    ) -> dict[str, Any]:
        raise NotImplementedError

    def parse_error(
        self,
        operation: OperationSpec,
        status_code: int,
        headers: Mapping[str, str],
        body: bytes,
    ) -> ServiceError:
        raise NotImplementedError


class _PresenceDeferredErrors(ValidationErrors):
    """Validation errors that leave required-member checks to the caller."""

    def report(self, name, reason, **kwargs):
        if reason == "missing required field":
            return
        super().report(name, reason, **kwargs)


class MemberShapeValidator(ParamValidator):
    """
    botocore parameter validation without the required-member check.

    Unknown members, wrong types, lengths and ranges are still rejected
    before anything is sent. Whether required members are enforced
    locally is decided per client by the operation table.
    """

    def validate(self, params, shape):
        errors = _PresenceDeferredErrors()
        self._validate(params, shape, errors, name="")
        return errors


class ModeledProtocol(ProtocolHandler):
    """
    Protocol backed by a botocore service model.

    Requests are serialized with ``botocore.serialize`` and responses
    parsed with ``botocore.parsers``, so member locations, timestamp
    formats, list and map wrapping and typed scalars all follow the
    model.
    """

    def __init__(self, service_model: ServiceModel, protocol_name: Optional[str] = None):
        """
        Initialize the protocol.

        Args:
            service_model: botocore ServiceModel of the service
            protocol_name: Wire protocol to speak; defaults to the one the
                           model resolves to
        """
        self.service_model = service_model
        self.name = protocol_name or service_model.resolved_protocol
        self._serializer = ParamValidationDecorator(
            MemberShapeValidator(),
            create_serializer(self.name, include_validation=False),
        )
        self._parser = create_parser(self.name)

    def operation_model(self, operation_name: str) -> OperationModel:
        return self.service_model.operation_model(operation_name)

    def serialize_to_request(self, request: ServiceRequest) -> dict[str, Any]:
        """
        Serialize a request into a botocore request dict.

        Raises:
            botocore.exceptions.ParamValidationError: If a member does not
                match its shape
        """
        return self._serializer.serialize_to_request(
            request.set_params(),
            self.operation_model(request.operation),
        )

    def encode_query_string(self, request: ServiceRequest) -> str:
        """Form-encode a query-protocol request including Action and Version."""
        return percent_encode_sequence(self.serialize_to_request(request)["body"])

    def serialize(
        self,
        operation: OperationSpec,
        request: ServiceRequest,
        endpoint: Endpoint,
    ) -> HttpRequest:
        request_dict = self.serialize_to_request(request)
        prepare_request_dict(request_dict, endpoint.base_url)

        body = request_dict["body"]
        if isinstance(body, dict):
            body = percent_encode_sequence(body)
        if isinstance(body, str):
            body = body.encode("utf-8")

        return HttpRequest(
            method=request_dict["method"],
            url=request_dict["url"],
            headers=dict(request_dict["headers"]),
            body=body or b"",
        )

    def _parse(
        self,
        operation_name: str,
        status_code: int,
        headers: Mapping[str, str],
        body: bytes,
    ) -> dict[str, Any]:
        response = _response_dict(operation_name, status_code, headers, body)
        try:
            return self._parser.parse(response, self.operation_model(operation_name).output_shape)
        except (ResponseParserError, KeyError) as e:
            raise ResponseParseError(f"Invalid {self.name} response: {e}") from e

    def parse_response(
        self,
        operation: OperationSpec,
        status_code: int,
        headers: Mapping[str, str],
        body: bytes,
    ) -> dict[str, Any]:
        # the XML parsers reject an empty document
        if not body or not body.strip():
            return _empty_result(status_code, headers)
        return self._parse(operation.name, status_code, headers, body)

    def parse_error(
        self,
        operation: OperationSpec,
        status_code: int,
        headers: Mapping[str, str],
        body: bytes,
    ) -> ServiceError:
        try:
            parsed = self._parse(operation.name, status_code, headers, body)
        except ResponseParseError:
            logger.debug(f"Unparseable {self.name} error body with status {status_code}")
            parsed = {}
        return _error_from_parsed(parsed, status_code, headers)


# =============================================================================
# Unmodeled REST-JSON
# =============================================================================

def _json_default(value: Any) -> Any:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.timestamp()
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(value).decode("ascii")
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _strip_none(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _strip_none(v) for k, v in value.items() if v is not None}
    if isinstance(value, (list, tuple)):
        return [_strip_none(v) for v in value]
    return value


def encode_json(params: Mapping[str, Any]) -> bytes:
    """Serialize parameters to a JSON body, dropping unset members."""
    return json.dumps(_strip_none(params), default=_json_default).encode("utf-8")


def _scalar_to_str(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    return str(value)


def _camel(name: str) -> str:
    return name[:1].lower() + name[1:]


class RestJsonProtocol(ProtocolHandler):
    """
    REST-JSON protocol for a service without a botocore model.

    Path members are bound by the operation table. Remaining members go
    to the JSON body for POST/PUT/PATCH and to the query string
    (camelCase keys) for GET/DELETE. Error bodies are parsed by
    botocore's rest-json parser, which needs no model for them.
    """

    name = "rest-json"
    content_type = "application/json"

    def __init__(self):
        self._parser = create_parser(self.name)

    def serialize(
        self,
        operation: OperationSpec,
        request: ServiceRequest,
        endpoint: Endpoint,
    ) -> HttpRequest:
        operation.build_path(endpoint, request)
        path_members = set(operation.path_params())
        remaining = {
            k: v for k, v in request.set_params().items() if k not in path_members
        }

        headers: dict[str, str] = {}
        body = b""
        if operation.http_method in (HttpMethod.GET, HttpMethod.DELETE):
            query = [
                (_camel(k), _scalar_to_str(item))
                for k, v in remaining.items()
                for item in (v if isinstance(v, (list, tuple)) else [v])
            ]
            if query:
                endpoint.set_query_string(urlencode(query))
        else:
            headers["Content-Type"] = self.content_type
            body = encode_json(remaining)

        return HttpRequest(
            method=operation.http_method.value,
            url=endpoint.url,
            headers=headers,
            body=body,
        )

    def parse_response(
        self,
        operation: OperationSpec,
        status_code: int,
        headers: Mapping[str, str],
        body: bytes,
    ) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if body and body.strip():
            try:
                result = json.loads(body)
            except ValueError as e:
                raise ResponseParseError(f"Invalid JSON response: {e}") from e
            if not isinstance(result, dict):
                raise ResponseParseError("JSON response is not an object")
        result.update(_empty_result(status_code, headers))
        return result

    def parse_error(
        self,
        operation: OperationSpec,
        status_code: int,
        headers: Mapping[str, str],
        body: bytes,
    ) -> ServiceError:
        response = _response_dict(operation.name, status_code, headers, body)
        return _error_from_parsed(self._parser.parse(response, None), status_code, headers)
