"""Enumerations shared by the service clients."""

from enum import Enum


class HttpMethod(str, Enum):
    """HTTP verbs used by the service operations."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class Protocol(str, Enum):
    """Wire protocols spoken by the services."""

    REST_JSON = "rest-json"
    JSON = "json"
    QUERY = "query"


class SignerType(str, Enum):
    """Request signers."""

    SIGV4 = "sigv4"
    NULL = "null"


class CoreErrorType(str, Enum):
    """Error categories shared by every service client."""

    MISSING_PARAMETER = "MISSING_PARAMETER"
    ENDPOINT_RESOLUTION_FAILURE = "ENDPOINT_RESOLUTION_FAILURE"
    NETWORK_CONNECTION = "NETWORK_CONNECTION"
    THROTTLING = "THROTTLING"
    ACCESS_DENIED = "ACCESS_DENIED"
    VALIDATION = "VALIDATION"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
    INTERNAL_FAILURE = "INTERNAL_FAILURE"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    REQUEST_EXPIRED = "REQUEST_EXPIRED"
    INVALID_SIGNATURE = "INVALID_SIGNATURE"
    MISSING_CREDENTIALS = "MISSING_CREDENTIALS"
    UNKNOWN = "UNKNOWN"
