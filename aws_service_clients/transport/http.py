# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Shared HTTP execution with SigV4 signing and exponential backoff."""

import logging
import time
from typing import Any, Optional, Protocol as TypingProtocol

from botocore.auth import SigV4Auth, SigV4QueryAuth
from botocore.awsrequest import AWSRequest
from botocore.exceptions import BotoCoreError
from botocore.httpsession import URLLib3Session

from ..config import Settings
from ..models.endpoint import Endpoint
from ..models.enums import CoreErrorType, SignerType
from ..models.operation import OperationSpec
from ..models.outcome import Outcome, ServiceError
from ..utils.correlation import INVOCATION_ID_HEADER, get_invocation_id, get_invocation_id_for_logging
from ..utils.redaction import redact_headers, redact_sensitive
from .protocols import HttpRequest, ProtocolHandler, ResponseParseError

logger = logging.getLogger(__name__)


class CredentialsProvider(TypingProtocol):
    """Anything that can hand out AWS credentials (e.g. a boto3.Session)."""

    def get_credentials(self) -> Any:
        ...


class StaticCredentialsProvider:
    """Credentials provider returning a fixed set of credentials."""

    def __init__(self, credentials: Any):
        self._credentials = credentials

    def get_credentials(self) -> Any:
        return self._credentials


def _resolve_credentials(credentials_provider: Optional[CredentialsProvider]) -> Any:
    """
    Fetch frozen credentials from a provider.

    Raises:
        _MissingCredentials: If there is no provider, it has no credentials,
                             or botocore fails while looking them up (for
                             example an unknown profile)
    """
    try:
        credentials = credentials_provider.get_credentials() if credentials_provider else None
        if credentials is not None and hasattr(credentials, "get_frozen_credentials"):
            credentials = credentials.get_frozen_credentials()
    except BotoCoreError as e:
        raise _MissingCredentials(
            ServiceError(
                error_type=CoreErrorType.MISSING_CREDENTIALS,
                exception_name=type(e).__name__,
                message=redact_sensitive(str(e)),
                retryable=False,
            )
        ) from e

    if credentials is None:
        raise _MissingCredentials(
            ServiceError(
                error_type=CoreErrorType.MISSING_CREDENTIALS,
                exception_name="NoCredentialsError",
                message="Unable to locate credentials",
                retryable=False,
            )
        )
    return credentials


class HttpExecutor:
    """
    Sends serialized requests and turns responses into outcomes.

    Requests are signed with SigV4 on every attempt. Errors classified as
    retryable (throttling, 5xx, transport failures) are retried with
    exponential backoff up to ``max_attempts`` total attempts.
    """

    def __init__(self, config: Settings, http_session: Any = None):
        """
        Initialize the executor.

        Args:
            config: Settings providing retry, timeout and TLS options
            http_session: Object with a botocore-style send(prepared_request)
                          method; a URLLib3Session is created when omitted
        """
        self._config = config
        self._session = http_session or URLLib3Session(
            verify=config.verify_ssl,
            timeout=(config.connect_timeout, config.read_timeout),
            max_pool_connections=config.max_pool_connections,
        )

    @property
    def max_attempts(self) -> int:
        return self._config.max_attempts

    def backoff_delay(self, attempt: int) -> float:
        """
        Delay before the retry following a failed attempt.

        Args:
            attempt: Zero-based index of the attempt that failed

        Returns:
            Seconds to sleep
        """
        delay = self._config.retry_base_delay * (2 ** attempt)
        return min(delay, self._config.retry_max_delay)

    def execute(
        self,
        operation: OperationSpec,
        http_request: HttpRequest,
        endpoint: Endpoint,
        protocol: ProtocolHandler,
        credentials_provider: Optional[CredentialsProvider],
        user_agent: str = "",
    ) -> Outcome:
        """
        Send a request, retrying retryable failures.

        Args:
            operation: Operation being called
            http_request: Serialized request
            endpoint: Resolved endpoint (signing region and name)
            protocol: Protocol used to parse the response
            credentials_provider: Source of signing credentials
            user_agent: User-Agent header value

        Returns:
            Success outcome with the parsed payload, or the last error
        """
        max_attempts = self.max_attempts
        error: Optional[ServiceError] = None

        for attempt in range(max_attempts):
            error = None
            try:
                aws_request = self._build_request(http_request, attempt, max_attempts, user_agent)
                if operation.signer == SignerType.SIGV4:
                    self._sign(aws_request, endpoint, credentials_provider)
            except _MissingCredentials as e:
                return Outcome.failure(operation.name, e.error)

            logger.debug(
                f"{operation.name} attempt {attempt + 1}/{max_attempts}: "
                f"{http_request.method} {redact_sensitive(http_request.url)} "
                f"headers={redact_headers(aws_request.headers)}",
                extra=get_invocation_id_for_logging(),
            )

            try:
                response = self._session.send(aws_request.prepare())
            except BotoCoreError as e:
                error = ServiceError(
                    error_type=CoreErrorType.NETWORK_CONNECTION,
                    exception_name=type(e).__name__,
                    message=redact_sensitive(str(e)),
                    retryable=True,
                )
            else:
                status_code = response.status_code
                headers = response.headers
                body = response.content or b""

                if 200 <= status_code < 300:
                    try:
                        result = protocol.parse_response(operation, status_code, headers, body)
                    except ResponseParseError as e:
                        return Outcome.failure(
                            operation.name,
                            ServiceError(
                                error_type=CoreErrorType.UNKNOWN,
                                exception_name="ResponseParseError",
                                message=str(e),
                                retryable=False,
                                response_code=status_code,
                            ),
                        )
                    logger.debug(
                        f"{operation.name} succeeded with status {status_code}",
                        extra=get_invocation_id_for_logging(),
                    )
                    return Outcome.success(operation.name, result)

                error = protocol.parse_error(operation, status_code, headers, body)

            if not error.retryable or attempt == max_attempts - 1:
                break

            delay = self.backoff_delay(attempt)
            logger.warning(
                f"{operation.name} failed with {error.exception_name}, "
                f"retrying in {delay:.2f}s (attempt {attempt + 1}/{max_attempts})",
                extra=get_invocation_id_for_logging(),
            )
            time.sleep(delay)

        logger.error(
            f"{operation.name} failed: {error.exception_name} - {redact_sensitive(error.message)}",
            extra=get_invocation_id_for_logging(),
        )
        return Outcome.failure(operation.name, error)

    def presign(
        self,
        url: str,
        endpoint: Endpoint,
        credentials_provider: Optional[CredentialsProvider],
        expires_in: int = 3600,
    ) -> str:
        """
        Presign a GET URL with SigV4 query authentication.

        Args:
            url: URL including the serialized query string
            endpoint: Resolved endpoint (signing region and name)
            credentials_provider: Source of signing credentials
            expires_in: Lifetime of the URL in seconds

        Returns:
            Presigned URL, or "" when no credentials are available
        """
        try:
            credentials = _resolve_credentials(credentials_provider)
        except _MissingCredentials as e:
            logger.error(
                f"Cannot presign request: {e.error.exception_name} - {e.error.message}",
                extra=get_invocation_id_for_logging(),
            )
            return ""

        aws_request = AWSRequest(method="GET", url=url)
        SigV4QueryAuth(
            credentials,
            endpoint.signing_name,
            endpoint.signing_region,
            expires=expires_in,
        ).add_auth(aws_request)
        return aws_request.url

    def _build_request(
        self,
        http_request: HttpRequest,
        attempt: int,
        max_attempts: int,
        user_agent: str,
    ) -> AWSRequest:
        headers = dict(http_request.headers)
        invocation_id = get_invocation_id()
        if invocation_id:
            headers[INVOCATION_ID_HEADER] = invocation_id
        headers["amz-sdk-request"] = f"attempt={attempt + 1}; max={max_attempts}"
        if user_agent:
            headers["User-Agent"] = user_agent
        return AWSRequest(
            method=http_request.method,
            url=http_request.url,
            headers=headers,
            data=http_request.body,
        )

    def _sign(
        self,
        aws_request: AWSRequest,
        endpoint: Endpoint,
        credentials_provider: Optional[CredentialsProvider],
    ) -> None:
        credentials = _resolve_credentials(credentials_provider)
        SigV4Auth(credentials, endpoint.signing_name, endpoint.signing_region).add_auth(aws_request)

    def close(self) -> None:
        close = getattr(self._session, "close", None)
        if close is not None:
            close()


class _MissingCredentials(Exception):
    def __init__(self, error: ServiceError):
        self.error = error
        super().__init__(error.message)
