# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Base class shared by every service client.

A service client is a subclass declaring its operation table. When the
subclass is created, each OperationSpec becomes three methods, named with
botocore's xform_name:

- ``list_jobs(**params)`` returns an Outcome
- ``list_jobs_callable(**params)`` returns a Future of the Outcome
- ``list_jobs_async(handler, context=None, **params)`` calls
  ``handler(client, request, outcome, context)`` when done

All three run the same synchronous implementation; the latter two submit
it to the client's executor.
"""

import logging
import platform
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Optional

import boto3
import botocore
from botocore import xform_name
from botocore.exceptions import ParamValidationError

from .. import __version__
from ..config import Settings, settings
from ..endpoints.provider import (
    EndpointProvider,
    EndpointResolutionError,
    PartitionEndpointProvider,
    RulesetEndpointProvider,
    compute_signer_region,
)
from ..models.enums import Protocol
from ..models.operation import OperationSpec
from ..models.outcome import Outcome, ServiceError
from ..models.request import ServiceRequest
from ..transport.http import CredentialsProvider, HttpExecutor, StaticCredentialsProvider
from ..transport.protocols import ModeledProtocol, ProtocolHandler, RestJsonProtocol
from ..utils.correlation import (
    generate_invocation_id,
    get_invocation_id_for_logging,
    reset_invocation_id,
    set_invocation_id,
)
from ..utils.redaction import redact_sensitive
from ..utils.service_data import load_service_model

logger = logging.getLogger(__name__)


class UnknownOperationError(Exception):
    """Raised when a client is asked for an operation it does not declare."""
    pass


class AsyncCallerContext:
    """Caller-supplied context handed back to async completion handlers."""

    def __init__(self, uuid: Optional[str] = None):
        self.uuid = uuid or generate_invocation_id()

    def __repr__(self) -> str:
        return f"AsyncCallerContext(uuid={self.uuid!r})"


ResponseHandler = Callable[[Any, ServiceRequest, Outcome, Optional[AsyncCallerContext]], None]


def _coerce_request(operation_name: str, py_name: str, args: tuple, kwargs: dict) -> ServiceRequest:
    if args:
        if len(args) == 1 and isinstance(args[0], ServiceRequest) and not kwargs:
            request = args[0]
            if request.operation != operation_name:
                raise ValueError(
                    f"{py_name}() got a request for {request.operation}, expected {operation_name}"
                )
            return request
        raise TypeError(
            f"{py_name}() only accepts keyword arguments or a single ServiceRequest."
        )
    return ServiceRequest(operation=operation_name, params=kwargs)


def _create_sync_method(operation_name: str, py_name: str, doc: str):
    def _api_call(self, *args, **kwargs) -> Outcome:
        request = _coerce_request(operation_name, py_name, args, kwargs)
        return self.invoke(request)

    _api_call.__name__ = py_name
    _api_call.__doc__ = doc
    return _api_call


def _create_callable_method(operation_name: str, py_name: str):
    name = f"{py_name}_callable"

    def _api_callable(self, *args, **kwargs) -> "Future[Outcome]":
        request = _coerce_request(operation_name, name, args, kwargs)
        return self.submit(request)

    _api_callable.__name__ = name
    _api_callable.__doc__ = f"Submit {operation_name} to the client executor and return a Future."
    return _api_callable


def _create_async_method(operation_name: str, py_name: str):
    name = f"{py_name}_async"

    def _api_async(
        self,
        handler: ResponseHandler,
        *args,
        context: Optional[AsyncCallerContext] = None,
        **kwargs,
    ) -> "Future[None]":
        request = _coerce_request(operation_name, name, args, kwargs)
        return self.submit_with_handler(request, handler, context)

    _api_async.__name__ = name
    _api_async.__doc__ = (
        f"Run {operation_name} on the client executor and pass the outcome "
        "to handler(client, request, outcome, context)."
    )
    return _api_async


class AWSServiceClient:
    """
    Base class for the generated service clients.

    Subclasses set the class attributes describing the service and list
    their operations in ``OPERATIONS``. Services named in
    ``BOTOCORE_SERVICE_NAME`` are serialized, parsed and resolved from
    their botocore service model; the others use the operation table
    with the unmodeled REST-JSON protocol and partition endpoints. Instances hold only immutable
    configuration, the endpoint provider and the executor, so one client
    may be shared across threads.
    """

    SERVICE_NAME: str = ""
    BOTOCORE_SERVICE_NAME: Optional[str] = None
    SERVICE_CLIENT_NAME: str = ""
    PROTOCOL: Protocol = Protocol.REST_JSON
    VALIDATE_REQUIRED: bool = False
    OPERATIONS: tuple[OperationSpec, ...] = ()

    _operations: dict[str, OperationSpec] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls._operations = {op.name: op for op in cls.OPERATIONS}
        for op in cls.OPERATIONS:
            py_name = xform_name(op.name)
            if py_name in cls.__dict__:
                continue
            doc = f"Call {cls.SERVICE_CLIENT_NAME or cls.__name__} {op.name} ({op.http_method.value})."
            setattr(cls, py_name, _create_sync_method(op.name, py_name, doc))
            setattr(cls, f"{py_name}_callable", _create_callable_method(op.name, py_name))
            setattr(cls, f"{py_name}_async", _create_async_method(op.name, py_name))

    def __init__(
        self,
        config: Optional[Settings] = None,
        *,
        endpoint_provider: Optional[EndpointProvider] = None,
        credentials: Any = None,
        credentials_provider: Optional[CredentialsProvider] = None,
        executor: Optional[ThreadPoolExecutor] = None,
        http_executor: Optional[HttpExecutor] = None,
    ):
        """
        Initialize the client.

        Args:
            config: Client settings (defaults to the global settings)
            endpoint_provider: Endpoint provider; a provider for this service
                               is created when omitted
            credentials: Static botocore Credentials used to sign requests
            credentials_provider: Object with get_credentials(); defaults to
                                  a boto3.Session (default provider chain)
            executor: Executor for callable/async operations; the client
                      creates and owns one when omitted
            http_executor: Shared HTTP executor; created from config when
                           omitted
        """
        self._config = config or settings()

        if credentials is not None and credentials_provider is not None:
            raise ValueError("Pass either credentials or credentials_provider, not both")
        if credentials is not None:
            credentials_provider = StaticCredentialsProvider(credentials)
        elif credentials_provider is None:
            credentials_provider = boto3.Session(region_name=self._config.aws_region)
        self._credentials_provider = credentials_provider

        self._service_model = (
            load_service_model(self.BOTOCORE_SERVICE_NAME) if self.BOTOCORE_SERVICE_NAME else None
        )
        self._endpoint_provider = endpoint_provider or self._create_endpoint_provider()
        self._endpoint_provider.init_builtin_parameters(self._config)

        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=self._config.executor_max_workers,
            thread_name_prefix=self.SERVICE_CLIENT_NAME or self.SERVICE_NAME,
        )
        self._http = http_executor or HttpExecutor(self._config)
        self._protocol = self._create_protocol()
        self._signer_region = compute_signer_region(self._config.aws_region)

        logger.debug(
            f"{self.SERVICE_CLIENT_NAME} client initialized for region {self._config.aws_region}"
        )

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    def _create_endpoint_provider(self) -> EndpointProvider:
        if self._service_model is not None:
            return RulesetEndpointProvider(self._service_model)
        return PartitionEndpointProvider(self.SERVICE_NAME, self.SERVICE_NAME)

    def _create_protocol(self) -> ProtocolHandler:
        if self._service_model is not None:
            return ModeledProtocol(self._service_model, self.PROTOCOL.value)
        return RestJsonProtocol()

    @property
    def service_model(self):
        """botocore ServiceModel backing this client, if any."""
        return self._service_model

    @property
    def config(self) -> Settings:
        return self._config

    @property
    def signer_region(self) -> Optional[str]:
        """Region requests are signed for when none is resolved."""
        return self._signer_region

    @property
    def endpoint_provider(self) -> Optional[EndpointProvider]:
        return self._endpoint_provider

    @endpoint_provider.setter
    def endpoint_provider(self, provider: Optional[EndpointProvider]) -> None:
        self._endpoint_provider = provider

    @property
    def user_agent(self) -> str:
        return (
            f"aws-service-clients/{__version__} api/{self.SERVICE_CLIENT_NAME.replace(' ', '-')} "
            f"botocore/{botocore.__version__} Python/{platform.python_version()}"
        )

    @classmethod
    def operation_names(cls) -> list[str]:
        return [op.name for op in cls.OPERATIONS]

    @classmethod
    def get_operation(cls, operation_name: str) -> OperationSpec:
        """
        Look up an operation by API name.

        Raises:
            UnknownOperationError: If the client does not declare it
        """
        try:
            return cls._operations[operation_name]
        except KeyError:
            raise UnknownOperationError(
                f"{cls.SERVICE_CLIENT_NAME or cls.__name__} has no operation {operation_name}"
            ) from None

    def override_endpoint(self, endpoint: str) -> None:
        """
        Send every subsequent request to an explicit endpoint.

        Args:
            endpoint: Endpoint URL (e.g. "http://localhost:4566")
        """
        if self._endpoint_provider is None:
            raise ValueError(f"{self.SERVICE_CLIENT_NAME}: endpoint provider is not initialized")
        self._endpoint_provider.override_endpoint(endpoint)

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def invoke(self, request: ServiceRequest) -> Outcome:
        """
        Run one operation synchronously.

        Args:
            request: Request naming a declared operation

        Returns:
            Outcome of the call. Missing required members, members that do
            not match their shape and endpoint resolution failures are
            returned without any network I/O.
        """
        operation = self.get_operation(request.operation)
        token = set_invocation_id(generate_invocation_id())
        try:
            return self._invoke(operation, request)
        finally:
            reset_invocation_id(token)

    def _invoke(self, operation: OperationSpec, request: ServiceRequest) -> Outcome:
        if self._endpoint_provider is None:
            logger.error(
                f"{operation.name}: endpoint provider is not initialized",
                extra=get_invocation_id_for_logging(),
            )
            return Outcome.failure(
                operation.name,
                ServiceError.endpoint_resolution_failure("Endpoint provider is not initialized"),
            )

        if self.VALIDATE_REQUIRED:
            for field_name in operation.missing_required(request):
                logger.error(
                    f"{operation.name}: Required field: {field_name}, is not set",
                    extra=get_invocation_id_for_logging(),
                )
                return Outcome.failure(operation.name, ServiceError.missing_parameter(field_name))

        try:
            endpoint = self._endpoint_provider.resolve_endpoint(
                request.endpoint_context_params(),
                operation_name=operation.name,
                call_args=request.set_params(),
            )
        except EndpointResolutionError as e:
            logger.error(
                f"{operation.name}: endpoint resolution failed: {e}",
                extra=get_invocation_id_for_logging(),
            )
            return Outcome.failure(operation.name, ServiceError.endpoint_resolution_failure(str(e)))

        try:
            http_request = self._protocol.serialize(operation, request, endpoint)
        except ParamValidationError as e:
            message = redact_sensitive(str(e))
            logger.error(
                f"{operation.name}: invalid parameters: {message}",
                extra=get_invocation_id_for_logging(),
            )
            return Outcome.failure(operation.name, ServiceError.invalid_parameter(message))

        return self._http.execute(
            operation,
            http_request,
            endpoint,
            self._protocol,
            self._credentials_provider,
            self.user_agent,
        )

    def submit(self, request: ServiceRequest) -> "Future[Outcome]":
        """
        Run an operation on the client executor.

        Args:
            request: Request naming a declared operation

        Returns:
            Future resolving to the Outcome
        """
        self.get_operation(request.operation)
        return self._executor.submit(self.invoke, request)

    def submit_with_handler(
        self,
        request: ServiceRequest,
        handler: ResponseHandler,
        context: Optional[AsyncCallerContext] = None,
    ) -> "Future[None]":
        """
        Run an operation on the client executor and report to a handler.

        Args:
            request: Request naming a declared operation
            handler: Called as handler(client, request, outcome, context)
            context: Caller context passed through to the handler

        Returns:
            Future that completes after the handler returns
        """
        self.get_operation(request.operation)

        def _task() -> None:
            outcome = self.invoke(request)
            handler(self, request, outcome, context)

        return self._executor.submit(_task)

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def close(self) -> None:
        """Shut down the executor if this client created it."""
        if self._owns_executor:
            self._executor.shutdown(wait=True)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(region={self._config.aws_region!r})"


class QueryPresignMixin:
    """Presigned URL support for query-protocol clients."""

    PRESIGN_EXPIRES_IN = 3600

    def convert_request_to_presigned_url(
        self,
        request: ServiceRequest,
        region: str,
        expires_in: int = PRESIGN_EXPIRES_IN,
    ) -> str:
        """
        Build a presigned GET URL for a query-protocol request.

        Args:
            request: Request to serialize into the query string
            region: Region to resolve the endpoint for and sign with
            expires_in: Lifetime of the URL in seconds

        Returns:
            Presigned URL, or an empty string when no endpoint can be
            resolved, the request is invalid or no credentials are available
        """
        if self._endpoint_provider is None:
            logger.error("Presigned URL generating failed. Endpoint provider is not initialized.")
            return ""
        try:
            endpoint = self._endpoint_provider.resolve_endpoint(
                {"Region": region},
                operation_name=request.operation,
            )
        except EndpointResolutionError as e:
            logger.error(f"Endpoint resolution failed: {e}")
            return ""

        try:
            query_string = self._protocol.encode_query_string(request)
        except ParamValidationError as e:
            logger.error(f"Presigned URL generating failed: {redact_sensitive(str(e))}")
            return ""

        endpoint.set_query_string(query_string)
        return self._http.presign(endpoint.url, endpoint, self._credentials_provider, expires_in)
