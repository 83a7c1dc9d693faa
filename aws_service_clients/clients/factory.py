# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Factory for creating and caching service clients per region."""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Union

from ..config import Settings, settings
from ..services import CLIENT_CLASSES
from .base import AWSServiceClient

logger = logging.getLogger(__name__)

ClientSpec = Union[str, type[AWSServiceClient]]


class ClientFactory:
    """
    Factory for creating and caching service clients.

    Reuses clients per (service, region) so repeated lookups return the
    same instance. Every client is built from the same base settings with
    only the region replaced, and all clients share one executor.
    """

    def __init__(
        self,
        config: Optional[Settings] = None,
        executor: Optional[ThreadPoolExecutor] = None,
    ):
        """
        Initialize with base settings.

        Args:
            config: Settings applied to every client (defaults to the
                    global settings)
            executor: Executor shared by every client; the factory creates
                      and owns one when omitted
        """
        self._config = config or settings()
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=self._config.executor_max_workers,
            thread_name_prefix="aws-service-clients",
        )
        self._clients: dict[tuple[str, str], AWSServiceClient] = {}
        self._lock = threading.Lock()

        logger.debug(
            f"ClientFactory initialized with default_region={self._config.aws_region}"
        )

    @property
    def default_region(self) -> str:
        """Get the default region."""
        return self._config.aws_region

    @property
    def cached_keys(self) -> list[tuple[str, str]]:
        """Get the (service, region) pairs with cached clients."""
        with self._lock:
            return list(self._clients.keys())

    @staticmethod
    def resolve_client_class(service: ClientSpec) -> type[AWSServiceClient]:
        """
        Resolve a service name or client class to a client class.

        Args:
            service: Service name (e.g. "databrew") or client class

        Returns:
            Client class

        Raises:
            ValueError: If the service name is unknown
        """
        if isinstance(service, type) and issubclass(service, AWSServiceClient):
            return service
        try:
            return CLIENT_CLASSES[service]
        except KeyError:
            known = ", ".join(sorted(CLIENT_CLASSES))
            raise ValueError(f"Unknown service {service!r}; expected one of: {known}") from None

    def get_client(self, service: ClientSpec, region: Optional[str] = None) -> AWSServiceClient:
        """
        Get or create a client for a service in a region.

        Calling this method again with the same service and region returns
        the exact same client instance.

        Args:
            service: Service name (e.g. "monitoring") or client class
            region: AWS region code (defaults to the configured region)

        Returns:
            Client configured for the region
        """
        client_class = self.resolve_client_class(service)
        region = region or self.default_region
        key = (client_class.SERVICE_NAME, region)

        with self._lock:
            if key in self._clients:
                logger.debug(f"Reusing cached {client_class.SERVICE_CLIENT_NAME} client for region {region}")
                return self._clients[key]

            logger.info(f"Creating new {client_class.SERVICE_CLIENT_NAME} client for region {region}")
            client = client_class(
                self._config.model_copy(update={"aws_region": region}),
                executor=self._executor,
            )
            self._clients[key] = client
            return client

    def clear_clients(self) -> None:
        """
        Clear all cached clients.

        Subsequent calls to get_client() create new client instances.
        """
        with self._lock:
            client_count = len(self._clients)
            self._clients.clear()
        logger.info(f"Cleared {client_count} cached service clients")

    def get_client_count(self) -> int:
        """Get the number of cached clients."""
        with self._lock:
            return len(self._clients)

    def has_client(self, service: ClientSpec, region: str) -> bool:
        """
        Check if a client exists for the service and region.

        Args:
            service: Service name or client class
            region: AWS region code

        Returns:
            True if a client is cached, False otherwise
        """
        client_class = self.resolve_client_class(service)
        with self._lock:
            return (client_class.SERVICE_NAME, region) in self._clients

    def close(self) -> None:
        """Drop cached clients and shut down the executor if owned."""
        self.clear_clients()
        if self._owns_executor:
            self._executor.shutdown(wait=True)
