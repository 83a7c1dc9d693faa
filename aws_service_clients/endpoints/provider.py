# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Endpoint resolution for the service clients.

Every provider holds the built-in parameters (Region, UseFIPS,
UseDualStack, Endpoint) set from client settings. Services that ship a
botocore endpoint rule set are resolved by botocore's rule engine; the
rest fall back to the partition defaults of botocore's legacy endpoint
table. Resolution never performs network I/O.
"""

import logging
import threading
from typing import Any, Optional

from botocore.exceptions import BotoCoreError, UnknownRegionError
from botocore.hooks import HierarchicalEmitter
from botocore.model import ServiceModel
from botocore.regions import EndpointResolver, EndpointResolverBuiltins, EndpointRulesetResolver
from botocore.utils import validate_region_name

from ..models.endpoint import Endpoint
from ..utils.service_data import load_endpoint_ruleset, load_endpoints, load_partitions

logger = logging.getLogger(__name__)

DEFAULT_SIGNING_REGION = "us-east-1"


class EndpointResolutionError(Exception):
    """Raised when no endpoint can be resolved from the parameters."""
    pass


def is_fips_pseudo_region(region: Optional[str]) -> bool:
    return bool(region) and (region.startswith("fips-") or region.endswith("-fips"))


def compute_signer_region(region: Optional[str]) -> Optional[str]:
    """
    Compute the region used for SigV4 signing.

    Pseudo regions are mapped onto the real region they sign for:
    "aws-global" signs as us-east-1, and "fips-" prefixes or "-fips"
    suffixes are stripped.

    Args:
        region: Configured region

    Returns:
        Region to sign requests with
    """
    if not region:
        return region
    if region == "aws-global":
        return DEFAULT_SIGNING_REGION
    if region.startswith("fips-"):
        return region[len("fips-"):]
    if region.endswith("-fips"):
        return region[:-len("-fips")]
    return region


class EndpointProvider:
    """
    Base endpoint provider holding the built-in parameters.

    Built-in parameters are set once from client settings and may be
    replaced by ``override_endpoint``; context parameters come from each
    request and take precedence. Subclasses implement ``_resolve``.
    """

    def __init__(self, signing_name: str):
        """
        Initialize the provider.

        Args:
            signing_name: SigV4 service name (e.g. "ses" for the email endpoint)
        """
        self.signing_name = signing_name
        self._builtins: dict[str, Any] = {
            "Region": None,
            "UseFIPS": False,
            "UseDualStack": False,
            "Endpoint": None,
        }
        self._lock = threading.Lock()

    @property
    def builtin_parameters(self) -> dict[str, Any]:
        with self._lock:
            return dict(self._builtins)

    def init_builtin_parameters(self, config: Any) -> None:
        """
        Initialize built-in parameters from client settings.

        Args:
            config: Settings-like object with aws_region, use_fips_endpoint,
                    use_dualstack_endpoint and endpoint_url attributes
        """
        with self._lock:
            self._builtins["Region"] = getattr(config, "aws_region", None)
            self._builtins["UseFIPS"] = bool(getattr(config, "use_fips_endpoint", False))
            self._builtins["UseDualStack"] = bool(getattr(config, "use_dualstack_endpoint", False))
            endpoint_url = getattr(config, "endpoint_url", None)
            if endpoint_url:
                self._builtins["Endpoint"] = endpoint_url

        logger.debug(
            f"Endpoint provider for {self.signing_name} initialized with "
            f"region={self._builtins['Region']}"
        )

    def override_endpoint(self, endpoint: str) -> None:
        """
        Use an explicit endpoint for every subsequent resolution.

        Args:
            endpoint: Full URL (e.g. "http://localhost:4566"); a bare host
                      is given an https:// scheme
        """
        if endpoint and "://" not in endpoint:
            endpoint = f"https://{endpoint}"
        with self._lock:
            self._builtins["Endpoint"] = endpoint
        logger.info(f"Endpoint for {self.signing_name} overridden to {endpoint}")

    def resolve_endpoint(
        self,
        context_params: Optional[dict[str, Any]] = None,
        operation_name: Optional[str] = None,
        call_args: Optional[dict[str, Any]] = None,
    ) -> Endpoint:
        """
        Resolve the endpoint for a request.

        Args:
            context_params: Per-request parameters; they take precedence over
                            the built-in parameters of the same name
            operation_name: Operation being resolved for, when known
            call_args: Request members, for rule sets that bind them

        Returns:
            Resolved Endpoint with signing region and name

        Raises:
            EndpointResolutionError: If the parameters do not describe a
                                     valid endpoint
        """
        params = self.builtin_parameters
        params.update({k: v for k, v in (context_params or {}).items() if v is not None})

        region = params.get("Region")
        use_fips = bool(params.get("UseFIPS"))
        if is_fips_pseudo_region(region):
            use_fips = True
        region = compute_signer_region(region)

        try:
            validate_region_name(region)
        except BotoCoreError as e:
            raise EndpointResolutionError(str(e)) from e

        return self._resolve(
            region,
            use_fips,
            bool(params.get("UseDualStack")),
            params.get("Endpoint"),
            operation_name,
            call_args or {},
        )

    def _resolve(
        self,
        region: Optional[str],
        use_fips: bool,
        use_dualstack: bool,
        endpoint: Optional[str],
        operation_name: Optional[str],
        call_args: dict[str, Any],
    ) -> Endpoint:
        raise NotImplementedError


class RulesetEndpointProvider(EndpointProvider):
    """
    Resolves endpoints with the botocore endpoint rule set of a service.

    One EndpointRulesetResolver is built per provider. The per-request
    built-in values are handed to it through the
    ``before-endpoint-resolution`` event, which is how botocore lets
    callers customize built-ins for a single resolution.
    """

    def __init__(self, service_model: ServiceModel):
        super().__init__(service_model.signing_name)
        self.service_model = service_model
        self._emitter = HierarchicalEmitter()
        self._emitter.register(
            f"before-endpoint-resolution.{service_model.service_id.hyphenize()}",
            self._apply_request_builtins,
        )
        self._resolver = EndpointRulesetResolver(
            endpoint_ruleset_data=load_endpoint_ruleset(service_model.service_name),
            partition_data=load_partitions(),
            service_model=service_model,
            builtins={},
            client_context={},
            event_emitter=self._emitter,
        )

    @staticmethod
    def _apply_request_builtins(builtins, context, **kwargs):
        builtins.update(context.get("endpoint_builtins", {}))

    def _resolve(self, region, use_fips, use_dualstack, endpoint, operation_name, call_args):
        operation_model = self.service_model.operation_model(
            operation_name or self.service_model.operation_names[0]
        )
        request_context = {
            "endpoint_builtins": {
                EndpointResolverBuiltins.AWS_REGION: region,
                EndpointResolverBuiltins.AWS_USE_FIPS: use_fips,
                EndpointResolverBuiltins.AWS_USE_DUALSTACK: use_dualstack,
                EndpointResolverBuiltins.SDK_ENDPOINT: endpoint,
            }
        }

        try:
            resolved = self._resolver.construct_endpoint(operation_model, call_args, request_context)
            signing = {}
            auth_schemes = resolved.properties.get("authSchemes")
            if auth_schemes:
                _, signing = self._resolver.auth_schemes_to_signing_ctx(auth_schemes)
        except BotoCoreError as e:
            raise EndpointResolutionError(str(e)) from e

        return Endpoint(
            base_url=resolved.url,
            signing_region=signing.get("region") or region or DEFAULT_SIGNING_REGION,
            signing_name=signing.get("signing_name") or self.signing_name,
        )


class PartitionEndpointProvider(EndpointProvider):
    """
    Resolves endpoints from the partition defaults of the legacy endpoint
    table, for services botocore ships no rule set for.

    Regions outside every partition resolve in the "aws" partition.
    """

    def __init__(self, endpoint_prefix: str, signing_name: str):
        super().__init__(signing_name)
        self.endpoint_prefix = endpoint_prefix
        self._resolver = EndpointResolver(load_endpoints(), uses_builtin_data=True)

    def _resolve(self, region, use_fips, use_dualstack, endpoint, operation_name, call_args):
        if endpoint:
            if use_fips:
                raise EndpointResolutionError(
                    "Invalid Configuration: FIPS and custom endpoint are not supported"
                )
            if use_dualstack:
                raise EndpointResolutionError(
                    "Invalid Configuration: Dualstack and custom endpoint are not supported"
                )
            return Endpoint(
                base_url=endpoint,
                signing_region=region or DEFAULT_SIGNING_REGION,
                signing_name=self.signing_name,
            )

        if not region:
            raise EndpointResolutionError("Invalid Configuration: Missing Region")

        try:
            try:
                partition = self._resolver.get_partition_for_region(region)
            except UnknownRegionError:
                partition = "aws"
            resolved = self._resolver.construct_endpoint(
                self.endpoint_prefix,
                region,
                partition_name=partition,
                use_dualstack_endpoint=use_dualstack,
                use_fips_endpoint=use_fips,
            )
        except BotoCoreError as e:
            raise EndpointResolutionError(str(e)) from e

        if resolved is None:
            raise EndpointResolutionError(
                f"No endpoint for {self.endpoint_prefix} in region {region}"
            )

        scope = resolved.get("credentialScope", {})
        return Endpoint(
            base_url=f"https://{resolved['hostname']}",
            signing_region=scope.get("region", region),
            signing_name=scope.get("service", self.signing_name),
        )
