# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Access to the service data bundled with botocore.

Service models, endpoint rule sets, partition metadata and the legacy
endpoint table are read through one shared botocore session. botocore's
loader caches every file it reads; service models are cached here.
"""

import logging
import threading
from typing import Any, Optional

import botocore.session
from botocore.model import ServiceModel

logger = logging.getLogger(__name__)

_session: Optional[botocore.session.Session] = None
_service_models: dict[str, ServiceModel] = {}
_lock = threading.Lock()


def get_botocore_session() -> botocore.session.Session:
    """
    Get the shared botocore session used to load service data.

    Returns:
        botocore Session, created on first call
    """
    global _session
    with _lock:
        if _session is None:
            _session = botocore.session.get_session()
        return _session


def load_service_model(service_name: str) -> ServiceModel:
    """
    Load the latest botocore service model for a service.

    Args:
        service_name: botocore service name (e.g. "databrew", "cloudwatch")

    Returns:
        botocore ServiceModel

    Raises:
        botocore.exceptions.UnknownServiceError: If botocore has no model
    """
    session = get_botocore_session()
    with _lock:
        model = _service_models.get(service_name)
        if model is None:
            model = session.get_service_model(service_name)
            _service_models[service_name] = model
            logger.debug(
                f"Loaded service model {service_name} "
                f"(api version {model.api_version})"
            )
        return model


def load_endpoint_ruleset(service_name: str) -> dict[str, Any]:
    """Load the endpoint rule set shipped for a service."""
    loader = get_botocore_session().get_component("data_loader")
    return loader.load_service_model(service_name, "endpoint-rule-set-1")


def load_partitions() -> dict[str, Any]:
    """Load the partition metadata used by endpoint rule sets."""
    return get_botocore_session().get_data("partitions")


def load_endpoints() -> dict[str, Any]:
    """Load the legacy per-partition endpoint table."""
    return get_botocore_session().get_data("endpoints")
