"""Pytest configuration and shared fixtures."""

import pytest
from botocore.credentials import Credentials

from aws_service_clients.config import Settings
from aws_service_clients.transport.http import HttpExecutor


# Environment variables read by Settings that must not leak into tests
_SETTINGS_ENV_VARS = (
    "AWS_REGION",
    "AWS_DEFAULT_REGION",
    "AWS_ENDPOINT_URL",
    "AWS_USE_FIPS_ENDPOINT",
    "AWS_USE_DUALSTACK_ENDPOINT",
    "AWS_MAX_ATTEMPTS",
    "MAX_ATTEMPTS",
    "RETRY_BASE_DELAY",
    "RETRY_MAX_DELAY",
    "EXECUTOR_MAX_WORKERS",
    "LOG_LEVEL",
    "CLOUDWATCH_LOGGING_ENABLED",
    "CLOUDWATCH_ENABLED",
    "CLOUDWATCH_LOG_GROUP",
    "CLOUDWATCH_LOG_STREAM",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove client settings from the environment for every test."""
    for key in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(key, raising=False)


# =============================================================================
# Fake HTTP layer
# =============================================================================

class FakeResponse:
    """Minimal stand-in for a botocore AWSResponse."""

    def __init__(self, status_code=200, content=b"", headers=None):
        self.status_code = status_code
        self.content = content
        self.headers = headers or {}


class FakeHttpSession:
    """
    Records prepared requests and replays queued responses.

    Queued items may be FakeResponse instances or exceptions to raise.
    Once the queue is empty every call returns a 200 response with no body.
    """

    def __init__(self, responses=None):
        self.responses = list(responses or [])
        self.requests = []

    def send(self, request):
        self.requests.append(request)
        item = self.responses.pop(0) if self.responses else FakeResponse()
        if isinstance(item, Exception):
            raise item
        return item

    @property
    def call_count(self):
        return len(self.requests)

    @property
    def last_request(self):
        return self.requests[-1]


# =============================================================================
# Configuration and Client Fixtures
# =============================================================================

@pytest.fixture
def test_settings():
    """Settings with no backoff delay and a small executor."""
    return Settings(
        aws_region="us-east-1",
        max_attempts=3,
        retry_base_delay=0.0,
        executor_max_workers=2,
    )


@pytest.fixture
def credentials():
    """Static credentials used to sign test requests."""
    return Credentials("AKIDEXAMPLE", "wJalrXUtnFEMI/K7MDENG+bPxRfiCYEXAMPLEKEY")


@pytest.fixture
def response():
    """Builder for fake HTTP responses: response(status, content, headers)."""
    return FakeResponse


@pytest.fixture
def fake_session():
    """Fake HTTP session with no queued responses."""
    return FakeHttpSession()


@pytest.fixture
def make_client(test_settings, credentials):
    """
    Factory building a client wired to a fake HTTP session.

    Usage:
        client, session = make_client(GlueDataBrewClient, responses=[...])
    """
    created = []

    def _make(client_class, responses=None, config=None, **kwargs):
        config = config or test_settings
        session = FakeHttpSession(responses)
        client = client_class(
            config,
            credentials=kwargs.pop("credentials", credentials),
            http_executor=HttpExecutor(config, http_session=session),
            **kwargs,
        )
        created.append(client)
        return client, session

    yield _make

    for client in created:
        client.close()


# =============================================================================
# Pytest Hooks for Test Reporting
# =============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "property: marks tests as property-based tests"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        # Mark tests by directory
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "property" in str(item.fspath):
            item.add_marker(pytest.mark.property)


def pytest_sessionstart(session):
    """Print test session information."""
    print("\n" + "=" * 70)
    print("AWS Service Clients - Test Suite")
    print("=" * 70)


def pytest_sessionfinish(session, exitstatus):
    """Print test session summary."""
    print("\n" + "=" * 70)
    if exitstatus == 0:
        print("PASS: All tests passed!")
    else:
        print(f"FAIL: Tests failed with exit status: {exitstatus}")
    print("=" * 70)
