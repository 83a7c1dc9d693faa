"""Unit tests for client settings."""

import pytest
from pydantic import ValidationError

from aws_service_clients import config as config_module
from aws_service_clients.config import Settings, get_settings


class TestSettingsDefaults:
    """Tests for default values."""

    def test_defaults(self):
        settings = Settings()

        assert settings.aws_region == "us-east-1"
        assert settings.endpoint_url is None
        assert settings.use_fips_endpoint is False
        assert settings.use_dualstack_endpoint is False
        assert settings.max_attempts == 3
        assert settings.executor_max_workers == 8
        assert settings.log_level == "INFO"
        assert settings.cloudwatch_logging_enabled is False
        assert settings.cloudwatch_log_group == "/aws-service-clients"


class TestSettingsEnvironment:
    """Tests for environment variable loading."""

    def test_region_from_aws_region(self, monkeypatch):
        monkeypatch.setenv("AWS_REGION", "eu-west-2")

        assert get_settings().aws_region == "eu-west-2"

    def test_region_from_default_region(self, monkeypatch):
        monkeypatch.setenv("AWS_DEFAULT_REGION", "sa-east-1")

        assert get_settings().aws_region == "sa-east-1"

    def test_endpoint_flags(self, monkeypatch):
        monkeypatch.setenv("AWS_USE_FIPS_ENDPOINT", "true")
        monkeypatch.setenv("AWS_USE_DUALSTACK_ENDPOINT", "1")
        monkeypatch.setenv("AWS_ENDPOINT_URL", "http://localhost:4566")

        settings = get_settings()

        assert settings.use_fips_endpoint is True
        assert settings.use_dualstack_endpoint is True
        assert settings.endpoint_url == "http://localhost:4566"

    def test_max_attempts_alias(self, monkeypatch):
        monkeypatch.setenv("AWS_MAX_ATTEMPTS", "5")

        assert get_settings().max_attempts == 5

    def test_invalid_max_attempts(self, monkeypatch):
        monkeypatch.setenv("MAX_ATTEMPTS", "0")

        with pytest.raises(ValidationError):
            get_settings()

    def test_field_names_accepted(self):
        settings = Settings(aws_region="ap-northeast-1", executor_max_workers=2)

        assert settings.aws_region == "ap-northeast-1"
        assert settings.executor_max_workers == 2


class TestGlobalSettings:
    """Tests for the lazily created global instance."""

    def test_settings_cached(self, monkeypatch):
        monkeypatch.setattr(config_module, "_settings", None)

        first = config_module.settings()

        assert config_module.settings() is first
