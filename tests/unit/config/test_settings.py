"""
Module: test_settings.py
Description: Unit tests for plugin settings and endpoint validation.
"""

import pytest
from pydantic import ValidationError

from coralogix_ci.config.settings import REGIONS, Settings, load_settings, validate_endpoint
from coralogix_ci.exceptions import ConfigurationError
from coralogix_ci.utils.logger import configure_logging, get_logger


class TestValidateEndpoint:

    def test_accepts_https_with_trailing_slash(self):
        assert validate_endpoint("https://api.coralogix.com/") == "https://api.coralogix.com/"

    def test_accepts_http(self):
        assert validate_endpoint("http://localhost:8080/") == "http://localhost:8080/"

    @pytest.mark.parametrize("url", [
        "ftp://x",
        "https://api.coralogix.com",
        "api.coralogix.com/",
        "",
    ])
    def test_rejects_malformed(self, url):
        with pytest.raises(ConfigurationError):
            validate_endpoint(url)


class TestSettings:
    """Test cases for Settings validation and defaults."""

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.region == "coralogix.com"
        assert settings.private_key is None
        assert settings.ci_name == "jenkins"
        assert settings.metrics_interval == 60
        assert settings.tag_wire_format == "json"
        assert not settings.audit_logs_enabled

    def test_region_preset_name(self):
        settings = Settings(_env_file=None, region="US")
        assert settings.region == REGIONS["US"]

    def test_region_rejects_url(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, region="https://api.coralogix.com/")

    def test_metrics_interval_minimum(self):
        assert Settings(_env_file=None, metrics_interval=5).metrics_interval == 5
        with pytest.raises(ValidationError):
            Settings(_env_file=None, metrics_interval=4)

    def test_custom_endpoint_validated(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, custom_endpoint="https://api.coralogix.com")

    def test_empty_custom_endpoint_is_none(self):
        assert Settings(_env_file=None, custom_endpoint="").custom_endpoint is None

    def test_log_level_normalized(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("CORALOGIX_PRIVATE_KEY", "env-key")
        monkeypatch.setenv("CORALOGIX_AUDIT_LOGS_ENABLED", "true")
        monkeypatch.setenv("CORALOGIX_REGION", "Singapore")

        settings = Settings(_env_file=None)

        assert settings.private_key.get_secret_value() == "env-key"
        assert settings.audit_logs_enabled is True
        assert settings.region == "coralogixsg.com"

    def test_private_key_masked(self):
        settings = Settings(_env_file=None, private_key="very-secret")
        assert "very-secret" not in repr(settings)


class TestLoadSettings:

    def test_invalid_settings_raise_configuration_error(self):
        with pytest.raises(ConfigurationError):
            load_settings(_env_file=None, custom_endpoint="ftp://x")

    def test_valid_overrides(self):
        settings = load_settings(_env_file=None, metrics_enabled=True)
        assert settings.metrics_enabled is True

    def test_log_level_applied(self, capsys):
        try:
            load_settings(_env_file=None, log_level="WARNING")
            get_logger("coralogix_ci.test").info("hidden message")
            get_logger("coralogix_ci.test").warning("shown message")
        finally:
            configure_logging("INFO")

        out = capsys.readouterr().out
        assert "hidden message" not in out
        assert "shown message" in out
