"""Tests for Beeswax connection configuration."""

import pytest

from beeswax.config import BeeswaxConnectionConfig
from beeswax.errors import BeeswaxConfigurationError

ENV = {
    "BEESWAX_URL": "https://buzzkey.api.beeswax.com/",
    "BEESWAX_USER": "user@example.com",
    "BEESWAX_PASSWORD": "secret",
}


class TestBeeswaxConnectionConfig:
    """Tests for BeeswaxConnectionConfig."""

    def test_from_env(self):
        config = BeeswaxConnectionConfig.from_env(ENV)

        assert config.base_url == "https://buzzkey.api.beeswax.com"
        assert config.user == "user@example.com"
        assert config.password == "secret"
        assert config.account_id is None
        assert config.timeout == 30

    def test_from_env_reads_os_environ(self, monkeypatch):
        for key, value in ENV.items():
            monkeypatch.setenv(key, value)
        monkeypatch.delenv("BEESWAX_ACCOUNT_ID", raising=False)

        config = BeeswaxConnectionConfig.from_env()

        assert config.user == "user@example.com"

    def test_from_env_account_id(self):
        config = BeeswaxConnectionConfig.from_env({**ENV, "BEESWAX_ACCOUNT_ID": "7"})

        assert config.account_id == 7

    def test_base_url_override(self):
        config = BeeswaxConnectionConfig.from_env(
            {"BEESWAX_USER": "user@example.com", "BEESWAX_PASSWORD": "secret"},
            base_url="http://localhost:8080",
        )

        assert config.base_url == "http://localhost:8080"

    def test_missing_variables_are_listed(self):
        with pytest.raises(BeeswaxConfigurationError) as exc_info:
            BeeswaxConnectionConfig.from_env({"BEESWAX_URL": "https://buzzkey.api.beeswax.com"})

        assert "BEESWAX_USER" in str(exc_info.value)
        assert "BEESWAX_PASSWORD" in str(exc_info.value)
        assert "BEESWAX_URL" not in str(exc_info.value)

    def test_invalid_url(self):
        with pytest.raises(BeeswaxConfigurationError, match="Invalid Beeswax configuration"):
            BeeswaxConnectionConfig.from_env({**ENV, "BEESWAX_URL": "buzzkey.api.beeswax.com"})

    def test_invalid_account_id(self):
        with pytest.raises(BeeswaxConfigurationError):
            BeeswaxConnectionConfig.from_env({**ENV, "BEESWAX_ACCOUNT_ID": "not-a-number"})

    def test_password_not_in_repr(self):
        config = BeeswaxConnectionConfig.from_env(ENV)

        assert "secret" not in repr(config)

    def test_password_marked_secret_in_schema(self):
        schema = BeeswaxConnectionConfig.model_json_schema()

        assert schema["properties"]["password"]["secret"] is True

    def test_to_authenticate(self):
        config = BeeswaxConnectionConfig.from_env({**ENV, "BEESWAX_ACCOUNT_ID": "7"})

        auth = config.to_authenticate()

        assert auth.email == "user@example.com"
        assert auth.password == "secret"
        assert auth.account_id == 7
        assert auth.keep_logged_in is False
