"""Beeswax connection configuration.

Settings are usually taken from the environment:

- ``BEESWAX_URL``: base URL of the Buzz instance, e.g. https://buzzkey.api.beeswax.com
- ``BEESWAX_USER``: login email
- ``BEESWAX_PASSWORD``: login password
- ``BEESWAX_ACCOUNT_ID``: optional, for multi-account users
"""

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from beeswax.errors import BeeswaxConfigurationError
from beeswax.resources.authenticate import Authenticate

ENV_URL = "BEESWAX_URL"
ENV_USER = "BEESWAX_USER"
ENV_PASSWORD = "BEESWAX_PASSWORD"
ENV_ACCOUNT_ID = "BEESWAX_ACCOUNT_ID"


class BeeswaxConnectionConfig(BaseModel):
    """Connection configuration for a Buzz instance."""

    model_config = ConfigDict(extra="forbid")

    base_url: str = Field(
        ...,
        description="Base URL of the Buzz instance, without the /rest suffix",
        json_schema_extra={"ui_order": 1},
    )
    user: str = Field(
        ...,
        description="Login email",
        json_schema_extra={"ui_order": 2},
    )
    password: str = Field(
        ...,
        repr=False,
        description="Login password",
        json_schema_extra={"secret": True, "ui_order": 3},
    )
    account_id: int | None = Field(
        default=None,
        description="Account to authenticate into, for multi-account users",
    )
    keep_logged_in: bool = Field(
        default=False,
        description="Keep the session alive for up to 30 days",
    )
    timeout: int = Field(
        default=30,
        ge=1,
        description="Request timeout in seconds",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an http(s) URL and strip the trailing slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid base_url '{v}'. Must start with http:// or https://")
        return v.rstrip("/")

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        base_url: str | None = None,
    ) -> "BeeswaxConnectionConfig":
        """Build the configuration from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``
            base_url: Overrides ``BEESWAX_URL`` when given

        Raises:
            BeeswaxConfigurationError: If a required variable is missing or invalid
        """
        env = os.environ if environ is None else environ

        values = {
            "base_url": base_url or env.get(ENV_URL),
            "user": env.get(ENV_USER),
            "password": env.get(ENV_PASSWORD),
        }
        missing = [
            name
            for name, key in ((ENV_URL, "base_url"), (ENV_USER, "user"), (ENV_PASSWORD, "password"))
            if not values[key]
        ]
        if missing:
            raise BeeswaxConfigurationError(f"Missing environment variables: {', '.join(missing)}")

        if env.get(ENV_ACCOUNT_ID):
            values["account_id"] = env[ENV_ACCOUNT_ID]

        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise BeeswaxConfigurationError(f"Invalid Beeswax configuration: {e}") from e

    def to_authenticate(self) -> Authenticate:
        """Credentials for the authenticate endpoint."""
        return Authenticate(
            email=self.user,
            password=self.password,
            account_id=self.account_id,
            keep_logged_in=self.keep_logged_in,
        )
