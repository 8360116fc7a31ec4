"""Typed configuration loaded from environment variables at startup."""

from __future__ import annotations

import logging
from typing import Any, Callable, Literal

from pydantic import ImportString, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from vpc_infra.schema import SubnetLookupArgs

logger: logging.Logger = logging.getLogger(__name__)


class ProviderConfig(BaseSettings):
    """Fully validated subnet data source configuration.

    All values are sourced from environment variables at startup.
    Raises ``ValidationError`` on invalid values.
    """

    model_config = SettingsConfigDict(
        env_prefix="VPC_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    region: str = "us-south"
    controller_url: str = "https://cloud.ibm.com"
    client_factory: ImportString[Callable[..., Any]] | None = None
    subnet_identifier: str | None = None
    subnet_name: str | None = None
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @field_validator("controller_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    def lookup_args(self) -> SubnetLookupArgs:
        """Build validated lookup inputs from the configured identifier/name."""
        return SubnetLookupArgs(identifier=self.subnet_identifier, name=self.subnet_name)

    @classmethod
    def load(cls) -> ProviderConfig:
        """Load and validate configuration from the environment.

        Logs each resolved setting at DEBUG level.
        """
        config = cls()
        logger.debug(
            "provider_config_loaded",
            extra={
                "region": config.region,
                "controller_url": config.controller_url,
                "has_client_factory": config.client_factory is not None,
                "log_level": config.log_level,
            },
        )
        return config
