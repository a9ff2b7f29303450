"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Settings loaded from environment variables.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Writer settings populated from OCW_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="OCW_",
        extra="ignore",
    )

    log_level: str = "INFO"

    # Location of the config file, relative to the user's home directory
    config_dir: str = ".oci"
    config_name: str = "config"

    # Owner read/write only
    file_mode: int = 0o600

    @field_validator("file_mode", mode="before")
    @classmethod
    def _parse_octal(cls, value):
        """Accept modes written as octal strings, e.g. "600" or "0o600"."""
        if isinstance(value, str):
            return int(value, 8)
        return value

    @field_validator("file_mode")
    @classmethod
    def _owner_only(cls, value: int) -> int:
        """Reject modes that grant any access to group or others."""
        if value & 0o077:
            raise ValueError(f"file_mode {value:o} must not grant group or other access")
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()


settings = Settings()
