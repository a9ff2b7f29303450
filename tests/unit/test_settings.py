"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Tests for settings loaded from the environment.
"""

import pytest
from pydantic import ValidationError

from oci_config_writer.settings import Settings


class TestSettings:
    """Settings reads OCW_* environment variables."""

    def test_defaults(self, monkeypatch):
        """Defaults point at ~/.oci/config with mode 0600."""
        for name in ("OCW_LOG_LEVEL", "OCW_CONFIG_DIR", "OCW_CONFIG_NAME", "OCW_FILE_MODE"):
            monkeypatch.delenv(name, raising=False)
        result = Settings()
        assert result.log_level == "INFO"
        assert result.config_dir == ".oci"
        assert result.config_name == "config"
        assert result.file_mode == 0o600

    def test_environment_overrides(self, monkeypatch):
        """OCW_* variables override the defaults."""
        monkeypatch.setenv("OCW_LOG_LEVEL", "debug")
        monkeypatch.setenv("OCW_CONFIG_DIR", ".oci-dev")
        monkeypatch.setenv("OCW_CONFIG_NAME", "dev")
        result = Settings()
        assert result.log_level == "DEBUG"
        assert result.config_dir == ".oci-dev"
        assert result.config_name == "dev"

    def test_file_mode_is_octal(self, monkeypatch):
        """OCW_FILE_MODE is read as an octal number."""
        monkeypatch.setenv("OCW_FILE_MODE", "400")
        assert Settings().file_mode == 0o400

    def test_file_mode_with_prefix(self, monkeypatch):
        """An 0o prefix is accepted."""
        monkeypatch.setenv("OCW_FILE_MODE", "0o700")
        assert Settings().file_mode == 0o700

    @pytest.mark.parametrize("mode", ["644", "666", "0o660", "604"])
    def test_file_mode_rejects_group_and_other_access(self, monkeypatch, mode):
        """Modes with group or other bits set are refused."""
        monkeypatch.setenv("OCW_FILE_MODE", mode)
        with pytest.raises(ValidationError):
            Settings()

    def test_file_mode_rejects_wide_integer(self):
        """An integer mode granting world access is refused."""
        with pytest.raises(ValidationError):
            Settings(file_mode=0o666)
