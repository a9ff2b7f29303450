"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Pytest configuration for unit tests.

Every test runs against a temporary home directory so the real
``~/.oci/config`` is never touched.  All tests in this directory are
marked 'unit':

    pytest -m "unit"           # Run only unit tests
"""
# pylint: disable=redefined-outer-name

import logging

import pytest

from oci_config_writer.settings import settings


def pytest_collection_modifyitems(items):
    """Automatically add 'unit' marker to all tests in this directory."""
    for item in items:
        if "/tests/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def home(tmp_path, monkeypatch):
    """Point the home directory at an empty temporary directory."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.setattr(settings, "config_dir", ".oci")
    monkeypatch.setattr(settings, "config_name", "config")
    monkeypatch.setattr(settings, "file_mode", 0o600)
    return home_dir


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo configure_logging so later tests do not log to closed capture streams."""
    root = logging.getLogger()
    oci_logger = logging.getLogger("oci")
    root_handlers, root_level = root.handlers[:], root.level
    oci_handlers, oci_level, oci_propagate = oci_logger.handlers[:], oci_logger.level, oci_logger.propagate
    yield
    root.handlers[:] = root_handlers
    root.setLevel(root_level)
    oci_logger.handlers[:] = oci_handlers
    oci_logger.setLevel(oci_level)
    oci_logger.propagate = oci_propagate


@pytest.fixture
def config_file(home):
    """Path of the config file inside the temporary home directory."""
    return home / ".oci" / "config"


@pytest.fixture
def existing_config(config_file):
    """A pre-existing, world-readable config file with one block."""
    config_file.parent.mkdir()
    config_file.write_text("[DEFAULT]\nuser: existing\n\n", encoding="utf-8")
    config_file.chmod(0o644)
    return config_file
