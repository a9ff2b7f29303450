"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Locate, create, secure and read the OCI config file.
"""

import logging
import stat
from pathlib import Path
from typing import Optional

from oci_config_writer.exceptions import ConfigFileError, HomeDirectoryNotFound
from oci_config_writer.settings import settings

LOGGER = logging.getLogger(__name__)


def home_dir() -> Path:
    """Return the user's home directory or raise HomeDirectoryNotFound"""
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as ex:
        LOGGER.error("Unable to resolve the home directory: %s", ex)
        raise HomeDirectoryNotFound("Unable to resolve the home directory") from ex

    if not home.is_dir():
        LOGGER.error("Home directory %s does not exist", home)
        raise HomeDirectoryNotFound(f"Home directory {home} does not exist")
    return home


def config_path(directory: Optional[str] = None, name: Optional[str] = None) -> Path:
    """Return <home>/<directory>/<name>, defaulting to the configured location"""
    return home_dir() / (directory or settings.config_dir) / (name or settings.config_name)


def create(directory: str, name: str) -> Path:
    """Create the config directory and an empty config file below the home directory.

    An existing file is left untouched.  New files get ``settings.file_mode``.
    """
    folder = home_dir() / directory
    path = folder / name
    try:
        folder.mkdir(mode=0o700, parents=True, exist_ok=True)
        if not path.exists():
            path.touch(mode=settings.file_mode)
            path.chmod(settings.file_mode)
            LOGGER.info("Created config file %s", path)
    except OSError as ex:
        LOGGER.error("Failed to create %s: %s", path, ex)
        raise ConfigFileError(f"Failed to create {path}: {ex}", path) from ex
    return path


def permissions(path: Path) -> None:
    """Narrow the mode of an existing config file to ``settings.file_mode``"""
    path = Path(path)
    try:
        current = stat.S_IMODE(path.stat().st_mode)
        if current != settings.file_mode:
            path.chmod(settings.file_mode)
            LOGGER.info("Changed mode of %s from %o to %o", path, current, settings.file_mode)
    except OSError as ex:
        LOGGER.error("Failed to set permissions on %s: %s", path, ex)
        raise ConfigFileError(f"Failed to set permissions on {path}: {ex}", path) from ex


def ensure(directory: Optional[str] = None, name: Optional[str] = None) -> Path:
    """Make the config file ready for appending and return its path.

    A missing file is created; an existing file has its permissions narrowed.
    """
    directory = directory or settings.config_dir
    name = name or settings.config_name
    path = config_path(directory, name)
    if not path.exists():
        return create(directory, name)
    permissions(path)
    return path


def read(path: Path) -> str:
    """Return the whole content of the config file"""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except OSError as ex:
        LOGGER.error("Failed to read %s: %s", path, ex)
        raise ConfigFileError(f"Failed to read {path}: {ex}", path) from ex
    LOGGER.debug("Read %d characters from %s", len(content), path)
    return content
