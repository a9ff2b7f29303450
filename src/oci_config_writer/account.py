"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Tenancy profiles and admin user credentials, rendered as config file blocks.

The DEFAULT block holds the tenancy profile; ADMIN_USER blocks add further
users.  Blocks are only ever appended to the file, never merged or rewritten.
"""
# spell-checker: ignore ocid

import logging
from dataclasses import dataclass, field
from pathlib import Path

from oci_config_writer.exceptions import ConfigFileError
from oci_config_writer.region import identifier

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Profile:
    """The DEFAULT section of the config file."""

    user: str
    fingerprint: str
    key_file: str
    tenancy: str
    region: str

    def entry(self) -> str:
        """Render the profile as a DEFAULT block."""
        return (
            "[DEFAULT]\n"
            f"user: {self.user}\n"
            f"fingerprint: {self.fingerprint}\n"
            f"key_file: {self.key_file}\n"
            f"tenancy: {self.tenancy}\n"
            f"region: {self.region}\n"
            "\n"
        )


@dataclass(frozen=True)
class Admin:
    """An ADMIN_USER section of the config file."""

    user: str
    fingerprint: str
    key_file: str
    pass_phrase: str = field(repr=False)

    def entry(self) -> str:
        """Render the credentials as an ADMIN_USER block."""
        return (
            "[ADMIN_USER]\n"
            f"user={self.user}\n"
            f"fingerprint={self.fingerprint}\n"
            f"key_file={self.key_file}\n"
            f"pass_phrase={self.pass_phrase}\n"
            "\n"
        )


def write(path: Path, block: str) -> None:
    """Append ``block`` to an existing config file with a single write"""
    path = Path(path)
    if not path.is_file():
        LOGGER.error("Config file %s does not exist", path)
        raise ConfigFileError(f"Config file {path} does not exist", path)
    try:
        with open(path, "a", encoding="utf-8") as f:
            f.write(block)
    except OSError as ex:
        LOGGER.error("Failed to write to %s: %s", path, ex)
        raise ConfigFileError(f"Failed to write to {path}: {ex}", path) from ex


def default(path: Path, user: str, fingerprint: str, key_file: str, tenancy: str, region: str) -> Profile:
    """Append the tenancy profile to the config file.

    ``region`` may be a short code such as ``IAD``; it is resolved to the
    region identifier before writing.
    """
    profile = Profile(
        user=user,
        fingerprint=fingerprint,
        key_file=key_file,
        tenancy=tenancy,
        region=identifier(region),
    )
    write(path, profile.entry())
    LOGGER.info("Tenancy data written to %s", path)
    return profile


def admin(path: Path, user: str, fingerprint: str, key_file: str, pass_phrase: str) -> Admin:
    """Append admin user credentials to the config file"""
    credentials = Admin(user=user, fingerprint=fingerprint, key_file=key_file, pass_phrase=pass_phrase)
    write(path, credentials.entry())
    LOGGER.info("User data written to %s", path)
    return credentials
