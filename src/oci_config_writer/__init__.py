"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Manage an Oracle Cloud Infrastructure (OCI) config file.

The file lives below the user's home directory (``~/.oci/config`` by default).
Before anything is written the file is created if missing, or its permissions
are narrowed to owner read/write if it already exists.  See
https://docs.oracle.com/en-us/iaas/Content/API/Concepts/sdkconfig.htm for the
file format.

Example::

    from oci_config_writer import profile, credentials, report

    profile(
        "ocid1.user.oc1..aaaaaaaaxxxxxx",
        "aa:bb:cc:dd",
        "path/to/private/key",
        "ocid1.tenancy.oc1..aaaaaaaaxxxxxx",
        "IAD",
    )
    credentials("ocid1.user.oc1..aaaaaaaaxxxxxx", "aa:bb:cc:dd", "path/to/private/key", "passphrase")
    print(report())
"""
# spell-checker: ignore ocid

from pathlib import Path

from oci_config_writer._version import __version__
from oci_config_writer.account import Admin, Profile, admin, default
from oci_config_writer.exceptions import ConfigFileError, ConfigWriterError, HomeDirectoryNotFound
from oci_config_writer.file import config_path, ensure, read

__all__ = [
    "Admin",
    "ConfigFileError",
    "ConfigWriterError",
    "HomeDirectoryNotFound",
    "Profile",
    "__version__",
    "credentials",
    "profile",
    "report",
]


def profile(user: str, fingerprint: str, key_file: str, tenancy: str, region: str) -> Path:
    """Write the tenancy profile (DEFAULT section) to the config file and return its path."""
    path = ensure()
    default(path, user, fingerprint, key_file, tenancy, region)
    return path


def credentials(user: str, fingerprint: str, key_file: str, pass_phrase: str) -> Path:
    """Add admin user credentials (ADMIN_USER section) to the config file and return its path."""
    path = ensure()
    admin(path, user, fingerprint, key_file, pass_phrase)
    return path


def report() -> str:
    """Return the content of the config file."""
    return read(config_path())
