"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Exceptions raised while locating, writing or reading the OCI config file.
"""

from pathlib import Path
from typing import Optional


class ConfigWriterError(Exception):
    """Base exception for the config writer"""

    def __init__(self, message):
        super().__init__(message)


class HomeDirectoryNotFound(ConfigWriterError):
    """The user's home directory could not be resolved"""


class ConfigFileError(ConfigWriterError):
    """Creating, opening, writing or reading the config file failed"""

    def __init__(self, message, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path
