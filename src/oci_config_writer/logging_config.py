"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Logging configuration for the library and the command line.
"""
# spell-checker:ignore levelname

import logging
from logging.config import dictConfig
from typing import Optional

from oci_config_writer._version import __version__
from oci_config_writer.settings import settings

FORMATTER = {
    "format": "%(asctime)s (v%(__version__)s) - %(levelname)-8s - (%(name)s): %(message)s",
    "datefmt": "%Y-%b-%d %H:%M:%S",
}


class VersionFilter(logging.Filter):
    """Logging filter that injects the current package version into log"""

    def filter(self, record):
        record.__version__ = __version__
        return True


def configure_logging(log_level: Optional[str] = None) -> None:
    """Apply the logging settings.

    Args:
        log_level: Override log level.  Falls back to ``settings.log_level``
            (``OCW_LOG_LEVEL``), which defaults to ``"INFO"``.
    """
    level = (log_level or settings.log_level).upper()

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": FORMATTER,
            },
            "filters": {
                "version_filter": {
                    "()": VersionFilter,
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "standard",
                    "stream": "ext://sys.stderr",
                    "filters": ["version_filter"],
                },
            },
            "root": {
                "handlers": ["console"],
                "level": level,
            },
            "loggers": {
                "oci": {"level": "WARNING", "handlers": ["console"], "propagate": False},
            },
        }
    )
