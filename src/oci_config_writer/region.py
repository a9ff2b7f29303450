"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Resolve short OCI region codes (e.g. "IAD") to region identifiers (e.g. "us-ashburn-1").
"""
# spell-checker: ignore ashburn

import logging
from types import MappingProxyType
from typing import Mapping

import oci.regions

LOGGER = logging.getLogger(__name__)

# Built once from the SDK's short-name table; keys are upper-case region codes
REGIONS: Mapping[str, str] = MappingProxyType(
    {code.upper(): name for code, name in oci.regions.REGIONS_SHORT_NAMES.items()}
)


def identifier(code: str) -> str:
    """Return the region identifier for ``code``.

    The lookup is exact and case-sensitive.  Codes that are not in the table
    are returned unchanged, so a full identifier such as ``us-ashburn-1`` can
    be passed straight through.  Invalid values surface later as OCI API
    errors rather than here.
    """
    try:
        return REGIONS[code]
    except KeyError:
        LOGGER.debug("Region code %r not in table, using it as given", code)
        return code


def identifiers() -> list[str]:
    """Return the sorted, distinct region identifiers known to the table."""
    return sorted(set(REGIONS.values()))
