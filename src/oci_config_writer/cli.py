"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Command line front end for writing and inspecting the OCI config file.
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

import oci_config_writer
from oci_config_writer import logging_config
from oci_config_writer.exceptions import ConfigWriterError
from oci_config_writer.region import REGIONS, identifiers

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser with one sub-command per operation"""
    parser = argparse.ArgumentParser(
        prog="oci-config-writer",
        description="Write tenancy profiles and admin credentials to the OCI config file",
    )
    parser.add_argument("--log-level", default=None, help="Log level (default: OCW_LOG_LEVEL or INFO)")
    parser.add_argument("--version", action="version", version=oci_config_writer.__version__)
    commands = parser.add_subparsers(dest="command", required=True)

    profile = commands.add_parser("profile", help="Append the DEFAULT tenancy profile")
    profile.add_argument("--user", required=True, help="User OCID")
    profile.add_argument("--fingerprint", required=True, help="API key fingerprint")
    profile.add_argument("--key-file", required=True, help="Path to the private key")
    profile.add_argument("--tenancy", required=True, help="Tenancy OCID")
    profile.add_argument("--region", required=True, help="Region code (e.g. IAD) or region identifier")

    credentials = commands.add_parser("credentials", help="Append ADMIN_USER credentials")
    credentials.add_argument("--user", required=True, help="User OCID")
    credentials.add_argument("--fingerprint", required=True, help="API key fingerprint")
    credentials.add_argument("--key-file", required=True, help="Path to the private key")
    credentials.add_argument("--pass-phrase", required=True, help="Private key pass phrase")

    commands.add_parser("report", help="Print the config file")
    commands.add_parser("regions", help="List the known region identifiers and their codes")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line and return the exit status"""
    args = build_parser().parse_args(argv)
    logging_config.configure_logging(args.log_level)

    try:
        if args.command == "profile":
            path = oci_config_writer.profile(args.user, args.fingerprint, args.key_file, args.tenancy, args.region)
            LOGGER.info("Profile successfully written to %s", path)
        elif args.command == "credentials":
            path = oci_config_writer.credentials(args.user, args.fingerprint, args.key_file, args.pass_phrase)
            LOGGER.info("Credentials successfully written to %s", path)
        elif args.command == "report":
            sys.stdout.write(oci_config_writer.report())
        elif args.command == "regions":
            for name in identifiers():
                codes = sorted(code for code, region_name in REGIONS.items() if region_name == name)
                print(f"{','.join(codes):<5} {name}")
    except ConfigWriterError as ex:
        LOGGER.error("%s", ex)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
