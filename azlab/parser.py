import argparse

from azlab.cloud.azure.defaults import (
    ADMIN_PASSWORD_ENV,
    DEFAULT_ADMIN_USERNAME,
    DEFAULT_REGION,
    DEFAULT_RESOURCE_GROUP,
    DEFAULT_VM_SIZE,
    SUBSCRIPTION_ID_ENV,
)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Provision a sample Azure VM (VNet, public IP, NIC, VM), "
            "list it, then tear it down"
        ),
        epilog=(
            f"The subscription is read from ${SUBSCRIPTION_ID_ENV}. "
            f"The VM admin password is read from ${ADMIN_PASSWORD_ENV} "
            "and generated when unset."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--resource-group",
        type=str,
        default=DEFAULT_RESOURCE_GROUP,
        help=(
            "Existing resource group to provision into "
            f"(default: {DEFAULT_RESOURCE_GROUP})"
        ),
    )
    parser.add_argument(
        "-l",
        "--location",
        "-r",
        "--region",
        type=str,
        default=DEFAULT_REGION,
        dest="location",
        help=f"Azure region (default: {DEFAULT_REGION})",
    )
    parser.add_argument(
        "--vm-size",
        type=str,
        help=f"VM size (default: {DEFAULT_VM_SIZE})",
    )
    parser.add_argument(
        "--admin-username",
        type=str,
        help=f"VM admin username (default: {DEFAULT_ADMIN_USERNAME})",
    )
    parser.add_argument(
        "--dns-label",
        type=str,
        help="Optional DNS label for the public IP address",
    )

    parser.add_argument(
        "--credential",
        type=str,
        choices=["default", "interactive"],
        default="default",
        help=(
            "How to authenticate: the default credential chain or an "
            "interactive browser login (default: default)"
        ),
    )

    parser.add_argument(
        "--cleanup",
        type=str,
        choices=["all", "vm-only", "none"],
        default="all",
        help=(
            "What to delete at the end of the run: everything created, "
            "only the VM, or nothing (default: all)"
        ),
    )
    parser.add_argument(
        "--with-storage",
        action="store_true",
        help="Also create and delete a storage account",
        default=False,
    )
    parser.add_argument(
        "--list-operations",
        action="store_true",
        help="Only list the compute provider's operations and exit",
        default=False,
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 when a remote operation fails",
        default=False,
    )

    # Logging
    parser.add_argument(
        "-v",
        "--logs",
        action="store_true",
        help="If flagged, print debug logs and full tracebacks on failure",
        default=False,
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return create_parser().parse_args(argv)
