"""
Default values for Azure sample deployments.
"""

import re

# Environment
SUBSCRIPTION_ID_ENV = "AZURE_SUBSCRIPTION_ID"
ADMIN_PASSWORD_ENV = "AZURE_VM_ADMIN_PASSWORD"

# Resource groups

# The resource group that owns the VNet, IP, NIC and VM. Must already exist.
DEFAULT_RESOURCE_GROUP = "azlab-samples"

# VM configuration
DEFAULT_REGION = "eastus"
DEFAULT_VM_SIZE = "Standard_B2s"
DEFAULT_ADMIN_USERNAME = "azureuser"

# Ubuntu 22.04 LTS, gen2
DEFAULT_IMAGE_PUBLISHER = "Canonical"
DEFAULT_IMAGE_OFFER = "0001-com-ubuntu-server-jammy"
DEFAULT_IMAGE_SKU = "22_04-lts-gen2"
DEFAULT_IMAGE_VERSION = "latest"

DEFAULT_OS_DISK_CACHING = "ReadWrite"
DEFAULT_OS_DISK_SKU = "Standard_LRS"

# Network configuration
DEFAULT_VNET_ADDRESS_PREFIXES = ("10.0.0.0/16",)
DEFAULT_SUBNET_PREFIX = "10.0.0.0/24"
DEFAULT_IP_ALLOCATION_METHOD = "Static"
DEFAULT_IP_SKU = "Standard"

# Storage configuration
DEFAULT_STORAGE_SKU = "Standard_LRS"
DEFAULT_STORAGE_KIND = "StorageV2"

# Region names are lowercase letters and digits, e.g. eastus, westeurope.
# Which regions exist and offer a given VM size is left to the service.
REGION_NAME_PATTERN = re.compile(r"[a-z][a-z0-9]*")


def validate_region(region: str) -> None:
    """Validate that the region looks like an Azure region name.

    Args:
        region: The Azure region to validate

    Raises:
        ValueError: If the region is not a well-formed region name
    """
    if not REGION_NAME_PATTERN.fullmatch(region):
        msg = (
            f"Invalid Azure region: {region}. "
            "Azure region names are lowercase letters and digits, "
            f"e.g. {DEFAULT_REGION}"
        )
        raise ValueError(msg)
