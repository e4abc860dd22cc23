"""
Azure provisioning utilities.

This package contains all Azure-specific functionality including:
- defaults: Default constants for Azure sample runs
- credentials: Credential acquisition
- clients: Management clients scoped to a subscription
- api: Per-resource create/get/list/delete operations
"""

from azlab.cloud.azure.defaults import (
    DEFAULT_REGION,
    DEFAULT_RESOURCE_GROUP,
    DEFAULT_VM_SIZE,
    SUBSCRIPTION_ID_ENV,
)

__all__ = [
    # Default constants
    "DEFAULT_REGION",
    "DEFAULT_RESOURCE_GROUP",
    "DEFAULT_VM_SIZE",
    "SUBSCRIPTION_ID_ENV",
]
