"""Configuration dataclasses for azlab runs."""

from azlab.config.azure_config import AzureConfigs
from azlab.config.configs import Configs
from azlab.config.resource_config import (
    NicParams,
    PublicIpParams,
    ResourceDefaults,
    StorageParams,
    VmParams,
    VnetParams,
)
from azlab.config.run_policy import CleanupPolicy, RunPolicy
from azlab.config.utils import generate_password, get_admin_password

__all__ = [
    # Config classes
    "AzureConfigs",
    "Configs",
    "RunPolicy",
    "CleanupPolicy",
    # Resource parameters
    "ResourceDefaults",
    "VnetParams",
    "PublicIpParams",
    "NicParams",
    "VmParams",
    "StorageParams",
    # Utilities
    "generate_password",
    "get_admin_password",
]
