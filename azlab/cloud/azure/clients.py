"""
Management clients scoped to one subscription.
"""

import logging
from dataclasses import dataclass

from azure.core.credentials import TokenCredential
from azure.mgmt.compute import ComputeManagementClient
from azure.mgmt.network import NetworkManagementClient
from azure.mgmt.storage import StorageManagementClient

logger = logging.getLogger(__name__)


@dataclass
class AzureClients:
    compute: ComputeManagementClient
    network: NetworkManagementClient
    storage: StorageManagementClient | None = None

    @staticmethod
    def create(
        credential: TokenCredential,
        subscription_id: str,
        with_storage: bool = False,
    ) -> "AzureClients":
        logger.info("Creating management clients")
        storage = None
        if with_storage:
            storage = StorageManagementClient(credential, subscription_id)
        return AzureClients(
            compute=ComputeManagementClient(credential, subscription_id),
            network=NetworkManagementClient(credential, subscription_id),
            storage=storage,
        )
