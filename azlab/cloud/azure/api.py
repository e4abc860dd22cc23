#!/usr/bin/env python3
"""
Azure resource operations.
One thin wrapper per resource type around the management SDK: create, get,
list and delete, each a single remote call that waits for completion.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from azlab.cloud.azure.clients import AzureClients

logger = logging.getLogger(__name__)


class ResourceApi(ABC):
    """Base class for per-resource-type operations.

    Remote errors (``azure.core.exceptions.HttpResponseError`` and friends)
    propagate to the caller unchanged.
    """

    resource_type = "resource"

    def __init__(self, clients: AzureClients):
        self.clients = clients

    @property
    @abstractmethod
    def operations(self) -> Any:
        """The SDK operations group for this resource type."""
        raise NotImplementedError

    def _create(self, resource_group: str, name: str, params: dict) -> Any:
        poller = self.operations.begin_create_or_update(
            resource_group, name, params
        )
        return poller.result()

    def _get(self, resource_group: str, name: str) -> Any:
        return self.operations.get(resource_group, name)

    def _list(self) -> Any:
        return self.operations.list_all()

    def _delete(self, resource_group: str, name: str) -> None:
        poller = self.operations.begin_delete(resource_group, name)
        poller.result()

    def create(self, resource_group: str, name: str, params: dict) -> Any:
        """Create or update a resource and wait for provisioning to finish."""
        logger.info(
            f"Creating {self.resource_type} {name} "
            f"in resource group {resource_group}..."
        )
        resource = self._create(resource_group, name, params)
        logger.info(f"Created {self.resource_type}: {resource.name}")
        return resource

    def get(self, resource_group: str, name: str) -> Any:
        """Fetch a resource and log its provisioning state."""
        resource = self._get(resource_group, name)
        state = getattr(resource, "provisioning_state", None)
        logger.info(
            f"Read back {self.resource_type} {resource.name} "
            f"(provisioning state: {state})"
        )
        return resource

    def list(self) -> list[Any]:
        """List every resource of this type in the subscription.

        The SDK pager is consumed exactly once; the materialized list is
        returned.
        """
        logger.info(f"Listing {self.resource_type}s...")
        resources = []
        for index, resource in enumerate(self._list()):
            state = getattr(resource, "provisioning_state", None)
            logger.info(
                f"  {index}: {resource.name} "
                f"location={resource.location} state={state}"
            )
            resources.append(resource)
        logger.info(f"Found {len(resources)} {self.resource_type}(s)")
        return resources

    def delete(self, resource_group: str, name: str) -> None:
        """Delete a resource and wait for the deletion to finish.

        No existence check: deleting a missing resource surfaces whatever
        the service returns.
        """
        logger.info(
            f"Deleting {self.resource_type} {name} "
            f"from resource group {resource_group}..."
        )
        self._delete(resource_group, name)
        logger.info(f"Deleted {self.resource_type}: {name}")


class VirtualNetworkApi(ResourceApi):
    resource_type = "virtual network"

    @property
    def operations(self) -> Any:
        return self.clients.network.virtual_networks


class PublicIpApi(ResourceApi):
    resource_type = "public IP address"

    @property
    def operations(self) -> Any:
        return self.clients.network.public_ip_addresses


class NetworkInterfaceApi(ResourceApi):
    resource_type = "network interface"

    @property
    def operations(self) -> Any:
        return self.clients.network.network_interfaces


class VirtualMachineApi(ResourceApi):
    resource_type = "virtual machine"

    @property
    def operations(self) -> Any:
        return self.clients.compute.virtual_machines


class StorageAccountApi(ResourceApi):
    """Storage accounts use begin_create / get_properties / list / delete."""

    resource_type = "storage account"

    @property
    def operations(self) -> Any:
        if self.clients.storage is None:
            raise ValueError(
                "Storage client was not created; run with --with-storage"
            )
        return self.clients.storage.storage_accounts

    def _create(self, resource_group: str, name: str, params: dict) -> Any:
        poller = self.operations.begin_create(resource_group, name, params)
        return poller.result()

    def _get(self, resource_group: str, name: str) -> Any:
        return self.operations.get_properties(resource_group, name)

    def _list(self) -> Any:
        return self.operations.list()

    def _delete(self, resource_group: str, name: str) -> None:
        # Synchronous on the service side; there is no poller
        self.operations.delete(resource_group, name)


def list_compute_operations(clients: AzureClients) -> list[Any]:
    """List the REST operations exposed by the compute provider."""
    logger.info("Listing compute provider operations...")
    operations = list(clients.compute.operations.list())
    for index, operation in enumerate(operations):
        logger.info(f"  {index}: {operation.name}")
    logger.info(f"Found {len(operations)} compute operation(s)")
    return operations


@dataclass
class ResourceApis:
    vnet: VirtualNetworkApi
    public_ip: PublicIpApi
    nic: NetworkInterfaceApi
    vm: VirtualMachineApi
    storage: StorageAccountApi

    @staticmethod
    def from_clients(clients: AzureClients) -> "ResourceApis":
        return ResourceApis(
            vnet=VirtualNetworkApi(clients),
            public_ip=PublicIpApi(clients),
            nic=NetworkInterfaceApi(clients),
            vm=VirtualMachineApi(clients),
            storage=StorageAccountApi(clients),
        )
