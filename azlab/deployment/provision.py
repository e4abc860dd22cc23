import logging
from dataclasses import dataclass, field
from typing import Any

from azlab.cloud.azure.api import ResourceApi, ResourceApis
from azlab.cloud.azure.clients import AzureClients
from azlab.cloud.azure.credentials import get_credential
from azlab.config import CleanupPolicy, Configs, ResourceDefaults, RunPolicy
from azlab.utils.naming import ResourceNames, time_suffix

logger = logging.getLogger(__name__)


@dataclass
class CreatedResource:
    api: ResourceApi
    name: str
    resource: Any


@dataclass
class ProvisionedResources:
    """Resources created during one run, in creation order."""

    resource_group: str
    created: list[CreatedResource] = field(default_factory=list)
    deleted: list[str] = field(default_factory=list)

    def record(self, api: ResourceApi, name: str, resource: Any) -> None:
        self.created.append(CreatedResource(api, name, resource))

    def names(self) -> list[str]:
        return [c.name for c in self.created]

    def to_dict(self) -> dict[str, Any]:
        return {
            "resourceGroup": self.resource_group,
            "created": [
                {"type": c.api.resource_type, "name": c.name}
                for c in self.created
            ],
            "deleted": self.deleted,
        }


class Provisioner:
    """Runs the fixed provision, list, teardown sequence.

    Each step waits for its remote call to finish before the next one
    starts. The first failure propagates and skips everything after it,
    teardown included.
    """

    def __init__(
        self,
        apis: ResourceApis,
        resource_group: str,
        defaults: ResourceDefaults,
        policy: RunPolicy,
        names: ResourceNames,
    ):
        self.apis = apis
        self.resource_group = resource_group
        self.defaults = defaults
        self.policy = policy
        self.names = names
        self.output = ProvisionedResources(resource_group=resource_group)

    def _create(self, api: ResourceApi, name: str, params: dict) -> Any:
        api.create(self.resource_group, name, params)
        resource = api.get(self.resource_group, name)
        self.output.record(api, name, resource)
        return resource

    def create_virtual_network(self) -> Any:
        params = self.defaults.vnet.to_parameters(subnet_name=self.names.subnet)
        return self._create(self.apis.vnet, self.names.vnet, params)

    def create_public_ip(self) -> Any:
        params = self.defaults.public_ip.to_parameters()
        return self._create(self.apis.public_ip, self.names.public_ip, params)

    def create_network_interface(self, vnet: Any, public_ip: Any) -> Any:
        if not vnet.subnets:
            raise RuntimeError(f"Virtual network {vnet.name} has no subnets")
        params = self.defaults.nic.to_parameters(
            ip_config_name=self.names.ip_config,
            subnet_id=vnet.subnets[0].id,
            public_ip_id=public_ip.id,
        )
        return self._create(self.apis.nic, self.names.nic, params)

    def create_virtual_machine(self, nic: Any) -> Any:
        params = self.defaults.vm.to_parameters(
            computer_name=self.names.vm, nic_id=nic.id
        )
        return self._create(self.apis.vm, self.names.vm, params)

    def create_storage_account(self) -> Any:
        params = self.defaults.storage.to_parameters()
        return self._create(
            self.apis.storage, self.names.storage_account, params
        )

    def provision(self) -> None:
        # No data dependency between the VNet and the IP, still sequential
        vnet = self.create_virtual_network()
        public_ip = self.create_public_ip()
        nic = self.create_network_interface(vnet, public_ip)
        self.create_virtual_machine(nic)

    def _to_delete(self) -> list[CreatedResource]:
        if self.policy.cleanup == CleanupPolicy.NONE:
            return []
        # Reverse creation order satisfies the reference chain:
        # VM -> NIC -> {Public IP, VNet}
        ordered = list(reversed(self.output.created))
        if self.policy.cleanup == CleanupPolicy.VM_ONLY:
            return [c for c in ordered if c.api is self.apis.vm]
        return ordered

    def teardown(self) -> None:
        to_delete = self._to_delete()
        if not to_delete:
            logger.info(
                f"Cleanup policy is '{self.policy.cleanup.value}', "
                f"leaving {len(self.output.created)} resource(s) in place"
            )
            return

        kept = len(self.output.created) - len(to_delete)
        if kept:
            logger.warning(
                f"Cleanup policy is '{self.policy.cleanup.value}', "
                f"leaving {kept} resource(s) in {self.resource_group}"
            )
        for created in to_delete:
            created.api.delete(self.resource_group, created.name)
            self.output.deleted.append(created.name)

    def run(self) -> ProvisionedResources:
        logger.info("Existing virtual machines:")
        self.apis.vm.list()

        self.provision()

        logger.info("Virtual machines after provisioning:")
        self.apis.vm.list()

        if self.policy.with_storage:
            self.create_storage_account()

        self.teardown()
        logger.info("Sample run completed.")
        return self.output


def build_provisioner(
    configs: Configs, clients: AzureClients, suffix: str | None = None
) -> Provisioner:
    names = ResourceNames.generate(suffix or time_suffix())
    logger.info(f"Resource names for this run: {names.to_dict()}")
    return Provisioner(
        apis=ResourceApis.from_clients(clients),
        resource_group=configs.azure.resource_group,
        defaults=configs.resources,
        policy=configs.policy,
        names=names,
    )


def create_clients(configs: Configs) -> AzureClients:
    credential = get_credential(configs.azure.credential_mode)
    return AzureClients.create(
        credential,
        configs.azure.subscription_id,
        with_storage=configs.policy.with_storage,
    )
