"""Create-parameter dataclasses for each resource type.

Each dataclass carries documented defaults and renders the request body the
management SDK expects. Overrides go through ``with_overrides`` so that the
defaults themselves are never mutated.
"""

import argparse
from dataclasses import dataclass, field, fields, replace
from typing import Any

from azlab.cloud.azure.defaults import (
    DEFAULT_ADMIN_USERNAME,
    DEFAULT_IMAGE_OFFER,
    DEFAULT_IMAGE_PUBLISHER,
    DEFAULT_IMAGE_SKU,
    DEFAULT_IMAGE_VERSION,
    DEFAULT_IP_ALLOCATION_METHOD,
    DEFAULT_IP_SKU,
    DEFAULT_OS_DISK_CACHING,
    DEFAULT_OS_DISK_SKU,
    DEFAULT_REGION,
    DEFAULT_STORAGE_KIND,
    DEFAULT_STORAGE_SKU,
    DEFAULT_SUBNET_PREFIX,
    DEFAULT_VM_SIZE,
    DEFAULT_VNET_ADDRESS_PREFIXES,
)


@dataclass(frozen=True)
class VnetParams:
    location: str = DEFAULT_REGION
    address_prefixes: tuple[str, ...] = DEFAULT_VNET_ADDRESS_PREFIXES
    subnet_prefix: str = DEFAULT_SUBNET_PREFIX

    def to_parameters(self, subnet_name: str) -> dict[str, Any]:
        return {
            "location": self.location,
            "address_space": {"address_prefixes": list(self.address_prefixes)},
            "subnets": [
                {"name": subnet_name, "address_prefix": self.subnet_prefix}
            ],
        }


@dataclass(frozen=True)
class PublicIpParams:
    location: str = DEFAULT_REGION
    allocation_method: str = DEFAULT_IP_ALLOCATION_METHOD
    sku: str = DEFAULT_IP_SKU
    dns_label: str | None = None

    def to_parameters(self) -> dict[str, Any]:
        params: dict[str, Any] = {
            "location": self.location,
            "sku": {"name": self.sku},
            "public_ip_allocation_method": self.allocation_method,
        }
        if self.dns_label:
            params["dns_settings"] = {"domain_name_label": self.dns_label}
        return params


@dataclass(frozen=True)
class NicParams:
    location: str = DEFAULT_REGION

    def to_parameters(
        self, ip_config_name: str, subnet_id: str, public_ip_id: str
    ) -> dict[str, Any]:
        return {
            "location": self.location,
            "ip_configurations": [
                {
                    "name": ip_config_name,
                    "subnet": {"id": subnet_id},
                    "public_ip_address": {"id": public_ip_id},
                }
            ],
        }


@dataclass(frozen=True)
class VmParams:
    location: str = DEFAULT_REGION
    size: str = DEFAULT_VM_SIZE
    admin_username: str = DEFAULT_ADMIN_USERNAME
    admin_password: str = field(default="", repr=False)
    image_publisher: str = DEFAULT_IMAGE_PUBLISHER
    image_offer: str = DEFAULT_IMAGE_OFFER
    image_sku: str = DEFAULT_IMAGE_SKU
    image_version: str = DEFAULT_IMAGE_VERSION
    os_disk_caching: str = DEFAULT_OS_DISK_CACHING
    os_disk_sku: str = DEFAULT_OS_DISK_SKU

    def to_parameters(self, computer_name: str, nic_id: str) -> dict[str, Any]:
        if not self.admin_password:
            raise ValueError("VM admin password must be set")
        return {
            "location": self.location,
            "hardware_profile": {"vm_size": self.size},
            "os_profile": {
                "computer_name": computer_name,
                "admin_username": self.admin_username,
                "admin_password": self.admin_password,
            },
            "network_profile": {"network_interfaces": [{"id": nic_id}]},
            "storage_profile": {
                "image_reference": {
                    "publisher": self.image_publisher,
                    "offer": self.image_offer,
                    "sku": self.image_sku,
                    "version": self.image_version,
                },
                "os_disk": {
                    "name": f"{computer_name}-osdisk",
                    "caching": self.os_disk_caching,
                    "create_option": "FromImage",
                    # Removed together with the VM
                    "delete_option": "Delete",
                    "managed_disk": {"storage_account_type": self.os_disk_sku},
                },
            },
        }


@dataclass(frozen=True)
class StorageParams:
    location: str = DEFAULT_REGION
    sku: str = DEFAULT_STORAGE_SKU
    kind: str = DEFAULT_STORAGE_KIND

    def to_parameters(self) -> dict[str, Any]:
        return {
            "location": self.location,
            "sku": {"name": self.sku},
            "kind": self.kind,
        }


@dataclass(frozen=True)
class ResourceDefaults:
    vnet: VnetParams = VnetParams()
    public_ip: PublicIpParams = PublicIpParams()
    nic: NicParams = NicParams()
    vm: VmParams = VmParams()
    storage: StorageParams = StorageParams()

    def with_location(self, location: str) -> "ResourceDefaults":
        """Return a copy with every resource placed in ``location``."""
        return ResourceDefaults(
            **{
                f.name: replace(getattr(self, f.name), location=location)
                for f in fields(self)
            }
        )

    def with_overrides(self, **overrides: dict[str, Any]) -> "ResourceDefaults":
        """Merge per-resource overrides into the defaults.

        Example:
            defaults.with_overrides(vm={"size": "Standard_B1s"})

        Fields that are not named keep their default value. Unknown resource
        or field names raise TypeError.
        """
        merged = {}
        for f in fields(self):
            current = getattr(self, f.name)
            resource_overrides = overrides.pop(f.name, None)
            if resource_overrides:
                current = replace(current, **resource_overrides)
            merged[f.name] = current
        if overrides:
            unknown = ", ".join(sorted(overrides))
            raise TypeError(f"Unknown resource types: {unknown}")
        return ResourceDefaults(**merged)

    @staticmethod
    def from_args(
        args: argparse.Namespace, location: str
    ) -> "ResourceDefaults":
        vm_overrides: dict[str, Any] = {}
        if args.vm_size:
            vm_overrides["size"] = args.vm_size
        if args.admin_username:
            vm_overrides["admin_username"] = args.admin_username
        ip_overrides = {}
        if args.dns_label:
            ip_overrides["dns_label"] = args.dns_label
        return (
            ResourceDefaults()
            .with_location(location)
            .with_overrides(vm=vm_overrides, public_ip=ip_overrides)
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "vnet": {
                "location": self.vnet.location,
                "addressPrefixes": list(self.vnet.address_prefixes),
                "subnetPrefix": self.vnet.subnet_prefix,
            },
            "publicIp": {
                "location": self.public_ip.location,
                "allocationMethod": self.public_ip.allocation_method,
                "sku": self.public_ip.sku,
                "dnsLabel": self.public_ip.dns_label,
            },
            "vm": {
                "location": self.vm.location,
                "size": self.vm.size,
                "adminUsername": self.vm.admin_username,
                "image": (
                    f"{self.vm.image_publisher}:{self.vm.image_offer}:"
                    f"{self.vm.image_sku}:{self.vm.image_version}"
                ),
            },
            "storage": {
                "location": self.storage.location,
                "sku": self.storage.sku,
                "kind": self.storage.kind,
            },
        }
