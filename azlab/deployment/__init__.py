"""Deployment module for the sample provisioning run."""

from azlab.deployment.provision import (
    CreatedResource,
    ProvisionedResources,
    Provisioner,
    build_provisioner,
    create_clients,
)

__all__ = [
    "CreatedResource",
    "ProvisionedResources",
    "Provisioner",
    "build_provisioner",
    "create_clients",
]
