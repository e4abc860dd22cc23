from __future__ import annotations

import logging
from types import SimpleNamespace

import pytest
from azure.core.exceptions import HttpResponseError

import azlab.cloud.azure.clients as clients_module
from azlab.cloud.azure.api import (
    PublicIpApi,
    StorageAccountApi,
    VirtualMachineApi,
    VirtualNetworkApi,
    list_compute_operations,
)
from azlab.cloud.azure.clients import AzureClients
from conftest import RESOURCE_GROUP, make_clients


def test_create_returns_resource_with_requested_name(clients):
    api = VirtualNetworkApi(clients)

    vnet = api.create(RESOURCE_GROUP, "vnet-1", {"location": "eastus"})

    assert vnet.name == "vnet-1"


def test_create_waits_for_completion(clients):
    api = PublicIpApi(clients)

    api.create(RESOURCE_GROUP, "pip-1", {"location": "eastus"})

    poller = clients.network.public_ip_addresses.pollers[-1]
    assert poller.waited is True


def test_create_propagates_remote_error_unchanged(clients):
    error = HttpResponseError(message="QuotaExceeded")
    clients.network.virtual_networks.failures["create"] = error
    api = VirtualNetworkApi(clients)

    with pytest.raises(HttpResponseError) as excinfo:
        api.create(RESOURCE_GROUP, "vnet-1", {"location": "eastus"})

    assert excinfo.value is error


def test_get_reads_back_resource(clients):
    api = VirtualNetworkApi(clients)
    api.create(RESOURCE_GROUP, "vnet-1", {"location": "eastus"})

    vnet = api.get(RESOURCE_GROUP, "vnet-1")

    assert vnet.provisioning_state == "Succeeded"


def test_list_empty_collection(clients, caplog):
    caplog.set_level(logging.INFO)
    api = VirtualMachineApi(clients)

    result = api.list()

    assert result == []
    assert "Found 0 virtual machine(s)" in caplog.text


def test_list_logs_each_entry_with_index(calls, caplog):
    caplog.set_level(logging.INFO)
    existing = [
        SimpleNamespace(name="a", location="eastus", provisioning_state="Succeeded"),
        SimpleNamespace(name="b", location="westus2", provisioning_state="Updating"),
    ]
    api = VirtualMachineApi(make_clients(calls, existing_vms=existing))

    result = api.list()

    assert [vm.name for vm in result] == ["a", "b"]
    assert "0: a location=eastus state=Succeeded" in caplog.text
    assert "1: b location=westus2 state=Updating" in caplog.text
    assert "Found 2 virtual machine(s)" in caplog.text


def test_list_consumes_pager_once(calls):
    existing = [SimpleNamespace(name="a", location="eastus", provisioning_state=None)]
    clients = make_clients(calls, existing_vms=existing)
    pager = iter(existing)
    clients.compute.virtual_machines.list_all = lambda: pager

    result = VirtualMachineApi(clients).list()

    assert len(result) == 1
    assert list(pager) == []


def test_delete_waits_and_has_no_existence_check(clients, calls):
    api = VirtualMachineApi(clients)

    api.delete(RESOURCE_GROUP, "vm-missing")

    assert calls == [("virtualMachines", "delete", "vm-missing")]
    assert clients.compute.virtual_machines.pollers[-1].waited is True


def test_delete_error_propagates(clients):
    clients.compute.virtual_machines.failures["delete"] = HttpResponseError(
        message="ResourceNotFound"
    )

    with pytest.raises(HttpResponseError):
        VirtualMachineApi(clients).delete(RESOURCE_GROUP, "vm-missing")


def test_storage_account_uses_storage_verbs(clients, calls):
    api = StorageAccountApi(clients)

    account = api.create(RESOURCE_GROUP, "sa1", {"location": "eastus"})
    api.get(RESOURCE_GROUP, "sa1")
    api.delete(RESOURCE_GROUP, "sa1")

    assert account.name == "sa1"
    assert calls == [
        ("storageAccounts", "create", "sa1"),
        ("storageAccounts", "get", "sa1"),
        ("storageAccounts", "delete", "sa1"),
    ]


def test_storage_account_requires_storage_client(calls):
    api = StorageAccountApi(make_clients(calls, with_storage=False))

    with pytest.raises(ValueError, match="--with-storage"):
        api.list()


def test_list_compute_operations(clients, caplog):
    caplog.set_level(logging.INFO)

    operations = list_compute_operations(clients)

    assert len(operations) == 2
    assert "Microsoft.Compute/virtualMachines/read" in caplog.text
    assert "Found 2 compute operation(s)" in caplog.text


def test_client_creation_does_not_log_subscription_id(monkeypatch, caplog):
    caplog.set_level(logging.DEBUG)
    built = []

    def fake_client(credential, subscription_id):
        built.append(subscription_id)
        return SimpleNamespace()

    for name in (
        "ComputeManagementClient",
        "NetworkManagementClient",
        "StorageManagementClient",
    ):
        monkeypatch.setattr(clients_module, name, fake_client)

    result = AzureClients.create(object(), "sub-secret-42", with_storage=True)

    assert built == ["sub-secret-42"] * 3
    assert result.storage is not None
    assert "sub-secret-42" not in caplog.text
