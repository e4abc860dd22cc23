from __future__ import annotations

from types import SimpleNamespace

import pytest

from azlab.cloud.azure.api import ResourceApis
from azlab.config import ResourceDefaults, RunPolicy
from azlab.deployment.provision import Provisioner
from azlab.utils.naming import ResourceNames

SUFFIX = "0307090501"
RESOURCE_GROUP = "rg-test"


class DummyPoller:
    def __init__(self, result=None):
        self._result = result
        self.waited = False

    def result(self):
        self.waited = True
        return self._result


class FakeOperations:
    """In-memory stand-in for one SDK operations group."""

    def __init__(self, kind: str, calls: list, items=None):
        self.kind = kind
        self.calls = calls
        self.items = list(items or [])
        self.store: dict[str, SimpleNamespace] = {}
        self.pollers: list[DummyPoller] = []
        self.failures: dict[str, Exception] = {}

    def _maybe_fail(self, method: str) -> None:
        if method in self.failures:
            raise self.failures[method]

    def _build(self, resource_group: str, name: str, params: dict):
        resource_id = f"/resourceGroups/{resource_group}/{self.kind}/{name}"
        subnets = [
            SimpleNamespace(name=s["name"], id=f"{resource_id}/subnets/{s['name']}")
            for s in params.get("subnets", [])
        ]
        return SimpleNamespace(
            name=name,
            id=resource_id,
            location=params.get("location"),
            provisioning_state="Succeeded",
            subnets=subnets,
            params=params,
        )

    def begin_create_or_update(self, resource_group, name, params):
        self.calls.append((self.kind, "create", name))
        self._maybe_fail("create")
        resource = self._build(resource_group, name, params)
        self.store[name] = resource
        poller = DummyPoller(resource)
        self.pollers.append(poller)
        return poller

    def get(self, resource_group, name):
        self.calls.append((self.kind, "get", name))
        self._maybe_fail("get")
        return self.store[name]

    def list_all(self):
        self.calls.append((self.kind, "list", None))
        self._maybe_fail("list")
        return iter(self.items + list(self.store.values()))

    def begin_delete(self, resource_group, name):
        self.calls.append((self.kind, "delete", name))
        self._maybe_fail("delete")
        self.store.pop(name, None)
        poller = DummyPoller(None)
        self.pollers.append(poller)
        return poller


class FakeStorageOperations(FakeOperations):
    def begin_create(self, resource_group, name, params):
        return self.begin_create_or_update(resource_group, name, params)

    def get_properties(self, resource_group, name):
        return self.get(resource_group, name)

    def list(self):
        return self.list_all()

    def delete(self, resource_group, name):
        self.calls.append((self.kind, "delete", name))
        self._maybe_fail("delete")
        self.store.pop(name, None)


def make_clients(calls: list, existing_vms=None, with_storage: bool = True):
    compute_ops = [
        SimpleNamespace(name="Microsoft.Compute/virtualMachines/read"),
        SimpleNamespace(name="Microsoft.Compute/virtualMachines/write"),
    ]
    storage = None
    if with_storage:
        storage = SimpleNamespace(
            storage_accounts=FakeStorageOperations("storageAccounts", calls)
        )
    return SimpleNamespace(
        compute=SimpleNamespace(
            virtual_machines=FakeOperations(
                "virtualMachines", calls, items=existing_vms
            ),
            operations=SimpleNamespace(list=lambda: iter(compute_ops)),
        ),
        network=SimpleNamespace(
            virtual_networks=FakeOperations("virtualNetworks", calls),
            public_ip_addresses=FakeOperations("publicIPAddresses", calls),
            network_interfaces=FakeOperations("networkInterfaces", calls),
        ),
        storage=storage,
    )


@pytest.fixture
def calls():
    return []


@pytest.fixture
def clients(calls):
    return make_clients(calls)


@pytest.fixture
def defaults():
    return ResourceDefaults().with_overrides(vm={"admin_password": "Secret-123"})


@pytest.fixture
def make_provisioner(clients, defaults):
    def _make(**policy_kwargs) -> Provisioner:
        return Provisioner(
            apis=ResourceApis.from_clients(clients),
            resource_group=RESOURCE_GROUP,
            defaults=defaults,
            policy=RunPolicy(**policy_kwargs),
            names=ResourceNames.generate(SUFFIX),
        )

    return _make
