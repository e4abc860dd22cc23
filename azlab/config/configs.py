"""Top-level Configs dataclass."""

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from azlab.config.azure_config import AzureConfigs
from azlab.config.resource_config import ResourceDefaults
from azlab.config.run_policy import RunPolicy
from azlab.config.utils import get_admin_password
from azlab.parser import parse_args


@dataclass
class Configs:
    azure: AzureConfigs
    resources: ResourceDefaults
    policy: RunPolicy
    show_logs: bool

    @staticmethod
    def parse(
        argv: list[str] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> "Configs":
        """Build the run configuration from CLI args and the environment.

        The VM admin password is not resolved here; see
        ``with_admin_password``.

        Raises:
            ValueError: If the subscription id is missing or an argument
                is invalid. Nothing remote has been touched at this point.
        """
        if environ is None:
            environ = os.environ
        args = parse_args(argv)
        azure = AzureConfigs.from_args(args, environ)
        policy = RunPolicy.from_args(args)
        resources = ResourceDefaults.from_args(args, location=azure.location)
        return Configs(
            azure=azure,
            resources=resources,
            policy=policy,
            show_logs=args.logs,
        )

    def with_admin_password(
        self, environ: Mapping[str, str] | None = None
    ) -> "Configs":
        """Return a copy whose VM parameters carry the admin password.

        Only needed when a VM is about to be created. A password is
        generated when the environment does not provide one.
        """
        if environ is None:
            environ = os.environ
        resources = self.resources.with_overrides(
            vm={"admin_password": get_admin_password(environ)}
        )
        return replace(self, resources=resources)

    def to_dict(self) -> dict[str, Any]:
        return {
            "azure": self.azure.to_dict(),
            "resources": self.resources.to_dict(),
            "policy": self.policy.to_dict(),
            "showLogs": self.show_logs,
        }
