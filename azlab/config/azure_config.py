"""Azure account configuration dataclass."""

import argparse
from collections.abc import Mapping
from dataclasses import dataclass

from azlab.cloud.azure.credentials import CredentialMode
from azlab.cloud.azure.defaults import SUBSCRIPTION_ID_ENV, validate_region


def mask_subscription_id(subscription_id: str) -> str:
    """Keep only the last four characters, for logs."""
    return "*" * max(len(subscription_id) - 4, 0) + subscription_id[-4:]


@dataclass
class AzureConfigs:
    subscription_id: str
    resource_group: str
    location: str
    credential_mode: CredentialMode = CredentialMode.DEFAULT

    @staticmethod
    def from_args(
        args: argparse.Namespace, environ: Mapping[str, str]
    ) -> "AzureConfigs":
        subscription_id = environ.get(SUBSCRIPTION_ID_ENV, "").strip()
        if not subscription_id:
            raise ValueError(
                f"Missing ${SUBSCRIPTION_ID_ENV}. "
                "Set it to the subscription to provision into"
            )

        validate_region(args.location)

        return AzureConfigs(
            subscription_id=subscription_id,
            resource_group=args.resource_group,
            location=args.location,
            credential_mode=CredentialMode(args.credential),
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "subscriptionId": mask_subscription_id(self.subscription_id),
            "resourceGroup": self.resource_group,
            "location": self.location,
            "credential": self.credential_mode.value,
        }
