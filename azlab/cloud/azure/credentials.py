"""
Credential acquisition for the Azure management clients.
"""

import logging
from enum import Enum

from azure.core.credentials import TokenCredential
from azure.identity import DefaultAzureCredential, InteractiveBrowserCredential

logger = logging.getLogger(__name__)


class CredentialMode(str, Enum):
    """Supported ways of authenticating."""

    DEFAULT = "default"
    INTERACTIVE = "interactive"


def get_credential(mode: CredentialMode) -> TokenCredential:
    """Return a credential for the given mode.

    The credential is lazy: authentication errors surface on the first
    management call and abort the run like any other remote error.
    """
    if mode == CredentialMode.DEFAULT:
        logger.info("Using default Azure credential chain")
        return DefaultAzureCredential()
    elif mode == CredentialMode.INTERACTIVE:
        logger.info("Using interactive browser login")
        return InteractiveBrowserCredential()
    else:
        raise ValueError(f"Unknown credential mode: {mode}")
