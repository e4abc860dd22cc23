"""Utility functions for configuration."""

import logging
import secrets
import string
from collections.abc import Mapping

from azlab.cloud.azure.defaults import ADMIN_PASSWORD_ENV

logger = logging.getLogger(__name__)


def generate_password(length: int = 20) -> str:
    """Generate a password meeting Azure's VM complexity rules.

    Azure requires three of: lowercase, uppercase, digit, special character.
    All four are included.
    """
    specials = "!@#%^*-_=+"
    alphabet = string.ascii_letters + string.digits + specials
    required = [
        secrets.choice(string.ascii_lowercase),
        secrets.choice(string.ascii_uppercase),
        secrets.choice(string.digits),
        secrets.choice(specials),
    ]
    rest = [secrets.choice(alphabet) for _ in range(length - len(required))]
    chars = required + rest
    secrets.SystemRandom().shuffle(chars)
    return "".join(chars)


def get_admin_password(environ: Mapping[str, str]) -> str:
    password = environ.get(ADMIN_PASSWORD_ENV)
    if password:
        return password
    logger.warning(
        f"No ${ADMIN_PASSWORD_ENV} set, generating a random admin password"
    )
    return generate_password()
