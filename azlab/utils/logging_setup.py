import logging

# Third-party loggers that flood INFO with HTTP request/response dumps
NOISY_LOGGERS = (
    "azure",
    "azure.core.pipeline.policies.http_logging_policy",
    "azure.identity",
    "azure.mgmt",
    "msal",
    "urllib3",
)


def setup_logging(verbose: bool = False) -> None:
    """Configure root logging for the CLI entry points."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
