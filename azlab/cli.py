import json
import logging
import sys
import traceback

from azlab.cloud.azure.api import list_compute_operations
from azlab.config import Configs
from azlab.deployment.provision import build_provisioner, create_clients
from azlab.utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    try:
        configs = Configs.parse(argv)
    except ValueError as e:
        setup_logging()
        logger.error(str(e))
        return 1

    setup_logging(verbose=configs.show_logs)
    logger.debug(f"Config:\n{json.dumps(configs.to_dict(), indent=2)}")

    try:
        clients = create_clients(configs)
        if configs.policy.list_operations:
            list_compute_operations(clients)
            return 0

        configs = configs.with_admin_password()
        provisioner = build_provisioner(configs, clients)
        output = provisioner.run()
        logger.debug(f"Run output:\n{json.dumps(output.to_dict(), indent=2)}")
        return 0
    except Exception as e:
        if configs.show_logs:
            logger.error(f"Failed: {str(e)}\n{traceback.format_exc()}")
        else:
            logger.error(f"Failed: {str(e)}")
        # Resources created before the failure are left in place
        return 1 if configs.policy.strict else 0


if __name__ == "__main__":
    sys.exit(main())
