"""Entry point for the stdio tool server: ``python -m src.tool_server``."""

import logging
import sys

from src.common.config import get_copilot_config
from src.common.errors import ConfigError
from src.edit_plan.providers import edit_plan_service
from src.tool_server.server import create_tool_server

logger = logging.getLogger(__name__)


def main() -> None:
    """Start the tool server, or exit if the backend is not configured."""
    # stdout carries the protocol, so logs go to stderr
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    try:
        service = edit_plan_service(get_copilot_config())
    except ConfigError as e:
        logger.error("Cannot start tool server: %s", e)
        sys.exit(1)

    server = create_tool_server(service)
    logger.info("Tool server running via stdio")
    server.run(transport="stdio")


if __name__ == "__main__":
    main()
