import asyncio
import logging
import sys

from dotenv import load_dotenv

from nocobase_mcp.server import run_server

logger = logging.getLogger(__name__)


def main() -> None:
    load_dotenv()

    try:
        asyncio.run(run_server())
    except KeyboardInterrupt:
        pass
    except Exception as e:
        logger.critical(f"Fatal error in main(): {e}", exc_info=True)
        sys.exit(1)
