import logging
from typing import Any, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent
from pydantic import ValidationError

from nocobase_mcp.client import CrmClient
from nocobase_mcp.config import ServerConfig
from nocobase_mcp.tools import TOOLS, TOOL_HANDLERS

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def dispatch_tool(client: CrmClient, name: str, arguments: Optional[dict[str, Any]]) -> str:
    handler = TOOL_HANDLERS.get(name)

    if handler is None:
        return f"Unknown tool: {name}"

    try:
        logger.info(f"Executing tool: {name} with args: {arguments}")
        result = await handler(client, arguments or {})
        logger.info(f"Tool {name} completed")
        return result
    except ValidationError as e:
        logger.warning(f"Tool {name} rejected arguments: {e.error_count()} errors")
        return f"Invalid arguments for {name}: {e}"
    except Exception as e:
        logger.exception(f"Tool {name} failed: {e}")
        return f"Error: {str(e)}"


def create_server(config: ServerConfig, client: CrmClient) -> Server:
    server = Server(config.server_name, version=config.server_version)

    @server.list_tools()
    async def list_tools():
        return TOOLS

    @server.call_tool()
    async def call_tool(name: str, arguments: dict):
        text = await dispatch_tool(client, name, arguments)
        return [TextContent(type="text", text=text)]

    return server


async def run_server(config: Optional[ServerConfig] = None):
    config = config or ServerConfig.from_env()
    configure_logging(config.log_level)

    if not config.api_base:
        logger.warning("API_BASE is not set, every CRM request will fail")

    async with CrmClient(config) as client:
        server = create_server(config, client)
        logger.info(f"Starting {config.server_name} {config.server_version} on stdio...")

        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options()
            )
