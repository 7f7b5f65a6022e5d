"""FastMCP server initialization for Google Tasks MCP."""

import argparse
import logging

from mcp.server.fastmcp import FastMCP
from mcp.types import ListResourcesRequest, ListResourcesResult, ServerResult
from mcp.types import Resource as MCPResource

from gtasks_mcp.auth import authenticate_and_save
from gtasks_mcp.config import Settings
from gtasks_mcp.errors import ConfigError
from gtasks_mcp.operations.listing import find_task, list_task_resources
from gtasks_mcp.utils.api import get_client
from gtasks_mcp.utils.formatters import _format_task_detail

logger = logging.getLogger(__name__)

TASK_URI_PREFIX = "gtasks:///"


def _to_resources(tasks) -> list[MCPResource]:
    return [
        MCPResource(uri=f"{TASK_URI_PREFIX}{task.id}", name=task.title or task.id, mimeType="text/plain")
        for task in tasks
        if task.id
    ]


class GTasksMCP(FastMCP):
    """FastMCP server that lists tasks as resources straight from the API."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # FastMCP's own resources/list handler drops the cursor
        self._mcp_server.request_handlers[ListResourcesRequest] = self._handle_list_resources

    async def list_resources(self) -> list[MCPResource]:
        tasks, _ = await list_task_resources(get_client())
        return _to_resources(tasks)

    async def _handle_list_resources(self, request: ListResourcesRequest) -> ServerResult:
        cursor = request.params.cursor if request.params else None
        tasks, next_cursor = await list_task_resources(get_client(), cursor)
        return ServerResult(ListResourcesResult(resources=_to_resources(tasks), nextCursor=next_cursor))


# Initialize the MCP server
mcp = GTasksMCP("gtasks_mcp")


@mcp.resource(f"{TASK_URI_PREFIX}{{task_id}}", mime_type="text/plain")
async def read_task_resource(task_id: str) -> str:
    """Details of a single task, looked up across all task lists."""
    task = await find_task(get_client(), task_id)
    return _format_task_detail(task)


def run(argv: list[str] | None = None) -> None:
    """Run the MCP server, or the one-off OAuth flow with ``auth``."""
    parser = argparse.ArgumentParser(prog="gtasks-mcp", description="MCP server for Google Tasks")
    parser.add_argument(
        "command",
        nargs="?",
        choices=["serve", "auth"],
        default="serve",
        help="'auth' signs in through the browser and saves credentials (default: serve)",
    )
    args = parser.parse_args(argv)

    settings = Settings.from_env()
    # stdout carries the MCP protocol, so logs go to stderr
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "auth":
        try:
            authenticate_and_save(settings.oauth_keys_path, settings.credentials_path)
        except ConfigError as e:
            logger.error("Authentication failed: %s", e)
            parser.exit(1, f"{e}\n")
        print(f"Credentials saved to {settings.credentials_path}. You can now run the server.")
        return

    mcp.run()


if __name__ == "__main__":
    run()
