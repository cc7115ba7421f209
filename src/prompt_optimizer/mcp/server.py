"""prompt-optimizer MCP Server.

Exposes the tool registry (``optimize_prompt``) over the Model Context
Protocol so assistants can call the analysis before making AI requests.

Implementation notes
- Built on the low-level ``Server`` of the ``mcp`` Python SDK.
- Handlers are plain coroutines (``list_tool_definitions``, ``call_tool``)
  registered on the server, so they can be exercised without a transport.
- Transport: stdio. Logging goes to stderr.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from ..errors import PromptOptimizerError
from ..tools import ToolRegistry, build_registry

SERVER_NAME = "prompt-optimizer"

log = logging.getLogger(__name__)


def list_tool_definitions(registry: ToolRegistry) -> List[types.Tool]:
    return [
        types.Tool(
            name=tool.name,
            description=tool.description,
            inputSchema=tool.get_parameters_schema(),
        )
        for tool in registry.get_all_tools()
    ]


async def call_tool(
    registry: ToolRegistry, name: str, arguments: Optional[Dict[str, Any]]
) -> List[types.TextContent]:
    """Run a registered tool and wrap its text output.

    Raises PromptOptimizerError for unknown tools or invalid arguments; the
    SDK reports raised errors to the client as error results.
    """
    tool = registry.require_tool(name)
    declared = tool.get_parameters_schema().get("properties", {})
    # Undeclared keys are ignored
    kwargs = {k: v for k, v in (arguments or {}).items() if k in declared}
    try:
        text = tool.execute(**kwargs)
    except PromptOptimizerError as e:
        log.warning("Tool %s rejected call: %s", name, e.message)
        raise
    return [types.TextContent(type="text", text=text)]


def create_server(registry: Optional[ToolRegistry] = None) -> Server:
    """Build the MCP server with list/call handlers bound to ``registry``."""
    registry = registry or build_registry()
    server = Server(SERVER_NAME)

    @server.list_tools()
    async def _list_tools() -> List[types.Tool]:
        return list_tool_definitions(registry)

    @server.call_tool()
    async def _call_tool(name: str, arguments: Dict[str, Any]) -> List[types.TextContent]:
        return await call_tool(registry, name, arguments)

    return server


async def serve_stdio(registry: Optional[ToolRegistry] = None) -> None:
    """Run the MCP server over stdio."""
    server = create_server(registry)
    log.info("Prompt Optimizer MCP Server running on stdio")
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def run_stdio_blocking(registry: Optional[ToolRegistry] = None) -> None:
    asyncio.run(serve_stdio(registry))
