import mcp.types as types
import pytest

from prompt_optimizer.errors import InvalidInputError, UnknownToolError
from prompt_optimizer.mcp.server import (
    SERVER_NAME,
    call_tool,
    create_server,
    list_tool_definitions,
)


def test_list_tool_definitions(registry):
    tools = list_tool_definitions(registry)

    assert len(tools) == 1
    assert isinstance(tools[0], types.Tool)
    assert tools[0].name == "optimize_prompt"
    assert tools[0].inputSchema["required"] == ["prompt"]
    assert "Optimize-Then-Answer" in tools[0].description


@pytest.mark.asyncio
async def test_call_tool_returns_text(registry):
    content = await call_tool(registry, "optimize_prompt", {"prompt": "build a dashboard"})

    assert len(content) == 1
    assert content[0].type == "text"
    assert content[0].text.startswith("[OPTIMIZED] Domain: code")


@pytest.mark.asyncio
async def test_call_tool_passes_context(registry):
    content = await call_tool(
        registry, "optimize_prompt", {"prompt": "build a dashboard", "context": "weekend project"}
    )
    assert "Clarification Needed" in content[0].text


@pytest.mark.asyncio
async def test_unknown_tool(registry):
    with pytest.raises(UnknownToolError):
        await call_tool(registry, "summarize", {})


@pytest.mark.asyncio
async def test_missing_prompt(registry):
    with pytest.raises(InvalidInputError):
        await call_tool(registry, "optimize_prompt", None)


@pytest.mark.asyncio
async def test_list_tools_handler_registered(registry):
    server = create_server(registry)

    assert server.name == SERVER_NAME
    assert types.CallToolRequest in server.request_handlers

    handler = server.request_handlers[types.ListToolsRequest]
    result = await handler(types.ListToolsRequest(method="tools/list"))
    assert [tool.name for tool in result.root.tools] == ["optimize_prompt"]


@pytest.mark.asyncio
async def test_undeclared_arguments_ignored(registry):
    content = await call_tool(
        registry, "optimize_prompt", {"prompt": "build a dashboard", "temperature": 0.2}
    )
    assert content[0].text.startswith("[OPTIMIZED] Domain: code | Clarity: 24%")


@pytest.mark.asyncio
async def test_undeclared_arguments_do_not_replace_prompt(registry):
    with pytest.raises(InvalidInputError):
        await call_tool(registry, "optimize_prompt", {"text": "build a dashboard"})
