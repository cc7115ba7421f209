"""Base tool abstractions shared by the MCP server and the CLI."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..errors import UnknownToolError


class BaseTool(ABC):
    """Base class for all prompt-optimizer tools exposed to clients."""

    def __init__(self, name: str, description: str):
        self.name = name
        self.description = description
        self.logger = logging.getLogger(
            f"{self.__class__.__module__}.{self.__class__.__name__}"
        )

    @abstractmethod
    def execute(self, *args, **kwargs) -> str:
        """Execute the tool with given parameters."""
        pass

    @abstractmethod
    def get_parameters_schema(self) -> Dict[str, Any]:
        """Get JSON schema for tool parameters."""
        pass

    def to_definition(self) -> Dict[str, Any]:
        """Name, description and input schema, as advertised to MCP clients."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.get_parameters_schema(),
        }


class ToolRegistry:
    """Registry for managing the tools a server advertises."""

    def __init__(self):
        self._tools: Dict[str, BaseTool] = {}
        self.logger = logging.getLogger(__name__)

    def register(self, tool: BaseTool) -> None:
        """Register a tool."""
        self._tools[tool.name] = tool
        self.logger.debug(f"Registered tool: {tool.name}")

    def get_tool(self, name: str) -> Optional[BaseTool]:
        """Get a tool by name."""
        return self._tools.get(name)

    def require_tool(self, name: str) -> BaseTool:
        """Get a tool by name or raise UnknownToolError."""
        tool = self._tools.get(name)
        if tool is None:
            raise UnknownToolError(name, list(self._tools))
        return tool

    def get_all_tools(self) -> List[BaseTool]:
        """Get all registered tools."""
        return list(self._tools.values())

    def definitions(self) -> List[Dict[str, Any]]:
        return [tool.to_definition() for tool in self.get_all_tools()]
