"""Tools package: the client-facing wrappers around the analysis engine."""

from typing import Optional

from ..preprocessing import PromptOptimizer
from .base_tools import BaseTool, ToolRegistry
from .optimize_tool import OptimizePromptTool, render_response


def build_registry(optimizer: Optional[PromptOptimizer] = None) -> ToolRegistry:
    """Create a registry holding the default tools, sharing one optimizer."""
    registry = ToolRegistry()
    registry.register(OptimizePromptTool(optimizer))
    return registry


__all__ = [
    "BaseTool",
    "ToolRegistry",
    "OptimizePromptTool",
    "render_response",
    "build_registry",
]
