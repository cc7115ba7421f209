"""MCP transport for the prompt optimizer tools."""

from .server import create_server, run_stdio_blocking, serve_stdio

__all__ = ["create_server", "run_stdio_blocking", "serve_stdio"]
