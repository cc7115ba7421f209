"""Structured logging configuration for prompt-optimizer.

Provides JSON or text logging with contextual fields. Logs go to stderr so
stdout stays free for MCP stdio traffic. Configure via environment variables
handled by AppSettings.
"""

from __future__ import annotations

import logging
import sys

from pythonjsonlogger.json import JsonFormatter


def _build_json_formatter() -> logging.Formatter:
    fields = [
        "asctime",
        "levelname",
        "name",
        "message",
        "module",
        "funcName",
        "lineno",
        "process",
    ]
    fmt = " ".join([f"{f}=%({f})s" for f in fields])
    return JsonFormatter(fmt=fmt)


def configure_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    level_upper = level.upper()
    log_level = getattr(logging, level_upper, logging.INFO)

    root = logging.getLogger()
    root.setLevel(log_level)

    # Remove default handlers to avoid duplicate logs
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    if fmt.lower() == "json":
        handler.setFormatter(_build_json_formatter())
    else:
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%dT%H:%M:%S%z",
            )
        )
    root.addHandler(handler)

    # The MCP SDK logs every request at INFO; keep it aligned with our level
    logging.getLogger("mcp").setLevel(max(log_level, logging.WARNING))
    return handler
