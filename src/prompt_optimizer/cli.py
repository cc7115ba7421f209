"""CLI entry point for prompt-optimizer."""

from __future__ import annotations

import sys
from typing import Optional

import click
import yaml
from pydantic import ValidationError
from rich.console import Console

from prompt_optimizer import __version__
from prompt_optimizer.errors import ConfigError
from prompt_optimizer.framework import FrameworkContext
from prompt_optimizer.logging_config import configure_logging
from prompt_optimizer.preprocessing import OptimizerConfig, PromptOptimizer
from prompt_optimizer.settings import AppSettings
from prompt_optimizer.tools import OptimizePromptTool, build_registry


def _load_config(settings: AppSettings, config_path: Optional[str]) -> OptimizerConfig:
    try:
        return settings.load_config(config_path)
    except FileNotFoundError as e:
        raise ConfigError(str(e)) from e
    except (yaml.YAMLError, ValidationError, TypeError) as e:
        raise ConfigError(f"invalid configuration: {e}") from e


def _build_optimizer(ctx: click.Context) -> PromptOptimizer:
    obj = ctx.ensure_object(dict)
    if "optimizer" not in obj:
        settings: AppSettings = obj.get("settings") or AppSettings()
        config = _load_config(settings, obj.get("config_path"))
        framework_path = obj.get("framework_path") or settings.resolved_framework_path(config)
        obj["optimizer"] = PromptOptimizer(config, FrameworkContext(framework_path))
    return obj["optimizer"]


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="prompt-optimizer")
@click.option("--log-level", default=None, help="Log level (override env)")
@click.option("--log-format", default=None, type=click.Choice(["json", "text"]))
@click.option("--config", "config_path", default=None, help="Path to YAML config")
@click.option("--framework", "framework_path", default=None, help="Path to framework context document")
@click.pass_context
def main(
    ctx: click.Context,
    log_level: Optional[str],
    log_format: Optional[str],
    config_path: Optional[str],
    framework_path: Optional[str],
) -> None:
    """prompt-optimizer - Optimize-Then-Answer analysis for AI requests."""
    settings = AppSettings()
    configure_logging(log_level or settings.log_level, log_format or settings.log_format)
    obj = ctx.ensure_object(dict)
    obj["settings"] = settings
    obj["config_path"] = config_path
    obj["framework_path"] = framework_path


@main.command("analyze")
@click.argument("text")
@click.option("--context", "request_context", default=None, help="Optional context passed along with the request")
@click.option("--json", "as_json", is_flag=True, help="Print the full analysis record as JSON")
@click.pass_context
def analyze(ctx: click.Context, text: str, request_context: Optional[str], as_json: bool) -> None:
    """Analyze TEXT (use '-' to read from stdin) and print the optimization result."""
    if text == "-":
        text = sys.stdin.read()

    tool = OptimizePromptTool(_build_optimizer(ctx))
    if as_json:
        click.echo(tool.execute_json(text, request_context))
        return

    console = Console(soft_wrap=True)
    console.print(tool.execute(text, request_context), markup=False, highlight=False)


@main.command("serve")
@click.pass_context
def serve(ctx: click.Context) -> None:
    """Run the MCP server over stdio."""
    from prompt_optimizer.mcp.server import run_stdio_blocking

    run_stdio_blocking(build_registry(_build_optimizer(ctx)))


@main.command("framework")
@click.pass_context
def framework_cmd(ctx: click.Context) -> None:
    """Show where the framework context is read from and whether it loaded."""
    framework = _build_optimizer(ctx).framework
    text = framework.load()
    click.echo(f"Framework path: {framework.path}")
    if text is None:
        click.echo(f"Status: not loaded ({framework.error}); using built-in rules")
    else:
        click.echo(f"Status: loaded ({len(text)} characters)")


if __name__ == "__main__":
    main()
