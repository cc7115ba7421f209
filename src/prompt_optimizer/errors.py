"""Error types for prompt-optimizer with friendly, actionable messages.

The analysis engine itself never raises for string input; these errors belong
to the boundaries around it (tool arguments, configuration files, MCP calls).
"""

from __future__ import annotations

from typing import Optional

import click


class PromptOptimizerError(click.ClickException):
    """Base class for all caller-visible errors with enhanced formatting."""

    #: Emoji shown at the beginning of every error line
    emoji: str = "❌"

    #: Short, actionable suggestion shown after the main message.
    hint: Optional[str] = None

    def __init__(self, message: str, hint: Optional[str] = None) -> None:
        super().__init__(message)
        if hint is not None:
            self.hint = hint

    @property
    def formatted_message(self) -> str:
        """
        Returns the final string that Click writes to stderr.
        Includes:
        * emoji + main message (bold)
        * optional hint on a new line (dim colour)
        """
        lines = [f"{self.emoji}  {click.style(self.message, fg='red', bold=True)}"]
        if self.hint:
            lines.append(click.style(f"💡 {self.hint}", fg='yellow'))
        return "\n".join(lines)

    @property
    def plain_message(self) -> str:
        """Unstyled message and hint, for non-terminal consumers such as MCP clients."""
        if self.hint:
            return f"{self.message}\n{self.hint}"
        return self.message

    # Click calls show to emit the message.
    def show(self, file=None) -> None:
        click.echo(self.formatted_message, err=True, file=file)


class InvalidInputError(PromptOptimizerError):
    """Raised when the request text is missing or not a string."""
    emoji = "⚠️"

    def __init__(self, field: str, received: object = None):
        kind = type(received).__name__
        hint = f"Pass {field} as a plain text string."
        super().__init__(f"Invalid input for {field}: expected a string, got {kind}.", hint)


class ConfigError(PromptOptimizerError):
    """Raised when there's a configuration problem."""
    emoji = "🔧"

    def __init__(self, details: str):
        hint = (
            f"Check {click.style('~/.prompt-optimizer/config.yaml', fg='cyan')} "
            f"or the file named by {click.style('PROMPT_OPTIMIZER_CONFIG', fg='cyan')}."
        )
        super().__init__(f"Configuration problem – {details}", hint)


class UnknownToolError(PromptOptimizerError):
    """Raised when a caller asks for a tool that is not registered."""
    emoji = "🔍"

    def __init__(self, name: str, available: Optional[list] = None):
        hint = None
        if available:
            hint = f"Available tools: {', '.join(sorted(available))}"
        super().__init__(f"Unknown tool: {name}", hint)

