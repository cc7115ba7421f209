"""Environment-based configuration using pydantic-settings.

This module defines the Settings class that loads configuration from
environment variables and optional .env files, and merges it onto the
YAML-backed OptimizerConfig used by the analysis pipeline.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .paths import default_framework_path
from .preprocessing.config import OptimizerConfig


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="PROMPT_OPTIMIZER_", case_sensitive=False, extra="ignore"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Application log level")
    log_format: str = Field(default="text", description="Log format: json or text")

    # Files
    framework_path: Optional[str] = Field(
        default=None, description="Framework context document (optional)"
    )

    def load_config(self, path: Optional[str] = None) -> OptimizerConfig:
        """Load the YAML config (explicit path, else PROMPT_OPTIMIZER_CONFIG) and merge env on top."""
        base = OptimizerConfig.load(Path(path) if path else None)
        return self.to_runtime_config(base)

    def to_runtime_config(self, base: Optional[OptimizerConfig] = None) -> OptimizerConfig:
        """Merge environment settings into a runtime OptimizerConfig.

        Environment variables take precedence over values loaded from YAML.
        """
        if base is None:
            base = OptimizerConfig()

        if self.framework_path:
            base = base.model_copy(update={"framework_path": self.framework_path})
        return base

    def resolved_framework_path(self, config: Optional[OptimizerConfig] = None) -> Path:
        """Framework path from env, then config, then the built-in default location."""
        if self.framework_path:
            return Path(self.framework_path).expanduser()
        if config is not None and config.framework_path:
            return Path(config.framework_path).expanduser()
        return default_framework_path()
