"""Centralized user file locations for prompt-optimizer.

- ~/.prompt-optimizer/: per-user data directory (config.yaml lives here)
- ~/prompts/optimized_prompts.md: default framework context document
"""

from __future__ import annotations

import os
from pathlib import Path


def data_dir() -> Path:
    return Path(os.path.expanduser("~/.prompt-optimizer"))


def default_user_config_path() -> Path:
    return data_dir() / "config.yaml"


def default_framework_path() -> Path:
    return Path(os.path.expanduser("~/prompts")) / "optimized_prompts.md"
