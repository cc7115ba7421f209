"""
Configuration for the analysis pipeline.

Heuristic thresholds and weights are kept here as tunable values rather
than re-derived in code. Values load from YAML with the usual precedence:
explicit path, PROMPT_OPTIMIZER_CONFIG, the per-user file, then defaults.
"""

import os
from pathlib import Path
from typing import Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from ..paths import default_user_config_path
from .models import ClarityFactor, RiskFlag


DEFAULT_WEIGHTS: Dict[ClarityFactor, float] = {
    ClarityFactor.GOAL: 0.30,
    ClarityFactor.CONTEXT: 0.25,
    ClarityFactor.FORMAT: 0.15,
    ClarityFactor.CRITERIA: 0.20,
    ClarityFactor.TECHNICAL: 0.10,
}


class OptimizerConfig(BaseModel):
    """Tunable thresholds for the analysis pipeline."""

    clarity_threshold: float = Field(
        default=0.6, description="Scores below this need clarification"
    )
    max_questions: int = Field(default=3, description="Cap on clarifying questions")
    goal_min_chars: int = Field(
        default=50, description="Length above which the goal gets its length credit"
    )
    context_min_words: int = Field(
        default=20, description="Word count above which context gets its length credit"
    )
    brief_goal_words: int = Field(
        default=15,
        description="Product/finance/research requests shorter than this ask for more context",
    )
    brief_request_words: int = Field(
        default=10, description="Uncategorized requests shorter than this ask for detail"
    )
    blocking_flags: List[RiskFlag] = Field(
        default_factory=lambda: [RiskFlag.POLICY, RiskFlag.SAFETY],
        description="Risk flags that always require clarification",
    )
    weights: Dict[ClarityFactor, float] = Field(
        default_factory=lambda: dict(DEFAULT_WEIGHTS)
    )
    framework_path: Optional[str] = Field(
        default=None, description="Path to the optional framework context file"
    )

    @field_validator("clarity_threshold")
    def validate_clarity_threshold(cls, v):
        if not 0 <= v <= 1:
            raise ValueError("Clarity threshold must be between 0 and 1")
        return v

    @field_validator("max_questions")
    def validate_max_questions(cls, v):
        if v < 0:
            raise ValueError("max_questions cannot be negative")
        return v

    @field_validator("goal_min_chars", "context_min_words", "brief_goal_words", "brief_request_words")
    def validate_non_negative(cls, v):
        if v < 0:
            raise ValueError("Length thresholds cannot be negative")
        return v

    @field_validator("weights")
    def validate_weights(cls, v):
        missing = [factor.value for factor in ClarityFactor if factor not in v]
        if missing:
            raise ValueError(f"Missing clarity weights: {', '.join(missing)}")
        if any(weight < 0 for weight in v.values()):
            raise ValueError("Clarity weights cannot be negative")
        if abs(sum(v.values()) - 1.0) > 1e-6:
            raise ValueError("Clarity weights must sum to 1.0")
        return v

    @classmethod
    def from_file(cls, path: Path) -> "OptimizerConfig":
        """Load configuration from a YAML file."""
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "OptimizerConfig":
        """Load configuration using precedence: explicit path -> env var -> user file -> defaults.

        If `path` not provided, uses PROMPT_OPTIMIZER_CONFIG if set.
        """
        env_path = os.getenv("PROMPT_OPTIMIZER_CONFIG")
        explicit = path or (Path(env_path) if env_path else None)
        if explicit is not None:
            return cls.from_file(Path(explicit))
        user_cfg = cls.default_config_path()
        if user_cfg.exists():
            return cls.from_file(user_cfg)
        return cls()

    def save_to_file(self, path: Path):
        """Save configuration to a YAML file."""
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            yaml.safe_dump(
                self.model_dump(mode="json", exclude_unset=True),
                f,
                default_flow_style=False,
                indent=2,
            )

    @staticmethod
    def default_config_path() -> Path:
        """Return the default per-user config path under ~/.prompt-optimizer."""
        return default_user_config_path()
