"""
Data model for prompt analysis.

Every object here is created fresh for a single ``analyze`` call and
discarded afterwards. Only ``AnalysisRequest`` validates its input; the
remaining types are plain containers produced by the pipeline.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, StrictStr


class Domain(str, Enum):
    """Closed set of subject areas a request can belong to."""
    CODE = "code"
    UX = "UX"
    DATA = "data"
    WRITING = "writing"
    RESEARCH = "research"
    FINANCE = "finance"
    PRODUCT = "product"
    MISC = "misc"


class ClarityFactor(str, Enum):
    """Named components of the clarity score."""
    GOAL = "goal"
    CONTEXT = "context"
    FORMAT = "format"
    CRITERIA = "criteria"
    TECHNICAL = "technical"


class RiskFlag(str, Enum):
    """Concern categories; flags are independent, not mutually exclusive."""
    SECURITY = "security"
    PRIVACY = "privacy"
    POLICY = "policy"
    SAFETY = "safety"
    COMPLIANCE = "compliance"


class AnalysisRequest(BaseModel):
    """Input to the optimizer.

    ``text`` is the only field the analysis looks at. ``context`` is carried
    for the caller and never inspected.
    """

    model_config = ConfigDict(frozen=True)

    text: StrictStr
    context: Optional[StrictStr] = None


@dataclass
class ClarityScore:
    """Weighted completeness estimate in [0, 1].

    ``factors`` holds each factor's raw sub-score before weighting,
    ``contributions`` the weighted value that was summed into ``total``.
    """
    total: float
    factors: Dict[ClarityFactor, float] = field(default_factory=dict)
    contributions: Dict[ClarityFactor, float] = field(default_factory=dict)


@dataclass
class AnalysisRecord:
    """Finalized output of one ``analyze`` call."""
    domain: Domain
    clarity_score: float
    risk_flags: List[RiskFlag]
    questions: List[str]
    optimized_prompt: str
    optimization_header: str
    needs_clarification: bool
    assumptions: List[str] = field(default_factory=list)
    clarity: Optional[ClarityScore] = None

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation with plain string labels."""
        data: Dict[str, Any] = {
            "domain": self.domain.value,
            "clarity_score": self.clarity_score,
            "risk_flags": [flag.value for flag in self.risk_flags],
            "questions": list(self.questions),
            "optimized_prompt": self.optimized_prompt,
            "optimization_header": self.optimization_header,
            "assumptions": list(self.assumptions),
            "needs_clarification": self.needs_clarification,
        }
        if self.clarity is not None:
            data["clarity_factors"] = {
                factor.value: value for factor, value in self.clarity.factors.items()
            }
        return data


def round_percent(value: float) -> int:
    """Scale a [0, 1] ratio to a whole percentage, rounding halves up."""
    return int(value * 100 + 0.5)
