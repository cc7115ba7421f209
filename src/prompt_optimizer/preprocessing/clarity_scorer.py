"""
Clarity Scorer - weighted completeness heuristic

Estimates how actionable a request is without further questions. The score
is built from five factors (goal, context, format, criteria, technical),
each with a weight; the weights sum to 1.0.

Each factor is described as data: a list of heuristics, each granting a
share of the factor when it fires. A factor's sub-score is the sum of the
shares that fired (at most 1.0) and its contribution to the total is
sub-score x weight. No rounding happens here.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Pattern, Tuple

from .config import OptimizerConfig
from .models import ClarityFactor, ClarityScore

logger = logging.getLogger(__name__)


def word_count(text: str) -> int:
    """Number of whitespace-separated tokens."""
    return len(text.split())


@dataclass(frozen=True)
class PatternHeuristic:
    """Fires when the pattern occurs anywhere in the text."""
    pattern: Pattern[str]
    share: float
    name: str = ""

    def fires(self, text: str) -> bool:
        return self.pattern.search(text) is not None


@dataclass(frozen=True)
class MinLengthHeuristic:
    """Fires when the text is longer than ``min_chars`` characters."""
    min_chars: int
    share: float
    name: str = "length"

    def fires(self, text: str) -> bool:
        return len(text) > self.min_chars


@dataclass(frozen=True)
class MinWordsHeuristic:
    """Fires when the text has more than ``min_words`` words."""
    min_words: int
    share: float
    name: str = "word_count"

    def fires(self, text: str) -> bool:
        return word_count(text) > self.min_words


@dataclass(frozen=True)
class FactorRule:
    """One clarity factor: its weight and the heuristics that earn it."""
    factor: ClarityFactor
    weight: float
    heuristics: Tuple = field(default_factory=tuple)

    def sub_score(self, text: str) -> float:
        earned = sum(h.share for h in self.heuristics if h.fires(text))
        return min(earned, 1.0)


def _pattern(pattern: str, share: float, name: str) -> PatternHeuristic:
    return PatternHeuristic(re.compile(pattern, re.IGNORECASE), share, name)


def build_factor_table(config: Optional[OptimizerConfig] = None) -> List[FactorRule]:
    """Build the factor table from configuration thresholds and weights."""
    if config is None:
        config = OptimizerConfig()
    weights = config.weights

    return [
        FactorRule(ClarityFactor.GOAL, weights[ClarityFactor.GOAL], (
            _pattern(r'\b(create|build|implement|analyze|design|write|calculate|help.*with)\b',
                     0.8, "action_verb"),
            MinLengthHeuristic(config.goal_min_chars, 0.2),
        )),
        FactorRule(ClarityFactor.CONTEXT, weights[ClarityFactor.CONTEXT], (
            _pattern(r'(using|with|for|in|on|my|our|the)\s+\w+', 0.5, "background"),
            MinWordsHeuristic(config.context_min_words, 0.5),
        )),
        FactorRule(ClarityFactor.FORMAT, weights[ClarityFactor.FORMAT], (
            _pattern(r'(code|markdown|json|csv|list|table|document|script|function)',
                     1.0, "deliverable"),
        )),
        FactorRule(ClarityFactor.CRITERIA, weights[ClarityFactor.CRITERIA], (
            _pattern(r'(must|should|need|require|ensure|with.*test|accessible|secure)',
                     1.0, "constraints"),
        )),
        FactorRule(ClarityFactor.TECHNICAL, weights[ClarityFactor.TECHNICAL], (
            _pattern(r'(react|python|node|sql|api|database|framework|library|version)',
                     1.0, "technology"),
        )),
    ]


class ClarityScorer:
    """Scores text against a weighted factor table."""

    def __init__(self, config: Optional[OptimizerConfig] = None,
                 factors: Optional[List[FactorRule]] = None):
        self.factors = factors if factors is not None else build_factor_table(config)

    def score(self, text: str) -> ClarityScore:
        sub_scores: Dict[ClarityFactor, float] = {}
        contributions: Dict[ClarityFactor, float] = {}

        for rule in self.factors:
            sub = rule.sub_score(text)
            sub_scores[rule.factor] = sub
            contributions[rule.factor] = sub * rule.weight

        total = min(max(sum(contributions.values()), 0.0), 1.0)
        logger.debug(f"Clarity {total:.3f} from {len(self.factors)} factors")
        return ClarityScore(total=total, factors=sub_scores, contributions=contributions)
