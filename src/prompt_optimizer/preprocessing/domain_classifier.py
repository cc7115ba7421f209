"""
Domain Classifier - maps a request to one subject area

Rules form an ordered guard chain: each rule is checked in turn and the
first one that matches decides the domain. The order of DOMAIN_RULES is
part of the behaviour (a request mentioning both "debug" and "accessible"
is a code request because code is checked before UX).
"""

import logging
import re
from dataclasses import dataclass
from typing import Pattern, Sequence, Tuple

from .models import Domain

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DomainRule:
    """A single (pattern -> domain) guard."""
    domain: Domain
    pattern: Pattern[str]

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


def _rule(domain: Domain, pattern: str) -> DomainRule:
    return DomainRule(domain, re.compile(pattern, re.IGNORECASE))


DOMAIN_RULES: Tuple[DomainRule, ...] = (
    _rule(Domain.CODE, r'(code|function|api|debug|error|implement|build|create.*app|deploy|test)'),
    _rule(Domain.UX, r'(ui|ux|design|interface|user.*experience|accessibility|usability|wireframe)'),
    _rule(Domain.DATA, r'(data|analyze|statistics|metrics|chart|graph|calculate|sql|query)'),
    _rule(Domain.WRITING, r'(write|blog|article|content|copy|email|documentation|readme)'),
    _rule(Domain.RESEARCH, r'(research|study|investigate|compare|evaluate|analyze.*market)'),
    _rule(Domain.FINANCE, r'(roi|revenue|cost|budget|finance|pricing|valuation)'),
    _rule(Domain.PRODUCT, r'(product|feature|roadmap|strategy|market.*plan|gtm)'),
)


class DomainClassifier:
    """First-match classifier over an ordered rule list. Falls back to misc."""

    def __init__(self, rules: Sequence[DomainRule] = DOMAIN_RULES, default: Domain = Domain.MISC):
        self.rules = tuple(rules)
        self.default = default

    def classify(self, text: str) -> Domain:
        for rule in self.rules:
            if rule.matches(text):
                logger.debug(f"Classified request as {rule.domain.value}")
                return rule.domain
        return self.default
