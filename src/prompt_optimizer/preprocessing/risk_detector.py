"""
Risk Detector - flags concern categories in a request

Every rule is evaluated on every request; flags accumulate independently
in rule order and a request may carry any subset of them.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Pattern, Sequence, Tuple

from .models import RiskFlag

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RiskRule:
    flag: RiskFlag
    pattern: Pattern[str]


def _rule(flag: RiskFlag, pattern: str) -> RiskRule:
    return RiskRule(flag, re.compile(pattern, re.IGNORECASE))


RISK_RULES: Tuple[RiskRule, ...] = (
    _rule(RiskFlag.SECURITY,
          r'(password|auth|login|token|secret|key|credential|hack|exploit|vulnerability)'),
    _rule(RiskFlag.PRIVACY, r'(email|phone|address|ssn|personal.*data|pii|gdpr)'),
    # basic detection only
    _rule(RiskFlag.POLICY, r'(fake|bypass|circumvent|illegal|hack.*into|crack|steal)'),
    _rule(RiskFlag.SAFETY, r'(harm|dangerous|weapon|explosive|poison|drug)'),
    _rule(RiskFlag.COMPLIANCE,
          r'(medical.*advice|legal.*advice|financial.*advice|tax|investment.*recommendation)'),
)


class RiskDetector:
    """Independent substring checks; returns flags in detection order without duplicates."""

    def __init__(self, rules: Sequence[RiskRule] = RISK_RULES):
        self.rules = tuple(rules)

    def detect(self, text: str) -> List[RiskFlag]:
        flags: List[RiskFlag] = []
        for rule in self.rules:
            if rule.pattern.search(text) and rule.flag not in flags:
                flags.append(rule.flag)

        if flags:
            logger.debug(f"Risk flags detected: {', '.join(f.value for f in flags)}")
        return flags
