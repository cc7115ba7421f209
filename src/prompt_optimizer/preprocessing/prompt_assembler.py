"""
Prompt Assembler - structured, domain-enhanced restatement of a request

Output layout:
    domain header, the original request verbatim, the domain's requirement
    bullets (plus any risk-triggered bullets), the generic output-format
    block and, when risks were flagged, a closing callout naming them.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from .models import Domain, RiskFlag

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConditionalRequirement:
    """Bullet added for ``domain`` when ``flag`` was detected."""
    domain: Domain
    flag: RiskFlag
    bullet: str


GENERIC_REQUIREMENTS: Tuple[str, ...] = (
    "Provide clear, structured output",
    "State assumptions explicitly",
    "Include examples if helpful",
)

DOMAIN_REQUIREMENTS: Dict[Domain, Tuple[str, ...]] = {
    Domain.CODE: (
        "Include code summary and complexity notes",
        "Add security considerations",
        "Provide test plan and example I/O",
        "Include error handling",
    ),
    Domain.UX: (
        "Evaluate against usability heuristics",
        "Include accessibility checklist (WCAG 2.1 AA)",
        "Consider mobile responsiveness",
        "Address error and loading states",
    ),
    Domain.DATA: (
        "Describe dataset shape and structure",
        "Show calculation steps explicitly",
        "Validate data and identify edge cases",
        "Make results reproducible",
    ),
    Domain.WRITING: (
        "Define audience clearly",
        "Specify tone and style",
        "Include structure outline",
        "Provide strong opening and CTA if applicable",
    ),
    Domain.FINANCE: (
        "State all assumptions explicitly",
        "Show calculation methodology",
        "Identify risk factors",
        "Include sensitivity analysis if relevant",
    ),
}

CONDITIONAL_REQUIREMENTS: Tuple[ConditionalRequirement, ...] = (
    ConditionalRequirement(
        Domain.CODE, RiskFlag.SECURITY,
        "**CRITICAL:** Address security concerns (authentication, validation, data exposure)",
    ),
    ConditionalRequirement(
        Domain.FINANCE, RiskFlag.COMPLIANCE,
        "**DISCLAIMER:** Not professional financial advice",
    ),
)

OUTPUT_FORMAT: Tuple[str, ...] = (
    "Structured and scannable",
    "Include acceptance criteria",
    "List any assumptions made",
)


def _unique(flags: Sequence[RiskFlag]) -> List[RiskFlag]:
    seen: List[RiskFlag] = []
    for flag in flags:
        if flag not in seen:
            seen.append(flag)
    return seen


class PromptAssembler:
    """Builds the optimized prompt document."""

    def requirements_for(self, domain: Domain, risk_flags: Sequence[RiskFlag]) -> List[str]:
        bullets = list(DOMAIN_REQUIREMENTS.get(domain, GENERIC_REQUIREMENTS))
        for extra in CONDITIONAL_REQUIREMENTS:
            if extra.domain == domain and extra.flag in risk_flags:
                bullets.append(extra.bullet)
        return bullets

    def assemble(self, text: str, domain: Domain, clarity: float,
                 risk_flags: Sequence[RiskFlag]) -> str:
        flags = _unique(risk_flags)

        lines = [
            f"**Domain:** {domain.value}",
            "",
            "**Original Request:**",
            text,
            "",
            "**Requirements Based on Domain:**",
        ]
        lines.extend(f"- {bullet}" for bullet in self.requirements_for(domain, flags))

        lines.append("")
        lines.append("**Output Format:**")
        lines.extend(f"- {bullet}" for bullet in OUTPUT_FORMAT)

        if flags:
            lines.append("")
            lines.append(f"**Risk Flags Detected:** {', '.join(f.value for f in flags)}")
            lines.append("Please address these concerns in your response.")

        logger.debug(f"Assembled {domain.value} prompt (clarity {clarity:.2f}, {len(flags)} flags)")
        return "\n".join(lines) + "\n"
