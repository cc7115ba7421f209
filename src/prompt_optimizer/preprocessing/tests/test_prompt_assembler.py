"""
Tests for the Prompt Assembler.
"""

import pytest

from ..models import Domain, RiskFlag
from ..prompt_assembler import GENERIC_REQUIREMENTS, PromptAssembler


@pytest.fixture
def assembler():
    return PromptAssembler()


def test_structure(assembler):
    output = assembler.assemble("build a dashboard", Domain.CODE, 0.24, [])

    assert output.startswith("**Domain:** code\n\n**Original Request:**\nbuild a dashboard\n")
    assert "**Requirements Based on Domain:**" in output
    assert "- Include code summary and complexity notes" in output
    assert "- Provide test plan and example I/O" in output
    assert "**Output Format:**\n- Structured and scannable" in output
    assert "- List any assumptions made" in output
    assert "Risk Flags Detected" not in output
    assert "CRITICAL" not in output


def test_sections_in_order(assembler):
    output = assembler.assemble("anything", Domain.DATA, 0.5, [RiskFlag.PRIVACY])
    positions = [
        output.index("**Domain:**"),
        output.index("**Original Request:**"),
        output.index("**Requirements Based on Domain:**"),
        output.index("**Output Format:**"),
        output.index("**Risk Flags Detected:**"),
    ]
    assert positions == sorted(positions)


def test_original_text_kept_verbatim(assembler):
    text = "Line one\n  indented *markdown* line two"
    assert text in assembler.assemble(text, Domain.MISC, 0.1, [])


@pytest.mark.parametrize("domain", list(Domain))
def test_domain_label_always_present(assembler, domain):
    assert domain.value in assembler.assemble("text", domain, 0.5, [])


def test_critical_security_bullet_for_code(assembler):
    output = assembler.assemble("add login", Domain.CODE, 0.9, [RiskFlag.SECURITY])
    assert (
        "- **CRITICAL:** Address security concerns (authentication, validation, data exposure)"
        in output
    )


def test_no_critical_bullet_outside_code(assembler):
    output = assembler.assemble("login screen", Domain.UX, 0.9, [RiskFlag.SECURITY])
    assert "CRITICAL" not in output
    assert "- Include accessibility checklist (WCAG 2.1 AA)" in output


def test_finance_disclaimer(assembler):
    output = assembler.assemble("tax plan", Domain.FINANCE, 0.4, [RiskFlag.COMPLIANCE])
    assert "- **DISCLAIMER:** Not professional financial advice" in output
    assert "- Include sensitivity analysis if relevant" in output

    without = assembler.assemble("budget", Domain.FINANCE, 0.4, [])
    assert "DISCLAIMER" not in without


@pytest.mark.parametrize("domain", [Domain.RESEARCH, Domain.PRODUCT, Domain.MISC])
def test_generic_requirements(assembler, domain):
    output = assembler.assemble("text", domain, 0.5, [])
    for bullet in GENERIC_REQUIREMENTS:
        assert f"- {bullet}" in output


def test_writing_requirements(assembler):
    output = assembler.assemble("blog post", Domain.WRITING, 0.5, [])
    assert "- Provide strong opening and CTA if applicable" in output


def test_risk_callout_lists_flags_deduplicated(assembler):
    flags = [RiskFlag.PRIVACY, RiskFlag.SECURITY, RiskFlag.PRIVACY]
    output = assembler.assemble("text", Domain.MISC, 0.5, flags)
    assert "**Risk Flags Detected:** privacy, security\n" in output
    assert output.rstrip().endswith("Please address these concerns in your response.")
