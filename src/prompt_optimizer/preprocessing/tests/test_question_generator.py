"""
Tests for the Question Generator.

Tests checklist behaviour per domain including:
- No questions at or above the clarity threshold
- Questions only for missing signals, in checklist order
- The three-question cap
"""

import pytest

from ..config import OptimizerConfig
from ..models import Domain
from ..question_generator import QuestionGenerator, build_checklists


LANGUAGE_Q = "What programming language or framework are you using?"
FEATURE_Q = "What specific feature or component are you building?"
TESTS_Q = "Do you need tests, validation, or specific security considerations?"


class TestQuestionGenerator:

    @pytest.fixture
    def generator(self):
        return QuestionGenerator()

    def test_no_questions_when_clear(self, generator):
        assert generator.generate("build a dashboard", Domain.CODE, 0.6) == []
        assert generator.generate("build a dashboard", Domain.CODE, 0.95) == []

    def test_code_questions_for_vague_request(self, generator):
        questions = generator.generate("build a dashboard", Domain.CODE, 0.24)
        assert questions == [LANGUAGE_Q, FEATURE_Q, TESTS_Q]

    def test_code_questions_skip_present_signals(self, generator):
        questions = generator.generate("build a react component", Domain.CODE, 0.3)
        assert questions == [TESTS_Q]

    def test_ux_questions(self, generator):
        questions = generator.generate("Design a wireframe for onboarding", Domain.UX, 0.3)
        assert questions == [
            "Who are the target users for this interface?",
            "What platform is this for (web, mobile, desktop)?",
        ]
        assert generator.generate("design a mobile app for users", Domain.UX, 0.3) == []

    def test_data_questions(self, generator):
        questions = generator.generate("Analyze the sales data", Domain.DATA, 0.3)
        assert questions == [
            "What is the shape/structure of your data?",
            "What specific metrics or calculations do you need?",
        ]

    def test_writing_questions(self, generator):
        assert generator.generate("Write something", Domain.WRITING, 0.2) == [
            "Who is the target audience?",
            "What length are you targeting (word count, pages)?",
            "What tone should this have (formal, casual, technical)?",
        ]
        complete = "Write a 500 word formal post for customers"
        assert generator.generate(complete, Domain.WRITING, 0.4) == []

    @pytest.mark.parametrize("domain", [Domain.PRODUCT, Domain.FINANCE, Domain.RESEARCH])
    def test_goal_questions(self, generator, domain):
        assert generator.generate("Plan the roadmap", domain, 0.2) == [
            "Can you provide more context about your goal?",
            "What is the timeline or urgency for this?",
        ]

    def test_goal_questions_satisfied(self, generator):
        text = (
            "Plan the pricing roadmap for our enterprise tier so sales can start "
            "selling it to existing accounts before the deadline"
        )
        assert generator.generate(text, Domain.PRODUCT, 0.5) == []

    def test_misc_questions(self, generator):
        assert generator.generate("Plan a birthday party", Domain.MISC, 0.0) == [
            "Can you provide more detail about what you need?",
            "What is the context or setting for this request?",
        ]

    def test_empty_text(self, generator):
        assert len(generator.generate("", Domain.MISC, 0.0)) == 2

    def test_cap_from_config(self):
        generator = QuestionGenerator(OptimizerConfig(max_questions=1))
        assert generator.generate("build a dashboard", Domain.CODE, 0.24) == [LANGUAGE_Q]

    def test_threshold_from_config(self):
        generator = QuestionGenerator(OptimizerConfig(clarity_threshold=0.2))
        assert generator.generate("build a dashboard", Domain.CODE, 0.24) == []

    @pytest.mark.parametrize("domain", list(Domain))
    def test_never_more_than_three(self, generator, domain):
        for text in ["", "x", "build a dashboard", "Write something"]:
            assert len(generator.generate(text, domain, 0.0)) <= 3

    def test_every_domain_has_a_checklist(self, generator):
        checklists = build_checklists()
        for domain in Domain:
            assert generator.checklist_for(domain)
        assert Domain.MISC in checklists
