"""
Question Generator - targeted clarifying questions

When a request scores below the clarity threshold, walks the checklist for
its domain and asks about whatever signal is missing from the text. Each
checklist entry pairs a question with the signal whose absence triggers it.
Only the first ``max_questions`` triggered questions are kept, in checklist
order.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from .clarity_scorer import word_count
from .config import OptimizerConfig
from .models import Domain

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuestionRule:
    """Ask ``question`` when ``is_missing(text)`` is true."""
    question: str
    is_missing: Callable[[str], bool]


def _absent(pattern: str) -> Callable[[str], bool]:
    compiled = re.compile(pattern, re.IGNORECASE)
    return lambda text: compiled.search(text) is None


def _fewer_words_than(limit: int) -> Callable[[str], bool]:
    return lambda text: word_count(text) < limit


def build_checklists(config: Optional[OptimizerConfig] = None) -> Dict[Domain, Tuple[QuestionRule, ...]]:
    """Domain -> ordered checklist. Domains without an entry use Domain.MISC."""
    if config is None:
        config = OptimizerConfig()

    goal_checklist = (
        QuestionRule("Can you provide more context about your goal?",
                     _fewer_words_than(config.brief_goal_words)),
        QuestionRule("What is the timeline or urgency for this?",
                     _absent(r'(timeline|deadline|when|by|urgent)')),
    )

    return {
        Domain.CODE: (
            QuestionRule("What programming language or framework are you using?",
                         _absent(r'(react|vue|python|node|java|go|rust|typescript|javascript)')),
            QuestionRule("What specific feature or component are you building?",
                         _absent(r'(function|class|component|api|endpoint|feature)')),
            QuestionRule("Do you need tests, validation, or specific security considerations?",
                         _absent(r'(test|validation|security)')),
        ),
        Domain.UX: (
            QuestionRule("Who are the target users for this interface?",
                         _absent(r'(user|customer|audience|people)')),
            QuestionRule("What platform is this for (web, mobile, desktop)?",
                         _absent(r'(mobile|desktop|responsive|web|app)')),
        ),
        Domain.DATA: (
            QuestionRule("What is the shape/structure of your data?",
                         _absent(r'(rows|records|dataset|table|csv|json)')),
            QuestionRule("What specific metrics or calculations do you need?",
                         _absent(r'(calculate|sum|average|count|metric)')),
        ),
        Domain.WRITING: (
            QuestionRule("Who is the target audience?",
                         _absent(r'(audience|reader|customer|user|stakeholder)')),
            QuestionRule("What length are you targeting (word count, pages)?",
                         _absent(r'(\d+\s*(word|page|paragraph|character))')),
            QuestionRule("What tone should this have (formal, casual, technical)?",
                         _absent(r'(formal|casual|technical|friendly|professional)')),
        ),
        Domain.PRODUCT: goal_checklist,
        Domain.FINANCE: goal_checklist,
        Domain.RESEARCH: goal_checklist,
        Domain.MISC: (
            QuestionRule("Can you provide more detail about what you need?",
                         _fewer_words_than(config.brief_request_words)),
            QuestionRule("What is the context or setting for this request?",
                         _absent(r'(for|with|using|in)')),
        ),
    }


class QuestionGenerator:
    """Produces up to ``max_questions`` questions for unclear requests."""

    def __init__(self, config: Optional[OptimizerConfig] = None):
        self.config = config or OptimizerConfig()
        self.checklists = build_checklists(self.config)

    def checklist_for(self, domain: Domain) -> Tuple[QuestionRule, ...]:
        return self.checklists.get(domain, self.checklists[Domain.MISC])

    def generate(self, text: str, domain: Domain, clarity: float) -> List[str]:
        if clarity >= self.config.clarity_threshold:
            return []

        questions: List[str] = []
        for rule in self.checklist_for(domain):
            if len(questions) >= self.config.max_questions:
                break
            if rule.is_missing(text):
                questions.append(rule.question)

        logger.debug(f"Generated {len(questions)} questions for {domain.value} request")
        return questions
