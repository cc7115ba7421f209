"""
Prompt Optimizer - runs the full analysis pipeline for one request

Sequence: classify -> score -> detect -> generate questions -> assemble
-> decide whether clarification is needed -> build the header line.
No stage is skipped; every field of the record is populated even when the
request needs clarification.
"""

import logging
from typing import List, Optional

from ..framework import FrameworkContext
from .clarity_scorer import ClarityScorer
from .config import OptimizerConfig
from .domain_classifier import DomainClassifier
from .models import AnalysisRecord, AnalysisRequest, Domain, RiskFlag, round_percent
from .prompt_assembler import PromptAssembler
from .question_generator import QuestionGenerator
from .risk_detector import RiskDetector

logger = logging.getLogger(__name__)


def build_header(domain: Domain, clarity: float, risk_flags: List[RiskFlag]) -> str:
    risks = ", ".join(flag.value for flag in risk_flags) if risk_flags else "none"
    return (
        f"[OPTIMIZED] Domain: {domain.value} | Clarity: {round_percent(clarity)}% | "
        f"Risks: {risks}"
    )


class PromptOptimizer:
    """
    Optimize-Then-Answer analysis engine.

    Holds only immutable rule tables, so a single instance can serve any
    number of callers. The optional framework context is loaded lazily on the
    first analysis and never reloaded.
    """

    def __init__(self, config: Optional[OptimizerConfig] = None,
                 framework: Optional[FrameworkContext] = None):
        self.config = config or OptimizerConfig()
        self.framework = framework
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        self.classifier = DomainClassifier()
        self.scorer = ClarityScorer(self.config)
        self.detector = RiskDetector()
        self.question_generator = QuestionGenerator(self.config)
        self.assembler = PromptAssembler()

    def needs_clarification(self, clarity: float, risk_flags: List[RiskFlag]) -> bool:
        if clarity < self.config.clarity_threshold:
            return True
        return any(flag in self.config.blocking_flags for flag in risk_flags)

    def analyze(self, request: AnalysisRequest) -> AnalysisRecord:
        """Analyze one request and return the finalized record."""
        if self.framework is not None and not self.framework.attempted:
            self.framework.load()

        text = request.text
        domain = self.classifier.classify(text)
        clarity = self.scorer.score(text)
        risk_flags = self.detector.detect(text)

        questions = self.question_generator.generate(text, domain, clarity.total)
        optimized_prompt = self.assembler.assemble(text, domain, clarity.total, risk_flags)
        needs_clarification = self.needs_clarification(clarity.total, risk_flags)
        header = build_header(domain, clarity.total, risk_flags)

        self.logger.debug(header)
        return AnalysisRecord(
            domain=domain,
            clarity_score=clarity.total,
            risk_flags=risk_flags,
            questions=questions,
            optimized_prompt=optimized_prompt,
            optimization_header=header,
            needs_clarification=needs_clarification,
            assumptions=[],
            clarity=clarity,
        )

    def optimize(self, text: str, context: Optional[str] = None) -> AnalysisRecord:
        """Convenience wrapper that builds the request from plain arguments."""
        return self.analyze(AnalysisRequest(text=text, context=context))
