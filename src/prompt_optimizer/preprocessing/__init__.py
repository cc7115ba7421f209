"""
Prompt analysis pipeline for prompt-optimizer

This module provides the Optimize-Then-Answer analysis steps:
- Domain classification (ordered first-match rules)
- Weighted clarity scoring
- Risk flag detection
- Targeted clarification questions
- Structured prompt assembly

PromptOptimizer sequences them into a single AnalysisRecord per request.
"""

from .models import (
    AnalysisRecord,
    AnalysisRequest,
    ClarityFactor,
    ClarityScore,
    Domain,
    RiskFlag,
)
from .config import OptimizerConfig
from .domain_classifier import DomainClassifier, DOMAIN_RULES
from .clarity_scorer import ClarityScorer
from .risk_detector import RiskDetector, RISK_RULES
from .question_generator import QuestionGenerator
from .prompt_assembler import PromptAssembler
from .optimizer import PromptOptimizer

__all__ = [
    'AnalysisRecord',
    'AnalysisRequest',
    'ClarityFactor',
    'ClarityScore',
    'Domain',
    'RiskFlag',
    'OptimizerConfig',
    'DomainClassifier',
    'DOMAIN_RULES',
    'ClarityScorer',
    'RiskDetector',
    'RISK_RULES',
    'QuestionGenerator',
    'PromptAssembler',
    'PromptOptimizer',
]
