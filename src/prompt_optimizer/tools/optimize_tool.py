"""The ``optimize_prompt`` tool: analysis plus a markdown rendering for clients."""

import json
from typing import Any, Dict, Optional

from pydantic import ValidationError

from ..errors import InvalidInputError
from ..preprocessing import AnalysisRecord, AnalysisRequest, PromptOptimizer
from ..preprocessing.models import round_percent
from .base_tools import BaseTool


def render_response(record: AnalysisRecord, blocking_flags=()) -> str:
    """Render a record the way the tool reports it back to the caller."""
    clarity = round_percent(record.clarity_score)
    parts = [f"{record.optimization_header}\n\n"]

    if record.needs_clarification and record.questions:
        parts.append(f"**⚠️ Clarification Needed** (Clarity: {clarity}%)\n\n")
        parts.append("**Please answer these questions before I proceed:**\n\n")
        for i, question in enumerate(record.questions, start=1):
            parts.append(f"{i}. {question}\n")
        parts.append("\n---\n\n")
    elif record.needs_clarification:
        blocking = [f.value for f in record.risk_flags if f in blocking_flags]
        if blocking:
            parts.append(f"**⚠️ Review Required** (Clarity: {clarity}%)\n\n")
            parts.append(
                f"This request was flagged for {', '.join(blocking)} concerns "
                "and needs review before it is processed.\n\n---\n\n"
            )
        else:
            # Low clarity, but no checklist question applies
            parts.append(f"**⚠️ Clarification Needed** (Clarity: {clarity}%)\n\n")
            parts.append(
                "Clarity is below the threshold; add detail about the goal, context "
                "and expected output before processing.\n\n---\n\n"
            )
    else:
        parts.append(f"**✓ Ready to Process** (Clarity: {clarity}%)\n\n")

    flags = ", ".join(f.value for f in record.risk_flags) if record.risk_flags else "None"
    parts.append(f"**Domain:** {record.domain.value}\n")
    parts.append(f"**Risk Flags:** {flags}\n\n")

    if not record.needs_clarification:
        parts.append(f"**Optimized Prompt:**\n```\n{record.optimized_prompt}\n```\n\n")
        parts.append(
            "Use this enhanced prompt for the AI request to ensure comprehensive, "
            "domain-appropriate output."
        )

    return "".join(parts)


class OptimizePromptTool(BaseTool):
    """Analyze and optimize a user prompt before it is sent to an AI model."""

    def __init__(self, optimizer: Optional[PromptOptimizer] = None):
        super().__init__(
            name="optimize_prompt",
            description=(
                "Analyze and optimize a user prompt using the OTA (Optimize-Then-Answer) Framework. "
                "Returns clarity score, domain classification, risk flags, targeted questions (if needed), "
                "and an enhanced prompt ready for AI processing."
            ),
        )
        self.optimizer = optimizer or PromptOptimizer()

    def get_parameters_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "prompt": {
                    "type": "string",
                    "description": "The user prompt to optimize",
                },
                "context": {
                    "type": "string",
                    "description": "Optional additional context about the request",
                },
            },
            "required": ["prompt"],
        }

    def analyze(self, prompt: Any, context: Any = None) -> AnalysisRecord:
        """Validate the raw arguments and run the analysis."""
        try:
            request = AnalysisRequest(text=prompt, context=context)
        except ValidationError as e:
            field = str(e.errors()[0]["loc"][0]) if e.errors() else "prompt"
            received = prompt if field == "text" else context
            raise InvalidInputError("prompt" if field == "text" else field, received) from e
        return self.optimizer.analyze(request)

    def execute(self, prompt: Any = None, context: Any = None) -> str:
        record = self.analyze(prompt, context)
        self.logger.info(record.optimization_header)
        return render_response(record, self.optimizer.config.blocking_flags)

    def execute_json(self, prompt: Any = None, context: Any = None) -> str:
        record = self.analyze(prompt, context)
        return json.dumps(record.to_dict(), indent=2)
