"""Extract and validate the assessment returned by the completion service."""

from collections.abc import Sequence

from pydantic import Field, ValidationError, field_validator

from storefront_risk.models.assessment import (
    AssessmentRecord,
    RiskLevel,
    TelemetrySummary,
)
from storefront_risk.models.base import Model

DEFAULT_SUMMARY = "Analysis completed"
DEFAULT_SCORE = 75


class InvalidCompletionError(Exception):
    """Raised when a completion does not contain a usable assessment."""


class CompletionPayload(Model):
    """Assessment fields as returned by the completion service.

    Every field is optional; missing ones are filled in by parse_completion.
    """

    risk_level: RiskLevel | None = None
    score: int | None = Field(default=None, ge=0, le=100)
    recommendations: Sequence[str] | None = None
    summary: str | None = None

    @field_validator("risk_level", mode="before")
    @classmethod
    def _blank_risk_level(cls, value: object) -> object:
        return None if value == "" else value


def extract_json_candidate(text: str) -> str:
    """Return the span between the first '{' and the last '}'.

    This does not balance braces: prose containing its own braces around
    the object yields an invalid candidate.
    """
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        raise InvalidCompletionError("No JSON object found in completion")
    return text[start : end + 1]


def parse_completion(text: str, summary: TelemetrySummary) -> AssessmentRecord:
    """Parse a completion into an assessment, filling missing fields.

    Only an absent or null score takes the default; an explicit 0 is kept.

    Raises:
        InvalidCompletionError: If the completion holds no valid JSON object
            or the object does not match the expected schema.

    """
    if not isinstance(text, str):
        raise InvalidCompletionError(f"Completion is not text: {type(text).__name__}")
    candidate = extract_json_candidate(text)
    try:
        payload = CompletionPayload.model_validate_json(candidate)
    except ValidationError as exc:
        raise InvalidCompletionError(
            f"Completion does not match assessment schema: {exc}"
        ) from exc

    return AssessmentRecord(
        risk_level=payload.risk_level or classify_failure_rate(summary),
        score=DEFAULT_SCORE if payload.score is None else payload.score,
        recommendations=tuple(payload.recommendations or ()),
        summary=payload.summary or DEFAULT_SUMMARY,
    )


def classify_failure_rate(summary: TelemetrySummary) -> RiskLevel:
    """Map the product page failure rate to a risk tier."""
    failure_rate = 1 - summary.pass_rate
    if failure_rate > 0.5:
        return "critical"
    if failure_rate > 0.3:
        return "high"
    if failure_rate > 0.1:
        return "medium"
    return "low"
