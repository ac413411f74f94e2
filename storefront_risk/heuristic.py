"""Deterministic risk scoring used whenever no usable completion exists."""

import math

from storefront_risk.models.assessment import (
    AssessmentRecord,
    RiskLevel,
    TelemetrySummary,
)
from storefront_risk.models.telemetry import TestExecutionTelemetry
from storefront_risk.normalizer import summarize

MAX_RECOMMENDATIONS = 3

FIX_PAGES = "Fix missing critical elements on product pages"
FIX_IMAGES = "Resolve image loading issues"
FIX_JS_ERRORS = "Address JavaScript errors"


def score_heuristically(telemetry: TestExecutionTelemetry) -> AssessmentRecord:
    """Score telemetry without any external dependency."""
    return assess_summary(summarize(telemetry))


def assess_summary(summary: TelemetrySummary) -> AssessmentRecord:
    """Build the fallback assessment from normalized counts.

    The score is the mean of the page pass rate and the image success rate,
    both as percentages, rounded half up.
    """
    pass_rate = summary.pass_rate * 100
    image_success_rate = summary.image_success_rate * 100
    score = math.floor((pass_rate + image_success_rate) / 2 + 0.5)

    recommendations: list[str] = []
    if summary.product_pages_passed < summary.product_pages_total:
        recommendations.append(FIX_PAGES)
    if summary.images_loaded < summary.images_total:
        recommendations.append(FIX_IMAGES)
    if summary.js_errors_count > 0:
        recommendations.append(FIX_JS_ERRORS)

    return AssessmentRecord(
        risk_level=classify_score(score),
        score=score,
        recommendations=tuple(recommendations[:MAX_RECOMMENDATIONS]),
        summary=(
            f"Test completed with {score}% overall score. "
            f"{summary.product_pages_passed}/{summary.product_pages_total} "
            "product pages passed validation."
        ),
    )


def classify_score(score: int) -> RiskLevel:
    """Map a combined score to a risk tier."""
    if score > 80:
        return "low"
    if score > 60:
        return "medium"
    if score > 40:
        return "high"
    return "critical"
