"""Render telemetry into the instruction sent to the completion service."""

from storefront_risk.models.assessment import TelemetrySummary
from storefront_risk.models.telemetry import TestExecutionTelemetry
from storefront_risk.normalizer import critical_element_issues

MAX_SAMPLED_JS_ERRORS = 3

SYSTEM_PROMPT = (
    "You are an expert QA engineer analyzing ecommerce website test results. "
    "Always respond ONLY with valid JSON matching the required schema."
)

PROMPT_TEMPLATE = """
Analyze the following ecommerce website test results and respond ONLY in valid JSON with this schema:

{{
  "riskLevel": "low | medium | high | critical",
  "score": number (0-100),
  "recommendations": [ "string", "string", "string" ],
  "summary": "short summary under 50 words"
}}

Rules:
- Risk level must be determined as:
  - "critical" if product page pass rate < 50%
  - "high" if pass rate < 70%
  - "medium" if pass rate < 85%
  - "low" otherwise
- Provide exactly 3 recommendations, each under 15 words, actionable.
- Summary must be clear and concise.

Test Results:
Product Page Tests:
- Total pages tested: {pages_total}
- Pages passed: {pages_passed}
- Critical elements missing: {element_issues}

Image Loading:
- Total images: {images_total}
- Successfully loaded: {images_loaded}
- Failed to load: {images_failed}

Errors Detected:
- JavaScript errors: {js_errors}
- Network failures: {network_errors}
- Console warnings: {warnings}

Most critical JavaScript errors:
{sampled_errors}
"""


def build_prompt(
    telemetry: TestExecutionTelemetry, summary: TelemetrySummary
) -> str:
    """Build the user prompt for one probe run.

    Only the first few JavaScript errors are included, in probe order.
    """
    sampled = telemetry.error_detection.js_errors[:MAX_SAMPLED_JS_ERRORS]
    return PROMPT_TEMPLATE.format(
        pages_total=summary.product_pages_total,
        pages_passed=summary.product_pages_passed,
        element_issues=(
            ", ".join(critical_element_issues(telemetry.product_page_tests))
            or "None"
        ),
        images_total=summary.images_total,
        images_loaded=summary.images_loaded,
        images_failed=summary.images_failed,
        js_errors=summary.js_errors_count,
        network_errors=summary.network_errors_count,
        warnings=summary.warnings_count,
        sampled_errors="\n".join(f"- {error.message}" for error in sampled),
    )
