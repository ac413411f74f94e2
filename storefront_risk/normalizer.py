"""Derive aggregate counts from raw probe telemetry."""

from collections.abc import Sequence

from storefront_risk.models.assessment import TelemetrySummary
from storefront_risk.models.telemetry import PageTest, TestExecutionTelemetry


def summarize(telemetry: TestExecutionTelemetry) -> TelemetrySummary:
    """Count passed pages, loaded images and collected errors."""
    errors = telemetry.error_detection
    return TelemetrySummary(
        product_pages_total=len(telemetry.product_page_tests),
        product_pages_passed=sum(1 for t in telemetry.product_page_tests if t.passed),
        images_total=len(telemetry.image_validation),
        images_loaded=sum(1 for i in telemetry.image_validation if i.loaded),
        js_errors_count=len(errors.js_errors),
        network_errors_count=len(errors.network_errors),
        warnings_count=len(errors.console_warnings),
    )


def critical_element_issues(page_tests: Sequence[PageTest]) -> Sequence[str]:
    """List missing critical elements across pages, first occurrence first."""
    issues: dict[str, None] = {}
    for test in page_tests:
        if not test.elements.title.present:
            issues["Missing product titles"] = None
        if not test.elements.price.present:
            issues["Missing price display"] = None
        if not test.elements.add_to_cart.present:
            issues["Missing add to cart buttons"] = None
    return list(issues)
