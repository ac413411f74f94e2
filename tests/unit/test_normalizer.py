"""Tests for telemetry normalization."""

from storefront_risk.models.assessment import TelemetrySummary
from storefront_risk.models.telemetry import TestExecutionTelemetry
from storefront_risk.normalizer import critical_element_issues, summarize
from storefront_risk.testing.factories import TelemetrySummaryFactory
from storefront_risk.testing.payloads import (
    build_telemetry,
    image_check,
    page_test,
    telemetry_payload,
)


def test_summarize_counts_outcomes() -> None:
    """Counts passed pages, loaded images and every error category."""
    telemetry = TestExecutionTelemetry.model_validate(
        telemetry_payload(
            pages=[page_test(passed=True), page_test(passed=False)],
            images=[image_check(), image_check(), image_check(loaded=False)],
            js_errors=["TypeError: x is undefined"],
            network_errors=2,
            warnings=3,
        )
    )

    assert summarize(telemetry) == TelemetrySummary(
        product_pages_total=2,
        product_pages_passed=1,
        images_total=3,
        images_loaded=2,
        js_errors_count=1,
        network_errors_count=2,
        warnings_count=3,
    )


def test_summarize_empty_telemetry() -> None:
    """Returns all-zero counts for an empty run."""
    summary = summarize(build_telemetry())

    assert summary == TelemetrySummaryFactory.build()


def test_summarize_does_not_mutate_input() -> None:
    """Leaves the telemetry untouched."""
    telemetry = build_telemetry(pages_passed=2, pages_failed=1, images_failed=1)
    before = telemetry.model_dump()

    summarize(telemetry)

    assert telemetry.model_dump() == before


def test_rates_default_to_full_success_without_items() -> None:
    """Treats a dimension with no items as fully successful."""
    summary = TelemetrySummaryFactory.build()

    assert summary.pass_rate == 1.0
    assert summary.image_success_rate == 1.0
    assert summary.images_failed == 0


def test_rates_are_fractions() -> None:
    """Computes pass and image success rates as fractions."""
    summary = TelemetrySummaryFactory.build(
        product_pages_total=4,
        product_pages_passed=1,
        images_total=5,
        images_loaded=4,
    )

    assert summary.pass_rate == 0.25
    assert summary.image_success_rate == 0.8
    assert summary.images_failed == 1


def test_critical_element_issues_deduplicates_in_order() -> None:
    """Reports each missing critical element once, first occurrence first."""
    telemetry = TestExecutionTelemetry.model_validate(
        telemetry_payload(
            pages=[
                page_test(passed=False, missing=["price"]),
                page_test(passed=False, missing=["addToCart", "title"]),
                page_test(passed=False, missing=["price", "description"]),
            ]
        )
    )

    issues = critical_element_issues(telemetry.product_page_tests)

    assert issues == [
        "Missing price display",
        "Missing product titles",
        "Missing add to cart buttons",
    ]


def test_critical_element_issues_empty_when_all_present() -> None:
    """Returns no issues when every critical element is present."""
    telemetry = build_telemetry(pages_passed=3)

    assert critical_element_issues(telemetry.product_page_tests) == []
