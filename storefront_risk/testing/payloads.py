"""Payload helpers for probe telemetry documents in tests."""

from collections.abc import Sequence
from typing import Any

from storefront_risk.models.telemetry import TestExecutionTelemetry

ELEMENT_NAMES = ("title", "price", "addToCart", "description", "variants")


def page_test(
    *,
    url: str = "https://shop.test/products/1",
    passed: bool = True,
    missing: Sequence[str] = (),
    errors: Sequence[str] = (),
) -> dict[str, Any]:
    """Create a product page test payload.

    Elements named in missing are reported absent.
    """
    return {
        "url": url,
        "passed": passed,
        "elements": {
            name: (
                {"present": False}
                if name in missing
                else {"present": True, "text": name, "clickable": True}
            )
            for name in ELEMENT_NAMES
        },
        "performance": {"loadTime": 1250, "timeToInteractive": 1800},
        "errors": list(errors),
    }


def image_check(*, loaded: bool = True, status: int | None = None) -> dict[str, Any]:
    """Create an image check payload."""
    return {
        "loaded": loaded,
        "status": status if status is not None else (200 if loaded else 404),
        "altText": "Product photo",
        "dimensions": {"width": 800, "height": 600} if loaded else {},
        "errors": [] if loaded else ["Image failed to load"],
    }


def js_error(message: str) -> dict[str, Any]:
    """Create a JavaScript error payload."""
    return {
        "message": message,
        "source": "https://shop.test/static/app.js",
        "timestamp": "2099-01-01T12:00:00Z",
    }


def telemetry_payload(
    *,
    pages: Sequence[dict[str, Any]] = (),
    images: Sequence[dict[str, Any]] = (),
    js_errors: Sequence[str] = (),
    network_errors: int = 0,
    warnings: int = 0,
) -> dict[str, Any]:
    """Create a complete telemetry payload as emitted by the probe."""
    return {
        "productPageTests": list(pages),
        "imageValidation": list(images),
        "errorDetection": {
            "jsErrors": [js_error(message) for message in js_errors],
            "networkErrors": [
                {
                    "status": 500,
                    "url": f"https://shop.test/api/{i}",
                    "error": "Internal Server Error",
                    "timestamp": "2099-01-01T12:00:00Z",
                }
                for i in range(network_errors)
            ],
            "consoleWarnings": [
                {"message": f"Deprecated API {i}", "timestamp": "2099-01-01T12:00:00Z"}
                for i in range(warnings)
            ],
        },
    }


def build_telemetry(
    *,
    pages_passed: int = 0,
    pages_failed: int = 0,
    images_loaded: int = 0,
    images_failed: int = 0,
    js_errors: Sequence[str] = (),
) -> TestExecutionTelemetry:
    """Build validated telemetry with the given outcome counts."""
    payload = telemetry_payload(
        pages=[page_test(passed=True) for _ in range(pages_passed)]
        + [page_test(passed=False, missing=["price"]) for _ in range(pages_failed)],
        images=[image_check(loaded=True) for _ in range(images_loaded)]
        + [image_check(loaded=False) for _ in range(images_failed)],
        js_errors=js_errors,
    )
    return TestExecutionTelemetry.model_validate(payload)
