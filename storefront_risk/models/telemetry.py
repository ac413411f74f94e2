"""Models for the telemetry produced by one probe run."""

from collections.abc import Sequence

from pydantic import Field

from storefront_risk.models.base import Model


class ElementCheck(Model):
    """Presence check for a single product page element."""

    present: bool = Field(..., description="Whether the element was found")
    text: str | None = Field(default=None, description="Rendered element text")
    clickable: bool | None = Field(
        default=None, description="Whether the element accepted a click"
    )


class PageElements(Model):
    """Critical elements checked on every product page."""

    title: ElementCheck
    price: ElementCheck
    add_to_cart: ElementCheck
    description: ElementCheck
    variants: ElementCheck


class PagePerformance(Model):
    """Page timing measurements in milliseconds."""

    load_time: float = 0
    time_to_interactive: float = 0


class PageTest(Model):
    """Result of probing a single product page."""

    url: str
    passed: bool
    elements: PageElements
    performance: PagePerformance = Field(default_factory=PagePerformance)
    errors: Sequence[str] = Field(default_factory=list)


class ImageDimensions(Model):
    """Natural size of a loaded image."""

    width: int = 0
    height: int = 0


class ImageCheck(Model):
    """Result of loading a single image."""

    loaded: bool
    status: int
    alt_text: str | None = None
    dimensions: ImageDimensions = Field(default_factory=ImageDimensions)
    errors: Sequence[str] = Field(default_factory=list)


class JsError(Model):
    """Uncaught JavaScript error captured by the probe."""

    message: str
    source: str = ""
    timestamp: str = ""


class NetworkError(Model):
    """Failed network request captured by the probe."""

    status: int
    url: str
    error: str | None = None
    timestamp: str = ""


class ConsoleWarning(Model):
    """Console warning captured by the probe."""

    message: str
    timestamp: str = ""


class ErrorDetection(Model):
    """Errors and warnings collected across the whole probe run."""

    js_errors: Sequence[JsError]
    network_errors: Sequence[NetworkError]
    console_warnings: Sequence[ConsoleWarning]


class TestExecutionTelemetry(Model):
    """Complete telemetry of one probe run.

    All three top-level sections are required. Missing sections are an
    upstream contract breach and fail validation on load.
    """

    __test__ = False

    product_page_tests: Sequence[PageTest] = Field(
        ..., description="Per-page element checks, in probe order"
    )
    image_validation: Sequence[ImageCheck] = Field(
        ..., description="Per-image load checks, in probe order"
    )
    error_detection: ErrorDetection = Field(
        ..., description="JavaScript, network and console diagnostics"
    )
