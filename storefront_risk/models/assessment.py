"""Models for normalized counts and the produced risk assessment."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Literal

RiskLevel = Literal["low", "medium", "high", "critical"]


@dataclass(frozen=True, kw_only=True)
class TelemetrySummary:
    """Aggregate counts derived from one telemetry record."""

    product_pages_total: int
    product_pages_passed: int
    images_total: int
    images_loaded: int
    js_errors_count: int
    network_errors_count: int
    warnings_count: int

    @property
    def pass_rate(self) -> float:
        """Fraction of product pages that passed; 1.0 when none were tested."""
        if self.product_pages_total == 0:
            return 1.0
        return self.product_pages_passed / self.product_pages_total

    @property
    def image_success_rate(self) -> float:
        """Fraction of images that loaded; 1.0 when none were checked."""
        if self.images_total == 0:
            return 1.0
        return self.images_loaded / self.images_total

    @property
    def images_failed(self) -> int:
        return self.images_total - self.images_loaded


@dataclass(frozen=True, kw_only=True)
class AssessmentRecord:
    """Risk assessment for one probe run.

    Records from the heuristic path carry at most three recommendations.
    Records from a validated completion carry whatever the completion listed.
    """

    risk_level: RiskLevel
    score: int
    recommendations: Sequence[str]
    summary: str

    def to_dict(self) -> dict[str, Any]:
        """Render the record with the keys dashboards consume."""
        return {
            "riskLevel": self.risk_level,
            "score": self.score,
            "recommendations": list(self.recommendations),
            "summary": self.summary,
        }
