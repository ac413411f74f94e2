"""Risk analysis engine turning probe telemetry into an assessment."""

import logging
from dataclasses import dataclass, field

from storefront_risk.heuristic import assess_summary
from storefront_risk.models.assessment import AssessmentRecord, TelemetrySummary
from storefront_risk.models.telemetry import TestExecutionTelemetry
from storefront_risk.normalizer import summarize
from storefront_risk.parser import parse_completion
from storefront_risk.prompt import build_prompt
from storefront_risk.providers.base import CompletionOptions, CompletionProvider

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class RiskAnalysisEngine:
    """Produces one assessment per probe run.

    When a provider is configured, a single completion request is made and
    its answer validated. Any failure along that path yields the heuristic
    assessment instead. Without a provider the heuristic is used directly.
    """

    provider: CompletionProvider | None = None
    options: CompletionOptions = field(default_factory=CompletionOptions)

    @property
    def ai_enabled(self) -> bool:
        return self.provider is not None

    async def analyze(self, telemetry: TestExecutionTelemetry) -> AssessmentRecord:
        """Assess a probe run.

        Args:
            telemetry: Complete telemetry of one probe run

        Returns:
            A fully populated assessment record

        """
        summary = summarize(telemetry)

        if self.provider is None:
            return assess_summary(summary)

        return await self._analyze_with_provider(self.provider, telemetry, summary)

    async def _analyze_with_provider(
        self,
        provider: CompletionProvider,
        telemetry: TestExecutionTelemetry,
        summary: TelemetrySummary,
    ) -> AssessmentRecord:
        prompt = build_prompt(telemetry, summary)

        try:
            completion = await provider.complete(prompt, self.options)
        except Exception as exc:
            log.warning(
                "Completion failed, falling back to heuristic analysis: %s",
                exc,
                exc_info=exc,
            )
            return assess_summary(summary)

        try:
            return parse_completion(completion, summary)
        except Exception as exc:
            log.warning(
                "Unusable completion, falling back to heuristic analysis: %s", exc
            )
            return assess_summary(summary)
