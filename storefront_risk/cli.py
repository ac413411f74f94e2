"""CLI entry point for storefront risk analysis."""

import argparse
import asyncio
import json
import logging
import os
import sys
from collections.abc import AsyncGenerator, Mapping, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from storefront_risk.engine import RiskAnalysisEngine
from storefront_risk.models.assessment import AssessmentRecord
from storefront_risk.models.telemetry import TestExecutionTelemetry
from storefront_risk.providers.base import CompletionOptions, CompletionProvider
from storefront_risk.providers.loading import load_provider_manifest

API_KEY_ENV_VAR = "OPENAI_API_KEY"
DEFAULT_PROVIDER = "openai"

RISK_SYMBOLS = {
    "low": "🟢",
    "medium": "🟡",
    "high": "🟠",
    "critical": "🔴",
}


@dataclass(frozen=True, kw_only=True)
class FileAssessment:
    """Assessment produced for one telemetry file."""

    path: Path
    assessment: AssessmentRecord


def resolve_provider_settings(
    provider_key: str | None,
    provider_config_json: str | None,
    environ: Mapping[str, str],
) -> tuple[str, dict[str, Any]] | None:
    """Decide once whether completions are available for this process.

    An explicit provider key wins. Otherwise an API key in the environment
    enables the default provider. Returns None when no provider is configured.
    """
    if provider_key:
        return provider_key, json.loads(provider_config_json or "{}")

    if api_key := environ.get(API_KEY_ENV_VAR):
        config = json.loads(provider_config_json or "{}")
        config.setdefault("api_key", api_key)
        return DEFAULT_PROVIDER, config

    return None


@asynccontextmanager
async def open_provider(
    settings: tuple[str, dict[str, Any]] | None,
) -> AsyncGenerator[CompletionProvider | None, None]:
    """Open the configured provider, or yield None when there is none."""
    log = logging.getLogger("storefront_risk")

    if settings is None:
        log.warning("No completion provider configured, using heuristic analysis")
        yield None
        return

    provider_key, config_dict = settings
    log.info("Loading provider: %s", provider_key)
    manifest = load_provider_manifest(provider_key)
    config = manifest.config_cls(**config_dict)

    async with manifest.provider_factory(config) as provider:
        yield provider


def load_telemetry(path: Path) -> TestExecutionTelemetry:
    """Load and validate a telemetry JSON document."""
    return TestExecutionTelemetry.model_validate_json(path.read_text())


async def analyze_files(
    engine: RiskAnalysisEngine, paths: Sequence[Path]
) -> Sequence[FileAssessment]:
    """Analyze telemetry files concurrently, preserving input order."""
    telemetries = [load_telemetry(path) for path in paths]
    assessments = await asyncio.gather(
        *(engine.analyze(telemetry) for telemetry in telemetries)
    )
    return [
        FileAssessment(path=path, assessment=assessment)
        for path, assessment in zip(paths, assessments, strict=True)
    ]


def log_assessment_summary(
    log: logging.Logger, file_assessments: Sequence[FileAssessment]
) -> None:
    """Log a formatted summary of assessments."""
    log.info("=" * 80)
    log.info("Risk Assessment Summary:")
    log.info("=" * 80)

    for item in file_assessments:
        assessment = item.assessment
        symbol = RISK_SYMBOLS.get(assessment.risk_level, "?")
        log.info(
            "%s %s: %s (score %d)",
            symbol,
            item.path,
            assessment.risk_level,
            assessment.score,
        )
        log.info("  Summary: %s", assessment.summary)
        for recommendation in assessment.recommendations:
            log.info("  - %s", recommendation)


def format_output(file_assessments: Sequence[FileAssessment]) -> dict[str, Any]:
    """Format assessments for JSON output."""
    return {
        "total": len(file_assessments),
        "results": [
            {"file": str(item.path), **item.assessment.to_dict()}
            for item in file_assessments
        ],
    }


async def run(
    telemetry_paths: Sequence[Path],
    provider_settings: tuple[str, dict[str, Any]] | None,
    options: CompletionOptions,
) -> int:
    """Analyze telemetry files and return exit code."""
    log = logging.getLogger("storefront_risk")

    async with open_provider(provider_settings) as provider:
        engine = RiskAnalysisEngine(provider=provider, options=options)
        log.info(
            "Analyzing %d telemetry file(s) (ai_enabled=%s)...",
            len(telemetry_paths),
            engine.ai_enabled,
        )
        file_assessments = await analyze_files(engine, telemetry_paths)

    log_assessment_summary(log, file_assessments)
    print(json.dumps(format_output(file_assessments), indent=2))

    has_critical = any(
        item.assessment.risk_level == "critical" for item in file_assessments
    )
    return 1 if has_critical else 0


def main() -> None:
    """CLI entry point."""
    defaults = CompletionOptions()
    parser = argparse.ArgumentParser(
        description="Assess ecommerce probe telemetry and report risk"
    )
    parser.add_argument(
        "telemetry",
        type=Path,
        nargs="+",
        help="Path(s) to telemetry JSON documents",
    )
    parser.add_argument(
        "--provider",
        default=None,
        help=f"Completion provider key (defaults to {DEFAULT_PROVIDER} "
        f"when {API_KEY_ENV_VAR} is set)",
    )
    parser.add_argument(
        "--provider-config",
        default=None,
        help="JSON configuration for the provider",
    )
    parser.add_argument(
        "--model",
        default=defaults.model,
        help="Model name sent to the provider",
    )
    parser.add_argument(
        "--max-output-tokens",
        type=int,
        default=defaults.max_output_tokens,
        help="Maximum tokens in the completion",
    )
    parser.add_argument(
        "--temperature",
        type=float,
        default=defaults.temperature,
        help="Sampling temperature",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    exit_code = asyncio.run(
        run(
            telemetry_paths=args.telemetry,
            provider_settings=resolve_provider_settings(
                args.provider, args.provider_config, os.environ
            ),
            options=CompletionOptions(
                model=args.model,
                max_output_tokens=args.max_output_tokens,
                temperature=args.temperature,
            ),
        )
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
