"""CLI entry point for the ClipSync service smoke tests."""

import argparse
import asyncio
import logging
import os
import sys
import time
from collections.abc import Sequence

from clipsync_smoke.cases import DEFAULT_CASES, TestCase
from clipsync_smoke.client import Services
from clipsync_smoke.config import (
    DEFAULT_API_BASE_URL,
    DEFAULT_DOWNLOAD_BASE_URL,
    SuiteConfig,
)
from clipsync_smoke.health import ServiceHealth, check_services_health
from clipsync_smoke.models.result import TestRunSummary
from clipsync_smoke.models.session import SessionState
from clipsync_smoke.orchestrator import TestOrchestrator


def log_health_guidance(
    log: logging.Logger, health: ServiceHealth, config: SuiteConfig
) -> None:
    """Tell the user which services to start before trying again."""
    log.error("Some services are not running or not accessible")
    if not health.api:
        log.error("  API Service: Please start with: %s", config.api_start_hint)
    if not health.download:
        log.error(
            "  Download Service: Please start with: %s", config.download_start_hint
        )


def log_results_summary(
    log: logging.Logger, summary: TestRunSummary, elapsed_ms: float
) -> None:
    """Log totals, timing and the details of every failed case."""
    log.info("=" * 80)
    log.info("Test Results Summary:")
    log.info("=" * 80)
    log.info("Total Tests: %d", summary.total)
    log.info("✅ Passed: %d", summary.passed)
    log.info("❌ Failed: %d", summary.failed)
    log.info("Success Rate: %.1f%%", summary.success_rate)
    log.info("Total Time: %.0fms", elapsed_ms)

    if summary.failures:
        log.info("Failed Test Details:")
        for result in summary.failures:
            log.info("  - %s: %s", result.name, result.details)

    if summary.failed:
        log.info("Some tests failed. Check the details above.")
    else:
        log.info("All tests passed! The ClipSync services are working.")


async def run(
    config: SuiteConfig, cases: Sequence[TestCase] = DEFAULT_CASES
) -> int:
    """Run the smoke tests and return exit code."""
    log = logging.getLogger("clipsync_smoke")

    log.info("ClipSync Complete Service Testing Suite")
    log.info("API Base URL: %s", config.api_base_url)
    log.info("Download Service Base URL: %s", config.download_base_url)
    log.info("Request Timeout: %gs", config.request_timeout)

    async with Services.from_config(config) as services:
        health = await check_services_health(services, config.health_timeout)
        if not health.all_healthy:
            log_health_guidance(log, health, config)
            return 1
        log.info("Both services are running and healthy")

        orchestrator = TestOrchestrator(services=services, config=config)
        started = time.monotonic()
        summary = await orchestrator.run(cases, SessionState.generate())
        elapsed_ms = (time.monotonic() - started) * 1000

    log_results_summary(log, summary, elapsed_ms)

    return 0 if summary.failed == 0 else 1


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Run end-to-end smoke tests against the API and download services"
    )
    parser.add_argument(
        "--api-url",
        default=os.environ.get("CLIPSYNC_API_URL", DEFAULT_API_BASE_URL),
        help="Base URL of the API service (env: CLIPSYNC_API_URL)",
    )
    parser.add_argument(
        "--download-url",
        default=os.environ.get("CLIPSYNC_DOWNLOAD_URL", DEFAULT_DOWNLOAD_BASE_URL),
        help="Base URL of the download service (env: CLIPSYNC_DOWNLOAD_URL)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=30.0,
        help="Default per-request timeout in seconds",
    )
    parser.add_argument(
        "--strict-not-found",
        action="store_true",
        help="Require a 404 from the download service for unknown routes",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every HTTP exchange",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    config = SuiteConfig(
        api_base_url=args.api_url,
        download_base_url=args.download_url,
        request_timeout=args.timeout,
        strict_not_found=args.strict_not_found,
    )
    exit_code = asyncio.run(run(config))
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
