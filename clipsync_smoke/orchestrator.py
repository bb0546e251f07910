"""Test orchestrator running the case catalog in order."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from clipsync_smoke.cases.base import CaseContext, TestCase, Verdict
from clipsync_smoke.client import Services
from clipsync_smoke.config import SuiteConfig
from clipsync_smoke.models.result import TestResult, TestRunSummary
from clipsync_smoke.models.session import SessionState

log = logging.getLogger(__name__)

SUITE_RESULT_NAME = "Test Suite"


@dataclass(frozen=True, kw_only=True)
class TestOrchestrator:
    """Runs test cases one at a time against both services."""

    __test__ = False

    services: Services
    config: SuiteConfig

    async def run(
        self, cases: Sequence[TestCase], session: SessionState
    ) -> TestRunSummary:
        """Run every case in order and record one result per case.

        Args:
            cases: Cases to run, in execution order
            session: Initial session state, threaded through the cases

        Returns:
            Summary with the recorded results. If an unexpected error escapes
            a case, the run stops and the error is recorded as one extra
            failing result.

        """
        summary = TestRunSummary()
        try:
            for case in cases:
                log.info("Testing %s...", case.name)
                verdict = await self._run_case(case, session)
                if verdict.session is not None:
                    session = verdict.session
                self._record(summary, case.name, verdict)
        except Exception as exc:
            log.exception("Test suite crashed: %s", exc)
            self._record(
                summary,
                SUITE_RESULT_NAME,
                Verdict(success=False, details=f"Crashed: {exc}"),
            )
        return summary

    async def _run_case(self, case: TestCase, session: SessionState) -> Verdict:
        if case.requires_auth and not session.auth_token:
            return Verdict(success=False, details="No auth token available")

        ctx = CaseContext(services=self.services, config=self.config, session=session)
        responses = await case.operation(ctx)
        return case.judge(responses, ctx)

    def _record(self, summary: TestRunSummary, name: str, verdict: Verdict) -> None:
        result = TestResult(name=name, success=verdict.success, details=verdict.details)
        summary.record(result)
        marker = "✅ PASS" if result.success else "❌ FAIL"
        if result.details:
            log.info("%s %s: %s", marker, result.name, result.details)
        else:
            log.info("%s %s", marker, result.name)
