"""Concurrency and latency probes against both health endpoints."""

import asyncio
from collections.abc import Sequence

from clipsync_smoke.cases.base import CaseContext, TestCase, Verdict, failed, passed
from clipsync_smoke.client import Response

CONCURRENT_PAIRS = 10
EXCELLENT_THRESHOLD = 18
GOOD_THRESHOLD = 15


async def concurrent_health_checks(ctx: CaseContext) -> Sequence[Response]:
    """Fire all health requests at once and wait for every one of them."""
    requests = []
    for _ in range(CONCURRENT_PAIRS):
        requests.append(ctx.services.api.get("/health"))
        requests.append(ctx.services.download.get("/health"))
    return await asyncio.gather(*requests)


def judge_concurrency(responses: Sequence[Response], ctx: CaseContext) -> Verdict:
    succeeded = sum(1 for response in responses if response.success)
    total = len(responses)
    if succeeded >= EXCELLENT_THRESHOLD:
        return passed(f"{succeeded}/{total} concurrent requests succeeded (excellent)")
    if succeeded >= GOOD_THRESHOLD:
        return passed(f"{succeeded}/{total} concurrent requests succeeded (good)")
    return failed(f"{succeeded}/{total} requests succeeded")


async def timed_health_checks(ctx: CaseContext) -> Sequence[Response]:
    return [
        await ctx.services.api.get("/health"),
        await ctx.services.download.get("/health"),
    ]


def judge_latency(responses: Sequence[Response], ctx: CaseContext) -> Verdict:
    """Both calls must succeed; slow answers only soften the detail message."""
    api, download = responses
    timings = f"API: {api.elapsed_ms:.0f}ms, Download: {download.elapsed_ms:.0f}ms"

    if not (api.success and download.success):
        return failed(timings)

    threshold = ctx.config.latency_threshold_ms
    if api.elapsed_ms < threshold and download.elapsed_ms < threshold:
        return passed(timings)
    return passed(f"{timings} (acceptable)")


concurrent_requests = TestCase(
    name="Concurrent Requests",
    operation=concurrent_health_checks,
    judge=judge_concurrency,
)
performance_test = TestCase(
    name="Performance Test",
    operation=timed_health_checks,
    judge=judge_latency,
)
