"""Cases that send bad requests and expect the services to reject them."""

from collections.abc import Sequence

from clipsync_smoke.cases.base import CaseContext, TestCase, Verdict, failed, passed
from clipsync_smoke.client import Response


async def list_videos_anonymously(ctx: CaseContext) -> Sequence[Response]:
    return [await ctx.services.api.get("/api/videos")]


def judge_unauthorized(responses: Sequence[Response], ctx: CaseContext) -> Verdict:
    (response,) = responses
    if not response.success and response.status == 401:
        return passed("Properly rejected unauthorized request")
    return failed(f"Expected 401, got {response.status}")


async def request_unknown_routes(ctx: CaseContext) -> Sequence[Response]:
    return [
        await ctx.services.api.get("/api/nonexistent"),
        await ctx.services.download.get("/nonexistent"),
    ]


def judge_unknown_routes(
    responses: Sequence[Response], ctx: CaseContext
) -> Verdict:
    """Both services must answer unknown routes with 404.

    Unless ``strict_not_found`` is configured, a download service that did not
    answer at all is accepted as well.
    """
    api, download = responses
    download_statuses = {404} if ctx.config.strict_not_found else {404, 0}

    api_ok = not api.success and api.status == 404
    download_ok = not download.success and download.status in download_statuses
    if api_ok and download_ok:
        return passed("Both services properly handle invalid endpoints")
    return failed(f"API: {api.status}, Download: {download.status}")


async def ingest_invalid_url(ctx: CaseContext) -> Sequence[Response]:
    return [
        await ctx.services.api.post(
            "/api/videos/ingest",
            json={"url": "invalid-url"},
            headers=ctx.session.auth_headers,
        )
    ]


def judge_invalid_url(responses: Sequence[Response], ctx: CaseContext) -> Verdict:
    (response,) = responses
    if not response.success and response.status in (400, 500):
        return passed("Properly rejected invalid URL")
    return failed(f"Expected error, got {response.status}")


unauthorized_access = TestCase(
    name="Unauthorized Access to API",
    operation=list_videos_anonymously,
    judge=judge_unauthorized,
)
invalid_endpoints = TestCase(
    name="Invalid Endpoints",
    operation=request_unknown_routes,
    judge=judge_unknown_routes,
)
invalid_video_url = TestCase(
    name="Invalid Video URL",
    operation=ingest_invalid_url,
    judge=judge_invalid_url,
    requires_auth=True,
)
