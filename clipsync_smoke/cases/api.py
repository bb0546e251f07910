"""Cases exercising the API service: health, auth and video ingestion."""

from collections.abc import Sequence
from dataclasses import replace

from clipsync_smoke.cases.base import (
    CaseContext,
    TestCase,
    Verdict,
    failed,
    parse,
    passed,
)
from clipsync_smoke.client import Response
from clipsync_smoke.models.api import (
    HealthResponse,
    IngestResponse,
    LoginResponse,
    RegisterResponse,
    VideoListResponse,
)

SAMPLE_VIDEO_URL = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"


def judge_health(responses: Sequence[Response], ctx: CaseContext) -> Verdict:
    """A health probe passes on 200 and reports the advertised status."""
    (response,) = responses
    if not (response.success and response.status == 200):
        return failed(response.describe())
    health = parse(HealthResponse, response.data) or HealthResponse()
    return passed(f"Status: {health.status}")


async def api_health(ctx: CaseContext) -> Sequence[Response]:
    return [await ctx.services.api.get("/health")]


async def register(ctx: CaseContext) -> Sequence[Response]:
    payload = {"email": ctx.session.email, "password": ctx.session.password}
    return [await ctx.services.api.post("/api/auth/register", json=payload)]


def judge_register(responses: Sequence[Response], ctx: CaseContext) -> Verdict:
    (response,) = responses
    if not (response.success and response.status == 201):
        return failed(response.describe())
    if (body := parse(RegisterResponse, response.data)) is None:
        return failed(f"No user ID in response. {response.describe()}")
    return passed(f"User ID: {body.user.id}")


async def login(ctx: CaseContext) -> Sequence[Response]:
    payload = {"email": ctx.session.email, "password": ctx.session.password}
    return [await ctx.services.api.post("/api/auth/login", json=payload)]


def judge_login(responses: Sequence[Response], ctx: CaseContext) -> Verdict:
    """Login captures both tokens for the authenticated cases that follow."""
    (response,) = responses
    if not (response.success and response.status == 200):
        return failed(response.describe())
    body = parse(LoginResponse, response.data) or LoginResponse()
    session = replace(
        ctx.session,
        auth_token=body.token or None,
        refresh_token=body.refresh_token or None,
    )
    return passed(f"Token received: {'Yes' if body.token else 'No'}", session)


async def ingest_video(ctx: CaseContext) -> Sequence[Response]:
    return [
        await ctx.services.api.post(
            "/api/videos/ingest",
            json={"url": SAMPLE_VIDEO_URL},
            headers=ctx.session.auth_headers,
        )
    ]


def judge_ingest(responses: Sequence[Response], ctx: CaseContext) -> Verdict:
    (response,) = responses
    if not (response.success and response.status == 201):
        return failed(response.describe())
    if (body := parse(IngestResponse, response.data)) is None:
        return failed(f"No video ID in response. {response.describe()}")
    video_id = str(body.video.id)
    return passed(f"Video ID: {video_id}", replace(ctx.session, video_id=video_id))


async def list_videos(ctx: CaseContext) -> Sequence[Response]:
    return [
        await ctx.services.api.get("/api/videos", headers=ctx.session.auth_headers)
    ]


def judge_list_videos(responses: Sequence[Response], ctx: CaseContext) -> Verdict:
    (response,) = responses
    if not (response.success and response.status == 200):
        return failed(response.describe())
    if (body := parse(VideoListResponse, response.data)) is None:
        return failed(f"No videos list in response. {response.describe()}")
    return passed(f"Found {len(body.videos)} videos")


async def logout(ctx: CaseContext) -> Sequence[Response]:
    return [
        await ctx.services.api.post(
            "/api/auth/logout", headers=ctx.session.auth_headers
        )
    ]


def judge_logout(responses: Sequence[Response], ctx: CaseContext) -> Verdict:
    (response,) = responses
    if response.success and response.status == 200:
        return passed("User logged out successfully")
    return failed(response.describe())


api_health_check = TestCase(
    name="API Health Check", operation=api_health, judge=judge_health
)
user_registration = TestCase(
    name="User Registration", operation=register, judge=judge_register
)
user_login = TestCase(name="User Login", operation=login, judge=judge_login)
video_ingestion = TestCase(
    name="Video Ingestion",
    operation=ingest_video,
    judge=judge_ingest,
    requires_auth=True,
)
get_user_videos = TestCase(
    name="Get User Videos",
    operation=list_videos,
    judge=judge_list_videos,
    requires_auth=True,
)
user_logout = TestCase(
    name="User Logout", operation=logout, judge=judge_logout, requires_auth=True
)
