"""Cases exercising the download service: status, clips and the job queue."""

from collections.abc import Sequence

from clipsync_smoke.cases.api import judge_health
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
    ClipListResponse,
    DownloadJobResponse,
    GenerateClipsResponse,
)

# "Me at the zoo", short enough to keep clip generation quick
CLIP_SOURCE_URL = "https://www.youtube.com/watch?v=jNQXAC9IVRw"

SAMPLE_DOWNLOAD_JOB = {
    "url": "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
    "userId": "test_user_123",
    "videoId": "dQw4w9WgXcQ",
    "priority": 5,
}

ENDPOINT_PROBE_TIMEOUT = 10.0
GENERATION_PROBE_TIMEOUT = 30.0
GENERATION_TIMEOUT = 90.0

# Processing failures caused by the test video or local tooling, not the service
TOLERATED_GENERATION_ERRORS = (
    "Failed to create any video clips",
    "FFmpeg failed",
    "Invalid data found",
)
FFMPEG_ERRORS = ("FFmpeg failed", "Invalid data found")


async def download_health(ctx: CaseContext) -> Sequence[Response]:
    return [await ctx.services.download.get("/health")]


async def download_status(ctx: CaseContext) -> Sequence[Response]:
    return [await ctx.services.download.get("/status")]


def judge_status(responses: Sequence[Response], ctx: CaseContext) -> Verdict:
    (response,) = responses
    if response.success and response.status == 200:
        return passed("Status retrieved successfully")
    return failed(response.describe())


async def list_clips(ctx: CaseContext) -> Sequence[Response]:
    return [await ctx.services.download.get("/clips")]


def judge_clips(responses: Sequence[Response], ctx: CaseContext) -> Verdict:
    """Listing passes on 200; a body without a clips list counts as zero clips."""
    (response,) = responses
    if not (response.success and response.status == 200):
        return failed(response.describe())
    body = parse(ClipListResponse, response.data) or ClipListResponse()
    return passed(f"Found {len(body.clips or ())} clips")


async def probe_generate_clips(ctx: CaseContext) -> Sequence[Response]:
    return [
        await ctx.services.download.post(
            "/generate-clips",
            json={"youtubeUrl": CLIP_SOURCE_URL, "maxClips": 1},
            timeout=ENDPOINT_PROBE_TIMEOUT,
        )
    ]


def judge_endpoint_reachable(
    responses: Sequence[Response], ctx: CaseContext
) -> Verdict:
    """Any HTTP answer counts; business-level correctness is not checked here."""
    (response,) = responses
    if response.reachable:
        return passed(
            f"Endpoint accessible and responding (Status: {response.status})"
        )
    return failed(f"Endpoint not accessible: {response.data}")


async def download_queue(ctx: CaseContext) -> Sequence[Response]:
    return [await ctx.services.download.get("/download/queue")]


def judge_queue(responses: Sequence[Response], ctx: CaseContext) -> Verdict:
    (response,) = responses
    if response.success and response.status == 200:
        return passed("Queue status retrieved")
    return failed(response.describe())


async def submit_download_job(ctx: CaseContext) -> Sequence[Response]:
    return [await ctx.services.download.post("/download", json=SAMPLE_DOWNLOAD_JOB)]


def judge_download_job(responses: Sequence[Response], ctx: CaseContext) -> Verdict:
    (response,) = responses
    if not (response.success and response.status in (200, 202)):
        return failed(response.describe())
    body = parse(DownloadJobResponse, response.data) or DownloadJobResponse()
    return passed(f"Job ID: {body.job_id or 'Unknown'}")


async def attempt_clip_generation(ctx: CaseContext) -> Sequence[Response]:
    """Check reachability first and only then issue the long-running request."""
    probe = await ctx.services.download.post(
        "/generate-clips",
        json={
            "youtubeUrl": CLIP_SOURCE_URL,
            "maxClips": 1,
            "targetDuration": 5,
            "quality": "low",
        },
        timeout=GENERATION_PROBE_TIMEOUT,
    )
    if not probe.reachable:
        return [probe]

    result = await ctx.services.download.post(
        "/generate-clips",
        json={
            "youtubeUrl": CLIP_SOURCE_URL,
            "maxClips": 1,
            "targetDuration": 5,
            "quality": "low",
            "downloadOptions": {
                "maxRetries": 1,
                "useProxy": False,
                "timeout": 30000,
            },
        },
        timeout=GENERATION_TIMEOUT,
    )
    return [probe, result]


def judge_generate_clips(
    responses: Sequence[Response], ctx: CaseContext
) -> Verdict:
    """Judge a full clip generation attempt.

    Passes when clips were generated (200), when the job was accepted for
    asynchronous processing (202), or when the service failed with one of the
    known processing errors (500). Those errors come from the sample video and
    the local ffmpeg build rather than from the service itself.
    """
    probe = responses[0]
    if not probe.reachable:
        return failed(f"Endpoint not accessible: {probe.data}")
    if len(responses) < 2:
        return failed("Clip generation request was not issued")

    response = responses[1]
    body = parse(GenerateClipsResponse, response.data) or GenerateClipsResponse()

    if response.status == 200:
        generated = body.video_info.clips_generated if body.video_info else None
        return passed(f"Generated {generated or 0} clips successfully")

    if response.status == 202:
        return passed("Clip generation started successfully (202 Accepted)")

    error = body.error or ""
    if response.status == 500 and any(
        phrase in error for phrase in TOLERATED_GENERATION_ERRORS
    ):
        if any(phrase in error for phrase in FFMPEG_ERRORS):
            return passed(
                "Endpoint working, video downloaded, but FFmpeg processing "
                "failed (known issue with test video)"
            )
        return passed(
            "Endpoint working but video processing failed (expected for test video)"
        )

    return failed(response.describe())


download_service_health_check = TestCase(
    name="Download Service Health Check",
    operation=download_health,
    judge=judge_health,
)
download_service_status = TestCase(
    name="Download Service Status",
    operation=download_status,
    judge=judge_status,
)
get_available_clips = TestCase(
    name="Get Available Clips", operation=list_clips, judge=judge_clips
)
generate_clips_endpoint = TestCase(
    name="Generate Clips Endpoint",
    operation=probe_generate_clips,
    judge=judge_endpoint_reachable,
)
download_queue_status = TestCase(
    name="Download Queue Status", operation=download_queue, judge=judge_queue
)
add_download_job = TestCase(
    name="Add Download Job",
    operation=submit_download_job,
    judge=judge_download_job,
)
generate_clips = TestCase(
    name="Generate Clips",
    operation=attempt_clip_generation,
    judge=judge_generate_clips,
)
