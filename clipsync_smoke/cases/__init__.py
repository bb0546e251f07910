"""Catalog of smoke-test cases, in execution order."""

from collections.abc import Sequence

from clipsync_smoke.cases.api import (
    api_health_check,
    get_user_videos,
    user_login,
    user_logout,
    user_registration,
    video_ingestion,
)
from clipsync_smoke.cases.base import CaseContext, TestCase, Verdict
from clipsync_smoke.cases.download import (
    add_download_job,
    download_queue_status,
    download_service_health_check,
    download_service_status,
    generate_clips,
    generate_clips_endpoint,
    get_available_clips,
)
from clipsync_smoke.cases.errors import (
    invalid_endpoints,
    invalid_video_url,
    unauthorized_access,
)
from clipsync_smoke.cases.performance import concurrent_requests, performance_test

DEFAULT_CASES: Sequence[TestCase] = (
    api_health_check,
    user_registration,
    user_login,
    video_ingestion,
    get_user_videos,
    download_service_health_check,
    download_service_status,
    get_available_clips,
    generate_clips_endpoint,
    download_queue_status,
    add_download_job,
    generate_clips,
    unauthorized_access,
    invalid_endpoints,
    invalid_video_url,
    concurrent_requests,
    performance_test,
    user_logout,
)

__all__ = ["DEFAULT_CASES", "CaseContext", "TestCase", "Verdict"]
