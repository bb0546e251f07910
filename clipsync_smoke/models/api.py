"""Pydantic models for response bodies of the API and download services.

Only the fields the smoke tests look at are declared; anything else in the
payloads is ignored.
"""

from collections.abc import Sequence
from typing import Any

from pydantic import Field

from clipsync_smoke.models.base import Model


class HealthResponse(Model):
    """Response from GET /health on either service."""

    status: str | None = None


class User(Model):
    """A registered user."""

    id: str | int


class RegisterResponse(Model):
    """Response from POST /api/auth/register."""

    user: User


class LoginResponse(Model):
    """Response from POST /api/auth/login."""

    token: str | None = None
    refresh_token: str | None = None


class Video(Model):
    """An ingested video."""

    id: str | int


class IngestResponse(Model):
    """Response from POST /api/videos/ingest."""

    video: Video


class VideoListResponse(Model):
    """Response from GET /api/videos."""

    videos: Sequence[Any]


class ClipListResponse(Model):
    """Response from GET /clips. The clips list is optional."""

    clips: Sequence[Any] | None = None


class VideoInfo(Model):
    """Summary of a clip generation run."""

    clips_generated: int | None = Field(default=None, alias="clipsGenerated")


class GenerateClipsResponse(Model):
    """Response from POST /generate-clips."""

    video_info: VideoInfo | None = Field(default=None, alias="videoInfo")
    error: str | None = None


class DownloadJobResponse(Model):
    """Response from POST /download."""

    job_id: str | int | None = Field(default=None, alias="jobId")
