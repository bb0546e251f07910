"""Tests for API service case judges."""

from clipsync_smoke.cases.api import (
    judge_health,
    judge_ingest,
    judge_list_videos,
    judge_login,
    judge_logout,
    judge_register,
)
from clipsync_smoke.cases.base import CaseContext
from clipsync_smoke.testing import payloads
from clipsync_smoke.testing.factories import ResponseFactory


class TestJudgeHealth:
    """Tests for the health probe judge."""

    def test_passes_on_200(self, ctx: CaseContext) -> None:
        """Passes and reports the advertised status."""
        response = ResponseFactory.build(data=payloads.health(status="healthy"))

        verdict = judge_health([response], ctx)

        assert verdict.success
        assert verdict.details == "Status: healthy"

    def test_passes_with_non_json_body(self, ctx: CaseContext) -> None:
        """Only the status code matters."""
        response = ResponseFactory.build(data="OK")

        verdict = judge_health([response], ctx)

        assert verdict.success
        assert verdict.details == "Status: None"

    def test_fails_when_unreachable(self, ctx: CaseContext) -> None:
        """Fails with the transport reason."""
        response = ResponseFactory.build(
            success=False, status=0, data="Connection refused"
        )

        verdict = judge_health([response], ctx)

        assert not verdict.success
        assert verdict.details == 'Status: 0, Response: "Connection refused"'

    def test_fails_on_server_error(self, ctx: CaseContext) -> None:
        """Fails on any status other than 200."""
        response = ResponseFactory.build(success=False, status=503)

        assert not judge_health([response], ctx).success


class TestJudgeRegister:
    """Tests for the registration judge."""

    def test_passes_on_201_with_user_id(self, ctx: CaseContext) -> None:
        """Passes and reports the new user id."""
        response = ResponseFactory.build(
            status=201, data=payloads.registered_user(user_id="abc")
        )

        verdict = judge_register([response], ctx)

        assert verdict.success
        assert verdict.details == "User ID: abc"
        assert verdict.session is None

    def test_fails_on_conflict(self, ctx: CaseContext) -> None:
        """A duplicate email is a failure, not retried."""
        response = ResponseFactory.build(
            success=False, status=409, data=payloads.error("User already exists")
        )

        verdict = judge_register([response], ctx)

        assert not verdict.success
        assert "409" in verdict.details
        assert "User already exists" in verdict.details

    def test_fails_on_200(self, ctx: CaseContext) -> None:
        """Requires the Created status."""
        response = ResponseFactory.build(data=payloads.registered_user())

        assert not judge_register([response], ctx).success

    def test_fails_without_user_id(self, ctx: CaseContext) -> None:
        """Fails when the body carries no user."""
        response = ResponseFactory.build(status=201, data={"message": "ok"})

        verdict = judge_register([response], ctx)

        assert not verdict.success
        assert verdict.details.startswith("No user ID in response.")


class TestJudgeLogin:
    """Tests for the login judge."""

    def test_captures_tokens(self, ctx: CaseContext) -> None:
        """Stores both tokens in the returned session."""
        response = ResponseFactory.build(
            data=payloads.login_tokens(token="t1", refresh_token="r1")
        )

        verdict = judge_login([response], ctx)

        assert verdict.success
        assert verdict.details == "Token received: Yes"
        assert verdict.session is not None
        assert verdict.session.auth_token == "t1"
        assert verdict.session.refresh_token == "r1"
        assert verdict.session.email == ctx.session.email

    def test_does_not_mutate_input_session(self, ctx: CaseContext) -> None:
        """Leaves the original session untouched."""
        response = ResponseFactory.build(data=payloads.login_tokens())

        judge_login([response], ctx)

        assert ctx.session.auth_token is None

    def test_reports_missing_token(self, ctx: CaseContext) -> None:
        """Passes on 200 but says no token was received."""
        response = ResponseFactory.build(data={})

        verdict = judge_login([response], ctx)

        assert verdict.success
        assert verdict.details == "Token received: No"
        assert verdict.session is not None
        assert verdict.session.auth_token is None

    def test_empty_token_is_not_captured(self, ctx: CaseContext) -> None:
        """Treats an empty token as no token at all."""
        response = ResponseFactory.build(
            data=payloads.login_tokens(token="", refresh_token="")
        )

        verdict = judge_login([response], ctx)

        assert verdict.success
        assert verdict.details == "Token received: No"
        assert verdict.session is not None
        assert verdict.session.auth_token is None
        assert verdict.session.refresh_token is None

    def test_fails_on_bad_credentials(self, ctx: CaseContext) -> None:
        """Fails and captures nothing on 401."""
        response = ResponseFactory.build(
            success=False, status=401, data=payloads.error("Invalid credentials")
        )

        verdict = judge_login([response], ctx)

        assert not verdict.success
        assert verdict.session is None


class TestJudgeIngest:
    """Tests for the video ingestion judge."""

    def test_captures_video_id(self, ctx: CaseContext) -> None:
        """Stores the created video id in the returned session."""
        response = ResponseFactory.build(
            status=201, data=payloads.ingested_video(video_id="vid-9")
        )

        verdict = judge_ingest([response], ctx)

        assert verdict.success
        assert verdict.details == "Video ID: vid-9"
        assert verdict.session is not None
        assert verdict.session.video_id == "vid-9"

    def test_fails_without_video(self, ctx: CaseContext) -> None:
        """Fails when the body has no video."""
        response = ResponseFactory.build(status=201, data={})

        assert not judge_ingest([response], ctx).success

    def test_fails_on_400(self, ctx: CaseContext) -> None:
        """Fails when ingestion is rejected."""
        response = ResponseFactory.build(success=False, status=400)

        assert not judge_ingest([response], ctx).success


class TestJudgeListVideos:
    """Tests for the video listing judge."""

    def test_reports_count(self, ctx: CaseContext) -> None:
        """Passes and reports how many videos were listed."""
        response = ResponseFactory.build(data=payloads.video_list(count=3))

        verdict = judge_list_videos([response], ctx)

        assert verdict.success
        assert verdict.details == "Found 3 videos"

    def test_fails_without_videos_list(self, ctx: CaseContext) -> None:
        """Fails when the list is missing."""
        response = ResponseFactory.build(data={})

        assert not judge_list_videos([response], ctx).success


class TestJudgeLogout:
    """Tests for the logout judge."""

    def test_passes_on_200(self, ctx: CaseContext) -> None:
        """Passes when the session is closed."""
        verdict = judge_logout([ResponseFactory.build()], ctx)

        assert verdict.success
        assert verdict.details == "User logged out successfully"

    def test_fails_on_401(self, ctx: CaseContext) -> None:
        """Fails when the token is rejected."""
        response = ResponseFactory.build(success=False, status=401)

        assert not judge_logout([response], ctx).success
