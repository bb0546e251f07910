"""Per-run session state shared between test cases."""

import time
from dataclasses import dataclass

DEFAULT_PASSWORD = "TestPassword123!"


@dataclass(frozen=True, kw_only=True)
class SessionState:
    """Credentials generated for this run plus values captured from responses.

    Cases never mutate the state; they hand back an updated copy and the
    orchestrator passes it on to the next case.
    """

    email: str
    password: str
    auth_token: str | None = None
    refresh_token: str | None = None
    video_id: str | None = None

    @classmethod
    def generate(cls) -> "SessionState":
        """Create fresh credentials unique to this run."""
        return cls(
            email=f"testuser{time.time_ns() // 1_000_000}@gmail.com",
            password=DEFAULT_PASSWORD,
        )

    @property
    def auth_headers(self) -> dict[str, str]:
        if not self.auth_token:
            return {}
        return {"Authorization": f"Bearer {self.auth_token}"}
