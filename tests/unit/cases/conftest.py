"""Fixtures for judging cases without any HTTP traffic."""

from unittest.mock import Mock

import pytest

from clipsync_smoke.cases.base import CaseContext
from clipsync_smoke.config import SuiteConfig
from clipsync_smoke.models.session import SessionState
from clipsync_smoke.testing.factories import SessionStateFactory


@pytest.fixture
def session() -> SessionState:
    """Create a session that has not logged in."""
    return SessionStateFactory.build()


@pytest.fixture
def ctx(session: SessionState) -> CaseContext:
    """Create a case context whose services must never be called."""
    return CaseContext(services=Mock(), config=SuiteConfig(), session=session)
