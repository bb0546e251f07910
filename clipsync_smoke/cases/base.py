"""Descriptors for catalog test cases."""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import Any, TypeAlias, TypeVar

from pydantic import BaseModel, ValidationError

from clipsync_smoke.client import Response, Services
from clipsync_smoke.config import SuiteConfig
from clipsync_smoke.models.session import SessionState


@dataclass(frozen=True, kw_only=True)
class CaseContext:
    """Everything a case can see while it runs."""

    services: Services
    config: SuiteConfig
    session: SessionState


@dataclass(frozen=True, kw_only=True)
class Verdict:
    """Judgement on a case, optionally carrying an updated session."""

    success: bool
    details: str
    session: SessionState | None = None


Operation: TypeAlias = Callable[[CaseContext], Awaitable[Sequence[Response]]]
Judge: TypeAlias = Callable[[Sequence[Response], CaseContext], Verdict]


@dataclass(frozen=True, kw_only=True)
class TestCase:
    """A named case: the requests it makes and how their outcome is judged.

    ``operation`` does all network work. ``judge`` is a pure function of the
    responses and the context, so expectations can be tested without HTTP.
    """

    __test__ = False

    name: str
    operation: Operation
    judge: Judge
    requires_auth: bool = False


def passed(details: str, session: SessionState | None = None) -> Verdict:
    return Verdict(success=True, details=details, session=session)


def failed(details: str) -> Verdict:
    return Verdict(success=False, details=details)


M = TypeVar("M", bound=BaseModel)


def parse(model: type[M], data: Any) -> M | None:
    """Validate a response body, returning None when it has the wrong shape."""
    try:
        return model.model_validate(data)
    except ValidationError:
        return None
