"""HTTP client for the services under test."""

import json
import logging
import time
from collections.abc import AsyncGenerator, Mapping
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any

import aiohttp

from clipsync_smoke.config import SuiteConfig

log = logging.getLogger(__name__)

DEFAULT_HEADERS = {"Content-Type": "application/json"}


@dataclass(frozen=True, kw_only=True)
class Response:
    """Uniform outcome of one HTTP call.

    ``status`` is 0 when no HTTP response was received, in which case ``data``
    holds the reason. ``success`` is only set for 2xx responses.
    """

    success: bool
    status: int
    data: Any = None
    elapsed_ms: float = 0.0

    @property
    def reachable(self) -> bool:
        """Whether the service answered at all, whatever the status."""
        return self.status != 0

    def describe(self) -> str:
        """Render status and body for failure details."""
        return f"Status: {self.status}, Response: {json.dumps(self.data, default=str)}"


@dataclass(frozen=True, kw_only=True)
class ServiceClient:
    """Client bound to the base URL of a single service."""

    name: str
    session: aiohttp.ClientSession = field(repr=False)
    timeout: float = 30.0

    @classmethod
    @asynccontextmanager
    async def from_base_url(
        cls, name: str, base_url: str, timeout: float = 30.0
    ) -> AsyncGenerator["ServiceClient", None]:
        """Create client with managed session lifecycle."""
        async with aiohttp.ClientSession(
            base_url=base_url,
            headers=DEFAULT_HEADERS,
        ) as session:
            yield cls(name=name, session=session, timeout=timeout)

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> Response:
        """Perform one HTTP call and never raise for transport failures.

        Args:
            method: HTTP method
            path: Path relative to the service base URL, starting with a slash
            json: Optional JSON request body
            headers: Extra request headers
            timeout: Total timeout in seconds, defaults to the client timeout

        Returns:
            Response describing either the HTTP answer or the transport failure

        """
        total = self.timeout if timeout is None else timeout
        started = time.perf_counter()
        try:
            async with self.session.request(
                method,
                path,
                json=json,
                headers=dict(headers or {}),
                timeout=aiohttp.ClientTimeout(total=total),
            ) as response:
                status = response.status
                data = decode_body(await response.read(), response.charset)
        except TimeoutError:
            return self._failure(
                method, path, f"Request timed out after {total:g}s", started
            )
        except aiohttp.ClientConnectorError as exc:
            if isinstance(exc.os_error, ConnectionRefusedError):
                return self._failure(method, path, "Connection refused", started)
            return self._failure(method, path, str(exc), started)
        except aiohttp.ClientError as exc:
            return self._failure(method, path, str(exc), started)

        elapsed_ms = (time.perf_counter() - started) * 1000
        log.debug(
            "%s %s %s -> %d (%.0fms)", self.name, method, path, status, elapsed_ms
        )
        return Response(
            success=200 <= status < 300,
            status=status,
            data=data,
            elapsed_ms=elapsed_ms,
        )

    async def get(self, path: str, **kwargs: Any) -> Response:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> Response:
        return await self.request("POST", path, **kwargs)

    def _failure(
        self, method: str, path: str, reason: str, started: float
    ) -> Response:
        elapsed_ms = (time.perf_counter() - started) * 1000
        log.debug("%s %s %s failed: %s", self.name, method, path, reason)
        return Response(success=False, status=0, data=reason, elapsed_ms=elapsed_ms)


@dataclass(frozen=True, kw_only=True)
class Services:
    """Clients for both services under test."""

    api: ServiceClient
    download: ServiceClient

    @classmethod
    @asynccontextmanager
    async def from_config(cls, config: SuiteConfig) -> AsyncGenerator["Services", None]:
        """Open one session per service for the duration of the run."""
        async with (
            ServiceClient.from_base_url(
                "api", config.api_base_url, config.request_timeout
            ) as api,
            ServiceClient.from_base_url(
                "download", config.download_base_url, config.request_timeout
            ) as download,
        ):
            yield cls(api=api, download=download)


def decode_body(body: bytes, charset: str | None = None) -> Any:
    """Decode a JSON body, falling back to the raw text.

    Bytes that are invalid in the declared charset are replaced rather than
    raising.
    """
    try:
        text = body.decode(charset or "utf-8", errors="replace")
    except LookupError:
        text = body.decode("utf-8", errors="replace")
    try:
        return json.loads(text)
    except ValueError:
        return text
