"""Pre-flight check that both services are up before any case runs."""

import asyncio
import logging
from dataclasses import dataclass

from clipsync_smoke.client import Services

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class ServiceHealth:
    """Whether each service answered its health probe."""

    api: bool
    download: bool

    @property
    def all_healthy(self) -> bool:
        return self.api and self.download


async def check_services_health(services: Services, timeout: float) -> ServiceHealth:
    """Probe both health endpoints with a short timeout.

    Args:
        services: Clients for both services
        timeout: Timeout in seconds for each probe

    Returns:
        Health of each service

    """
    api, download = await asyncio.gather(
        services.api.get("/health", timeout=timeout),
        services.download.get("/health", timeout=timeout),
    )
    log.debug("Health probes: api=%s download=%s", api.status, download.status)
    return ServiceHealth(api=api.success, download=download.success)
