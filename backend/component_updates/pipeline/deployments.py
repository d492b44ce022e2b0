"""
Component Update Helper — Deployment verifier.

Probes every planned artifact URL concurrently and reports the ones the
repository does not serve yet. A probe that answers anything but 200 or
404 fails the whole call.
"""

from __future__ import annotations

import asyncio

import httpx

from component_updates.core.config import settings
from component_updates.github.https import does_url_return_404
from component_updates.pipeline.artifacts import plan_urls
from component_updates.utils.logging import logger, step_timer


async def _probe_all(urls: list[str], client: httpx.AsyncClient) -> list[str]:
    # wait for every probe before failing so none outlives the client
    results = await asyncio.gather(
        *(does_url_return_404(url, client) for url in urls),
        return_exceptions=True,
    )
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return [url for url, missing in zip(urls, results) if missing]


async def get_missing_deployments(
    package_name: str,
    version: str,
    client: httpx.AsyncClient | None = None,
) -> list[str]:
    """Return the planned artifact URLs that answer 404, in planned order."""
    urls = plan_urls(package_name, version)

    with step_timer(f"Probe {len(urls)} artifact(s) for {package_name} {version}"):
        if client is None:
            async with httpx.AsyncClient(timeout=settings.http_timeout) as own_client:
                missing = await _probe_all(urls, own_client)
        else:
            missing = await _probe_all(urls, client)

    for url in missing:
        logger.warning("  Missing deployment: %s", url)
    return missing
