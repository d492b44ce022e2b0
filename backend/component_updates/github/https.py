"""
Component Update Helper — Raw HTTPS probes.

  HEAD {url}  → True on 404, False on 200, ProbeError otherwise
  GET  {url}  → HTML text, TransportError above 299

Redirects are never followed: a 3xx on an artifact URL is an
unexpected answer, not a "found".
"""

import re
from dataclasses import dataclass

import httpx

from component_updates.core.config import settings
from component_updates.errors import ProbeError, TransportError, URLParseError
from component_updates.utils.logging import logger

URL_PATTERN = re.compile(r"^https://([^/]+?)(:\d+)?(/.*)?$")


@dataclass(frozen=True)
class ParsedURL:
    host: str
    port: int
    path: str


def parse_url(url: str) -> ParsedURL:
    """Split an https URL into host, port (default 443) and path (default '/')."""
    match = URL_PATTERN.match(url)
    if not match:
        raise URLParseError(url)
    return ParsedURL(
        host=match.group(1),
        port=int((match.group(2) or ":443")[1:]),
        path=match.group(3) or "/",
    )


async def _request(
    client: httpx.AsyncClient | None,
    method: str,
    url: str,
    headers: dict[str, str],
) -> httpx.Response:
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=settings.http_timeout) as own_client:
                return await own_client.request(method, url, headers=headers)
        return await client.request(method, url, headers=headers)
    except httpx.TransportError as exc:
        raise TransportError(None, f"{method} {url}: {str(exc) or type(exc).__name__}") from exc


async def does_url_return_404(url: str, client: httpx.AsyncClient | None = None) -> bool:
    parse_url(url)
    resp = await _request(client, "HEAD", url, {"User-Agent": settings.user_agent})
    if resp.status_code == 404:
        return True
    if resp.status_code == 200:
        return False
    logger.error("  HEAD %s returned %d", url, resp.status_code)
    raise ProbeError(url, resp.status_code)


async def fetch_html(url: str, client: httpx.AsyncClient | None = None) -> str:
    """GET a page as text/html and return its decoded body."""
    target = parse_url(url)
    resp = await _request(
        client,
        "GET",
        url,
        {"User-Agent": settings.user_agent, "Accept": "text/html"},
    )
    if resp.status_code > 299:
        raise TransportError(
            resp.status_code,
            resp.reason_phrase,
            request_method="GET",
            request_path=target.path,
            body=resp.text,
        )
    return resp.text
