"""
Component Update Helper — GitHub REST request helper.

  {method} https://{hostname or GITHUB_API_HOST}{path}

Success statuses resolve to the parsed JSON body; 204 resolves to a
bare status descriptor. Anything above 299 raises TransportError with
the request and response details attached.
"""

import json
from typing import Any

import httpx

from component_updates.core.config import settings
from component_updates.errors import ParseError, TransportError
from component_updates.github.auth import GitHubContext
from component_updates.utils.logging import logger, step_timer


def _gently_parse(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError:
        return None


def _build_headers(
    context: GitHubContext | None,
    extra: dict[str, str] | None,
) -> dict[str, str]:
    h = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if context is not None:
        h.update(context.as_headers())
    if extra:
        h.update(extra)
    return h


async def _send(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    headers: dict[str, str],
    content: str | None,
) -> httpx.Response:
    try:
        return await client.request(method, url, headers=headers, content=content)
    except httpx.TransportError as exc:
        raise TransportError(None, str(exc) or type(exc).__name__) from exc


async def github_api_request(
    context: GitHubContext | None,
    hostname: str | None,
    method: str | None,
    path: str,
    body: Any = None,
    headers: dict[str, str] | None = None,
    client: httpx.AsyncClient | None = None,
) -> Any:
    """
    Call the GitHub REST API and return the decoded JSON response.

    A dict/list body is serialised as JSON. Raises TransportError for
    non-2xx answers and transport failures, ParseError when a success
    status carries a body that is not JSON.
    """
    method = method or "GET"
    url = f"https://{hostname or settings.github_api_host}{path}"
    h = _build_headers(context, headers)

    content = None
    if body:
        content = body if isinstance(body, str) else json.dumps(body)
        h["Content-Type"] = "application/json"

    with step_timer(f"GitHub API {method} {path}"):
        if client is None:
            async with httpx.AsyncClient(timeout=settings.http_timeout) as own_client:
                resp = await _send(own_client, method, url, h, content)
        else:
            resp = await _send(client, method, url, h, content)

    if resp.status_code == 204:
        return {
            "status_code": resp.status_code,
            "status_message": resp.reason_phrase,
            "headers": dict(resp.headers),
        }

    text = resp.text
    if resp.status_code > 299:
        logger.error("  %s %s returned %d: %s", method, path, resp.status_code, text[:200])
        raise TransportError(
            resp.status_code,
            resp.reason_phrase,
            request_method=method,
            request_path=path,
            body=text,
            json=_gently_parse(text),
        )

    try:
        return json.loads(text)
    except ValueError as exc:
        raise ParseError(text) from exc
