"""Integration tests for the deployment verifier against a mock artifact repository."""

import asyncio

import httpx
import pytest

from component_updates.errors import ProbeError, TransportError
from component_updates.pipeline.artifacts import plan_urls
from component_updates.pipeline.deployments import get_missing_deployments


def _repository(present: set[str], seen: list[httpx.Request] | None = None):
    """Answer HEAD requests with 200 for paths in `present`, 404 otherwise."""
    async def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        # finish i686 probes last so completion order differs from planned order
        if request.url.path.startswith("/i686/"):
            await asyncio.sleep(0.01)
        return httpx.Response(200 if request.url.path in present else 404)
    return handler


@pytest.mark.asyncio
class TestGetMissingDeployments:
    async def test_all_present(self, mock_client):
        present = {httpx.URL(url).path for url in plan_urls("bash", "5.2.21")}
        async with mock_client(_repository(present)) as client:
            assert await get_missing_deployments("bash", "5.2.21", client) == []

    async def test_all_missing_in_planned_order(self, mock_client):
        async with mock_client(_repository(set())) as client:
            missing = await get_missing_deployments("curl", "8.4.0", client)
        assert missing == plan_urls("curl", "8.4.0")

    async def test_subset_missing(self, mock_client):
        urls = plan_urls("openssl", "3.1.4")
        present = {httpx.URL(urls[1]).path, httpx.URL(urls[2]).path}
        async with mock_client(_repository(present)) as client:
            missing = await get_missing_deployments("openssl", "3.1.4", client)
        assert missing == [urls[0], urls[3]]

    async def test_mintty_probes_epoch_version(self, mock_client):
        seen: list[httpx.Request] = []
        async with mock_client(_repository(set(), seen)) as client:
            missing = await get_missing_deployments("mintty", "3.6.1", client)
        assert len(seen) == 2
        assert all(r.method == "HEAD" for r in seen)
        assert all("mintty-1~3.6.1-1-" in str(r.url) for r in seen)
        assert missing == [
            "https://wingit.blob.core.windows.net/i686/mintty-1~3.6.1-1-i686.pkg.tar.xz",
            "https://wingit.blob.core.windows.net/x86-64/mintty-1~3.6.1-1-x86_64.pkg.tar.xz",
        ]

    async def test_msys2_runtime_probes_x86_64_only(self, mock_client):
        seen: list[httpx.Request] = []
        async with mock_client(_repository(set(), seen)) as client:
            await get_missing_deployments("msys2-runtime", "3.4.6", client)
        assert [r.url.path for r in seen] == ["/x86-64/msys2-runtime-3.4.6-1-x86_64.pkg.tar.xz"]

    async def test_unexpected_status_fails(self, mock_client):
        def handler(request):
            return httpx.Response(503)
        async with mock_client(handler) as client:
            with pytest.raises(ProbeError) as exc_info:
                await get_missing_deployments("bash", "5.2.21", client)
        assert exc_info.value.status_code == 503

    async def test_redirect_is_unexpected(self, mock_client):
        def handler(request):
            return httpx.Response(302, headers={"Location": "https://example.com/"})
        async with mock_client(handler) as client:
            with pytest.raises(ProbeError):
                await get_missing_deployments("bash", "5.2.21", client)

    async def test_transport_failure(self, mock_client):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)
        async with mock_client(handler) as client:
            with pytest.raises(TransportError) as exc_info:
                await get_missing_deployments("bash", "5.2.21", client)
        assert exc_info.value.status_code is None

    async def test_failure_waits_for_every_probe(self, mock_client):
        finished: list[str] = []

        async def handler(request):
            if request.url.path.startswith("/i686/"):
                finished.append(request.url.path)
                return httpx.Response(503)
            await asyncio.sleep(0.05)
            finished.append(request.url.path)
            return httpx.Response(404)

        async with mock_client(handler) as client:
            with pytest.raises(ProbeError):
                await get_missing_deployments("curl", "8.4.0", client)
            assert len(finished) == 4
            pending = [t for t in asyncio.all_tasks() if t is not asyncio.current_task()]
            assert pending == []

    async def test_first_failure_in_planned_order_is_raised(self, mock_client):
        urls = plan_urls("curl", "8.4.0")
        slow_failure = httpx.URL(urls[0]).path

        async def handler(request):
            if request.url.path == slow_failure:
                await asyncio.sleep(0.05)
                return httpx.Response(503)
            return httpx.Response(500)

        async with mock_client(handler) as client:
            with pytest.raises(ProbeError) as exc_info:
                await get_missing_deployments("curl", "8.4.0", client)
        assert exc_info.value.url == urls[0]
        assert exc_info.value.status_code == 503
