"""
Geolocation client unit tests

Requests are answered by httpx.MockTransport, no network access.
"""
import httpx
import pytest

from docker_ip_retrieval.infrastructure.geolocation.client import GeolocationClient
from docker_ip_retrieval.shared.errors import GeolocationError, InvalidArgumentError


def _client(handler) -> GeolocationClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return GeolocationClient(base_url="http://ip-api.com/json/", client=http_client)


class TestGeolocationClient:
    """Geolocation client tests"""

    @pytest.mark.asyncio
    async def test_success_returns_country_and_city(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(
                200,
                json={"status": "success", "country": "US", "city": "Ashburn", "query": "203.0.113.7"},
            )

        async with _client(handler) as client:
            location = await client.resolve("203.0.113.7")

        assert location == "US, Ashburn"
        assert seen == ["http://ip-api.com/json/203.0.113.7"]

    @pytest.mark.asyncio
    async def test_fail_status_is_unknown(self):
        def handler(request):
            return httpx.Response(
                200,
                json={"status": "fail", "message": "private range", "query": "10.0.0.1"},
            )

        async with _client(handler) as client:
            assert await client.resolve("10.0.0.1") == "Unknown"

    @pytest.mark.asyncio
    async def test_transport_error_is_lookup_failed(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        async with _client(handler) as client:
            assert await client.resolve("203.0.113.7") == "Lookup Failed"

    @pytest.mark.asyncio
    async def test_invalid_json_is_lookup_failed(self):
        def handler(request):
            return httpx.Response(200, text="<html>rate limited</html>")

        async with _client(handler) as client:
            assert await client.resolve("203.0.113.7") == "Lookup Failed"

    @pytest.mark.asyncio
    async def test_body_without_status_is_lookup_failed(self):
        def handler(request):
            return httpx.Response(200, json=["not", "an", "object"])

        async with _client(handler) as client:
            assert await client.resolve("203.0.113.7") == "Lookup Failed"

    @pytest.mark.asyncio
    async def test_empty_fields_returned_verbatim(self):
        def handler(request):
            return httpx.Response(200, json={"status": "success", "country": "", "city": ""})

        async with _client(handler) as client:
            assert await client.resolve("203.0.113.7") == ", "

    @pytest.mark.asyncio
    async def test_lookup_raises_geolocation_error(self):
        def handler(request):
            raise httpx.ReadTimeout("timeout", request=request)

        async with _client(handler) as client:
            with pytest.raises(GeolocationError):
                await client.lookup("203.0.113.7")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("bad_ip", [None, "", 12345])
    async def test_rejects_invalid_ip_argument(self, bad_ip):
        async with _client(lambda request: httpx.Response(200, json={})) as client:
            with pytest.raises(InvalidArgumentError):
                await client.resolve(bad_ip)
