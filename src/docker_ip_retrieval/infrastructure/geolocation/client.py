"""
Geolocation HTTP client

Resolves a public IP address to a short "<country>, <city>" label using the
ip-api.com JSON endpoint.
"""
from typing import Optional

import httpx
from pydantic import ValidationError

from docker_ip_retrieval.domain.entities.report import LOCATION_UNKNOWN, LOOKUP_FAILED
from docker_ip_retrieval.infrastructure.geolocation.dto import GeolocationResponse
from docker_ip_retrieval.infrastructure.logging import get_logger
from docker_ip_retrieval.shared.errors import GeolocationError, InvalidArgumentError

logger = get_logger(__name__)


class GeolocationClient:
    """
    Geolocation HTTP client

    One GET per lookup, no retries. Lookup problems never propagate: they
    are reported as LOOKUP_FAILED so a single bad lookup cannot abort a run.
    """

    def __init__(
        self,
        base_url: str = "http://ip-api.com/json",
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Args:
            base_url: lookup endpoint, the IP is appended as a path segment
            timeout: request timeout in seconds
            client: pre-built HTTP client, mainly for tests
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client = client

    async def __aenter__(self):
        self._get_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def lookup(self, ip: str) -> GeolocationResponse:
        """
        Query the service for an IP

        Raises:
            GeolocationError: transport failure or a body that cannot be parsed
        """
        client = self._get_client()
        url = f"{self._base_url}/{ip}"
        try:
            response = await client.get(url)
            return GeolocationResponse.model_validate(response.json())
        except httpx.HTTPError as e:
            raise GeolocationError(f"Request to {url} failed: {e}", original_error=e) from e
        except (ValueError, ValidationError) as e:
            raise GeolocationError(f"Invalid response from {url}: {e}", original_error=e) from e

    async def resolve(self, ip: str) -> str:
        """Return "<country>, <city>", "Unknown" or "Lookup Failed" for an IP"""
        if not ip or not isinstance(ip, str):
            raise InvalidArgumentError("Invalid IP address", details={"ip": repr(ip)})

        try:
            result = await self.lookup(ip)
        except GeolocationError as e:
            logger.debug("Geolocation lookup failed", ip=ip, error=e.message)
            return LOOKUP_FAILED

        if result.is_failure:
            logger.debug("Geolocation service could not resolve address", ip=ip, reason=result.message)
            return LOCATION_UNKNOWN
        return result.label()
