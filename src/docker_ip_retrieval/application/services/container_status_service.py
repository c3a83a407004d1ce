"""
Container status service

Builds one (name, ip-or-status, location) row per container:

    inspect -> not running? -> exec for public IP -> validate -> geolocate

Per-container failures are turned into placeholder rows so that one broken
container never hides the results of the others.
"""
import asyncio
from typing import List, Optional, Sequence

from docker_ip_retrieval.application.services.public_ip_service import PublicIPService
from docker_ip_retrieval.domain.entities.container import ContainerRef, UNKNOWN_CONTAINER_NAME
from docker_ip_retrieval.domain.entities.report import StatusRow, LOCATION_UNKNOWN
from docker_ip_retrieval.infrastructure.container_engine.base import IContainerGateway
from docker_ip_retrieval.infrastructure.geolocation.client import GeolocationClient
from docker_ip_retrieval.infrastructure.logging import get_logger
from docker_ip_retrieval.shared.errors import ContainerEngineError

logger = get_logger(__name__)


class ContainerStatusService:
    """
    Container status service

    Rows are computed independently; "All" fans out over every container
    with at most max_concurrency pipelines in flight.
    """

    def __init__(
        self,
        gateway: IContainerGateway,
        public_ip_service: PublicIPService,
        geolocation: GeolocationClient,
        max_concurrency: int = 16,
    ):
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        self._gateway = gateway
        self._public_ip_service = public_ip_service
        self._geolocation = geolocation
        self._max_concurrency = max_concurrency

    async def resolve(
        self,
        container_id: str,
        fallback_name: Optional[str] = None,
    ) -> StatusRow:
        """
        Resolve the status row of one container

        Args:
            container_id: engine container id
            fallback_name: display name used when the container cannot be
                inspected
        """
        try:
            details = await self._gateway.inspect(container_id)
        except ContainerEngineError as e:
            logger.debug("Failed to inspect container", container_id=container_id, error=str(e))
            return StatusRow.retrieval_failed(fallback_name or UNKNOWN_CONTAINER_NAME)

        if not details.running:
            return StatusRow(
                name=details.name,
                ip_or_status=details.describe_status(),
                location=LOCATION_UNKNOWN,
            )

        ip = await self._public_ip_service.resolve(container_id, os_hint=details.os_hint or "")
        if ip is None:
            return StatusRow.retrieval_failed(details.name)

        location = await self._geolocation.resolve(ip)
        return StatusRow(name=details.name, ip_or_status=ip, location=location)

    async def resolve_many(self, refs: Sequence[ContainerRef]) -> List[StatusRow]:
        """Resolve every container concurrently, rows in listing order"""
        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def _bounded(ref: ContainerRef) -> StatusRow:
            async with semaphore:
                return await self.resolve(ref.id, fallback_name=ref.name)

        results = await asyncio.gather(
            *(_bounded(ref) for ref in refs),
            return_exceptions=True,
        )

        rows = []
        for ref, result in zip(refs, results):
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    raise result
                logger.debug(
                    "Status pipeline failed",
                    container_id=ref.id,
                    error=repr(result),
                )
                rows.append(StatusRow.retrieval_failed(ref.name))
            else:
                rows.append(result)
        return rows
