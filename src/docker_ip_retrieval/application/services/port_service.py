"""
Port listing service

Collects the published port bindings of every container for the --ports
table.
"""
import asyncio
from itertools import groupby
from typing import List, Sequence

from docker_ip_retrieval.domain.entities.container import ContainerRef
from docker_ip_retrieval.domain.entities.report import PortRow, NO_PORTS_EXPOSED
from docker_ip_retrieval.domain.value_objects.port_binding import PortBinding
from docker_ip_retrieval.infrastructure.container_engine.base import IContainerGateway
from docker_ip_retrieval.infrastructure.logging import get_logger
from docker_ip_retrieval.shared.errors import ContainerEngineError

logger = get_logger(__name__)


def format_bindings(bindings: Sequence[PortBinding]) -> List[str]:
    """
    One line per container port

    Example: ["0.0.0.0:8080->80/tcp, :::8080->80/tcp", "127.0.0.1:5432->5432/tcp"]
    """
    return [
        ", ".join(str(binding) for binding in group)
        for _, group in groupby(bindings, key=lambda b: b.container_port)
    ]


class PortListingService:
    """Port listing service"""

    def __init__(self, gateway: IContainerGateway, max_concurrency: int = 16):
        self._gateway = gateway
        self._max_concurrency = max_concurrency

    async def get_ports(self, container_id: str) -> List[str]:
        """
        Formatted port lines of one container

        Raises:
            ContainerEngineError: the container could not be inspected
        """
        details = await self._gateway.inspect(container_id)
        return format_bindings(details.ports)

    async def port_row(self, ref: ContainerRef) -> PortRow:
        try:
            lines = await self.get_ports(ref.id)
        except ContainerEngineError as e:
            logger.debug("Failed to get ports", container_id=ref.id, error=str(e))
            return PortRow(name=ref.name, ports=f"Error: {e}")
        return PortRow(name=ref.name, ports="\n".join(lines) if lines else NO_PORTS_EXPOSED)

    async def list_ports(self, refs: Sequence[ContainerRef]) -> List[PortRow]:
        """Port rows for every container, in listing order"""
        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def _bounded(ref: ContainerRef) -> PortRow:
            async with semaphore:
                return await self.port_row(ref)

        return list(await asyncio.gather(*(_bounded(ref) for ref in refs)))
