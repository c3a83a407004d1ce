"""
Container engine gateway interface.

Defines the read-only engine operations the application relies on.
"""
from abc import ABC, abstractmethod
from typing import List

from docker_ip_retrieval.domain.entities.container import (
    ContainerRef,
    ContainerDetails,
    ExecResult,
)


class IContainerGateway(ABC):
    """
    Container engine gateway interface

    Only listing, inspection and one-shot exec are exposed; containers are
    never created, started or stopped.
    """

    @abstractmethod
    async def ping(self) -> bool:
        """Check whether the engine is reachable"""
        pass

    @abstractmethod
    async def list_containers(self) -> List[ContainerRef]:
        """
        List all containers, stopped ones included

        Raises:
            EngineUnavailableError: the engine cannot be reached
        """
        pass

    @abstractmethod
    async def inspect(self, container_id: str) -> ContainerDetails:
        """
        Inspect one container

        Raises:
            ContainerNotFoundError: the id no longer exists
            ContainerEngineError: any other engine failure
        """
        pass

    @abstractmethod
    async def exec(self, container_id: str, command: List[str]) -> ExecResult:
        """
        Run a command inside a running container and wait for it to exit

        Raises:
            ExecFailedError: the engine rejected or failed the exec
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release engine connections"""
        pass
