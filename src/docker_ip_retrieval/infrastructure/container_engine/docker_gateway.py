"""
Docker engine gateway

Thin accessor over the local Docker daemon built on aiodocker. One instance
is created per run and injected into the services that need it.
"""
import asyncio
import re
from typing import Any, Dict, List, Optional

import aiohttp
from aiodocker import Docker
from aiodocker.exceptions import DockerError

from docker_ip_retrieval.domain.entities.container import (
    ContainerRef,
    ContainerDetails,
    ExecResult,
    UNKNOWN_CONTAINER_NAME,
    normalize_name,
)
from docker_ip_retrieval.domain.value_objects.port_binding import PortBinding
from docker_ip_retrieval.infrastructure.container_engine.base import IContainerGateway
from docker_ip_retrieval.infrastructure.logging import get_logger
from docker_ip_retrieval.shared.errors import (
    ContainerEngineError,
    ContainerNotFoundError,
    EngineUnavailableError,
    ExecFailedError,
    InvalidArgumentError,
)

logger = get_logger(__name__)

# Anything outside printable ASCII: colour codes, CR/LF, stream noise.
_NON_PRINTABLE = re.compile(r"[^ -~]+")

_CONNECTION_ERRORS = (aiohttp.ClientError, OSError, asyncio.TimeoutError)


def clean_output(raw: str) -> str:
    """Remove non-printable characters and surrounding whitespace"""
    return _NON_PRINTABLE.sub("", raw).strip()


def _require_container_id(container_id: Any) -> str:
    if not container_id or not isinstance(container_id, str):
        raise InvalidArgumentError(
            "Invalid container id",
            details={"container_id": repr(container_id)},
        )
    return container_id


class DockerGateway(IContainerGateway):
    """
    Docker engine gateway

    Connects to the Docker daemon over its Unix socket or TCP endpoint.
    """

    def __init__(
        self,
        docker_url: Optional[str] = None,
        exec_timeout: Optional[float] = None,
    ):
        """
        Args:
            docker_url: Docker daemon URL, None for aiodocker's discovery
                - unix:///var/run/docker.sock (Unix socket)
                - tcp://localhost:2375 (TCP)
            exec_timeout: upper bound in seconds for a single exec, None waits
                until the process exits
        """
        self._docker_url = docker_url
        self._exec_timeout = exec_timeout
        self._docker: Optional[Docker] = None
        self._initialized = False

    async def _ensure_docker(self) -> Docker:
        """Create the Docker client on first use"""
        if not self._initialized:
            try:
                self._docker = Docker(url=self._docker_url)
            except ValueError as e:
                # Raised when no DOCKER_HOST is set and no local socket exists
                raise EngineUnavailableError(str(e), original_error=e) from e
            self._initialized = True
        return self._docker

    async def close(self) -> None:
        """Close the Docker connection"""
        if self._docker:
            await self._docker.close()
            self._initialized = False

    async def ping(self) -> bool:
        """Check the Docker connection"""
        try:
            docker = await self._ensure_docker()
            version = await docker.version()
            return version is not None
        except (EngineUnavailableError, DockerError) + _CONNECTION_ERRORS as e:
            logger.debug("Docker ping failed", error=str(e))
            return False

    async def list_containers(self) -> List[ContainerRef]:
        """List all containers, including stopped ones, in engine order"""
        docker = await self._ensure_docker()
        try:
            containers = await docker.containers.list(all=True)
        except (DockerError,) + _CONNECTION_ERRORS as e:
            raise EngineUnavailableError(
                f"Failed to list Docker containers: {e}", original_error=e
            ) from e

        refs = []
        for container in containers:
            names = self._field(container, "Names") or []
            refs.append(
                ContainerRef(
                    id=container.id,
                    name=normalize_name(names[0] if names else None),
                )
            )
        logger.debug("Listed containers", count=len(refs))
        return refs

    async def inspect(self, container_id: str) -> ContainerDetails:
        """Inspect a container and map the payload to ContainerDetails"""
        _require_container_id(container_id)
        docker = await self._ensure_docker()
        try:
            info = await docker.containers.container(container_id).show()
        except DockerError as e:
            if e.status == 404:
                raise ContainerNotFoundError(container_id, original_error=e) from e
            raise ContainerEngineError(
                f"Failed to inspect container {container_id}: {e}", original_error=e
            ) from e
        except _CONNECTION_ERRORS as e:
            raise ContainerEngineError(
                f"Failed to inspect container {container_id}: {e}", original_error=e
            ) from e

        return self._to_details(container_id, info)

    async def exec(self, container_id: str, command: List[str]) -> ExecResult:
        """
        Run a command inside a container without detaching

        stdout and stderr are collected until the process exits, then the
        exit code is read back from the exec instance.
        """
        _require_container_id(container_id)
        if not isinstance(command, list) or not all(isinstance(c, str) for c in command):
            raise InvalidArgumentError("Command must be a list of strings")

        docker = await self._ensure_docker()
        try:
            if self._exec_timeout:
                return await asyncio.wait_for(
                    self._run_exec(docker, container_id, command),
                    timeout=self._exec_timeout,
                )
            return await self._run_exec(docker, container_id, command)
        except asyncio.TimeoutError as e:
            reason = f"timed out after {self._exec_timeout}s" if self._exec_timeout else "timed out"
            raise ExecFailedError(container_id, reason, original_error=e) from e
        except (DockerError,) + _CONNECTION_ERRORS as e:
            raise ExecFailedError(container_id, str(e), original_error=e) from e

    async def _run_exec(
        self,
        docker: Docker,
        container_id: str,
        command: List[str],
    ) -> ExecResult:
        container = docker.containers.container(container_id)
        exec_instance = await container.exec(
            cmd=command,
            stdout=True,
            stderr=True,
            tty=False,
        )

        chunks = []
        async with exec_instance.start(detach=False) as stream:
            while True:
                message = await stream.read_out()
                if message is None:
                    break
                chunks.append(message.data)

        raw = b"".join(chunks).decode("utf-8", errors="replace")
        inspection = await exec_instance.inspect()
        exit_code = inspection.get("ExitCode")

        logger.debug(
            "Exec finished",
            container_id=container_id,
            exit_code=exit_code,
        )
        return ExecResult(output=clean_output(raw), exit_code=exit_code)

    @staticmethod
    def _field(container: Any, key: str) -> Any:
        try:
            return container[key]
        except (KeyError, TypeError):
            return None

    @staticmethod
    def _parse_ports(ports: Optional[Dict[str, Any]]) -> List[PortBinding]:
        """
        Flatten NetworkSettings.Ports

        Input: {"80/tcp": [{"HostIp": "0.0.0.0", "HostPort": "8080"}], "443/tcp": None}
        Exposed ports without a host binding are skipped.
        """
        bindings = []
        for container_port, host_bindings in (ports or {}).items():
            for binding in host_bindings or []:
                bindings.append(
                    PortBinding(
                        container_port=container_port,
                        host_ip=binding.get("HostIp", ""),
                        host_port=binding.get("HostPort", ""),
                    )
                )
        return bindings

    def _to_details(self, container_id: str, info: Dict[str, Any]) -> ContainerDetails:
        state = info.get("State") or {}
        network_settings = info.get("NetworkSettings") or {}
        return ContainerDetails(
            id=info.get("Id", container_id),
            name=normalize_name(info.get("Name"), default=UNKNOWN_CONTAINER_NAME),
            status=state.get("Status", "unknown"),
            ports=tuple(self._parse_ports(network_settings.get("Ports"))),
            os_hint=info.get("Platform") or info.get("Os"),
        )
