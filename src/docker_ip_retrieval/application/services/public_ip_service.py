"""
Public IP service

Discovers the outbound public IP of a container by running an HTTP request
to an IP echo endpoint from inside it.
"""
import re
from typing import List, Optional

from docker_ip_retrieval.domain.value_objects.container_state import OsKind
from docker_ip_retrieval.infrastructure.container_engine.base import IContainerGateway
from docker_ip_retrieval.infrastructure.logging import get_logger
from docker_ip_retrieval.shared.errors import ContainerEngineError

logger = get_logger(__name__)

# Structural check only: octet ranges and group counts are not validated.
IPV4_PATTERN = re.compile(r"[0-9.]+")


def looks_like_ipv4(value: str) -> bool:
    return bool(IPV4_PATTERN.fullmatch(value))


class PublicIPService:
    """
    Public IP service

    Every failure mode (engine rejected the exec, no curl in the image,
    non-IP output) collapses to None.
    """

    def __init__(
        self,
        gateway: IContainerGateway,
        ip_echo_url: str = "https://api.ipify.org",
    ):
        self._gateway = gateway
        self._ip_echo_url = ip_echo_url

    def build_command(self, os_kind: OsKind) -> List[str]:
        """
        Build the exec command vector

        Windows images are not assumed to ship a POSIX shell, so the command
        string is split on whitespace and run directly.
        """
        command = f"curl -s {self._ip_echo_url}"
        if os_kind == OsKind.WINDOWS:
            return command.split()
        return ["sh", "-c", command]

    async def detect_os(self, container_id: str) -> OsKind:
        try:
            details = await self._gateway.inspect(container_id)
        except ContainerEngineError as e:
            logger.debug("OS detection failed, assuming non-Windows", container_id=container_id, error=str(e))
            return OsKind.OTHER
        return OsKind.from_hint(details.os_hint)

    async def resolve(self, container_id: str, os_hint: Optional[str] = None) -> Optional[str]:
        """
        Return the container's public IP, or None

        Args:
            container_id: id of a running container
            os_hint: platform string from a previous inspect; the container is
                inspected again when omitted
        """
        if os_hint is None:
            os_kind = await self.detect_os(container_id)
        else:
            os_kind = OsKind.from_hint(os_hint)

        command = self.build_command(os_kind)
        try:
            result = await self._gateway.exec(container_id, command)
        except ContainerEngineError as e:
            logger.debug("Public IP exec failed", container_id=container_id, error=str(e))
            return None

        output = result.output.strip()
        if result.exit_code == 0 and looks_like_ipv4(output):
            return output

        logger.debug(
            "Public IP output rejected",
            container_id=container_id,
            exit_code=result.exit_code,
            output=output[:80],
        )
        return None
