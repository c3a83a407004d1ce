"""
Container entities.

Point-in-time views of containers built from engine listings and inspect
payloads. They are recomputed on every run and never written back.
"""
from dataclasses import dataclass, field
from typing import Optional, Tuple

from docker_ip_retrieval.domain.value_objects.container_state import ContainerState
from docker_ip_retrieval.domain.value_objects.port_binding import PortBinding

UNKNOWN_NAME = "Unknown"
UNKNOWN_CONTAINER_NAME = "Unknown Container"


def normalize_name(raw_name: Optional[str], default: str = UNKNOWN_NAME) -> str:
    """Strip the leading "/" from an engine container name"""
    if not raw_name:
        return default
    if raw_name.startswith("/"):
        raw_name = raw_name[1:]
    return raw_name or default


@dataclass(frozen=True)
class ContainerRef:
    """
    A container as seen in a listing.

    Identity is the engine-assigned id; the name is a display label and is
    not guaranteed to be unique.
    """
    id: str
    name: str

    def __post_init__(self):
        if not self.id:
            raise ValueError("id cannot be empty")


@dataclass(frozen=True)
class ContainerDetails:
    """Result of inspecting a single container"""
    id: str
    name: str
    status: str
    ports: Tuple[PortBinding, ...] = field(default_factory=tuple)
    os_hint: Optional[str] = None

    @property
    def state(self) -> Optional[ContainerState]:
        return ContainerState.parse(self.status)

    @property
    def running(self) -> bool:
        # Paused and restarting containers report State.Running too.
        return self.state is ContainerState.RUNNING

    def describe_status(self) -> str:
        """Display text for a container that is not running"""
        return f"Container {self.status}"


@dataclass(frozen=True)
class ExecResult:
    """Captured output of a one-shot exec"""
    output: str
    exit_code: Optional[int]
