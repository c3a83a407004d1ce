"""
Domain value objects.
"""
from docker_ip_retrieval.domain.value_objects.container_state import ContainerState, OsKind
from docker_ip_retrieval.domain.value_objects.port_binding import PortBinding

__all__ = [
    "ContainerState",
    "OsKind",
    "PortBinding",
]
