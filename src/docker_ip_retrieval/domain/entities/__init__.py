"""
Domain entities.
"""
from docker_ip_retrieval.domain.entities.container import (
    ContainerRef,
    ContainerDetails,
    ExecResult,
    normalize_name,
)
from docker_ip_retrieval.domain.entities.report import (
    StatusRow,
    PortRow,
    RETRIEVAL_FAILED,
    LOCATION_UNKNOWN,
    LOOKUP_FAILED,
    NO_PORTS_EXPOSED,
)

__all__ = [
    "ContainerRef",
    "ContainerDetails",
    "ExecResult",
    "normalize_name",
    "StatusRow",
    "PortRow",
    "RETRIEVAL_FAILED",
    "LOCATION_UNKNOWN",
    "LOOKUP_FAILED",
    "NO_PORTS_EXPOSED",
]
