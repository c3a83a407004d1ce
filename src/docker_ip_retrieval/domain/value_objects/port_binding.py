"""
Port binding value object.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class PortBinding:
    """One host binding of an exposed container port"""
    container_port: str  # e.g. "80/tcp"
    host_ip: str
    host_port: str

    def __str__(self) -> str:
        return f"{self.host_ip}:{self.host_port}->{self.container_port}"
