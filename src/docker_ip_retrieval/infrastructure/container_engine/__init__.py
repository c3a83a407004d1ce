"""
Container engine access.

Provides the gateway interface and its Docker implementation.
"""
from docker_ip_retrieval.infrastructure.container_engine.base import IContainerGateway
from docker_ip_retrieval.infrastructure.container_engine.docker_gateway import DockerGateway

__all__ = [
    "IContainerGateway",
    "DockerGateway",
]
