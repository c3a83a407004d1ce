"""
Application services.
"""
from docker_ip_retrieval.application.services.container_catalog import ContainerCatalog, ALL_CHOICE
from docker_ip_retrieval.application.services.container_status_service import ContainerStatusService
from docker_ip_retrieval.application.services.port_service import PortListingService
from docker_ip_retrieval.application.services.public_ip_service import PublicIPService

__all__ = [
    "ContainerCatalog",
    "ALL_CHOICE",
    "ContainerStatusService",
    "PortListingService",
    "PublicIPService",
]
