"""
Geolocation lookup.
"""
from docker_ip_retrieval.infrastructure.geolocation.client import GeolocationClient
from docker_ip_retrieval.infrastructure.geolocation.dto import GeolocationResponse

__all__ = [
    "GeolocationClient",
    "GeolocationResponse",
]
