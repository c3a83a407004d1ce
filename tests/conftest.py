"""
Pytest configuration

Shared fixtures for the unit tests. Nothing here talks to a real Docker
daemon or to the network.
"""
from typing import Optional, Sequence
from unittest.mock import AsyncMock, Mock

import pytest

from docker_ip_retrieval.domain.entities.container import ContainerDetails, ContainerRef, ExecResult
from docker_ip_retrieval.domain.value_objects.port_binding import PortBinding
from docker_ip_retrieval.infrastructure.config.settings import get_settings


def make_details(
    container_id: str = "c-web",
    name: str = "web",
    status: str = "running",
    ports: Sequence[PortBinding] = (),
    os_hint: Optional[str] = "linux",
) -> ContainerDetails:
    return ContainerDetails(
        id=container_id,
        name=name,
        status=status,
        ports=tuple(ports),
        os_hint=os_hint,
    )


@pytest.fixture
def details_factory():
    """Factory for ContainerDetails"""
    return make_details


@pytest.fixture
def gateway():
    """Mock container gateway"""
    gw = Mock()
    gw.ping = AsyncMock(return_value=True)
    gw.list_containers = AsyncMock(return_value=[])
    gw.inspect = AsyncMock(return_value=make_details())
    gw.exec = AsyncMock(return_value=ExecResult(output="203.0.113.7", exit_code=0))
    gw.close = AsyncMock()
    return gw


@pytest.fixture
def geolocation():
    """Mock geolocation client"""
    geo = Mock()
    geo.resolve = AsyncMock(return_value="US, Ashburn")
    return geo


@pytest.fixture
def refs():
    """Three containers in listing order"""
    return [
        ContainerRef(id="c-a", name="a"),
        ContainerRef(id="c-b", name="b"),
        ContainerRef(id="c-c", name="c"),
    ]


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
