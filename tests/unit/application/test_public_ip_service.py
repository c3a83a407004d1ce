"""
Public IP service unit tests
"""
from unittest.mock import AsyncMock

import pytest

from docker_ip_retrieval.application.services.public_ip_service import (
    PublicIPService,
    looks_like_ipv4,
)
from docker_ip_retrieval.domain.entities.container import ExecResult
from docker_ip_retrieval.domain.value_objects.container_state import OsKind
from docker_ip_retrieval.shared.errors import ContainerNotFoundError, ExecFailedError


class TestPublicIPService:
    """Public IP service tests"""

    @pytest.fixture
    def service(self, gateway):
        return PublicIPService(gateway, ip_echo_url="https://api.ipify.org")

    def test_build_command_posix(self, service):
        assert service.build_command(OsKind.OTHER) == ["sh", "-c", "curl -s https://api.ipify.org"]

    def test_build_command_windows(self, service):
        assert service.build_command(OsKind.WINDOWS) == ["curl", "-s", "https://api.ipify.org"]

    @pytest.mark.asyncio
    async def test_resolve_valid_ip(self, service, gateway):
        gateway.exec = AsyncMock(return_value=ExecResult(output="203.0.113.7", exit_code=0))

        assert await service.resolve("c-web") == "203.0.113.7"
        gateway.inspect.assert_awaited_once_with("c-web")
        gateway.exec.assert_awaited_once_with("c-web", ["sh", "-c", "curl -s https://api.ipify.org"])

    @pytest.mark.asyncio
    async def test_resolve_uses_windows_syntax(self, service, gateway, details_factory):
        gateway.inspect = AsyncMock(return_value=details_factory(os_hint="Windows"))

        await service.resolve("c-win")

        gateway.exec.assert_awaited_once_with("c-win", ["curl", "-s", "https://api.ipify.org"])

    @pytest.mark.asyncio
    async def test_resolve_with_hint_skips_inspect(self, service, gateway):
        await service.resolve("c-web", os_hint="linux")

        gateway.inspect.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_inspect_failure_defaults_to_posix(self, service, gateway):
        gateway.inspect = AsyncMock(side_effect=ContainerNotFoundError("c-web"))

        assert await service.resolve("c-web") == "203.0.113.7"
        gateway.exec.assert_awaited_once_with("c-web", ["sh", "-c", "curl -s https://api.ipify.org"])

    @pytest.mark.asyncio
    async def test_output_is_trimmed(self, service, gateway):
        gateway.exec = AsyncMock(return_value=ExecResult(output="  198.51.100.4  ", exit_code=0))

        assert await service.resolve("c-web", os_hint="linux") == "198.51.100.4"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "output,exit_code",
        [
            ("203.0.113.7", 1),
            ("203.0.113.7", 127),
            ("203.0.113.7", None),
            ("connection refused", 0),
            ("", 0),
            ("<html>error</html>", 0),
            ("2001:db8::1", 0),
        ],
    )
    async def test_rejected_results_are_none(self, service, gateway, output, exit_code):
        gateway.exec = AsyncMock(return_value=ExecResult(output=output, exit_code=exit_code))

        assert await service.resolve("c-web", os_hint="linux") is None

    @pytest.mark.asyncio
    async def test_exec_failure_is_none(self, service, gateway):
        gateway.exec = AsyncMock(side_effect=ExecFailedError("c-web", "container not running"))

        assert await service.resolve("c-web", os_hint="linux") is None

    @pytest.mark.asyncio
    async def test_out_of_range_octets_are_accepted(self, service, gateway):
        gateway.exec = AsyncMock(return_value=ExecResult(output="999.300.1.1", exit_code=0))

        assert await service.resolve("c-web", os_hint="linux") == "999.300.1.1"


@pytest.mark.parametrize("value", ["203.0.113.7", "999.999.999.999", "0.0.0.0", "1.2.3.4"])
def test_structural_check_accepts(value):
    assert looks_like_ipv4(value)


@pytest.mark.parametrize("value", ["", "abc", "1.2.3.4a", "1.2.3.4 ", "::1", "-1.2.3.4"])
def test_structural_check_rejects(value):
    assert not looks_like_ipv4(value)
