#!/usr/bin/env python3
"""
docker-ip-retrieval CLI - Show the public IP and location of Docker containers
"""

import argparse
import asyncio
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import List, Optional

from pydantic import ValidationError
from rich.console import Console

from docker_ip_retrieval.application.services import (
    ALL_CHOICE,
    ContainerCatalog,
    ContainerStatusService,
    PortListingService,
    PublicIPService,
)
from docker_ip_retrieval.infrastructure.config.settings import Settings, get_settings
from docker_ip_retrieval.infrastructure.container_engine import DockerGateway
from docker_ip_retrieval.infrastructure.geolocation import GeolocationClient
from docker_ip_retrieval.infrastructure.logging import configure_logging, get_logger
from docker_ip_retrieval.interfaces.cli.formatter import ReportFormatter
from docker_ip_retrieval.interfaces.cli.prompt import prompt_container
from docker_ip_retrieval.shared.errors import EngineUnavailableError, PromptFailureError

logger = get_logger(__name__)

DISTRIBUTION_NAME = "docker-ip-retrieval"
KNOWN_FLAGS = ("--version", "-v", "--ports", "-p")
UNKNOWN_VERSION = "Unknown Version"


def get_app_version() -> str:
    """Version of the installed distribution, or a placeholder"""
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return UNKNOWN_VERSION


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments, ignoring anything unrecognised"""
    parser = argparse.ArgumentParser(
        prog="docker-ip-retrieval",
        description="Show the public IP address and location of Docker containers",
        add_help=False,
        allow_abbrev=False,
    )

    parser.add_argument(
        "--version", "-v",
        action="store_true",
        help="Print the version and exit"
    )
    parser.add_argument(
        "--ports", "-p",
        action="store_true",
        help="List published port mappings of all containers"
    )

    if argv is None:
        argv = sys.argv[1:]
    # Only exact flags count; "--ports=x" or "-h" must not make argparse exit.
    args, _ = parser.parse_known_args([a for a in argv if a in KNOWN_FLAGS])
    return args


async def run(
    args: argparse.Namespace,
    settings: Settings,
    console: Optional[Console] = None,
    err_console: Optional[Console] = None,
) -> int:
    """Run one report and return the process exit code"""
    console = console or Console()
    err_console = err_console or Console(stderr=True)
    formatter = ReportFormatter(console)

    gateway = DockerGateway(
        docker_url=settings.docker_host,
        exec_timeout=settings.exec_timeout,
    )
    try:
        if not await gateway.ping():
            err_console.print("Docker not detected.", markup=False)
            return 1

        refs = await gateway.list_containers()
        if not refs:
            console.print("No containers found.", markup=False)
            return 0

        if args.ports:
            port_service = PortListingService(gateway, max_concurrency=settings.max_concurrency)
            formatter.show_ports(await port_service.list_ports(refs))
            return 0

        catalog = ContainerCatalog.from_refs(refs)
        selection = prompt_container(catalog.choices(), console=console)
        targets = catalog.targets(selection)

        async with GeolocationClient(
            base_url=settings.geolocation_url,
            timeout=settings.http_timeout,
        ) as geolocation:
            status_service = ContainerStatusService(
                gateway=gateway,
                public_ip_service=PublicIPService(gateway, ip_echo_url=settings.ip_echo_url),
                geolocation=geolocation,
                max_concurrency=settings.max_concurrency,
            )
            if selection == ALL_CHOICE:
                rows = await status_service.resolve_many(targets)
            else:
                target = targets[0]
                rows = [await status_service.resolve(target.id, fallback_name=target.name)]

        formatter.show_results(rows)
        return 0

    except EngineUnavailableError as e:
        logger.debug("Container engine unavailable", error=e.message)
        err_console.print(f"Docker not detected: {e.message}", markup=False)
        return 1
    except PromptFailureError as e:
        err_console.print(f"Error: {e.message}", markup=False)
        return 1
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        err_console.print(f"Error fetching container data: {e}", markup=False)
        return 1
    finally:
        await gateway.close()


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI function"""
    args = parse_args(argv)

    if args.version:
        print(f"Version: {get_app_version()}")
        return 0

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    configure_logging(settings.effective_log_level, settings.log_format)
    return asyncio.run(run(args, settings))


def entry_point():
    """CLI entry point"""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    entry_point()
