"""
Logging infrastructure.

Exports logging configuration and utilities.
"""

from docker_ip_retrieval.infrastructure.logging.logging_config import (
    configure_logging,
    get_logger,
)

__all__ = [
    "configure_logging",
    "get_logger",
]
