"""
Error taxonomy shared by all layers.
"""
from docker_ip_retrieval.shared.errors.domain import (
    DomainError,
    InvalidArgumentError,
    PromptFailureError,
)
from docker_ip_retrieval.shared.errors.infrastructure import (
    InfrastructureError,
    ContainerEngineError,
    EngineUnavailableError,
    ContainerNotFoundError,
    ExecFailedError,
    GeolocationError,
)

__all__ = [
    "DomainError",
    "InvalidArgumentError",
    "PromptFailureError",
    "InfrastructureError",
    "ContainerEngineError",
    "EngineUnavailableError",
    "ContainerNotFoundError",
    "ExecFailedError",
    "GeolocationError",
]
