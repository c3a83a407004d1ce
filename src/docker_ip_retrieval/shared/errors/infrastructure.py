"""
Infrastructure errors.

Errors raised while talking to the container engine or the geolocation
service. original_error keeps the library exception that caused them.
"""
from typing import Optional


class InfrastructureError(Exception):
    """Base class for infrastructure errors"""

    def __init__(
        self,
        message: str,
        original_error: Optional[Exception] = None
    ):
        self.message = message
        self.original_error = original_error
        super().__init__(self.message)


class ContainerEngineError(InfrastructureError):
    """The container engine rejected or failed a request"""
    pass


class EngineUnavailableError(ContainerEngineError):
    """The container engine cannot be reached"""
    pass


class ContainerNotFoundError(ContainerEngineError):
    """The container disappeared between listing and inspection"""

    def __init__(self, container_id: str, original_error: Optional[Exception] = None):
        self.container_id = container_id
        super().__init__(f"Container {container_id} not found", original_error)


class ExecFailedError(ContainerEngineError):
    """A command could not be executed inside a container"""

    def __init__(
        self,
        container_id: str,
        reason: str = "",
        original_error: Optional[Exception] = None
    ):
        self.container_id = container_id
        self.reason = reason
        super().__init__(
            f"Failed to run command in container {container_id}: {reason}",
            original_error,
        )


class GeolocationError(InfrastructureError):
    """The geolocation service could not be queried or understood"""
    pass
