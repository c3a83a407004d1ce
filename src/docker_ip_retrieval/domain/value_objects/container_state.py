"""
Container state value objects.

Defines the lifecycle states reported by the engine and the OS family hint
used to pick an exec command syntax.
"""
from enum import Enum
from typing import Optional


class ContainerState(Enum):
    """Container lifecycle states as reported by Docker"""
    CREATED = "created"
    RUNNING = "running"
    PAUSED = "paused"
    RESTARTING = "restarting"
    REMOVING = "removing"
    EXITED = "exited"
    DEAD = "dead"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["ContainerState"]:
        """Map an engine status string to a state, None when unrecognised"""
        if not value:
            return None
        try:
            return cls(value.lower())
        except ValueError:
            return None


class OsKind(Enum):
    """OS family of a container, only used to choose the exec syntax"""
    WINDOWS = "windows"
    OTHER = "other"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_hint(cls, hint: Optional[str]) -> "OsKind":
        # Substring heuristic: "windows", "win32", "Windows/amd64" all match.
        if isinstance(hint, str) and "win" in hint.lower():
            return cls.WINDOWS
        return cls.OTHER
