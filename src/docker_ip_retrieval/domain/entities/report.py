"""
Report rows.

The display units produced by the status pipeline and the port listing.
"""
from dataclasses import dataclass

RETRIEVAL_FAILED = "Retrieval failed"
LOCATION_UNKNOWN = "Unknown"
LOOKUP_FAILED = "Lookup Failed"
NO_PORTS_EXPOSED = "No ports exposed"


@dataclass(frozen=True)
class StatusRow:
    """
    One row of the status table.

    ip_or_status holds an accepted IP string, a non-running status such as
    "Container exited", or RETRIEVAL_FAILED. location is a real place only
    when ip_or_status is an IP.
    """
    name: str
    ip_or_status: str
    location: str = LOCATION_UNKNOWN

    def __iter__(self):
        return iter((self.name, self.ip_or_status, self.location))

    @classmethod
    def retrieval_failed(cls, name: str) -> "StatusRow":
        return cls(name=name, ip_or_status=RETRIEVAL_FAILED, location=LOCATION_UNKNOWN)


@dataclass(frozen=True)
class PortRow:
    """One row of the ports table"""
    name: str
    ports: str

    def __iter__(self):
        return iter((self.name, self.ports))
