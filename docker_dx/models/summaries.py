"""
Read-only records built from Docker Engine API responses.

The records are snapshots: they are fetched once per invocation, rendered and
dropped. Optional fields stay ``None`` rather than failing the whole listing.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from docker_dx.config import ID_LENGTH


_FRACTION = re.compile(r"\.(\d+)")
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an RFC 3339 timestamp from the API into an aware UTC datetime.

    The daemon reports nanoseconds, which are cut down to microseconds. The
    zero time ``0001-01-01T00:00:00Z`` and unparsable values give ``None``.
    """
    if not value:
        return None
    text = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), value.strip())
    text = text.replace("Z", "+00:00")
    try:
        moment = datetime.fromisoformat(text)
    except ValueError:
        return None
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    if moment.year <= 1:
        return None
    return moment.astimezone(timezone.utc)


def from_unix(seconds: Optional[int]) -> datetime:
    """Convert the ``Created`` field of list endpoints."""
    return datetime.fromtimestamp(seconds or 0, timezone.utc)


def strip_algorithm(digest: str) -> str:
    """Drop a ``sha256:``-style prefix from an object ID."""
    if ":" in digest:
        return digest.split(":", 1)[1]
    return digest


@dataclass
class PortBinding:
    """A container port, optionally published on the host."""
    private_port: int
    type: str = "tcp"
    public_port: Optional[int] = None
    ip: str = ""

    @property
    def published(self) -> bool:
        return bool(self.ip)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "PortBinding":
        return cls(
            private_port=data.get("PrivatePort", 0),
            type=data.get("Type") or "tcp",
            public_port=data.get("PublicPort"),
            ip=data.get("IP") or "",
        )


@dataclass
class ContainerState:
    """Lifecycle flags and timestamps from ``docker inspect``."""
    running: bool = False
    paused: bool = False
    restarting: bool = False
    dead: bool = False
    exit_code: int = 0
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "ContainerState":
        return cls(
            running=bool(data.get("Running")),
            paused=bool(data.get("Paused")),
            restarting=bool(data.get("Restarting")),
            dead=bool(data.get("Dead")),
            exit_code=data.get("ExitCode") or 0,
            started_at=parse_timestamp(data.get("StartedAt")),
            finished_at=parse_timestamp(data.get("FinishedAt")),
        )


@dataclass
class ContainerSummary:
    """One row of the container listing."""
    id: str
    name: str
    image: str
    image_id: str
    command: str
    created: datetime
    state: ContainerState
    networks: Dict[str, str] = field(default_factory=dict)
    ports: List[PortBinding] = field(default_factory=list)

    @property
    def short_id(self) -> str:
        return self.id[:ID_LENGTH]

    @property
    def ip_address(self) -> Optional[str]:
        """IP address on the first network, if any."""
        for address in self.networks.values():
            return address or None
        return None

    @classmethod
    def from_api(cls, listed: Dict[str, Any], inspected: Dict[str, Any]) -> "ContainerSummary":
        """
        Combine a ``/containers/json`` entry with its inspect record.

        Args:
            listed: Entry from the container listing
            inspected: Result of inspecting the same container

        Returns:
            ContainerSummary: The combined record
        """
        networks = (listed.get("NetworkSettings") or {}).get("Networks") or {}
        name = inspected.get("Name") or ""
        return cls(
            id=listed.get("Id", ""),
            name=name[1:] if name.startswith("/") else name,
            image=listed.get("Image", ""),
            image_id=inspected.get("Image") or listed.get("ImageID", ""),
            command=listed.get("Command", ""),
            created=from_unix(listed.get("Created")),
            state=ContainerState.from_api(inspected.get("State") or {}),
            networks={net: (info or {}).get("IPAddress", "") for net, info in networks.items()},
            ports=[PortBinding.from_api(p) for p in listed.get("Ports") or []],
        )


@dataclass
class ImageSummary:
    """One row of the image listing."""
    id: str
    created: datetime
    size: int = 0
    repo_tags: List[str] = field(default_factory=list)

    @property
    def short_id(self) -> str:
        return strip_algorithm(self.id)[:ID_LENGTH]

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "ImageSummary":
        return cls(
            id=data.get("Id", ""),
            created=from_unix(data.get("Created")),
            size=data.get("Size") or 0,
            repo_tags=list(data.get("RepoTags") or []),
        )


@dataclass
class VolumeSummary:
    """One row of the volume listing."""
    name: str
    driver: str
    created: Optional[datetime] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "VolumeSummary":
        return cls(
            name=data.get("Name", ""),
            driver=data.get("Driver", ""),
            created=parse_timestamp(data.get("CreatedAt")),
        )
