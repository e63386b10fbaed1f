"""
Render settings passed to every formatter.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from docker_dx.config import WIDE


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class RenderConfig:
    """
    Width, verbosity and reference time for one listing.

    Verbosity 1 adds the container age column, bind addresses and the command
    column. Verbosity 2 also turns off every string shortener.
    """
    width: int
    verbosity: int = 0
    now: datetime = field(default_factory=utcnow)

    def __post_init__(self):
        if self.verbosity < 0:
            object.__setattr__(self, "verbosity", 0)

    @property
    def verbose(self) -> bool:
        return self.verbosity >= 1

    @property
    def shorten_strings(self) -> bool:
        return self.verbosity < 2

    @property
    def show_command(self) -> bool:
        return self.verbose or self.width >= WIDE

    def budget(self, ratio: float) -> int:
        """Number of characters a column may use."""
        return int(ratio * self.width)
