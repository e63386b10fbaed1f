"""
Configuration for docker-dx.

Runtime settings come from the environment; layout constants are module level.
"""

import os
from dataclasses import dataclass, field
from typing import List


DEFAULT_DOCKER_HOST = "unix:///var/run/docker.sock"
DEFAULT_PAGER = "less"

# Terminal width at or above which the command column is always shown
WIDE = 100
# Width used when stdout is not a terminal, so piped output is never cut
OFFSCREEN_WIDTH = 999
# Number of hash characters shown in id columns
ID_LENGTH = 6

# Column budgets as a share of the terminal width
NAME_RATIO = 0.2
COMMAND_RATIO = 0.15
IMAGE_RATIO = 0.2

PLACEHOLDER = "?"
NO_ADDRESS = "-"

SUBCOMMAND_USAGE = """subcommands:
  ps|c|containers
  i|imgs|images
  v|vols|volumes
  x|examine|inspect"""


@dataclass
class Settings:
    """Settings read from the environment."""
    docker_host: str = DEFAULT_DOCKER_HOST
    pager: List[str] = field(default_factory=lambda: [DEFAULT_PAGER])

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from ``DOCKER_HOST`` and ``PAGER``.

        Empty variables fall back to the defaults. ``PAGER`` is split on
        whitespace into the program and its arguments.
        """
        docker_host = os.environ.get("DOCKER_HOST") or DEFAULT_DOCKER_HOST
        pager = (os.environ.get("PAGER") or "").split()
        return cls(docker_host=docker_host, pager=pager or [DEFAULT_PAGER])
