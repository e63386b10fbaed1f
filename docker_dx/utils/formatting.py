"""
Formatting utilities for docker-dx.

Small pure helpers that turn durations, sizes, strings, ports and container
states into short labels for the listing tables.
"""

from datetime import datetime, timedelta
from typing import Iterable, List, Optional

from docker_dx.config import PLACEHOLDER
from docker_dx.models.summaries import ContainerState, PortBinding


MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY
MONTH = 30 * DAY
YEAR = 365 * DAY

SIZE_UNITS = "kMGTPE"
ELLIPSIS = "…"
NEWLINE_GLYPH = "␤"
ARROW = "→"


def pretty_duration(delta: timedelta) -> str:
    """
    Format an elapsed time as one compact token.

    Months are 30 days and years 365 days. Negative durations, which clock
    skew between client and daemon can produce, count as ``now``.

    Args:
        delta: Elapsed time

    Returns:
        str: Label such as ``now``, ``42s``, ``5m``, ``30h``, ``9d``, ``3w``,
        ``7M`` or ``2y``
    """
    seconds = int(delta.total_seconds())
    if seconds < 1:
        return "now"
    if seconds < MINUTE:
        return f"{seconds}s"
    if seconds < HOUR:
        return f"{seconds // MINUTE}m"
    if seconds < 2 * DAY:
        return f"{seconds // HOUR}h"
    if seconds < 2 * WEEK:
        return f"{seconds // DAY}d"
    if seconds < 2 * MONTH:
        return f"{seconds // WEEK}w"
    if seconds < 2 * YEAR:
        return f"{seconds // MONTH}M"
    return f"{seconds // YEAR}y"


def age_since(moment: Optional[datetime], now: datetime) -> str:
    """Age of ``moment`` relative to ``now``, or a placeholder when unknown."""
    if moment is None:
        return PLACEHOLDER
    return pretty_duration(now - moment)


def shorten_bytes(size_bytes: int) -> str:
    """
    Convert bytes to a compact binary-unit string.

    Args:
        size_bytes: Size in bytes

    Returns:
        str: ``1023`` below one kilobyte, otherwise e.g. ``1.5kB`` or ``2.3GB``
    """
    if size_bytes < 1024:
        return str(size_bytes)

    exponent = 0
    while exponent < len(SIZE_UNITS) and size_bytes >= 1024 ** (exponent + 1):
        exponent += 1

    return f"{size_bytes / 1024 ** exponent:.1f}{SIZE_UNITS[exponent - 1]}B"


def shorten(text: str, length: int) -> str:
    """
    Cut ``text`` to ``length`` characters, ending it with an ellipsis.

    Newlines are always replaced by a visible glyph so a value never breaks
    a table row.
    """
    length = max(length, 1)
    if len(text) > length:
        text = text[:length - 1] + ELLIPSIS
    return text.replace("\n", NEWLINE_GLYPH)


def shorten_middle(text: str, length: int) -> str:
    """
    Cut ``text`` to ``length`` characters by eliding its middle.

    The head keeps one character more than the tail when the kept count is
    odd. Newlines are replaced like in :func:`shorten`.
    """
    length = max(length, 1)
    if len(text) > length:
        kept = length - 1
        head = kept // 2 + kept % 2
        tail = kept // 2
        text = text[:head] + ELLIPSIS + text[len(text) - tail:]
    return text.replace("\n", NEWLINE_GLYPH)


def join_host_port(host: str, port: str) -> str:
    """Join a host and port, bracketing IPv6 addresses."""
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def port_token(port: PortBinding, verbose: bool = False) -> str:
    """Render one port binding, e.g. ``8080→80``, ``53/udp`` or ``0.0.0.0:80→80``."""
    private = str(port.private_port)
    if port.type != "tcp":
        private += f"/{port.type}"
    if not port.published:
        return private
    public = str(port.public_port or 0)
    if verbose:
        public = join_host_port(port.ip, public)
    return public + ARROW + private


def format_ports(ports: Iterable[PortBinding], verbose: bool = False) -> str:
    """
    Format a container's ports as one comma separated string.

    The daemon lists a published port once per bind address, so tokens that
    render the same are kept only once, in first-seen order.

    Args:
        ports: Port bindings from the container listing
        verbose: Include the host bind address of published ports

    Returns:
        str: Comma separated port tokens
    """
    tokens: List[str] = []
    for port in ports:
        token = port_token(port, verbose)
        if token and token not in tokens:
            tokens.append(token)
    return ",".join(tokens)


def state_label(state: ContainerState, now: datetime) -> str:
    """
    Summarize a container's lifecycle state.

    Args:
        state: State from the container's inspect record
        now: Reference time for the elapsed part

    Returns:
        str: ``dead``, ``created``, ``exit(0)3d``, ``restart(1)5s``, ``2h``
        or ``2hPaused``
    """
    if not state.running or state.restarting:
        if state.dead:
            return "dead"
        if state.started_at is None:
            return "created"
        if state.finished_at is None:
            return "finished=0"
        prefix = "restart" if state.running else "exit"
        return f"{prefix}({state.exit_code}){age_since(state.finished_at, now)}"

    label = age_since(state.started_at, now)
    if state.paused:
        label += "Paused"
    return label
