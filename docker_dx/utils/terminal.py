"""
Terminal helpers for docker-dx: output width and paging.
"""

import logging
import subprocess
import sys
from typing import List, Optional, TextIO

from rich.console import Console

from docker_dx.config import OFFSCREEN_WIDTH
from docker_dx.core.errors import DxError


logger = logging.getLogger(__name__)


def terminal_width(console: Console) -> int:
    """
    Width available for listings.

    Args:
        console: Console the listing is printed to

    Returns:
        int: The terminal width, or a very wide default when output is piped
    """
    # The stream itself decides, not FORCE_COLOR style overrides
    isatty = getattr(console.file, "isatty", None)
    if isatty is None or not isatty():
        return OFFSCREEN_WIDTH
    return console.width


def run_pager(text: str, pager: List[str]) -> int:
    """
    Feed text to a pager program and wait for it to exit.

    Args:
        text: Text to page
        pager: Pager program followed by its arguments

    Returns:
        int: Exit status of the pager
    """
    logger.debug("Starting pager %s", pager)
    try:
        process = subprocess.Popen(pager, stdin=subprocess.PIPE, text=True)
    except OSError as e:
        raise DxError(f"pager {pager[0]!r}: {e}") from e

    try:
        process.stdin.write(text)
    except BrokenPipeError:
        # The pager was quit before reading everything
        logger.debug("Pager closed its input early")
    finally:
        try:
            process.stdin.close()
        except BrokenPipeError:
            pass

    return process.wait()


def show(text: str, pager: List[str], stream: Optional[TextIO] = None) -> None:
    """Page ``text`` when ``stream`` is a terminal, otherwise write it out."""
    stream = stream or sys.stdout
    if stream.isatty():
        stream.flush()
        run_pager(text, pager)
        return
    stream.write(text)
    stream.flush()
