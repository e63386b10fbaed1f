"""
Listing tables for containers, images and volumes.

Rows are built as lists of plain strings from a RenderConfig, then laid out
by rich as borderless, single-space separated columns.
"""

from datetime import datetime
from typing import Callable, Iterable, List, Optional

from rich.cells import cell_len
from rich.console import Console
from rich.table import Table
from rich.text import Text

from docker_dx.config import COMMAND_RATIO, IMAGE_RATIO, NAME_RATIO, NO_ADDRESS
from docker_dx.models.render import RenderConfig
from docker_dx.models.summaries import EPOCH, ContainerSummary, ImageSummary, VolumeSummary
from docker_dx.utils.formatting import (
    NEWLINE_GLYPH,
    age_since,
    format_ports,
    shorten,
    shorten_bytes,
    shorten_middle,
    state_label,
)


ImageAgeLookup = Callable[[str], Optional[datetime]]


def _fit(text: str, ratio: float, config: RenderConfig, shortener=shorten) -> str:
    if not config.shorten_strings:
        return text.replace("\n", NEWLINE_GLYPH)
    return shortener(text, config.budget(ratio))


def container_header(config: RenderConfig) -> List[str]:
    """Column names for the container listing."""
    header = ["id", "name"]
    if config.verbose:
        header.append("age")
    header += ["up", "ip", "ports"]
    if config.show_command:
        header.append("cmd")
    header += ["image", "age"]
    return header


def container_row(container: ContainerSummary, config: RenderConfig, image_created: ImageAgeLookup) -> List[str]:
    """
    Build one container row.

    Args:
        container: Container to render
        config: Width, verbosity and reference time
        image_created: Returns the creation time of an image ID, or None

    Returns:
        List[str]: Cells matching container_header(config)
    """
    row = [container.short_id, _fit(container.name, NAME_RATIO, config)]
    if config.verbose:
        row.append(age_since(container.created, config.now))
    row += [
        state_label(container.state, config.now),
        container.ip_address or NO_ADDRESS,
        format_ports(container.ports, config.verbose),
    ]
    if config.show_command:
        row.append(_fit(container.command, COMMAND_RATIO, config, shorten_middle))
    row += [
        _fit(container.image, IMAGE_RATIO, config),
        age_since(image_created(container.image_id), config.now),
    ]
    return row


def container_rows(containers: Iterable[ContainerSummary], config: RenderConfig,
                   image_created: ImageAgeLookup) -> List[List[str]]:
    """Container rows, oldest first."""
    ordered = sorted(containers, key=lambda c: c.created)
    return [container_row(c, config, image_created) for c in ordered]


IMAGE_HEADER = ["id", "age", "size", "repotags"]


def image_rows(images: Iterable[ImageSummary], config: RenderConfig) -> List[List[str]]:
    """Image rows, oldest first."""
    return [
        [
            image.short_id,
            age_since(image.created, config.now),
            shorten_bytes(image.size),
            ",".join(image.repo_tags),
        ]
        for image in sorted(images, key=lambda i: i.created)
    ]


VOLUME_HEADER = ["age", "driver", "name"]


def volume_rows(volumes: Iterable[VolumeSummary], config: RenderConfig) -> List[List[str]]:
    """Volume rows, oldest first; volumes without a creation time come first."""
    return [
        [age_since(volume.created, config.now), volume.driver, volume.name]
        for volume in sorted(volumes, key=lambda v: v.created or EPOCH)
    ]


def table_width(header: List[str], rows: List[List[str]]) -> int:
    """Width of the laid out table: widest cell of each column plus one separating space."""
    widths = [cell_len(name) for name in header]
    for row in rows:
        widths = [max(width, cell_len(cell)) for width, cell in zip(widths, row)]
    return sum(widths) + len(widths)


def build_table(header: List[str], rows: List[List[str]]) -> Table:
    """Lay out rows as a borderless table with one space between columns."""
    table = Table(box=None, show_edge=False, pad_edge=False, padding=(0, 1, 0, 0), header_style="")
    for name in header:
        table.add_column(name, no_wrap=True)
    for row in rows:
        # Text keeps rich from reading brackets in values as markup
        table.add_row(*(Text(cell) for cell in row))
    return table


def print_table(console: Console, header: List[str], rows: List[List[str]]) -> None:
    """
    Print a table without letting rich reflow it.

    Column widths are already budgeted from the terminal width. The console is
    widened to the table when a row is longer than the console, so no cell is
    ever collapsed or ellipsized; lines are never cropped.
    """
    needed = table_width(header, rows)
    if needed > console.width:
        console.width = needed
    console.print(build_table(header, rows), crop=False)
