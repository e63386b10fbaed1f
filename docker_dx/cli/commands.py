"""
CLI commands for docker-dx.

This module provides the ``dx`` command: compact listings of containers,
images and volumes, and an examine command for a single object.
"""

import logging
import sys
from typing import List, Optional

import click
import typer
from rich.console import Console
from rich.markup import escape
from typer.core import TyperGroup

from docker_dx import __version__
from docker_dx.config import OFFSCREEN_WIDTH, SUBCOMMAND_USAGE, Settings
from docker_dx.core.docker_manager import DockerManager
from docker_dx.core.errors import DxError
from docker_dx.core.locator import ALL_KINDS, locate
from docker_dx.models.enums import DumpFormat, ObjectKind
from docker_dx.models.render import RenderConfig
from docker_dx.cli.tables import (
    IMAGE_HEADER,
    VOLUME_HEADER,
    container_header,
    container_rows,
    image_rows,
    print_table,
    volume_rows,
)
from docker_dx.utils.terminal import show, terminal_width


ALIASES = {
    "c": "ps",
    "containers": "ps",
    "imgs": "i",
    "images": "i",
    "vols": "v",
    "volumes": "v",
    "examine": "x",
    "inspect": "x",
}

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Diagnostics go to stderr so listings stay clean when piped
err_console = Console(stderr=True, highlight=False, soft_wrap=True)


class DxGroup(TyperGroup):
    """
    Command group with subcommand aliases and one place for error reporting.
    """

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, ALIASES.get(cmd_name, cmd_name))

    def resolve_command(self, ctx: click.Context, args: List[str]):
        name = args[0]
        if not name.startswith("-") and self.get_command(ctx, name) is None:
            typer.echo(f"{name!r}: unknown subcommand.")
            typer.echo(SUBCOMMAND_USAGE)
            ctx.exit(2)
        return super().resolve_command(ctx, args)

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except DxError as e:
            err_console.print(f"[bold red]Error:[/bold red] {escape(e.message)}")
            raise typer.Exit(code=e.exit_code)


app = typer.Typer(
    cls=DxGroup,
    help="Compact listings of Docker containers, images and volumes",
    add_completion=False,
)


def _configure_logging(debug: bool):
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=LOG_FORMAT,
    )


def _manager(ctx: typer.Context) -> DockerManager:
    settings: Settings = ctx.obj
    return DockerManager(base_url=settings.docker_host)


def _listing_width() -> int:
    return terminal_width(Console())


def _stdout_console() -> Console:
    # Columns are budgeted by RenderConfig; print_table widens this further for longer rows
    return Console(highlight=False, width=OFFSCREEN_WIDTH)


def _print_version(value: bool):
    if value:
        typer.echo(f"dx {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Log every query to stderr"),
    version: bool = typer.Option(
        False, "--version", callback=_print_version, is_eager=True,
        help="Show the version and exit",
    ),
):
    """List containers, images and volumes, or examine one object."""
    _configure_logging(debug)
    ctx.obj = Settings.from_env()
    if ctx.invoked_subcommand is None:
        typer.echo(SUBCOMMAND_USAGE)


@app.command("ps")
def containers(
    ctx: typer.Context,
    all: bool = typer.Option(False, "--all", "-a", help="Show all containers"),
    verbose: int = typer.Option(
        0, "--verbose", "-v", count=True,
        help=(
            "Add container age, bind addresses and cmd (always shown on wide terminals); "
            "-vv also stops shortening"
        ),
    ),
):
    """List containers (aliases: c, containers)."""
    manager = _manager(ctx)
    summaries = manager.container_summaries(all=all)

    console = _stdout_console()
    config = RenderConfig(width=_listing_width(), verbosity=verbose)
    rows = container_rows(summaries, config, manager.image_created)
    print_table(console, container_header(config), rows)


@app.command("i")
def images(
    ctx: typer.Context,
    all: bool = typer.Option(False, "--all", "-a", help="Show all images, including intermediate ones"),
):
    """List images (aliases: imgs, images)."""
    summaries = _manager(ctx).image_summaries(all=all)

    console = _stdout_console()
    config = RenderConfig(width=_listing_width())
    print_table(console, IMAGE_HEADER, image_rows(summaries, config))


@app.command("v")
def volumes(ctx: typer.Context):
    """List volumes (aliases: vols, volumes)."""
    summaries = _manager(ctx).volume_summaries()

    console = _stdout_console()
    config = RenderConfig(width=_listing_width())
    print_table(console, VOLUME_HEADER, volume_rows(summaries, config))


@app.command("x")
def examine(
    ctx: typer.Context,
    arg: str = typer.Argument(..., help="ID, name or prefix of a container, image or volume"),
    kinds: Optional[List[ObjectKind]] = typer.Option(
        None, "--type", "-t", case_sensitive=False,
        help="Only look for these kinds of objects (repeatable)",
    ),
    as_yaml: bool = typer.Option(False, "--yaml", help="Print the record as YAML instead of JSON"),
):
    """Examine one object by ID/name prefix (aliases: examine, inspect)."""
    settings: Settings = ctx.obj
    found = locate(_manager(ctx), arg, kinds or ALL_KINDS)

    err_console.print(f"Found {found.kind.value}: {found.identifier}", markup=False)
    text = found.dump(DumpFormat.YAML if as_yaml else DumpFormat.JSON)
    show(text, settings.pager, sys.stdout)


if __name__ == "__main__":
    app()
