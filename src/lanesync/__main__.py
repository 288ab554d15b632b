"""CLI entry point for lanesync."""

from __future__ import annotations

import asyncio
import sys
from typing import TYPE_CHECKING

import click

from lanesync import __version__
from lanesync.constants import LANE_LABELS, LANE_ORDER
from lanesync.core.filters import ALL, BoardFilters
from lanesync.core.models.enums import CardPriority, Lane, NotificationKind, SortOrder
from lanesync.paths import get_config_path

if TYPE_CHECKING:
    from lanesync.config import LaneSyncConfig
    from lanesync.services.board import BoardService

base_url_option = click.option(
    "--base-url",
    default=None,
    envvar="LANESYNC_API_URL",
    help="Backend root URL (overrides config)",
)


def _load_config(base_url: str | None) -> LaneSyncConfig:
    from lanesync.config import LaneSyncConfig

    config = LaneSyncConfig.load()
    if base_url:
        config.api.base_url = base_url.rstrip("/")
    return config


def _build_service(config: LaneSyncConfig, filters: BoardFilters | None = None) -> BoardService:
    from lanesync.services.board import BoardService

    service = BoardService.from_config(config)
    if filters is not None:
        service.filters = filters
    return service


@click.group(invoke_without_command=True)
@click.option("--version", is_flag=True, help="Show version and exit")
@click.pass_context
def cli(ctx: click.Context, version: bool) -> None:
    """Kanban board with optimistic drag-and-drop status sync."""
    if version:
        click.echo(f"lanesync {__version__}")
        ctx.exit(0)

    if ctx.invoked_subcommand is None:
        ctx.invoke(tui)


@cli.command()
@base_url_option
def tui(base_url: str | None) -> None:
    """Run the board TUI (default command)."""
    from lanesync.tui.app import LaneSyncApp

    app = LaneSyncApp(config=_load_config(base_url))
    app.run()


async def _show(config: LaneSyncConfig, filters: BoardFilters) -> dict[Lane, list] | None:
    service = _build_service(config, filters)
    try:
        if not await service.load():
            return None
        return service.visible_lanes()
    finally:
        await service.aclose()


@cli.command()
@base_url_option
@click.option(
    "--priority",
    type=click.Choice([ALL, *(p.value for p in CardPriority)]),
    default=ALL,
    show_default=True,
)
@click.option("--category", default=ALL, show_default=True, help="Category name filter")
@click.option(
    "--sort",
    "sort_by",
    type=click.Choice([s.value for s in SortOrder]),
    default=None,
    help="Sort order (defaults to ui.default_sort)",
)
def show(base_url: str | None, priority: str, category: str, sort_by: str | None) -> None:
    """Print the board lanes."""
    config = _load_config(base_url)
    filters = BoardFilters(
        priority=priority,
        category=category,
        sort_by=SortOrder(sort_by) if sort_by else config.ui.default_sort,
    )
    lanes = asyncio.run(_show(config, filters))
    if lanes is None:
        click.secho("Failed to load projects from the backend.", fg="red", err=True)
        sys.exit(1)

    for lane in LANE_ORDER:
        cards = lanes[lane]
        click.echo()
        click.secho(f"{LANE_LABELS[lane]} ({len(cards)})", bold=True)
        if not cards:
            click.secho("  (empty)", fg="bright_black")
        for card in cards:
            click.echo(
                f"  {click.style(card.id, fg='cyan')}  {card.title or 'Untitled'}"
                f"  [{card.priority.label}]"
            )


async def _move(config: LaneSyncConfig, card_id: str, lane: Lane) -> tuple[bool, str]:
    service = _build_service(config)
    try:
        if not await service.load():
            return False, "Failed to load projects from the backend."
        if card_id not in service.board:
            return False, f"Unknown project: {card_id}"
        change = service.move_to_lane(card_id, lane)
        if change is None:
            return True, f"Project {card_id} is already in {LANE_LABELS[lane]}"
        await service.sync.drain()
        latest = service.notifications.latest()
        if latest is None or latest.kind == NotificationKind.ERROR:
            return False, latest.message if latest else "Status sync did not complete"
        return True, latest.message
    finally:
        await service.aclose()


@cli.command()
@base_url_option
@click.argument("card_id")
@click.argument("lane")
def move(base_url: str | None, card_id: str, lane: str) -> None:
    """Move CARD_ID to LANE and sync its status.

    LANE accepts board ids (todo, inProgress, completed) or backend
    statuses (in-progress).
    """
    try:
        target = Lane.parse(lane)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="LANE") from exc

    ok, message = asyncio.run(_move(_load_config(base_url), card_id, target))
    if ok:
        click.secho(message, fg="green")
        return
    click.secho(message, fg="red", err=True)
    sys.exit(1)


@cli.command("config-path")
def config_path() -> None:
    """Print the config file location."""
    click.echo(get_config_path())


if __name__ == "__main__":
    cli()
