"""Atlas Foundry CLI for validating and inspecting a content root.

Provides command-line access to the content index: a pass/fail validation
gate for builds plus read-only views of lanes, breadcrumbs, museum fact
cards and the index.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from atlas_foundry.config.settings import get_settings
from atlas_foundry.exceptions import ContentError
from atlas_foundry.museum import (
    MuseumFactSection,
    format_enum_label,
    get_discovery_details,
    get_museum_fact_sections,
    normalize_source_url,
)
from atlas_foundry.store import ContentStore

console = Console()
error_console = Console(stderr=True)


def configure_logging(log_level: str = "INFO", log_format: str = "simple") -> None:
    """Configure root logging for CLI runs."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    if log_format == "simple":
        format_str = "%(message)s"
    else:
        format_str = "%(name)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[RichHandler(console=error_console, show_path=False)],
    )
    logging.getLogger("atlas_foundry").setLevel(level)


def print_error(text: str) -> None:
    error_console.print(
        f"[red]Error: {escape(text)}[/red]", highlight=False, soft_wrap=True
    )


def _load_store(content_root: Optional[Path]) -> ContentStore:
    settings = get_settings()
    return ContentStore(content_root or settings.content_root)


def _index_or_exit(store: ContentStore):
    try:
        return store.get_index()
    except ContentError as exc:
        print_error(exc.message)
        sys.exit(1)


content_root_option = click.option(
    "--content-root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Content directory (defaults to ATLAS_CONTENT_ROOT or ./content)",
)


@click.group()
@click.option("--log-level", default=None, help="Override the configured log level")
def cli(log_level: Optional[str]):
    """Atlas Foundry: content graph validator and indexer."""
    settings = get_settings()
    configure_logging(log_level or settings.log_level, settings.log_format)


@cli.command()
@content_root_option
def validate(content_root: Optional[Path]):
    """Validate every content document and report counts."""
    store = _load_store(content_root)
    try:
        report = store.load_report()
    except ContentError as exc:
        print_error(exc.message)
        sys.exit(1)

    if not report.content_root_found:
        console.print(
            f'No "{store.content_root}" directory found; skipping content validation.',
            highlight=False,
            soft_wrap=True,
        )
        return
    console.print(f"[green]{report.summary()}[/green]", highlight=False, soft_wrap=True)


@cli.command()
@click.argument("anchor_id")
@content_root_option
def lane(anchor_id: str, content_root: Optional[Path]):
    """Show the orbit lane (center body and orbiters) for ANCHOR_ID."""
    store = _load_store(content_root)
    index = _index_or_exit(store)
    model = store.derive_orbit_lane(anchor_id)

    if model.is_empty:
        console.print(f"[yellow]Nothing to render for '{escape(anchor_id)}'[/yellow]")
        return

    title = model.system.name if model.system else anchor_id
    table = Table(title=f"{title} ({'system root' if model.is_system_root else 'body'})")
    table.add_column("Role")
    table.add_column("ID")
    table.add_column("Name")
    table.add_column("Type")
    table.add_column("Children", justify="right")

    for position, body in enumerate(model.lane_bodies):
        role = "center" if position == 0 else "orbiter"
        table.add_row(
            role,
            body.id,
            body.name,
            body.type,
            str(len(index.get_children(body.id))),
        )
    console.print(table)


@cli.command()
@click.argument("anchor_id")
@content_root_option
def breadcrumb(anchor_id: str, content_root: Optional[Path]):
    """Print the breadcrumb trail from the system root to ANCHOR_ID."""
    store = _load_store(content_root)
    _index_or_exit(store)
    crumbs = store.build_breadcrumb(anchor_id)

    if not crumbs:
        console.print(f"[yellow]No breadcrumb for '{escape(anchor_id)}'[/yellow]")
        return
    console.print(
        " › ".join(crumb.label for crumb in crumbs), highlight=False, soft_wrap=True
    )


@cli.command()
@click.argument("body_id")
@content_root_option
def facts(body_id: str, content_root: Optional[Path]):
    """Show the museum fact cards for BODY_ID."""
    store = _load_store(content_root)
    index = _index_or_exit(store)
    body = index.get_body(body_id)

    if body is None:
        console.print(f"[yellow]No body with id '{escape(body_id)}'[/yellow]")
        return

    console.print(
        f"[bold]{escape(body.name)}[/bold] ({format_enum_label(body.type)}): "
        f"{escape(body.hook)}",
        highlight=False,
        soft_wrap=True,
    )

    cards = get_museum_fact_sections(body)
    discovery = get_discovery_details(body)
    if discovery:
        cards.append(MuseumFactSection("discovery", "Discovery", discovery))
    if not cards:
        console.print("No structured facts recorded.", highlight=False)
        return

    for card in cards:
        table = Table(title=card.title, show_header=False)
        table.add_column("Fact")
        table.add_column("Value")
        for item in card.items:
            table.add_row(item.label, item.value)
        console.print(table)

    for position, source in enumerate(body.sources or [], start=1):
        url = normalize_source_url(source.url)
        suffix = f" {url}" if url else ""
        console.print(
            f"[{position}] {source.title}{suffix}",
            highlight=False,
            soft_wrap=True,
            markup=False,
        )


@cli.command()
@content_root_option
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write JSON to this file instead of stdout",
)
def export(content_root: Optional[Path], output: Optional[Path]):
    """Export the full index as JSON."""
    store = _load_store(content_root)
    index = _index_or_exit(store)
    payload = json.dumps(index.to_dict(), indent=2, ensure_ascii=False)

    if output is None:
        click.echo(payload)
        return
    output.write_text(payload + "\n", encoding="utf-8")
    console.print(f"Wrote {index.entity_count} entities to {output}", highlight=False)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
