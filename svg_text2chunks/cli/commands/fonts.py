"""Fonts command - report resolved fonts of text runs."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from svg_text2chunks import TextChunkConverter
from svg_text2chunks.config import Config
from svg_text2chunks.exceptions import Text2ChunksError
from svg_text2chunks.text.model import Font

console = Console()


@click.command()
@click.argument("svg_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def fonts(ctx: click.Context, svg_file: Path) -> None:
    """Report the fonts resolved for the text runs of SVG_FILE."""
    obj = ctx.obj or {}
    config = obj.get("config") or Config.load()

    try:
        result = TextChunkConverter(config=config).convert_file(svg_file)
    except Text2ChunksError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    fonts_used: dict[Font, int] = {}
    for element in result.elements:
        for chunk in element.kind.chunks:
            for run in chunk.runs:
                fonts_used[run.font] = fonts_used.get(run.font, 0) + 1

    table = Table(title=f"Fonts in {svg_file.name}")
    table.add_column("Family", style="cyan")
    table.add_column("Size", style="yellow")
    table.add_column("Weight", style="yellow")
    table.add_column("Style", style="green")
    table.add_column("Variant", style="green")
    table.add_column("Stretch", style="green")
    table.add_column("Runs", style="dim")

    for font, count in sorted(fonts_used.items(), key=lambda item: (item[0].family, item[0].size)):
        table.add_row(
            font.family,
            f"{font.size:g}",
            font.weight.value,
            font.style.value,
            font.variant.value,
            font.stretch.value,
            str(count),
        )

    console.print(table)
    console.print(f"\n[bold]Total:[/bold] {len(fonts_used)} fonts")
