"""Inspect command - show the chunks of every text element."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from svg_text2chunks import TextChunkConverter
from svg_text2chunks.config import Config
from svg_text2chunks.exceptions import Text2ChunksError
from svg_text2chunks.text.model import Font, StyledRun

console = Console()


def describe_font(font: Font) -> str:
    """Short human-readable font summary, e.g. ``Arial 24 700 italic``."""
    parts = [font.family, f"{font.size:g}"]
    for value in (font.weight, font.style, font.variant, font.stretch):
        if value.value != "normal":
            parts.append(value.value)
    return " ".join(parts)


def describe_run(run: StyledRun) -> str:
    label = f"[green]{escape(repr(run.text))}[/green] [dim]{escape(describe_font(run.font))}[/dim]"
    decorations = run.decoration.active_kinds()
    if decorations:
        label += f" [magenta]{' '.join(decorations)}[/magenta]"
    return label


@click.command()
@click.argument("svg_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--no-prepare", is_flag=True, help="Use tspans exactly as written")
@click.pass_context
def inspect(ctx: click.Context, svg_file: Path, no_prepare: bool) -> None:
    """Show text chunks and styled runs for SVG_FILE."""
    obj = ctx.obj or {}
    config = obj.get("config") or Config.load()

    converter = TextChunkConverter(config=config, prepare=not no_prepare)
    try:
        result = converter.convert_file(svg_file)
    except Text2ChunksError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    if result.text_count == 0:
        console.print("[yellow]No text elements found[/yellow]")
        return

    tree = Tree(f"[bold]{escape(svg_file.name)}[/bold]")
    for elem_id, element in zip(result.source_ids, result.elements):
        text_node = tree.add(f"[cyan]text[/cyan] id={escape(str(elem_id))}")
        if not element.transform.is_identity():
            text_node.add(f"[dim]transform {element.transform.as_tuple()}[/dim]")
        for chunk in element.kind.chunks:
            chunk_node = text_node.add(
                f"[yellow]chunk[/yellow] x={chunk.x:g} y={chunk.y:g} "
                f"anchor={chunk.anchor.value}"
            )
            for run in chunk.runs:
                chunk_node.add(describe_run(run))

    console.print(tree)
    console.print(
        f"\n[bold]Total:[/bold] {result.text_count} text element(s), "
        f"{result.chunk_count} chunk(s)"
    )
    for error in result.errors:
        console.print(f"[red]Error:[/red] {escape(error)}")

    if not result.success:
        raise SystemExit(1)
