"""Print statistics for a Fountain screenplay."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from fountainkit.cli.formatters import JsonFormatter
from fountainkit.cli.utils.cli_handler import CLIHandler
from fountainkit.config import get_settings
from fountainkit.parser import ElementType, compute_statistics

console = Console()


def stats_command(
    source: Annotated[
        str,
        typer.Argument(help="Fountain file to measure, or '-' for standard input"),
    ],
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show word, page, scene and element counts."""
    handler = CLIHandler(console)

    try:
        text = handler.read_script(source)
        stats = compute_statistics(text, words_per_page=get_settings().words_per_page)
    except Exception as e:
        handler.handle_error(e, json_output)
        return

    if json_output:
        print(JsonFormatter().format(stats))
        return

    console.print("[bold cyan]Screenplay Statistics[/bold cyan]\n")
    console.print(f"  Words: {stats.word_count}")
    console.print(f"  Characters: {stats.character_count}")
    console.print(f"  Pages: {stats.page_count}")
    console.print(f"  Scenes: {stats.scene_count}")
    for kind, count in sorted(stats.element_counts.items()):
        console.print(f"  {ElementType(kind).display_name} elements: {count}")
