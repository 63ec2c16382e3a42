"""Print the scene outline of a Fountain screenplay."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from fountainkit.cli.formatters import JsonFormatter, OutputFormat, TableFormatter
from fountainkit.cli.utils.cli_handler import CLIHandler
from fountainkit.parser import build_outline, character_names, parse_fountain

console = Console()


def outline_command(
    source: Annotated[
        str,
        typer.Argument(help="Fountain file to outline, or '-' for standard input"),
    ],
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """List scene headings and the characters who speak."""
    handler = CLIHandler(console)

    try:
        result = parse_fountain(handler.read_script(source))
    except Exception as e:
        handler.handle_error(e, json_output)
        return

    scenes = [
        {
            "scene": scene.scene_number,
            "line": scene.line_number,
            "heading": scene.heading,
        }
        for scene in build_outline(result.elements)
    ]
    characters = character_names(result.elements)

    if json_output:
        print(JsonFormatter().format({"scenes": scenes, "characters": characters}))
        return

    if not scenes:
        console.print("[yellow]No scene headings found.[/yellow]")
    else:
        console.print(
            TableFormatter(console, title="Outline").format(scenes, OutputFormat.TABLE),
            markup=False,
        )
    if characters:
        console.print(f"[bold]Characters:[/bold] {', '.join(characters)}")
