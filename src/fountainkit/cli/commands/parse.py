"""Parse a Fountain screenplay and print its elements."""

from __future__ import annotations

import asyncio
from typing import Annotated

import typer
from rich.console import Console

from fountainkit.cli.formatters import JsonFormatter, OutputFormat, TableFormatter
from fountainkit.cli.utils.cli_handler import CLIHandler
from fountainkit.config import get_logger
from fountainkit.parser import FountainParser, strip_emphasis_markers

logger = get_logger(__name__)
console = Console()


def parse_command(
    source: Annotated[
        str,
        typer.Argument(help="Fountain file to parse, or '-' for standard input"),
    ],
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
    background: Annotated[
        bool,
        typer.Option("--async", help="Parse on a background worker thread"),
    ] = False,
    plain: Annotated[
        bool,
        typer.Option("--plain", help="Strip emphasis markers from element text"),
    ] = False,
) -> None:
    """Classify every line of a screenplay into Fountain elements."""
    handler = CLIHandler(console)

    try:
        text = handler.read_script(source)
        parser = FountainParser()
        if background:
            asyncio.run(parser.parse_async(text))
        else:
            parser.parse(text)
        result = parser.result
        logger.info("Parsed screenplay", source=source, elements=len(result.elements))
    except Exception as e:
        handler.handle_error(e, json_output)
        return

    if json_output:
        print(JsonFormatter().format(result))
        return

    if result.title_page:
        console.print("[bold cyan]Title Page[/bold cyan]")
        for key, value in result.title_page.items():
            console.print(f"  {key}: {value}", markup=False)
        console.print()

    rows = [
        {
            "line": element.line_number,
            "type": element.type.display_name,
            "text": strip_emphasis_markers(element.text) if plain else element.text,
            "flags": ", ".join(
                flag
                for flag in (
                    "dual" if element.is_dual_dialogue else "",
                    element.emphasis.value if element.emphasis else "",
                )
                if flag
            ),
        }
        for element in result.elements
    ]
    table = TableFormatter(console, title="Elements")
    console.print(table.format(rows, OutputFormat.TABLE), markup=False)
