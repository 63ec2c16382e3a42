"""Main CLI entry point."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from fountainkit import __version__
from fountainkit.cli.commands import outline_command, parse_command, stats_command
from fountainkit.cli.formatters.json_formatter import JsonFormatter
from fountainkit.cli.utils.cli_handler import CLIHandler
from fountainkit.config import FountainKitSettings, apply_settings, get_logger

logger = get_logger(__name__)
console = Console()

app = typer.Typer(
    name="fountainkit",
    help="Parse Fountain screenplays into classified elements",
    pretty_exceptions_enable=False,
    add_completion=False,
    rich_markup_mode="rich",
)

app.command(name="parse")(parse_command)
app.command(name="outline")(outline_command)
app.command(name="stats")(stats_command)


@app.command()
def version(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show FountainKit version."""
    version_info = {
        "name": "FountainKit",
        "version": __version__,
        "description": "Parse Fountain screenplays into classified elements",
    }

    if json_output:
        print(JsonFormatter().format(version_info))
    else:
        console.print(f"FountainKit v{version_info['version']}")


@app.callback()
def main_callback(
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file (YAML, TOML, or JSON)",
            envvar="FOUNTAINKIT_CONFIG",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging (INFO level)"),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug", help="Enable debug logging", envvar="FOUNTAINKIT_DEBUG"
        ),
    ] = False,
) -> None:
    """Configure global options."""
    if debug:
        os.environ["FOUNTAINKIT_LOG_LEVEL"] = "DEBUG"
        os.environ["FOUNTAINKIT_DEBUG"] = "true"
    elif verbose:
        os.environ["FOUNTAINKIT_LOG_LEVEL"] = "INFO"

    if config:
        try:
            settings = FountainKitSettings.from_multiple_sources(
                config_files=[config]
            )
        except Exception as e:
            CLIHandler(console).handle_error(e)
            return
        apply_settings(settings)
        logger.debug("Loaded configuration", config_file=str(config))
    elif debug or verbose:
        apply_settings()
        logger.debug("Debug mode enabled")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
