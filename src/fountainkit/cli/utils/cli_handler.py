"""Unified CLI handler for standardized error handling and output."""

from __future__ import annotations

import sys

import typer
from rich.console import Console

from fountainkit.cli.formatters.json_formatter import JsonFormatter
from fountainkit.cli.validators import FOUNTAIN_EXTENSIONS, ScriptFileValidator
from fountainkit.config import get_logger
from fountainkit.exceptions import FountainKitError, ValidationError

logger = get_logger(__name__)


class CLIHandler:
    """Unified handler for CLI commands."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize CLI handler.

        Args:
            console: Rich console for output
        """
        self.console = console or Console()
        self.json_formatter = JsonFormatter()
        self.file_validator = ScriptFileValidator(FOUNTAIN_EXTENSIONS)

    def read_script(self, source: str) -> str:
        """Read screenplay text from a path, or from stdin when ``source`` is '-'."""
        if source == "-":
            return sys.stdin.read()
        return self.file_validator.read(source)

    def handle_error(
        self, error: Exception, json_output: bool = False, exit_code: int = 1
    ) -> None:
        """Handle and display errors consistently.

        Args:
            error: Exception to handle
            json_output: Whether to output JSON
            exit_code: Exit code to use
        """
        error_msg = error.message if isinstance(error, FountainKitError) else str(error)
        logger.error(f"Command failed: {error_msg}", exc_info=error)

        if json_output:
            print(self.json_formatter.format_error_response(error, exit_code))
        elif isinstance(error, ValidationError):
            self.console.print(f"[red]Validation Error: {error_msg}[/red]")
        else:
            self.console.print(f"[red]Error: {error_msg}[/red]")
            hint = getattr(error, "hint", None)
            if hint:
                self.console.print(f"[yellow]Hint: {hint}[/yellow]")

        raise typer.Exit(exit_code)
