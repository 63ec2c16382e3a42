"""Output formatters for the FountainKit CLI."""

from fountainkit.cli.formatters.json_formatter import JsonFormatter
from fountainkit.cli.formatters.table_formatter import OutputFormat, TableFormatter

__all__ = ["JsonFormatter", "OutputFormat", "TableFormatter"]
