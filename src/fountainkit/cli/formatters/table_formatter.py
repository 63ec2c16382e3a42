"""Table output for element listings and outlines."""

from __future__ import annotations

import io
from enum import Enum
from typing import Any

from rich.console import Console
from rich.table import Table
from rich.text import Text


class OutputFormat(str, Enum):
    """Layouts a table can be rendered in."""

    TEXT = "text"
    TABLE = "table"


class TableFormatter:
    """Render rows of screenplay data as a Rich table or plain text."""

    def __init__(self, console: Console | None = None, title: str | None = None):
        """Initialize formatter.

        Args:
            console: Console whose width the table is fitted to
            title: Optional table title
        """
        self.console = console or Console()
        self.title = title

    def format(
        self, data: list[dict[str, Any]], format_type: OutputFormat = OutputFormat.TABLE
    ) -> str:
        """Format rows as a Rich table, or tab separated text.

        Cell values are wrapped in ``Text`` so that screenplay notes such as
        ``[[check this]]`` are never read as console markup.

        Args:
            data: Rows sharing the keys of the first row
            format_type: Output layout

        Returns:
            Formatted string
        """
        if not data:
            return "No data to display"

        columns = list(data[0].keys())
        if format_type == OutputFormat.TEXT:
            return "\n".join(
                "\t".join(str(row.get(col, "")) for col in columns) for row in data
            )

        table = Table(title=self.title, show_header=True, header_style="bold magenta")
        for col in columns:
            table.add_column(col.replace("_", " ").title())
        for row in data:
            table.add_row(*[Text(str(row.get(col, ""))) for col in columns])

        string_io = io.StringIO()
        Console(file=string_io, width=self.console.width).print(table)
        return string_io.getvalue()
