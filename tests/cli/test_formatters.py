"""Tests for CLI formatters."""

import json

from rich.console import Console

from fountainkit.cli.formatters import JsonFormatter, OutputFormat, TableFormatter
from fountainkit.exceptions import ScriptFileNotFoundError
from fountainkit.parser import parse_fountain


class TestJsonFormatter:
    """Test JSON output formatting."""

    def test_objects_with_to_dict(self):
        """Test that parse results serialize through to_dict."""
        data = json.loads(JsonFormatter().format(parse_fountain("BOB\nHi.")))
        assert [element["type"] for element in data["elements"]] == [
            "character",
            "dialogue",
        ]

    def test_collections_and_scalars(self):
        """Test plain containers and wrapped scalar values."""
        formatter = JsonFormatter()
        assert json.loads(formatter.format({"a": 1})) == {"a": 1}
        assert json.loads(formatter.format([1, 2])) == [1, 2]
        assert json.loads(formatter.format(3)) == {"value": 3}

    def test_read_only_title_page(self):
        """Test that a parse result's title page serializes as an object."""
        title_page = parse_fountain("Title: X\nAuthor: Y").title_page
        assert json.loads(JsonFormatter().format(title_page)) == {
            "Title": "X",
            "Author": "Y",
        }

    def test_error_response(self):
        """Test that error responses carry the hint when present."""
        error = ScriptFileNotFoundError("missing", hint="Check the path")
        data = json.loads(JsonFormatter().format_error_response(error, 2))
        assert data["success"] is False
        assert data["code"] == 2
        assert data["hint"] == "Check the path"
        assert "hint" not in json.loads(
            JsonFormatter().format_error_response("plain failure")
        )


class TestTableFormatter:
    """Test tabular output formatting."""

    def test_table_output(self):
        """Test that rows render with title and headers."""
        formatter = TableFormatter(Console(width=100), title="Elements")
        output = formatter.format(
            [{"line": 1, "type": "Character", "text": "BOB"}], OutputFormat.TABLE
        )
        assert "Elements" in output
        assert "Character" in output
        assert "BOB" in output

    def test_brackets_are_not_markup(self):
        """Test that note text in brackets is shown literally."""
        formatter = TableFormatter(Console(width=100))
        output = formatter.format([{"text": "[[bold]] [red]x[/red]"}])
        assert "[[bold]] [red]x[/red]" in output

    def test_text_output(self):
        """Test tab separated plain text."""
        output = TableFormatter().format(
            [{"line": 1, "text": "BOB"}, {"line": 2, "text": "Hi."}],
            OutputFormat.TEXT,
        )
        assert output == "1\tBOB\n2\tHi."

    def test_empty_rows(self):
        """Test the placeholder for empty data."""
        assert TableFormatter().format([]) == "No data to display"
