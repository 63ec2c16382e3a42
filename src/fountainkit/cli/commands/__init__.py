"""CLI commands for FountainKit."""

from fountainkit.cli.commands.outline import outline_command
from fountainkit.cli.commands.parse import parse_command
from fountainkit.cli.commands.stats import stats_command

__all__ = ["outline_command", "parse_command", "stats_command"]
