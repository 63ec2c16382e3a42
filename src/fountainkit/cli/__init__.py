"""FountainKit command line interface."""

from fountainkit.cli.main import app, main

__all__ = ["app", "main"]
