"""Screenplay file validation for CLI input."""

from __future__ import annotations

from pathlib import Path

from fountainkit.exceptions import ScriptFileNotFoundError, ValidationError

# Suffixes the CLI accepts for screenplay files
FOUNTAIN_EXTENSIONS = [".fountain", ".spmd", ".txt"]


class ScriptFileValidator:
    """Validate and read screenplay files named on the command line."""

    def __init__(self, extensions: list[str] | None = None) -> None:
        """Initialize file validator.

        Args:
            extensions: Allowed file extensions, or None to accept any
        """
        self.extensions = extensions

    def validate(self, value: str | Path) -> Path:
        """Validate a screenplay path.

        Args:
            value: File path to validate

        Returns:
            Resolved path

        Raises:
            ScriptFileNotFoundError: If the file does not exist
            ValidationError: If the path is a directory or has a bad extension
        """
        path = Path(value).expanduser().resolve()

        if not path.exists():
            raise ScriptFileNotFoundError(
                message=f"Screenplay file not found: {path}",
                hint="Check the path or pass '-' to read from standard input",
                details={"path": str(path), "current_dir": str(Path.cwd())},
            )

        if not path.is_file():
            raise ValidationError(message=f"Path is not a file: {path}")

        if self.extensions and path.suffix.lower() not in self.extensions:
            raise ValidationError(
                message=f"Invalid file extension: {path.suffix}",
                hint=f"Expected one of: {', '.join(self.extensions)}",
            )

        return path

    def read(self, value: str | Path) -> str:
        """Validate a screenplay path and return its text.

        Raises:
            ValidationError: If the file is not valid UTF-8 text
        """
        path = self.validate(value)
        try:
            # Line terminators are kept as written so ranges match the file
            with path.open(encoding="utf-8", newline="") as f:
                return f.read()
        except UnicodeDecodeError as e:
            raise ValidationError(
                message=f"Screenplay file is not UTF-8 text: {path}",
                details={"path": str(path), "reason": str(e)},
            ) from e
