"""Custom exception hierarchy for FountainKit with helpful error messages.

The parser itself never raises: any text is a valid screenplay. These errors
belong to the configuration and command line surfaces around it.
"""

from __future__ import annotations

from typing import Any


class FountainKitError(Exception):
    """Base exception with helpful formatting for all FountainKit errors.

    Provides structured error messages with hints and details to help users
    understand and fix problems.
    """

    def __init__(
        self,
        message: str,
        hint: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize exception with structured error information.

        Args:
            message: Primary error message describing what went wrong
            hint: Optional hint suggesting how to fix the problem
            details: Optional dictionary with additional debugging information
        """
        self.message = message
        self.hint = hint
        self.details = details
        super().__init__(self.format_error())

    def format_error(self) -> str:
        """Format the error message with hint and details.

        Returns:
            Formatted error string with all available information
        """
        output = f"Error: {self.message}"
        if self.hint:
            output += f"\nHint: {self.hint}"
        if self.details:
            details_str = "\n".join(
                f"  {key}: {value}" for key, value in self.details.items()
            )
            output += f"\nDetails:\n{details_str}"
        return output


class ConfigurationError(FountainKitError):
    """Configuration errors including invalid settings and missing config files."""

    pass


class ValidationError(FountainKitError):
    """Input validation errors with details about what was expected."""

    pass


class ScriptFileNotFoundError(FountainKitError):
    """Screenplay file not found, with helpful path information."""

    pass


def check_config_keys(config: dict[str, Any]) -> None:
    """Check for common configuration mistakes.

    Args:
        config: Configuration dictionary to validate

    Raises:
        ConfigurationError: With hints about correct configuration keys
    """
    wrong_keys = {
        "level": "log_level",
        "format": "log_format",
        "page_words": "words_per_page",
        "async_chars": "async_threshold",
    }

    for wrong, correct in wrong_keys.items():
        if wrong in config:
            raise ConfigurationError(
                message=f"Invalid configuration key '{wrong}'",
                hint=f"Use '{correct}' instead of '{wrong}'",
                details={
                    "found_keys": list(config.keys()),
                    "invalid_key": wrong,
                    "correct_key": correct,
                },
            )
