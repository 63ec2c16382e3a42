"""JSON output for parse results, outlines and statistics."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any


class JsonFormatter:
    """Render command results as indented JSON."""

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def _dump(self, data: Any) -> str:
        return json.dumps(data, default=str, indent=self.indent)

    def format(self, data: Any) -> str:
        """Format data as JSON.

        Models with ``to_dict`` are serialized through it. Read-only mappings
        such as a parse result's title page are copied into plain dicts, and
        bare scalars are wrapped as ``{"value": ...}``.

        Args:
            data: Model, mapping, sequence or scalar to format

        Returns:
            JSON string
        """
        if hasattr(data, "to_dict"):
            return self._dump(data.to_dict())
        if isinstance(data, Mapping):
            return self._dump(dict(data))
        if isinstance(data, list | tuple):
            return self._dump(list(data))
        return self._dump({"value": data})

    def format_error_response(self, error: str | Exception, code: int = 1) -> str:
        """Format an error response.

        Args:
            error: Error message or exception
            code: Exit code reported alongside the error

        Returns:
            JSON string
        """
        response: dict[str, Any] = {
            "success": False,
            "error": str(error),
            "code": code,
        }
        hint = getattr(error, "hint", None)
        if hint:
            response["hint"] = hint
        return self._dump(response)
