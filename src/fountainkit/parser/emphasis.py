"""Inline emphasis detection and marker stripping for Fountain text."""

from __future__ import annotations

import re

from fountainkit.parser.fountain_models import EmphasisType

# Checked in order; a ``**text**`` span satisfies the first pattern.
EMPHASIS_PATTERNS: tuple[tuple[EmphasisType, re.Pattern[str]], ...] = (
    (EmphasisType.BOLD_ITALIC, re.compile(r"\*\*[^*]+\*\*|__[^_]+__")),
    (EmphasisType.BOLD, re.compile(r"\*[^*]+\*")),
    (EmphasisType.ITALIC, re.compile(r"_[^_]+_")),
)

# Most specific first so ``**x**`` is not half-consumed by the single star rule.
_MARKER_PATTERNS = (
    re.compile(r"\*\*([^*]+)\*\*"),
    re.compile(r"__([^_]+)__"),
    re.compile(r"\*([^*]+)\*"),
    re.compile(r"_([^_]+)_"),
)


def detect_emphasis(text: str) -> EmphasisType | None:
    """Return the first emphasis category found in ``text``.

    Args:
        text: Dialogue line to scan

    Returns:
        Emphasis category of the first matching pattern, or None
    """
    for emphasis, pattern in EMPHASIS_PATTERNS:
        if pattern.search(text):
            return emphasis
    return None


def strip_emphasis_markers(text: str) -> str:
    """Remove emphasis markers from ``text``, keeping the inner content."""
    for pattern in _MARKER_PATTERNS:
        text = pattern.sub(r"\1", text)
    return text
