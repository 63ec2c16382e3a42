"""Document statistics derived from text and its parsed elements."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from fountainkit.parser.fountain_models import ElementType, ParseResult
from fountainkit.parser.fountain_parser import parse_fountain
from fountainkit.parser.outline import character_names

DEFAULT_WORDS_PER_PAGE = 250


@dataclass(frozen=True)
class ScriptStatistics:
    """Counts describing a screenplay document."""

    word_count: int
    character_count: int
    page_count: int
    scene_count: int
    element_counts: dict[str, int] = field(default_factory=dict)
    characters: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        """Serialize the statistics into plain JSON-compatible values."""
        return {
            "word_count": self.word_count,
            "character_count": self.character_count,
            "page_count": self.page_count,
            "scene_count": self.scene_count,
            "element_counts": dict(self.element_counts),
            "characters": list(self.characters),
        }


def compute_statistics(
    text: str,
    result: ParseResult | None = None,
    words_per_page: int = DEFAULT_WORDS_PER_PAGE,
) -> ScriptStatistics:
    """Compute word, page and element statistics for a document.

    Args:
        text: Full document text
        result: Parse result for ``text``; parsed on demand when omitted
        words_per_page: Words assumed per printed page

    Returns:
        Statistics for the document

    Raises:
        ValueError: If ``words_per_page`` is not positive
    """
    if words_per_page < 1:
        raise ValueError(f"words_per_page must be positive, got {words_per_page}")
    if result is None:
        result = parse_fountain(text)

    word_count = len(text.split())
    counts = Counter(element.type.value for element in result.elements)

    return ScriptStatistics(
        word_count=word_count,
        character_count=len(text),
        page_count=max(1, word_count // words_per_page),
        scene_count=counts.get(ElementType.SCENE_HEADING.value, 0),
        element_counts=dict(counts),
        characters=character_names(result.elements),
    )
