"""Data models for Fountain screenplay parsing."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from uuid import UUID, uuid4


class ElementType(str, Enum):
    """Element kinds in a Fountain screenplay document."""

    TITLE_PAGE = "title_page"
    SCENE_HEADING = "scene_heading"
    FORCE_SCENE_HEADING = "force_scene_heading"
    ACTION = "action"
    FORCE_ACTION = "force_action"
    CHARACTER = "character"
    DIALOGUE = "dialogue"
    PARENTHETICAL = "parenthetical"
    TRANSITION = "transition"
    SECTION = "section"
    SYNOPSIS = "synopsis"
    NOTE = "note"
    CENTERED = "centered"
    PAGE_BREAK = "page_break"
    LYRICS = "lyrics"
    EMPHASIS = "emphasis"
    DUAL_DIALOGUE = "dual_dialogue"
    BONEYARD = "boneyard"  # commented-out /* */ content
    UNKNOWN = "unknown"

    @property
    def display_name(self) -> str:
        """Human readable name of the element kind."""
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    ElementType.TITLE_PAGE: "Title Page",
    ElementType.SCENE_HEADING: "Scene Heading",
    ElementType.FORCE_SCENE_HEADING: "Scene Heading",
    ElementType.ACTION: "Action",
    ElementType.FORCE_ACTION: "Action",
    ElementType.CHARACTER: "Character",
    ElementType.DIALOGUE: "Dialogue",
    ElementType.PARENTHETICAL: "Parenthetical",
    ElementType.TRANSITION: "Transition",
    ElementType.SECTION: "Section",
    ElementType.SYNOPSIS: "Synopsis",
    ElementType.NOTE: "Note",
    ElementType.CENTERED: "Centered",
    ElementType.PAGE_BREAK: "Page Break",
    ElementType.LYRICS: "Lyrics",
    ElementType.EMPHASIS: "Emphasis",
    ElementType.DUAL_DIALOGUE: "Dual Dialogue",
    ElementType.BONEYARD: "Boneyard",
    ElementType.UNKNOWN: "Unknown",
}


class EmphasisType(str, Enum):
    """Inline emphasis detected on a dialogue line."""

    BOLD = "bold"
    ITALIC = "italic"
    BOLD_ITALIC = "bold_italic"


@dataclass(frozen=True)
class TextRange:
    """Half-open offset interval into the parsed source text."""

    location: int
    length: int

    @property
    def end(self) -> int:
        """Offset one past the last character of the range."""
        return self.location + self.length

    def contains(self, position: int) -> bool:
        """Check whether a position falls in the range, end inclusive."""
        return self.location <= position <= self.end


@dataclass(frozen=True)
class FountainElement:
    """A single classified line of a Fountain screenplay."""

    type: ElementType
    text: str
    original_text: str
    line_number: int
    emphasis: EmphasisType | None = None
    is_dual_dialogue: bool = False
    range: TextRange | None = None
    id: UUID = field(default_factory=uuid4, compare=False)

    @property
    def position(self) -> int:
        """Start offset of the element in the document."""
        return self.range.location if self.range else 0

    @property
    def length(self) -> int:
        """Length of the element in characters."""
        return self.range.length if self.range else len(self.text)

    @property
    def text_range(self) -> TextRange:
        """Source range, falling back to a range over the element text."""
        return self.range or TextRange(0, len(self.text))

    @property
    def is_empty(self) -> bool:
        """Whether the element carries no visible text."""
        return not self.text.strip()

    def to_dict(self) -> dict[str, object]:
        """Serialize the element into plain JSON-compatible values."""
        return {
            "id": str(self.id),
            "type": self.type.value,
            "text": self.text,
            "original_text": self.original_text,
            "line_number": self.line_number,
            "emphasis": self.emphasis.value if self.emphasis else None,
            "is_dual_dialogue": self.is_dual_dialogue,
            "range": (
                {"location": self.range.location, "length": self.range.length}
                if self.range
                else None
            ),
        }


@dataclass(frozen=True)
class ParseResult:
    """Elements and title page produced by one parse of a document."""

    elements: tuple[FountainElement, ...] = ()
    title_page: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        # Readers share one instance, so both fields are read-only copies
        object.__setattr__(self, "elements", tuple(self.elements))
        object.__setattr__(
            self, "title_page", MappingProxyType(dict(self.title_page))
        )

    @classmethod
    def empty(cls) -> ParseResult:
        """Result of parsing an empty document."""
        return cls()

    def of_type(self, *types: ElementType) -> list[FountainElement]:
        """Return the elements whose kind is one of ``types``."""
        return [element for element in self.elements if element.type in types]

    def to_dict(self) -> dict[str, object]:
        """Serialize the result into plain JSON-compatible values."""
        return {
            "title_page": dict(self.title_page),
            "elements": [element.to_dict() for element in self.elements],
        }
