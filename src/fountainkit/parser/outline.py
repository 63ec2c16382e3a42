"""Queries over a parsed element stream: outline, lookups and suggestions."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from fountainkit.parser.fountain_models import ElementType, FountainElement

SCENE_HEADING_PREFIXES = ("INT.", "EXT.", "INT./EXT.", "I/E.")


@dataclass(frozen=True)
class OutlineScene:
    """A scene entry in the document outline."""

    scene_number: int
    heading: str
    position: int
    length: int
    line_number: int


def build_outline(elements: Iterable[FountainElement]) -> list[OutlineScene]:
    """Build the scene outline from scene heading elements.

    Args:
        elements: Parsed elements in document order

    Returns:
        Scenes numbered from 1 in document order
    """
    scenes: list[OutlineScene] = []
    for element in elements:
        if element.type != ElementType.SCENE_HEADING:
            continue
        scenes.append(
            OutlineScene(
                scene_number=len(scenes) + 1,
                heading=element.text,
                position=element.position,
                length=element.length,
                line_number=element.line_number,
            )
        )
    return scenes


def scene_at(scenes: Sequence[OutlineScene], position: int) -> OutlineScene | None:
    """Return the last scene starting at or before ``position``."""
    current = None
    for scene in scenes:
        if scene.position <= position:
            current = scene
    return current


def element_at(
    elements: Iterable[FountainElement], position: int
) -> FountainElement | None:
    """Return the first element whose source range contains ``position``."""
    for element in elements:
        if element.range is not None and element.range.contains(position):
            return element
    return None


def character_names(elements: Iterable[FountainElement]) -> list[str]:
    """Collect unique character names in order of first appearance.

    Names are upper-cased so cues typed with stray lowercase still merge.
    """
    seen: dict[str, None] = {}
    for element in elements:
        if element.type == ElementType.CHARACTER:
            seen.setdefault(element.text.strip().upper(), None)
    return list(seen)


def section_depth(element: FountainElement) -> int:
    """Count the leading ``#`` markers of a section element."""
    stripped = element.original_text.lstrip()
    return len(stripped) - len(stripped.lstrip("#"))
