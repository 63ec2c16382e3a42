"""Fountain screenplay format parser for FountainKit."""

from __future__ import annotations

from .emphasis import detect_emphasis, strip_emphasis_markers
from .fountain_models import (
    ElementType,
    EmphasisType,
    FountainElement,
    ParseResult,
    TextRange,
)
from .fountain_parser import FountainParser, parse_fountain
from .outline import (
    OutlineScene,
    build_outline,
    character_names,
    element_at,
    scene_at,
    section_depth,
)
from .statistics import ScriptStatistics, compute_statistics

__all__ = [
    "ElementType",
    "EmphasisType",
    "FountainElement",
    "FountainParser",
    "OutlineScene",
    "ParseResult",
    "ScriptStatistics",
    "TextRange",
    "build_outline",
    "character_names",
    "compute_statistics",
    "detect_emphasis",
    "element_at",
    "parse_fountain",
    "scene_at",
    "section_depth",
    "strip_emphasis_markers",
]
