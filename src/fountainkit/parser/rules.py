"""Ordered line classification rules for the Fountain parser.

Each rule pairs a pattern with the element kind it produces and a function
that extracts the element text from the stripped source line. Rules are
evaluated top to bottom and the first match wins. The patterns overlap (a
transition such as ``CUT TO`` is also an all-caps character cue), so the
order of ``LINE_RULES`` is part of the format's behavior.

Dialogue and action are not listed: they are the fallbacks applied by the
parser when no rule matches, depending on whether a character cue has been
seen.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from fountainkit.parser.fountain_models import ElementType

SCENE_PREFIX = r"(?:INT\.?/EXT|INT/EXT|I/E|INT|EXT)"

TRANSITIONS = (
    "FADE OUT",
    "FADE TO BLACK",
    "CUT TO",
    "DISSOLVE TO",
    "SMASH CUT TO",
    "JUMP CUT TO",
    "MATCH CUT TO",
    "FADE IN",
    "CUT TO BLACK",
    "END",
    "THE END",
    "IRIS IN",
    "IRIS OUT",
    "WIPE TO",
    "DISSOLVE",
    "FADE",
    "CUT",
    "SMASH CUT",
    "JUMP CUT",
    "MATCH CUT",
    "IRIS",
    "WIPE",
)


def _strip(*patterns: str) -> Callable[[str], str]:
    """Build an extractor that deletes each pattern from the line in turn."""
    compiled = [re.compile(pattern) for pattern in patterns]

    def extract(line: str) -> str:
        for pattern in compiled:
            line = pattern.sub("", line)
        return line

    return extract


def _whole(line: str) -> str:
    return line


def _empty(_line: str) -> str:
    return ""


@dataclass(frozen=True)
class LineRule:
    """A single classification rule."""

    name: str
    element_type: ElementType
    pattern: re.Pattern[str]
    extract: Callable[[str], str] = _whole
    sets_character: bool = False
    is_dual_dialogue: bool = False

    def matches(self, line: str) -> bool:
        """Check whether the stripped line satisfies this rule."""
        return self.pattern.match(line) is not None


LINE_RULES: tuple[LineRule, ...] = (
    LineRule(
        "page_break",
        ElementType.PAGE_BREAK,
        re.compile(r"^={3,}$"),
        _empty,
    ),
    LineRule(
        "force_scene_heading",
        ElementType.FORCE_SCENE_HEADING,
        re.compile(rf"^!{SCENE_PREFIX}\.?\s+.*$"),
        _strip(r"^!\s*"),
    ),
    LineRule(
        "force_action",
        ElementType.FORCE_ACTION,
        re.compile(r"^@.*$"),
        _strip(r"^@\s*"),
    ),
    LineRule(
        "lyrics",
        ElementType.LYRICS,
        re.compile(r"^~.*~$"),
        _strip(r"^~", r"~$"),
    ),
    LineRule(
        "centered",
        ElementType.CENTERED,
        re.compile(r"^>\s.*\s<$"),
        _strip(r"^>\s+", r"\s+<$"),
    ),
    LineRule(
        "note",
        ElementType.NOTE,
        re.compile(r"^\[\[.*\]\]$"),
        _strip(r"^\[\[", r"\]\]$"),
    ),
    LineRule(
        "synopsis",
        ElementType.SYNOPSIS,
        re.compile(r"^=\s+.*$"),
        _strip(r"^=\s+"),
    ),
    LineRule(
        "section",
        ElementType.SECTION,
        re.compile(r"^#+\s+.*$"),
        _strip(r"^#+\s+"),
    ),
    LineRule(
        "transition",
        ElementType.TRANSITION,
        re.compile(r"^(?:" + "|".join(map(re.escape, TRANSITIONS)) + r").*$"),
    ),
    LineRule(
        "scene_heading",
        ElementType.SCENE_HEADING,
        re.compile(rf"^{SCENE_PREFIX}\.?\s+.*$"),
    ),
    LineRule(
        "dual_dialogue_character",
        ElementType.CHARACTER,
        re.compile(r"^[A-Z][A-Z\s]*\^$"),
        _strip(r"\^$"),
        sets_character=True,
        is_dual_dialogue=True,
    ),
    LineRule(
        "parenthetical",
        ElementType.PARENTHETICAL,
        re.compile(r"^\(.*\)$"),
        _strip(r"^\(", r"\)$"),
    ),
    LineRule(
        "character",
        ElementType.CHARACTER,
        re.compile(r"^[A-Z][A-Z\s]*$"),
        sets_character=True,
    ),
)


def match_rule(line: str) -> LineRule | None:
    """Return the first rule matching the stripped line, if any."""
    for rule in LINE_RULES:
        if rule.matches(line):
            return rule
    return None
