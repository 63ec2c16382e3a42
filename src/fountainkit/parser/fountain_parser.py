"""Fountain screenplay format parser."""

from __future__ import annotations

import asyncio
import re
from collections.abc import Callable, Iterator, Mapping

from fountainkit.config import get_logger, get_settings
from fountainkit.parser.emphasis import detect_emphasis
from fountainkit.parser.fountain_models import (
    ElementType,
    FountainElement,
    ParseResult,
    TextRange,
)
from fountainkit.parser.rules import match_rule

logger = get_logger(__name__)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")

ParseCallback = Callable[[ParseResult], None]


def _iter_lines(text: str) -> Iterator[tuple[str, int]]:
    """Yield each source line with the length of the terminator that ends it."""
    start = 0
    for match in _LINE_BREAK.finditer(text):
        yield text[start : match.start()], match.end() - match.start()
        start = match.end()
    yield text[start:], 0


def _parse_title_line(line: str) -> tuple[str, str] | None:
    """Split a ``key: value`` title page line on its first colon."""
    if ":" not in line:
        return None
    key, _, value = line.partition(":")
    return key.strip(), value.strip()


def _classify(
    line: str,
    raw_line: str,
    line_number: int,
    position: int,
    active_character: str | None,
) -> tuple[FountainElement, str | None]:
    """Classify one stripped line into a screenplay element.

    Args:
        line: Source line with surrounding whitespace removed
        raw_line: Untouched source line
        line_number: 1-based source line number
        position: Offset of the raw line in the document
        active_character: Most recent character cue seen so far

    Returns:
        Tuple of (element, active character after this line)
    """
    text_range = TextRange(position, len(raw_line))
    rule = match_rule(line)

    if rule is not None:
        text = rule.extract(line)
        if rule.sets_character:
            active_character = text
        element = FountainElement(
            type=rule.element_type,
            text=text,
            original_text=raw_line,
            line_number=line_number,
            is_dual_dialogue=rule.is_dual_dialogue,
            range=text_range,
        )
    elif active_character is not None:
        element = FountainElement(
            type=ElementType.DIALOGUE,
            text=line,
            original_text=raw_line,
            line_number=line_number,
            emphasis=detect_emphasis(line),
            range=text_range,
        )
    else:
        element = FountainElement(
            type=ElementType.ACTION,
            text=line,
            original_text=raw_line,
            line_number=line_number,
            range=text_range,
        )

    return element, active_character


def parse_fountain(text: str) -> ParseResult:
    """Parse Fountain text into elements and a title page.

    Parsing is total: unrecognised lines become action, and no input raises.

    Args:
        text: Full document text

    Returns:
        Parsed elements in source order together with the title page entries
    """
    elements: list[FountainElement] = []
    title_page: dict[str, str] = {}

    in_title_page = True
    active_character: str | None = None
    position = 0

    for line_number, (raw_line, terminator) in enumerate(_iter_lines(text), start=1):
        line_start = position
        position += len(raw_line) + terminator
        line = raw_line.strip()

        if not line:
            # A blank line closes a title page that has started
            if title_page:
                in_title_page = False
            continue

        if in_title_page:
            if line == ":":
                in_title_page = False
                continue
            entry = _parse_title_line(line)
            if entry is not None:
                key, value = entry
                title_page[key] = value
                continue
            in_title_page = False

        element, active_character = _classify(
            line, raw_line, line_number, line_start, active_character
        )
        elements.append(element)

    return ParseResult(elements=tuple(elements), title_page=title_page)


class FountainParser:
    """Parse Fountain documents and publish the latest result.

    The published result is an immutable ``ParseResult`` replaced as a whole,
    so readers see either the previous parse or the new one, never a mix.
    """

    def __init__(self) -> None:
        """Initialize the parser with an empty result."""
        self._result = ParseResult.empty()
        self._subscribers: list[ParseCallback] = []

    @property
    def result(self) -> ParseResult:
        """Most recently published parse result."""
        return self._result

    @property
    def elements(self) -> tuple[FountainElement, ...]:
        """Elements of the most recently published parse."""
        return self._result.elements

    @property
    def title_page(self) -> Mapping[str, str]:
        """Title page entries of the most recently published parse."""
        return self._result.title_page

    def subscribe(self, callback: ParseCallback) -> Callable[[], None]:
        """Register a callback invoked with every published result.

        Args:
            callback: Called with the new ``ParseResult`` after each publish

        Returns:
            Function that removes the callback again
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _publish(self, result: ParseResult) -> None:
        self._result = result
        for callback in list(self._subscribers):
            try:
                callback(result)
            except Exception as e:
                logger.error(
                    "Parse subscriber failed",
                    callback=getattr(callback, "__name__", repr(callback)),
                    error=str(e),
                )

    def parse(self, text: str) -> None:
        """Parse ``text`` on the calling thread and publish the result."""
        result = parse_fountain(text)
        logger.debug(
            "Parsed fountain document",
            elements=len(result.elements),
            title_entries=len(result.title_page),
            characters=len(text),
        )
        self._publish(result)

    async def parse_async(self, text: str) -> None:
        """Parse ``text`` on a worker thread and publish when done.

        The result equals what ``parse`` produces for the same text. Calls
        that overlap are not cancelled; whichever finishes last is published.
        """
        result = await asyncio.to_thread(parse_fountain, text)
        logger.debug(
            "Parsed fountain document in background",
            elements=len(result.elements),
            title_entries=len(result.title_page),
            characters=len(text),
        )
        self._publish(result)

    async def update(self, text: str) -> None:
        """Re-parse after a text change, in the background for large documents.

        Args:
            text: Full current document text
        """
        if len(text) >= get_settings().async_threshold:
            await self.parse_async(text)
        else:
            self.parse(text)

    def clear(self) -> None:
        """Drop all elements and title page entries."""
        self._publish(ParseResult.empty())
