"""FountainKit: a Fountain screenplay markup parser.

Turns screenplay text into an ordered stream of classified elements with
source ranges, plus the title page entries that precede the script.
"""

from .config import FountainKitSettings, get_logger, get_settings
from .parser import (
    ElementType,
    EmphasisType,
    FountainElement,
    FountainParser,
    ParseResult,
    TextRange,
    parse_fountain,
    strip_emphasis_markers,
)

__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    "ElementType",
    "EmphasisType",
    "FountainElement",
    "FountainKitSettings",
    "FountainParser",
    "ParseResult",
    "TextRange",
    "__version__",
    "get_logger",
    "get_settings",
    "parse_fountain",
    "strip_emphasis_markers",
]
