"""Tests for emphasis detection and marker stripping."""

import pytest

from fountainkit.parser import EmphasisType, detect_emphasis, strip_emphasis_markers


class TestStripEmphasisMarkers:
    """Marker removal keeps the emphasised words."""

    def test_removes_every_marker_kind(self):
        """All four marker styles are removed."""
        text = "**bold** and *b* and _i_ and __bi__"
        assert strip_emphasis_markers(text) == "bold and b and i and bi"

    def test_double_star_is_not_half_consumed(self):
        """Double stars are stripped whole before single stars."""
        assert strip_emphasis_markers("**loud**") == "loud"

    def test_text_without_markers_is_unchanged(self):
        """Plain text passes through."""
        assert strip_emphasis_markers("No markers here.") == "No markers here."

    def test_unbalanced_markers_are_kept(self):
        """A lone marker has no span to strip."""
        assert strip_emphasis_markers("5 * 3 = 15") == "5 * 3 = 15"


class TestDetectEmphasis:
    """Emphasis category precedence."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("**x**", EmphasisType.BOLD_ITALIC),
            ("__x__", EmphasisType.BOLD_ITALIC),
            ("*x*", EmphasisType.BOLD),
            ("_x_", EmphasisType.ITALIC),
            ("_x_ then **y**", EmphasisType.BOLD_ITALIC),
            ("_x_ then *y*", EmphasisType.BOLD),
            ("nothing", None),
            ("", None),
        ],
    )
    def test_precedence(self, text, expected):
        """Bold-italic beats bold, which beats italic."""
        assert detect_emphasis(text) == expected
