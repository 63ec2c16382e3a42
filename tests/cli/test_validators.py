"""Tests for CLI validators."""

import pytest

from fountainkit.cli.validators import ScriptFileValidator
from fountainkit.exceptions import ScriptFileNotFoundError, ValidationError


class TestScriptFileValidator:
    """Test screenplay path validation and reading."""

    def test_valid_file(self, tmp_path):
        """Test that an existing file resolves to its absolute path."""
        script = tmp_path / "pilot.fountain"
        script.write_text("INT. HOUSE - DAY\n")
        assert ScriptFileValidator().validate(str(script)) == script.resolve()

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises with a hint."""
        with pytest.raises(ScriptFileNotFoundError, match="not found") as exc_info:
            ScriptFileValidator().validate(tmp_path / "absent.fountain")
        assert "standard input" in exc_info.value.hint

    def test_directory_rejected(self, tmp_path):
        """Test that directories are not accepted."""
        with pytest.raises(ValidationError, match="not a file"):
            ScriptFileValidator().validate(tmp_path)

    def test_extension_filter(self, tmp_path):
        """Test that extensions are checked when configured."""
        script = tmp_path / "pilot.docx"
        script.write_text("text")
        validator = ScriptFileValidator(extensions=[".fountain", ".txt"])
        with pytest.raises(ValidationError, match="Invalid file extension"):
            validator.validate(script)
        assert ScriptFileValidator().validate(script) == script.resolve()

    def test_read_keeps_line_terminators(self, tmp_path):
        """Test that CRLF line endings survive reading."""
        script = tmp_path / "pilot.fountain"
        script.write_bytes(b"BOB\r\nHi.\r\n")
        assert ScriptFileValidator().read(script) == "BOB\r\nHi.\r\n"

    def test_read_rejects_binary(self, tmp_path):
        """Test that non UTF-8 content is a validation error."""
        script = tmp_path / "pilot.fountain"
        script.write_bytes(b"\xff\xfe\x00bad")
        with pytest.raises(ValidationError, match="not UTF-8"):
            ScriptFileValidator().read(script)
