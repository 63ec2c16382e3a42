"""Tests for the settings configuration module."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml
from pydantic import ValidationError

from fountainkit.config.settings import (
    FountainKitSettings,
    clear_settings_cache,
    get_settings,
    set_settings,
)
from fountainkit.exceptions import ConfigurationError


class TestFountainKitSettings:
    """Test field defaults and validation."""

    def test_default_values(self):
        """Test default settings values."""
        settings = FountainKitSettings()
        assert settings.app_name == "fountainkit"
        assert settings.debug is False
        assert settings.log_level == "WARNING"
        assert settings.log_format == "console"
        assert settings.log_file is None
        assert settings.async_threshold == 50_000
        assert settings.words_per_page == 250

    def test_environment_variable_override(self, monkeypatch):
        """Test environment variables with the FOUNTAINKIT_ prefix."""
        monkeypatch.setenv("FOUNTAINKIT_LOG_LEVEL", "debug")
        monkeypatch.setenv("FOUNTAINKIT_WORDS_PER_PAGE", "300")
        settings = FountainKitSettings.from_env()
        assert settings.log_level == "DEBUG"
        assert settings.words_per_page == 300

    def test_log_format_is_case_insensitive(self):
        """Test that log format is normalized to lowercase."""
        assert FountainKitSettings(log_format="JSON").log_format == "json"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"log_level": "verbose"},
            {"log_format": "xml"},
            {"words_per_page": 0},
            {"async_threshold": -1},
        ],
    )
    def test_invalid_values_rejected(self, overrides):
        """Test that out-of-range and unknown values fail validation."""
        with pytest.raises(ValidationError):
            FountainKitSettings(**overrides)

    def test_log_file_path_is_expanded(self, tmp_path, monkeypatch):
        """Test that environment variables in log paths are expanded."""
        monkeypatch.setenv("LOG_ROOT", str(tmp_path))
        settings = FountainKitSettings(log_file="$LOG_ROOT/fountainkit.log")
        assert settings.log_file == (tmp_path / "fountainkit.log").resolve()


class TestFromFile:
    """Test loading settings from configuration files."""

    def test_yaml(self, tmp_path):
        """Test loading a YAML configuration file."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump({"log_level": "info", "debug": True}))
        settings = FountainKitSettings.from_file(config_file)
        assert settings.log_level == "INFO"
        assert settings.debug is True

    def test_empty_yaml(self, tmp_path):
        """Test that an empty YAML file yields defaults."""
        config_file = tmp_path / "config.yml"
        config_file.write_text("")
        assert FountainKitSettings.from_file(config_file).words_per_page == 250

    def test_toml(self, tmp_path):
        """Test loading a TOML configuration file."""
        config_file = tmp_path / "config.toml"
        config_file.write_text('words_per_page = 300\nlog_format = "json"\n')
        settings = FountainKitSettings.from_file(config_file)
        assert settings.words_per_page == 300
        assert settings.log_format == "json"

    def test_json(self, tmp_path):
        """Test loading a JSON configuration file."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"async_threshold": 10}))
        assert FountainKitSettings.from_file(config_file).async_threshold == 10

    def test_unsupported_format(self, tmp_path):
        """Test that unknown suffixes raise a configuration error."""
        config_file = tmp_path / "config.ini"
        config_file.write_text("[fountainkit]\n")
        with pytest.raises(ConfigurationError) as exc_info:
            FountainKitSettings.from_file(config_file)
        assert exc_info.value.details["detected_format"] == ".ini"

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            FountainKitSettings.from_file(tmp_path / "absent.yaml")

    def test_common_key_mistake(self, tmp_path):
        """Test that a misspelled key is reported with the correct name."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump({"level": "DEBUG"}))
        with pytest.raises(ConfigurationError) as exc_info:
            FountainKitSettings.from_file(config_file)
        assert exc_info.value.hint == "Use 'log_level' instead of 'level'"


class TestFromMultipleSources:
    """Test merging settings from several sources."""

    def test_later_files_override_earlier(self, tmp_path):
        """Test file precedence."""
        first = tmp_path / "first.yaml"
        first.write_text(yaml.dump({"log_level": "INFO", "words_per_page": 200}))
        second = tmp_path / "second.json"
        second.write_text(json.dumps({"log_level": "ERROR"}))

        settings = FountainKitSettings.from_multiple_sources(
            config_files=[first, second]
        )
        assert settings.log_level == "ERROR"
        assert settings.words_per_page == 200

    def test_cli_args_override_files(self, tmp_path):
        """Test that CLI arguments win and None values are ignored."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump({"log_level": "INFO"}))

        settings = FountainKitSettings.from_multiple_sources(
            config_files=[config_file],
            cli_args={"log_level": "DEBUG", "words_per_page": None},
        )
        assert settings.log_level == "DEBUG"
        assert settings.words_per_page == 250

    def test_missing_file_is_skipped(self, tmp_path):
        """Test that a missing config file falls back to defaults."""
        settings = FountainKitSettings.from_multiple_sources(
            config_files=[tmp_path / "absent.yaml"]
        )
        assert settings == FountainKitSettings()

    def test_env_file(self, tmp_path):
        """Test loading values from a dotenv file."""
        env_file = tmp_path / ".env"
        env_file.write_text("FOUNTAINKIT_ASYNC_THRESHOLD=42\n")
        settings = FountainKitSettings.from_multiple_sources(env_file=env_file)
        assert settings.async_threshold == 42


class TestGlobalSettings:
    """Test the process-wide settings instance."""

    def test_get_settings_is_cached(self):
        """Test that the same instance is returned until cleared."""
        with patch(
            "fountainkit.config.settings._get_config_paths", return_value=[]
        ):
            first = get_settings()
            assert get_settings() is first
            clear_settings_cache()
            assert get_settings() is not first

    def test_get_settings_reads_config_files(self, tmp_path):
        """Test that discovered config files are loaded."""
        config_file = tmp_path / "fountainkit.yaml"
        config_file.write_text(yaml.dump({"words_per_page": 180}))
        with patch(
            "fountainkit.config.settings._get_config_paths",
            return_value=[config_file],
        ):
            assert get_settings().words_per_page == 180

    def test_set_settings(self):
        """Test replacing the global instance."""
        custom = FountainKitSettings(words_per_page=123)
        set_settings(custom)
        assert get_settings() is custom

    def test_config_paths_in_working_directory(self, tmp_path, monkeypatch):
        """Test discovery of a project config file in the current directory."""
        from fountainkit.config.settings import _get_config_paths

        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(Path, "home", lambda: tmp_path / "home")
        (tmp_path / "fountainkit.toml").write_text("debug = true\n")
        assert _get_config_paths() == [tmp_path / "fountainkit.toml"]
