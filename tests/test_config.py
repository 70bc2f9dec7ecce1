"""Tests for projectlist.lib.config and projectlist.lib.envparse modules."""

import pytest
from unittest.mock import patch

from projectlist.lib.config import (
    load_config,
    VALID_EXPORT_FORMATS,
    DEFAULT_PROJECTLIST_PATH,
)
from projectlist.lib.envparse import parse_env, load_env


class TestParseEnv:
    """Test parse_env function."""

    def test_parses_keys_and_quotes(self):
        text = '# settings\n\nPROJECTLIST_PATH="docs/projects.md"\nSHOW_TERMINAL=true\n'
        assert parse_env(text) == {
            "PROJECTLIST_PATH": "docs/projects.md",
            "SHOW_TERMINAL": "true",
        }

    def test_rejects_missing_equals(self):
        with pytest.raises(ValueError, match="Line 1"):
            parse_env("SHOW_TERMINAL\n")

    def test_rejects_lowercase_key(self):
        with pytest.raises(ValueError, match="Invalid key"):
            parse_env("show_terminal=true\n")

    def test_shell_characters_are_literal(self):
        env = parse_env("PROJECTLIST_PATH=docs/a;b|c$(d).md\n")
        assert env["PROJECTLIST_PATH"] == "docs/a;b|c$(d).md"

    def test_mismatched_quotes_kept(self):
        assert parse_env("PROJECTLIST_PATH=\"docs/a.md'\n")["PROJECTLIST_PATH"] == "\"docs/a.md'"

    def test_strips_export_prefix(self):
        assert parse_env("export SHOW_TERMINAL=true\n") == {"SHOW_TERMINAL": "true"}

    def test_ignores_unknown_keys(self, caplog):
        env = parse_env("SHOW_TERMINAL=true\nCOLOR=red\n", known_keys=("SHOW_TERMINAL",))
        assert env == {"SHOW_TERMINAL": "true"}
        assert "Ignoring unknown setting COLOR" in caplog.text

    def test_repeated_key_keeps_last(self, caplog):
        env = parse_env("EXPORT_FORMAT=json\nEXPORT_FORMAT=yaml\n")
        assert env["EXPORT_FORMAT"] == "yaml"
        assert "set more than once" in caplog.text

    def test_load_env_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_env(str(tmp_path / "projectlist.env"))


class TestLoadConfig:
    """Test load_config function."""

    def test_defaults_without_file(self, tmp_path):
        config = load_config(tmp_path)
        assert config.root == tmp_path
        assert config.projectlist_path == tmp_path / DEFAULT_PROJECTLIST_PATH
        assert config.show_terminal is False
        assert config.export_format == "json"

    def test_reads_file(self, tmp_path):
        (tmp_path / "projectlist.env").write_text(
            "PROJECTLIST_PATH=docs/list.md\nSHOW_TERMINAL=TRUE\nEXPORT_FORMAT=yaml\n"
        )
        config = load_config(tmp_path)
        assert config.projectlist_path == tmp_path / "docs/list.md"
        assert config.show_terminal is True
        assert config.export_format == "yaml"

    def test_path_with_semicolon(self, tmp_path):
        (tmp_path / "projectlist.env").write_text("PROJECTLIST_PATH=docs/a;b.md\n")
        config = load_config(tmp_path)
        assert config.projectlist_path == tmp_path / "docs/a;b.md"

    def test_malformed_file_raises(self, tmp_path):
        (tmp_path / "projectlist.env").write_text("not a setting\n")
        with pytest.raises(ValueError):
            load_config(tmp_path)

    @patch("projectlist.lib.config.envparse.load_env")
    def test_invalid_format_defaults_to_json_with_warning(self, mock_load_env, tmp_path, caplog):
        (tmp_path / "projectlist.env").write_text("")
        mock_load_env.return_value = {"EXPORT_FORMAT": "xml"}
        config = load_config(tmp_path)
        assert config.export_format == "json"
        assert "Unknown EXPORT_FORMAT 'xml'" in caplog.text


class TestValidExportFormats:
    """Test VALID_EXPORT_FORMATS constant."""

    def test_contains_expected_formats(self):
        assert VALID_EXPORT_FORMATS == ("json", "yaml")
