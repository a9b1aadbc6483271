"""
Unit tests for settings loading.
"""

import pytest

from hrefscan.config import Settings
from hrefscan.errors import ConfigurationError


@pytest.mark.unit
class TestSettings:
    """Test the Settings model."""

    def test_defaults(self):
        """Test default settings."""
        settings = Settings()

        assert settings.style == "a"
        assert settings.url is None
        assert settings.attribute == "href"
        assert settings.parser == "html5lib"
        assert settings.log_level == "WARNING"

    def test_environment(self, monkeypatch):
        """Test that HREFSCAN_* variables are read."""
        monkeypatch.setenv("HREFSCAN_STYLE", "link")
        monkeypatch.setenv("HREFSCAN_URL", "https://e.com")

        settings = Settings.load({})

        assert settings.style == "link"
        assert settings.url == "https://e.com"

    def test_log_level_is_case_insensitive(self):
        """Test that lower-case levels are accepted."""
        assert Settings.load({"log_level": "debug"}).log_level == "DEBUG"

    def test_invalid_value(self):
        """Test that validation failures become ConfigurationError."""
        with pytest.raises(ConfigurationError, match="log_level"):
            Settings.load({"log_level": "LOUD"})

    def test_blank_attribute(self):
        """Test that an empty attribute name is rejected."""
        with pytest.raises(ConfigurationError, match="attribute"):
            Settings.load({"attribute": "  "})

    def test_merged_applies_overrides(self):
        """Test that non-None overrides replace loaded values."""
        settings = Settings.load({"style": "link", "url": "https://a.org"})

        merged = settings.merged(style="a.nav", url=None)

        assert merged.style == "a.nav"
        assert merged.url == "https://a.org"

    def test_merged_without_overrides(self):
        """Test that no overrides returns the same settings."""
        settings = Settings()

        assert settings.merged(style=None, url=None) is settings

    def test_merged_validates(self):
        """Test that overrides are validated like loaded values."""
        with pytest.raises(ConfigurationError):
            Settings().merged(log_level="LOUD")


@pytest.mark.unit
class TestSettingsFromYaml:
    """Test Settings.from_yaml."""

    def test_load(self, tmp_path):
        """Test loading values from a YAML mapping."""
        path = tmp_path / "hrefscan.yaml"
        path.write_text("style: 'nav a'\nurl: https://e.com\nlog_level: info\n", encoding="utf-8")

        settings = Settings.from_yaml(path)

        assert settings.style == "nav a"
        assert settings.url == "https://e.com"
        assert settings.log_level == "INFO"

    def test_file_overrides_environment(self, tmp_path, monkeypatch):
        """Test that file values win over environment values."""
        monkeypatch.setenv("HREFSCAN_STYLE", "link")
        monkeypatch.setenv("HREFSCAN_URL", "https://env.org")
        path = tmp_path / "hrefscan.yaml"
        path.write_text("style: area\n", encoding="utf-8")

        settings = Settings.from_yaml(path)

        assert settings.style == "area"
        assert settings.url == "https://env.org"

    def test_empty_file(self, tmp_path):
        """Test that an empty file yields defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert Settings.from_yaml(path).style == "a"

    def test_missing_file(self, tmp_path):
        """Test that a missing file is a configuration error."""
        with pytest.raises(ConfigurationError, match="not found"):
            Settings.from_yaml(tmp_path / "absent.yaml")

    def test_malformed_yaml(self, tmp_path):
        """Test that unparsable YAML is a configuration error."""
        path = tmp_path / "bad.yaml"
        path.write_text("style: [a\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            Settings.from_yaml(path)

    def test_not_a_mapping(self, tmp_path):
        """Test that a YAML list is rejected."""
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="mapping"):
            Settings.from_yaml(path)
