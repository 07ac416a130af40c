"""Tests for configuration loading."""

from pathlib import Path

import pytest

from halstead_insight.config import AnalysisConfig, load_config
from halstead_insight.exceptions import ConfigurationError, InvalidConfigError


class TestAnalysisConfig:
    def test_defaults(self):
        config = AnalysisConfig()
        assert config.excluded_dirs == ["node_modules"]
        assert ".js" in config.extensions and ".css" in config.extensions
        assert config.interoperability_score == pytest.approx(84.0)
        assert config.decimal_places == 2
        assert config.allow_hidden_files is True
        assert config.max_file_size_mb is None
        assert config.max_file_size_bytes is None

    def test_language_for(self):
        config = AnalysisConfig()
        assert config.language_for(Path("a.js")) == "javascript"
        assert config.language_for(Path("A.JSX")) == "javascript"
        assert config.language_for(Path("a.tsx")) == "tsx"
        assert config.language_for(Path("a.html")) is None

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"max_file_size_mb": 0},
            {"interoperability_score": 120.0},
            {"decimal_places": -1},
            {"extensions": ["js"]},
            {"extensions": [".css"], "script_languages": {".js": "javascript"}},
            {"verbosity": "loud"},
        ],
    )
    def test_validation(self, kwargs):
        with pytest.raises(InvalidConfigError):
            AnalysisConfig(**kwargs)


class TestLoadConfig:
    def test_overrides(self, isolated_config):
        config = load_config(decimal_places=4, verbose=True)
        assert config.decimal_places == 4
        assert config.verbosity == "verbose"

    def test_quiet_flag(self, isolated_config):
        assert load_config(quiet=True).verbosity == "quiet"

    def test_project_toml(self, isolated_config):
        (isolated_config / "halstead-insight.toml").write_text(
            'excluded_dirs = ["node_modules", "dist"]\ndecimal_places = 3\n'
        )
        config = load_config()
        assert config.excluded_dirs == ["node_modules", "dist"]
        assert config.decimal_places == 3

    def test_explicit_file_beats_project_file(self, isolated_config):
        (isolated_config / "halstead-insight.toml").write_text("decimal_places = 3\n")
        explicit = isolated_config / "custom.toml"
        explicit.write_text("decimal_places = 5\n")
        assert load_config(config_file=explicit).decimal_places == 5

    def test_missing_explicit_file(self, isolated_config):
        with pytest.raises(ConfigurationError):
            load_config(config_file=isolated_config / "missing.toml")

    def test_env_vars(self, isolated_config, monkeypatch):
        monkeypatch.setenv("HALSTEAD_DECIMAL_PLACES", "6")
        monkeypatch.setenv("HALSTEAD_ALLOW_HIDDEN_FILES", "no")
        monkeypatch.setenv("HALSTEAD_MAX_FILE_SIZE_MB", "2.5")
        config = load_config()
        assert config.decimal_places == 6
        assert config.allow_hidden_files is False
        assert config.max_file_size_mb == 2.5

    def test_bad_env_var(self, isolated_config, monkeypatch):
        monkeypatch.setenv("HALSTEAD_FOLLOW_SYMLINKS", "maybe")
        with pytest.raises(ConfigurationError):
            load_config()

    def test_cli_override_beats_env(self, isolated_config, monkeypatch):
        monkeypatch.setenv("HALSTEAD_DECIMAL_PLACES", "6")
        assert load_config(decimal_places=1).decimal_places == 1

    def test_unknown_key(self, isolated_config):
        with pytest.raises(ConfigurationError):
            load_config(not_a_field=True)
