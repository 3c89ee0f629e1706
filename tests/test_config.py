"""Tests for configuration loading."""

import pytest

from project_analysis.config import AnalysisConfig, load_config
from project_analysis.exceptions import ConfigurationError, InvalidConfigurationError


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run each test from an empty directory with an empty home."""
    home = tmp_path / "home"
    home.mkdir()
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    for name in ("MAX_PERIODS", "VERBOSITY", "LOG_FILE"):
        monkeypatch.delenv(f"PROJECT_ANALYSIS_{name}", raising=False)
    return work


class TestAnalysisConfig:
    def test_defaults(self):
        config = AnalysisConfig()
        assert config.max_periods == 5
        assert config.verbosity == "normal"
        assert not config.verbose and not config.quiet

    @pytest.mark.parametrize("max_periods", [0, 6])
    def test_max_periods_range(self, max_periods):
        with pytest.raises(InvalidConfigurationError):
            AnalysisConfig(max_periods=max_periods)

    def test_unknown_verbosity(self):
        with pytest.raises(InvalidConfigurationError):
            AnalysisConfig(verbosity="loud")


class TestLoadConfig:
    def test_no_sources_gives_defaults(self):
        assert load_config() == AnalysisConfig()

    def test_project_file(self, isolated_env):
        (isolated_env / "project-analysis.toml").write_text("max_periods = 3\n")
        assert load_config().max_periods == 3

    def test_section_in_explicit_file(self, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text('[project-analysis]\nverbosity = "quiet"\n')
        assert load_config(config_file=path).quiet

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_config(config_file=tmp_path / "nope.toml")

    def test_invalid_toml(self, isolated_env):
        (isolated_env / "project-analysis.toml").write_text("max_periods = \n")
        with pytest.raises(ConfigurationError):
            load_config()

    def test_unknown_key(self, isolated_env):
        (isolated_env / "project-analysis.toml").write_text("colour = true\n")
        with pytest.raises(ConfigurationError):
            load_config()

    def test_env_overrides_file(self, isolated_env, monkeypatch):
        (isolated_env / "project-analysis.toml").write_text("max_periods = 3\n")
        monkeypatch.setenv("PROJECT_ANALYSIS_MAX_PERIODS", "2")
        assert load_config().max_periods == 2

    def test_bad_env_value(self, monkeypatch):
        monkeypatch.setenv("PROJECT_ANALYSIS_MAX_PERIODS", "many")
        with pytest.raises(ConfigurationError):
            load_config()

    def test_kwargs_override_env(self, monkeypatch):
        monkeypatch.setenv("PROJECT_ANALYSIS_VERBOSITY", "quiet")
        config = load_config(verbose=True)
        assert config.verbosity == "verbose"

    def test_false_flags_are_ignored(self):
        assert load_config(verbose=False, quiet=False).verbosity == "normal"
