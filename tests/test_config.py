"""Tests for configuration defaults, environment overrides and validation."""

import os

import pytest

from git_authorship.config import AuthorshipConfig, default_config, load_config
from git_authorship.exceptions import ConfigurationError, InvalidConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith("GIT_AUTHORSHIP_"):
            monkeypatch.delenv(key)


class TestDefaults:
    def test_defaults(self):
        assert default_config.git_executable == "git"
        assert default_config.git_timeout is None
        assert default_config.encoding == "utf-8"
        assert default_config.sort_mode == "truncated"
        assert default_config.output_format == "text"
        assert default_config.skip_failed_files is False
        assert default_config.verbosity == "normal"

    def test_frozen(self):
        with pytest.raises(AttributeError):
            default_config.sort_mode = "exact"


class TestValidation:
    @pytest.mark.parametrize(
        "kwargs, key",
        [
            ({"sort_mode": "random"}, "sort_mode"),
            ({"output_format": "xml"}, "output_format"),
            ({"verbosity": "loud"}, "verbosity"),
            ({"git_timeout": 0}, "git_timeout"),
            ({"encoding": "no-such-codec"}, "encoding"),
            ({"git_executable": ""}, "git_executable"),
        ],
    )
    def test_invalid_values(self, kwargs, key):
        with pytest.raises(InvalidConfigError) as exc_info:
            AuthorshipConfig(**kwargs)
        assert exc_info.value.key == key
        assert isinstance(exc_info.value, ConfigurationError)


class TestLoadConfig:
    def test_no_overrides(self):
        assert load_config() == AuthorshipConfig()

    def test_overrides(self):
        config = load_config(sort_mode="exact", output_format="json")
        assert config.sort_mode == "exact"
        assert config.output_format == "json"

    def test_none_overrides_ignored(self):
        assert load_config(sort_mode=None).sort_mode == "truncated"

    def test_verbose_and_quiet_flags(self):
        assert load_config(verbose=True).verbosity == "verbose"
        assert load_config(quiet=True).verbosity == "quiet"
        assert load_config(verbose=False, quiet=False).verbosity == "normal"

    def test_unknown_key(self):
        with pytest.raises(InvalidConfigError, match="unknown_option"):
            load_config(unknown_option=1)

    def test_env_vars(self, monkeypatch):
        monkeypatch.setenv("GIT_AUTHORSHIP_SORT_MODE", "exact")
        monkeypatch.setenv("GIT_AUTHORSHIP_GIT_TIMEOUT", "2.5")
        monkeypatch.setenv("GIT_AUTHORSHIP_SKIP_FAILED_FILES", "yes")
        monkeypatch.setenv("GIT_AUTHORSHIP_GIT_EXECUTABLE", "/opt/git/bin/git")

        config = load_config()

        assert config.sort_mode == "exact"
        assert config.git_timeout == 2.5
        assert config.skip_failed_files is True
        assert config.git_executable == "/opt/git/bin/git"

    def test_env_choice_is_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("GIT_AUTHORSHIP_SORT_MODE", "EXACT")
        monkeypatch.setenv("GIT_AUTHORSHIP_OUTPUT_FORMAT", " Json ")

        config = load_config()

        assert config.sort_mode == "exact"
        assert config.output_format == "json"

    def test_cli_overrides_beat_env(self, monkeypatch):
        monkeypatch.setenv("GIT_AUTHORSHIP_SORT_MODE", "exact")
        assert load_config(sort_mode="truncated").sort_mode == "truncated"

    def test_env_none_timeout(self, monkeypatch):
        monkeypatch.setenv("GIT_AUTHORSHIP_GIT_TIMEOUT", "none")
        assert load_config().git_timeout is None

    def test_bad_env_bool(self, monkeypatch):
        monkeypatch.setenv("GIT_AUTHORSHIP_SKIP_FAILED_FILES", "maybe")
        with pytest.raises(InvalidConfigError) as exc_info:
            load_config()
        assert "GIT_AUTHORSHIP_SKIP_FAILED_FILES" in exc_info.value.reason

    def test_bad_env_float(self, monkeypatch):
        monkeypatch.setenv("GIT_AUTHORSHIP_GIT_TIMEOUT", "soon")
        with pytest.raises(InvalidConfigError):
            load_config()

    def test_bad_env_literal_validated(self, monkeypatch):
        monkeypatch.setenv("GIT_AUTHORSHIP_OUTPUT_FORMAT", "yaml")
        with pytest.raises(InvalidConfigError) as exc_info:
            load_config()
        assert exc_info.value.key == "output_format"
