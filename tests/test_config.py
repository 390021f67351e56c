"""Tests for configuration loading."""

import os
from pathlib import Path
from tempfile import TemporaryDirectory

from tdd_kata.config import (
    CONFIG_PATH,
    DEFAULT_LESSON,
    DEFAULT_STRICT,
    load_config,
    setup_langsmith,
)


class TestLoadConfig:
    """Tests for load_config function."""

    def test_defaults_when_no_config(self):
        """Should return defaults when no config file exists."""
        with TemporaryDirectory() as tmpdir:
            config = load_config(Path(tmpdir))

            assert config.coercion.strict == DEFAULT_STRICT
            assert config.lesson.name == DEFAULT_LESSON

    def test_load_from_file(self):
        """Should load config from file."""
        with TemporaryDirectory() as tmpdir:
            config_file = Path(tmpdir) / CONFIG_PATH
            config_file.write_text("""
version: "1.1"
coercion:
  strict: true
lesson:
  name: lessons/custom.yml
""")

            config = load_config(Path(tmpdir))

            assert config.version == "1.1"
            assert config.coercion.strict is True
            assert config.lesson.name == "lessons/custom.yml"

    def test_minimal_config(self):
        """Should handle minimal config file."""
        with TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / CONFIG_PATH).write_text('version: "1.0"\n')

            config = load_config(Path(tmpdir))

            assert config.coercion.strict == DEFAULT_STRICT
            assert config.lesson.name == DEFAULT_LESSON

    def test_empty_config_file(self):
        with TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / CONFIG_PATH).write_text("")

            config = load_config(Path(tmpdir))

            assert config.lesson.name == DEFAULT_LESSON

    def test_env_override(self, monkeypatch):
        """Environment variables should override config file."""
        with TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / CONFIG_PATH).write_text("""
coercion:
  strict: false
lesson:
  name: add
""")

            monkeypatch.setenv("TDD_KATA_STRICT", "yes")
            monkeypatch.setenv("TDD_KATA_LESSON", "other")

            config = load_config(Path(tmpdir))

            assert config.coercion.strict is True
            assert config.lesson.name == "other"

    def test_env_can_disable_strict(self, monkeypatch):
        with TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / CONFIG_PATH).write_text("coercion:\n  strict: true\n")
            monkeypatch.setenv("TDD_KATA_STRICT", "0")

            config = load_config(Path(tmpdir))

            assert config.coercion.strict is False


class TestSetupLangsmith:
    """Tests for setup_langsmith function."""

    def test_disabled_without_api_key(self):
        assert setup_langsmith() is False
        assert os.environ["LANGCHAIN_TRACING_V2"] == "false"

    def test_enabled_with_api_key(self, monkeypatch):
        monkeypatch.setenv("LANGCHAIN_API_KEY", "test-key")
        monkeypatch.delenv("LANGCHAIN_TRACING_V2", raising=False)
        monkeypatch.delenv("LANGCHAIN_PROJECT", raising=False)

        assert setup_langsmith() is True
        assert os.environ["LANGCHAIN_TRACING_V2"] == "true"
        assert os.environ["LANGCHAIN_PROJECT"] == "tdd-kata"
