"""Configuration and LangSmith setup."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


# Default values
DEFAULT_STRICT = False
DEFAULT_LESSON = "add"

# Config file path
CONFIG_PATH = ".tdd-kata.yml"

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class CoercionConfig:
    """How add treats strings that are not numbers."""

    strict: bool = DEFAULT_STRICT


@dataclass
class LessonConfig:
    """Which lesson show and walk use by default."""

    name: str = DEFAULT_LESSON


@dataclass
class TddKataConfig:
    """Main configuration class."""

    version: str = "1.0"
    coercion: CoercionConfig = field(default_factory=CoercionConfig)
    lesson: LessonConfig = field(default_factory=LessonConfig)


def load_config(repo_path: Optional[Path] = None) -> TddKataConfig:
    """Load tdd-kata configuration.

    Priority (highest to lowest):
    1. Environment variables (TDD_KATA_STRICT, TDD_KATA_LESSON)
    2. Config file (.tdd-kata.yml in the working directory)
    3. Package defaults

    Args:
        repo_path: Directory holding the config file. Defaults to current directory.

    Returns:
        TddKataConfig instance
    """
    config = TddKataConfig()

    if repo_path is None:
        repo_path = Path.cwd()

    config_file = repo_path / CONFIG_PATH
    if config_file.exists():
        with open(config_file) as f:
            data = yaml.safe_load(f) or {}

        config.version = str(data.get("version", config.version))

        if "coercion" in data:
            config.coercion.strict = bool(data["coercion"].get("strict", DEFAULT_STRICT))

        if "lesson" in data:
            config.lesson.name = data["lesson"].get("name", DEFAULT_LESSON)

    # Override with environment variables
    if env_strict := os.environ.get("TDD_KATA_STRICT"):
        config.coercion.strict = env_strict.strip().lower() in _TRUE_VALUES
    if env_lesson := os.environ.get("TDD_KATA_LESSON"):
        config.lesson.name = env_lesson

    return config


def setup_langsmith() -> bool:
    """Configure LangSmith tracing if API key is available.

    Returns:
        True if LangSmith is enabled, False otherwise.
    """
    if not os.environ.get("LANGCHAIN_API_KEY"):
        os.environ["LANGCHAIN_TRACING_V2"] = "false"
        return False

    os.environ.setdefault("LANGCHAIN_TRACING_V2", "true")
    os.environ.setdefault("LANGCHAIN_PROJECT", "tdd-kata")
    return True
