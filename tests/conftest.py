"""Pytest configuration and fixtures."""

import os
from pathlib import Path

import pytest


def _load_env_file():
    """Load .env file from project root if it exists."""
    env_path = Path(__file__).parent.parent / ".env"
    if not env_path.exists():
        return

    with open(env_path) as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" in line:
                key, _, value = line.partition("=")
                key = key.strip()
                value = value.strip().strip("\"'")
                if key not in os.environ:
                    os.environ[key] = value


_load_env_file()


@pytest.fixture(autouse=True)
def no_tracing(monkeypatch):
    """Keep LangSmith tracing off and config env vars unset during tests."""
    monkeypatch.setenv("LANGCHAIN_TRACING_V2", "false")
    monkeypatch.setenv("LANGSMITH_TRACING", "false")
    monkeypatch.delenv("LANGCHAIN_API_KEY", raising=False)
    monkeypatch.delenv("TDD_KATA_STRICT", raising=False)
    monkeypatch.delenv("TDD_KATA_LESSON", raising=False)
