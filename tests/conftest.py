"""Pytest configuration and shared fixtures for Dictum tests."""

import os
import shutil
import tempfile
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest

from dictum.config.loader import ENV_VAR_MAP


@pytest.fixture
def temp_dir() -> Generator[Path]:
    """Create a temporary directory for test file operations.

    Yields:
        Path to temporary directory

    Cleanup:
        Automatically removes directory after test
    """
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def isolated_env(
    temp_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[dict[str, str]]:
    """Isolate tests from the user's home directory and DICTUM_* variables.

    HOME points at an empty temporary directory, the working directory is
    changed to it and every DICTUM_* variable is removed.

    Yields:
        Dictionary of original environment variables
    """
    original_env = os.environ.copy()
    for env_var in ENV_VAR_MAP.values():
        monkeypatch.delenv(env_var, raising=False)
    monkeypatch.setenv("HOME", str(temp_dir))
    monkeypatch.chdir(temp_dir)
    yield original_env


@pytest.fixture
def statute_paragraphs() -> list[str]:
    """Paragraphs of a small definitions section using straight quotes."""
    return [
        "Section 1. Definitions.",
        'As used in this chapter, unless the context requires otherwise:',
        '"Commissioner" means the Commissioner of Motor Vehicles.',
        '"Motor vehicle" means every vehicle that is self-propelled.',
        '"DMV" means the Department of Motor Vehicles.',
        '"Motor vehicle" does not mean a bicycle.',
        '"Owner", "lessee" and "operator" includes any person in control.',
    ]


# Configure pytest
def pytest_configure(config: Any) -> None:
    """Configure pytest with marker options."""
    # Register custom markers
    config.addinivalue_line(
        "markers",
        "unit: marks tests as unit tests",
    )
