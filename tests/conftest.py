"""
Shared test fixtures and configuration.
"""

import logging
from pathlib import Path

import pytest

from dimensgen.core.config.settings import GeneratorSettings, load_settings


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """CLI tests call setup_logging(), which replaces the root handlers."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def settings() -> GeneratorSettings:
    """The compiled-in generator settings."""
    return load_settings()


@pytest.fixture
def output_root(tmp_path: Path) -> Path:
    """Return a not-yet-created output directory."""
    return tmp_path / "output"
