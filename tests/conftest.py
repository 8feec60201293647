"""Shared test fixtures."""

from pathlib import Path

import pytest

from elm_reactor.config import (
    CompilerConfig,
    Config,
    LiveReloadConfig,
    ProjectConfig,
    ServerConfig,
)
from tests.fakes import FakeCompiler, FakeWatcher


@pytest.fixture
def root_dir(tmp_path: Path) -> Path:
    """Served project directory."""
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def test_config(root_dir: Path) -> Config:
    """Create a test configuration serving root_dir."""
    return Config(
        server=ServerConfig(),
        project=ProjectConfig(root=root_dir),
        compiler=CompilerConfig(),
        live_reload=LiveReloadConfig(enabled=True),
    )


@pytest.fixture
def compiler() -> FakeCompiler:
    return FakeCompiler()


@pytest.fixture
def watcher() -> FakeWatcher:
    return FakeWatcher()
