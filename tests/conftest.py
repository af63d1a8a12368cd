"""Pytest configuration and fixtures for ModGraph CLI tests."""

import shutil
import tempfile
from pathlib import Path
from typing import Generator, List

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch) -> Path:
    """Point the TOML config at a per-test location.

    Keeps a developer's ~/.modgraph/config.toml from leaking into results.
    """
    config_file = tmp_path / "modgraph_home" / "config.toml"
    monkeypatch.setattr("modgraph_cli.config.CONFIG_FILE", config_file)
    monkeypatch.setattr("modgraph_cli.config_manager.CONFIG_FILE", config_file)
    return config_file


@pytest.fixture
def config_file(_isolated_config: Path) -> Path:
    """Path of the isolated config file (not created yet)."""
    return _isolated_config


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def go_mod_graph_path() -> Path:
    """Path to a small `go mod graph` style edge list."""
    return FIXTURES_DIR / "go_mod_graph.txt"


@pytest.fixture
def go_mod_graph_lines(go_mod_graph_path: Path) -> List[str]:
    return go_mod_graph_path.read_text(encoding="utf-8").splitlines(keepends=True)


@pytest.fixture
def cyclic_graph_lines() -> List[str]:
    """Edge list where several routes to 'target' pass through cycles."""
    return (FIXTURES_DIR / "cyclic_graph.txt").read_text(encoding="utf-8").splitlines()
