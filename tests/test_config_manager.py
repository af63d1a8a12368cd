"""Tests for TOML-backed render configuration."""

from pathlib import Path

import pytest
import toml

from modgraph_cli import config_manager
from modgraph_cli.config_manager import (
    DEFAULT_RENDER_CONFIG,
    coerce_option,
    load_render_config,
    save_render_option,
)


def test_defaults_without_file(config_file: Path):
    """Test that a missing config file yields the defaults."""
    assert not config_file.exists()
    assert load_render_config() == DEFAULT_RENDER_CONFIG


def test_file_values_override_defaults(config_file: Path):
    config_file.parent.mkdir(parents=True)
    config_file.write_text(
        '[render]\npicked_color = "blue"\nfont_size = 10\nunknown = "x"\n',
        encoding="utf-8",
    )

    loaded = load_render_config()

    assert loaded["picked_color"] == "blue"
    assert loaded["font_size"] == 10
    assert loaded["unpicked_color"] == "gray"
    assert "unknown" not in loaded


def test_invalid_value_falls_back_to_default(config_file: Path):
    config_file.parent.mkdir(parents=True)
    config_file.write_text('[render]\nfont_size = "huge"\n', encoding="utf-8")

    assert load_render_config()["font_size"] == 12


def test_unparsable_file_falls_back_to_defaults(config_file: Path, caplog):
    """Test that broken TOML is reported and ignored."""
    config_file.parent.mkdir(parents=True)
    config_file.write_text("[render\npicked_color = ", encoding="utf-8")

    with caplog.at_level("WARNING", logger="modgraph_cli.config_manager"):
        loaded = load_render_config()

    assert loaded == DEFAULT_RENDER_CONFIG
    assert "Ignoring unreadable config" in caplog.text


def test_save_preserves_other_sections(config_file: Path):
    """Test that saving one option keeps unrelated TOML content."""
    config_file.parent.mkdir(parents=True)
    config_file.write_text('[other]\nkeep = true\n\n[render]\nnode_shape = "box"\n', encoding="utf-8")

    stored = save_render_option("font_size", "14")

    data = toml.loads(config_file.read_text(encoding="utf-8"))
    assert stored == 14
    assert data["other"] == {"keep": True}
    assert data["render"] == {"node_shape": "box", "font_size": 14}


def test_save_creates_file(config_file: Path):
    save_render_option("wrap_versions", "off")

    assert config_file.exists()
    assert load_render_config()["wrap_versions"] is False


@pytest.mark.parametrize(
    "key, value, expected",
    [
        ("wrap_versions", "yes", True),
        ("wrap_versions", "0", False),
        ("wrap_versions", False, False),
        ("font_size", "8", 8),
        ("font_size", 16, 16),
        ("picked_color", " red ", "red"),
    ],
)
def test_coerce_option(key, value, expected):
    assert coerce_option(key, value) == expected


@pytest.mark.parametrize(
    "key, value",
    [
        ("nope", "x"),
        ("wrap_versions", "maybe"),
        ("font_size", "big"),
        ("font_size", "0"),
        ("graph_name", "two words"),
        ("node_shape", ""),
    ],
)
def test_coerce_option_rejects(key, value):
    with pytest.raises(ValueError):
        coerce_option(key, value)


def test_config_file_is_isolated(config_file: Path):
    assert config_manager.CONFIG_FILE == config_file
