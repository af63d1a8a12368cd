"""Configuration manager for modgraph rendering settings using TOML files."""

from __future__ import annotations

import logging
from typing import Any, Dict

import toml

from .config import CONFIG_FILE

logger = logging.getLogger(__name__)


# Defaults for the [render] section
DEFAULT_RENDER_CONFIG: Dict[str, Any] = {
    "graph_name": "modgraph",
    "node_shape": "rectangle",
    "font_size": 12,
    "picked_color": "green",
    "unpicked_color": "gray",
    "wrap_versions": True,
}

_TRUE_WORDS = {"1", "true", "yes", "on"}
_FALSE_WORDS = {"0", "false", "no", "off"}


def load_full_config() -> Dict[str, Any]:
    """Load the entire TOML config (all sections)."""
    if not CONFIG_FILE.exists():
        return {}
    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            return toml.load(f)
    except (OSError, toml.TomlDecodeError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", CONFIG_FILE, exc)
        return {}


def _save_full_config(config: Dict[str, Any]) -> None:
    """Write entire config dict to TOML file, preserving all sections."""
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    with open(CONFIG_FILE, "w", encoding="utf-8") as f:
        toml.dump(config, f)


def coerce_option(key: str, value: Any) -> Any:
    """Convert *value* to the type of the default for *key*.

    Raises:
        ValueError: unknown key, or a value that cannot be converted.
    """
    if key not in DEFAULT_RENDER_CONFIG:
        raise ValueError(f"Unknown render option: {key}")
    default = DEFAULT_RENDER_CONFIG[key]

    if isinstance(default, bool):
        if isinstance(value, bool):
            return value
        word = str(value).strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
        raise ValueError(f"Option '{key}' expects true or false, got {value!r}")
    if isinstance(default, int):
        try:
            number = int(value)
        except (TypeError, ValueError):
            raise ValueError(f"Option '{key}' expects an integer, got {value!r}") from None
        if number <= 0:
            raise ValueError(f"Option '{key}' must be positive, got {number}")
        return number

    text = str(value).strip()
    if not text or any(ch.isspace() for ch in text):
        raise ValueError(f"Option '{key}' expects a single word, got {value!r}")
    return text


def load_render_config() -> Dict[str, Any]:
    """Load the ``[render]`` section merged over the defaults.

    Unknown keys are ignored and invalid values fall back to the default
    with a warning.
    """
    merged = DEFAULT_RENDER_CONFIG.copy()
    section = load_full_config().get("render", {})
    if not isinstance(section, dict):
        logger.warning("Ignoring [render] in %s: not a table", CONFIG_FILE)
        return merged

    for key, value in section.items():
        if key not in DEFAULT_RENDER_CONFIG:
            logger.debug("Ignoring unknown render option '%s'", key)
            continue
        try:
            merged[key] = coerce_option(key, value)
        except ValueError as exc:
            logger.warning("%s; using default %r", exc, DEFAULT_RENDER_CONFIG[key])
    return merged


def save_render_option(key: str, value: Any) -> Any:
    """Store one ``[render]`` option, preserving the rest of the file.

    Returns:
        The value as stored, after type conversion.
    """
    coerced = coerce_option(key, value)
    config = load_full_config()
    section = config.get("render")
    if not isinstance(section, dict):
        section = {}
    section[key] = coerced
    config["render"] = section
    _save_full_config(config)
    return coerced
