"""Configuration paths for modgraph."""

from __future__ import annotations

import os
from pathlib import Path

BASE_DIR = Path(os.environ.get("MODGRAPH_HOME", str(Path.home() / ".modgraph"))).expanduser()
CONFIG_FILE = BASE_DIR / "config.toml"
