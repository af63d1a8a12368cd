"""Stream-to-stream conversion: edge-list lines in, DOT text out.

The whole input is parsed before anything is written, so a malformed line
or a missing target never leaves partial output behind.
"""

from __future__ import annotations

from typing import Iterable, Optional, TextIO

from .builder import build_graph
from .classifier import classify
from .graph import Graph
from .graph_export import RenderOptions, export_dot, export_paths_dot
from .models import Classification
from .paths import extract_paths_to


def convert(
    lines: Iterable[str],
    out: TextIO,
    options: Optional[RenderOptions] = None,
) -> Classification:
    """Render the full graph with selected/superseded node colouring."""
    graph = build_graph(lines)
    classification = classify(graph)
    export_dot(graph, out, classification, options)
    return classification


def convert_paths(
    lines: Iterable[str],
    out: TextIO,
    target: str,
    options: Optional[RenderOptions] = None,
) -> Graph:
    """Render only the acyclic paths from the root to *target*."""
    graph = build_graph(lines)
    paths = extract_paths_to(graph, target)
    export_paths_dot(paths, out, options)
    return paths
