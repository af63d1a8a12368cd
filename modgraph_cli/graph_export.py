"""Graph export helpers for Graphviz DOT output."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, TextIO

from .classifier import VERSION_DELIMITER
from .graph import Graph
from .models import Classification, Edge

_PLAIN_ID = re.compile(r"^(?:[A-Za-z_][A-Za-z0-9_]*|-?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?))\Z")
_DOT_KEYWORDS = {"node", "edge", "graph", "digraph", "subgraph", "strict"}


@dataclass
class RenderOptions:
    graph_name: str = "modgraph"
    node_shape: str = "rectangle"
    font_size: int = 12
    picked_color: str = "green"
    unpicked_color: str = "gray"
    wrap_versions: bool = True

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "RenderOptions":
        """Build options from a ``[render]`` mapping, ignoring unknown keys."""
        known = {k: v for k, v in config.items() if k in cls.__dataclass_fields__}
        return cls(**known)


def quote(name: str, wrap_versions: bool = False) -> str:
    """Render *name* as a double-quoted DOT identifier.

    With *wrap_versions* the first ``@`` starts a new label line, so module
    and version are drawn one above the other.
    """
    text = name.replace("\\", "\\\\").replace('"', '\\"')
    if wrap_versions:
        text = text.replace(VERSION_DELIMITER, "\n" + VERSION_DELIMITER, 1)
    text = text.replace("\r", "\\r").replace("\n", "\\n")
    return f'"{text}"'


def dot_id(value: str) -> str:
    """Return *value* bare when it is a plain DOT identifier or numeral, quoted otherwise."""
    if _PLAIN_ID.match(value) and value.lower() not in _DOT_KEYWORDS:
        return value
    return quote(value)


def dot_lines(
    edges: Iterable[Edge],
    classification: Optional[Classification] = None,
    options: Optional[RenderOptions] = None,
) -> List[str]:
    """Return the DOT statements for *edges* and optional node styling."""
    opts = options or RenderOptions()
    wrap = opts.wrap_versions

    lines = [f"digraph {dot_id(opts.graph_name)} {{"]
    lines.append(f"\tnode [ shape={dot_id(opts.node_shape)} fontsize={opts.font_size} ]")

    for edge in edges:
        lines.append(f"\t{quote(edge.src, wrap)} -> {quote(edge.dst, wrap)}")

    if classification is not None:
        for name in classification.selected:
            lines.append(f"\t{quote(name, wrap)} [style = filled, fillcolor = {dot_id(opts.picked_color)}]")
        for name in classification.superseded:
            lines.append(f"\t{quote(name, wrap)} [style = filled, fillcolor = {dot_id(opts.unpicked_color)}]")

    lines.append("}")
    return lines


def export_dot(
    graph: Graph,
    out: TextIO,
    classification: Optional[Classification] = None,
    options: Optional[RenderOptions] = None,
) -> None:
    """Write the full graph, every edge in input order, to *out*."""
    for line in dot_lines(graph.edges(), classification, options):
        out.write(line + "\n")


def export_paths_dot(
    graph: Graph,
    out: TextIO,
    options: Optional[RenderOptions] = None,
) -> None:
    """Write the edges reachable from the root, depth first, to *out*."""
    for line in dot_lines(graph.walk_edges(), None, options):
        out.write(line + "\n")
