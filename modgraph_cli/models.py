"""Core data models shared by the graph, classifier and exporter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass
class Vertex:
    vertex_id: int
    name: str
    edges: List[int] = field(default_factory=list)


@dataclass(frozen=True)
class Edge:
    src: str
    dst: str


@dataclass(frozen=True)
class Classification:
    """Selected (greatest version per module) and superseded node names."""
    selected: Tuple[str, ...] = ()
    superseded: Tuple[str, ...] = ()
