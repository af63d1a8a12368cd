"""Extract every acyclic path from the root to a target vertex.

The search is breadth first.  Each queue entry is a :class:`Breadcrumb`,
the current vertex plus a link to the crumb it was reached from, so the
full trail back to the root can be recovered at any point.  Trails that
revisit a vertex are dropped before expansion, which both bounds the
search on cyclic graphs and keeps cycles out of the result.

Complexity is exponential in the worst case (every distinct trail is
explored), which is acceptable for module graphs.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional

from .errors import TargetNotFoundError
from .graph import Graph
from .models import Vertex

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Breadcrumb:
    """A search frontier entry: a vertex and the trail that led to it."""
    vertex: Vertex
    parent: Optional["Breadcrumb"] = None

    @property
    def name(self) -> str:
        return self.vertex.name

    def has_cycle(self) -> bool:
        """Whether this crumb's vertex already appears earlier in its trail.

        Every ancestor passed this same check before it was expanded, so
        only the newest vertex can close a cycle.
        """
        vertex_id = self.vertex.vertex_id
        cursor = self.parent
        while cursor is not None:
            if cursor.vertex.vertex_id == vertex_id:
                return True
            cursor = cursor.parent
        return False

    def trail(self) -> List[str]:
        """Vertex names from the root down to this crumb."""
        names: List[str] = []
        cursor: Optional[Breadcrumb] = self
        while cursor is not None:
            names.append(cursor.name)
            cursor = cursor.parent
        names.reverse()
        return names


def extract_paths_to(graph: Graph, target: str) -> Graph:
    """Return a new graph holding every acyclic root-to-*target* path.

    All matching trails are merged into one graph: shared prefixes and shared
    edges appear once.  The result shares no vertex objects with *graph*;
    its root is a fresh vertex named after the source root.

    Args:
        graph: Source graph, not modified.
        target: Name of the vertex to reach.

    Returns:
        The merged path graph.  When the target is the root itself, or is
        known but unreachable, the result holds only the root.

    Raises:
        TargetNotFoundError: *target* was never registered in *graph*.
    """
    if not graph.exists(target):
        raise TargetNotFoundError(target)

    result = Graph()
    root = graph.root
    if root is None:
        return result
    result.set_root(root.name)

    queue: Deque[Breadcrumb] = deque([Breadcrumb(vertex=root)])
    matched = 0
    pruned = 0

    while queue:
        cursor = queue.popleft()

        if cursor.has_cycle():
            pruned += 1
            continue

        if cursor.name == target:
            matched += 1
            trail = cursor.trail()
            for src, dst in zip(trail, trail[1:]):
                result.add_edge(src, dst)
            # Going past the target can only lead back to it through a cycle.
            continue

        for vertex_id in cursor.vertex.edges:
            queue.append(Breadcrumb(vertex=graph.vertex_by_id(vertex_id), parent=cursor))

    logger.debug(
        "Paths to %s: %d matched, %d cyclic trails pruned, %d edges kept",
        target, matched, pruned, result.edge_count,
    )
    return result
