"""In-memory dependency graph backed by an integer-indexed vertex arena.

Vertices live in a list and are addressed by their position; adjacency is
stored as lists of vertex ids.  Names are deduplicated through a single
name -> id index, so every mention of a name resolves to the same vertex.
Vertex ids are handed out in first-mention order, which callers rely on
to replay node discovery order without re-reading the input.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Set, Tuple

from .models import Edge, Vertex


class Graph:
    """Directed, unweighted graph of named vertices with an optional root."""

    def __init__(self) -> None:
        self._vertices: List[Vertex] = []
        self._index: Dict[str, int] = {}
        self._edge_log: List[Tuple[int, int]] = []
        self._edge_set: Set[Tuple[int, int]] = set()
        self._root: Optional[int] = None

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __repr__(self) -> str:
        return f"Graph(root={self.root_name!r}, vertices={len(self)}, edges={self.edge_count})"

    # ------------------------------------------------------------------
    # Vertices
    # ------------------------------------------------------------------

    def create(self, name: str) -> Vertex:
        """Return the vertex called *name*, creating it with no edges if absent."""
        vertex_id = self._index.get(name)
        if vertex_id is not None:
            return self._vertices[vertex_id]
        vertex = Vertex(vertex_id=len(self._vertices), name=name)
        self._vertices.append(vertex)
        self._index[name] = vertex.vertex_id
        return vertex

    def exists(self, name: str) -> bool:
        """Whether *name* was ever registered, reachable from the root or not."""
        return name in self._index

    def vertex(self, name: str) -> Optional[Vertex]:
        vertex_id = self._index.get(name)
        if vertex_id is None:
            return None
        return self._vertices[vertex_id]

    def vertex_by_id(self, vertex_id: int) -> Vertex:
        return self._vertices[vertex_id]

    def names(self) -> List[str]:
        """Vertex names in first-mention order."""
        return [v.name for v in self._vertices]

    # ------------------------------------------------------------------
    # Root
    # ------------------------------------------------------------------

    @property
    def root(self) -> Optional[Vertex]:
        if self._root is None:
            return None
        return self._vertices[self._root]

    @property
    def root_name(self) -> Optional[str]:
        root = self.root
        return root.name if root is not None else None

    def set_root(self, name: str) -> Vertex:
        vertex = self.create(name)
        self._root = vertex.vertex_id
        return vertex

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def add_edge(self, src: str, dst: str) -> bool:
        """Record ``src -> dst``, creating either endpoint as needed.

        Returns False when *src* already had an edge to *dst*.
        """
        from_vertex = self.create(src)
        to_vertex = self.create(dst)
        key = (from_vertex.vertex_id, to_vertex.vertex_id)
        if key in self._edge_set:
            return False
        self._edge_set.add(key)
        self._edge_log.append(key)
        from_vertex.edges.append(to_vertex.vertex_id)
        return True

    @property
    def edge_count(self) -> int:
        return len(self._edge_log)

    def edges(self) -> List[Edge]:
        """Every distinct edge, in the order it was first added."""
        return [
            Edge(src=self._vertices[a].name, dst=self._vertices[b].name)
            for a, b in self._edge_log
        ]

    def walk_edges(self) -> Iterator[Edge]:
        """Yield edges reachable from the root, depth first.

        Each vertex is expanded once, so every reachable edge is yielded
        exactly once even when the graph has cycles.
        """
        if self._root is None:
            return
        visited: Set[int] = set()
        stack: List[Tuple[int, int]] = [(self._root, 0)]
        visited.add(self._root)
        while stack:
            vertex_id, position = stack[-1]
            vertex = self._vertices[vertex_id]
            if position >= len(vertex.edges):
                stack.pop()
                continue
            stack[-1] = (vertex_id, position + 1)
            target_id = vertex.edges[position]
            yield Edge(src=vertex.name, dst=self._vertices[target_id].name)
            if target_id not in visited:
                visited.add(target_id)
                stack.append((target_id, 0))
