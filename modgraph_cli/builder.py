"""Build a :class:`Graph` from a line-oriented edge list.

Each non-empty line holds two whitespace-separated words, ``from to``,
meaning *from* depends directly on *to* (the format printed by
``go mod graph``).  The first *from* word in the input becomes the root.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Tuple

from .errors import MalformedLineError
from .graph import Graph

logger = logging.getLogger(__name__)


def parse_edge_lines(lines: Iterable[str]) -> Iterator[Tuple[str, str]]:
    """Yield ``(from, to)`` pairs, skipping blank lines.

    Raises:
        MalformedLineError: a non-blank line does not split into two words.
    """
    for line_number, raw in enumerate(lines, 1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        parts = line.split()
        if len(parts) != 2:
            raise MalformedLineError(line, line_number)
        yield parts[0], parts[1]


def build_graph(lines: Iterable[str]) -> Graph:
    """Parse *lines* into a new graph.

    The root is the first source word seen; it is taken on trust and not
    checked for having no incoming edges.  Any malformed line aborts the
    build, so a graph is only returned for a fully valid input.

    Args:
        lines: Edge-list lines, e.g. an open text file or ``str.splitlines()``.

    Returns:
        The populated graph.
    """
    graph = Graph()
    for src, dst in parse_edge_lines(lines):
        if graph.root is None:
            graph.set_root(src)
        graph.add_edge(src, dst)

    logger.debug(
        "Built graph: %d vertices, %d edges, root=%s",
        len(graph), graph.edge_count, graph.root_name,
    )
    return graph
