"""Tests for building graphs from edge-list text."""

from pathlib import Path
from typing import List

import pytest

from modgraph_cli.builder import build_graph, parse_edge_lines
from modgraph_cli.errors import MalformedLineError, ModGraphError
from modgraph_cli.models import Edge


def test_first_source_is_root():
    """Test that the first 'from' word becomes the root."""
    graph = build_graph(["B C", "A B"])

    assert graph.root_name == "B"


def test_simple_chain():
    graph = build_graph("A B\nB C".splitlines())

    assert graph.edges() == [Edge("A", "B"), Edge("B", "C")]
    assert graph.root_name == "A"
    assert len(graph) == 3


def test_every_endpoint_is_registered(go_mod_graph_lines: List[str]):
    """Test that every word of every line ends up in the node set."""
    graph = build_graph(go_mod_graph_lines)

    for line in go_mod_graph_lines:
        for word in line.split():
            assert graph.exists(word)


def test_reads_open_file(go_mod_graph_path: Path):
    """Test building straight from a text file handle."""
    with open(go_mod_graph_path, encoding="utf-8") as f:
        graph = build_graph(f)

    assert graph.root_name == "example.com/app"
    assert graph.edge_count == 6


def test_node_identity_is_stable():
    """Test that repeated mentions resolve to one vertex."""
    graph = build_graph(["A B", "A C", "C B", "B A"])

    assert len(graph) == 3
    assert graph.names() == ["A", "B", "C"]
    assert graph.create("B") is graph.vertex("B")


def test_duplicate_lines_are_deduplicated():
    graph = build_graph(["A B", "A B", "A B"])
    assert graph.edge_count == 1


def test_blank_lines_are_skipped():
    """Test that empty and whitespace-only lines are ignored."""
    graph = build_graph(["", "A B\n", "\n", "   ", "B C\r\n"])

    assert graph.edges() == [Edge("A", "B"), Edge("B", "C")]


def test_empty_input_gives_empty_graph():
    graph = build_graph([])

    assert len(graph) == 0
    assert graph.root is None


def test_tabs_separate_words():
    graph = build_graph(["A\tB"])
    assert graph.edges() == [Edge("A", "B")]


@pytest.mark.parametrize("line, count", [("A B C", 3), ("A", 1)])
def test_malformed_line_aborts(line: str, count: int):
    """Test that a line with the wrong number of words fails the build."""
    with pytest.raises(MalformedLineError) as excinfo:
        build_graph(["X Y", line, "Y Z"])

    err = excinfo.value
    assert err.line == line
    assert err.line_number == 2
    assert err.word_count == count
    assert f"got {count}: {line}" in str(err)
    assert isinstance(err, ModGraphError)


def test_parse_edge_lines_is_lazy():
    """Test that pairs before a bad line are yielded before the error."""
    pairs = parse_edge_lines(["A B", "oops", "C D"])

    assert next(pairs) == ("A", "B")
    with pytest.raises(MalformedLineError):
        next(pairs)
