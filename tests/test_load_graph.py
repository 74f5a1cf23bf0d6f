import pytest

from shortpath.config import GraphConfig
from shortpath.domain.errors import GraphError, InvalidReferenceError
from shortpath.domain.models import PathResult
from shortpath.graph.load_graph import (
    DEFAULT_EDGES,
    DEFAULT_NODES,
    build_graph,
    build_graph_from_lines,
    default_graph,
    parse_edge_line,
)


def test_parse_edge_line():
    assert parse_edge_line("a b 4") == ("a", "b", 4)
    assert parse_edge_line("  A   C  10 ") == ("A", "C", 10)


@pytest.mark.parametrize("line", ["", "A B", "A B 1 2", "A B x", "A B -3"])
def test_parse_edge_line_rejects_malformed(line):
    with pytest.raises(GraphError) as excinfo:
        parse_edge_line(line)
    assert excinfo.value.line == line


def test_parse_edge_line_keeps_cause():
    with pytest.raises(GraphError) as excinfo:
        parse_edge_line("A B four")
    assert isinstance(excinfo.value.cause, ValueError)


def test_build_graph_with_mixed_edge_specs():
    graph = build_graph(["A", "B", "C"], [("A", "B", 1, True), ("B", "C", 2)])

    assert graph.has_edge("B", "A")
    assert not graph.has_edge("C", "B")
    assert graph.shortest_path("C", "A") == PathResult.unreachable()
    assert graph.shortest_path("A", "C") == PathResult(("A", "B", "C"), 3)


def test_build_graph_unknown_endpoint():
    with pytest.raises(InvalidReferenceError):
        build_graph(["A"], [("A", "B", 1)])


def test_build_graph_from_lines_skips_comments():
    lines = [
        "# triangle",
        "a b 1",
        "",
        "b c 2",
        "a c 4",
    ]

    graph = build_graph_from_lines(["a", "b", "c"], lines)

    assert graph.shortest_path("a", "c") == PathResult(("A", "B", "C"), 3)


def test_build_graph_respects_config():
    graph = build_graph(["a", "A"], [("a", "A", 1)], config=GraphConfig(normalize_case=False))

    assert len(graph) == 2
    assert graph.has_edge("a", "A")
    assert not graph.has_edge("A", "a")


def test_default_graph_shape():
    graph = default_graph()

    assert [node.name for node in graph.nodes()] == list(DEFAULT_NODES)
    edge_count = sum(len(node.edges) for node in graph.nodes())
    bidirectional = sum(1 for spec in DEFAULT_EDGES if spec[3])
    assert edge_count == 2 * bidirectional + (len(DEFAULT_EDGES) - bidirectional)
    assert graph.has_edge("E", "B")
    assert not graph.has_edge("B", "E")
