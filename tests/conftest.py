import pytest

from shortpath.config import reset_config
from shortpath.graph.store import Graph


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def triangle() -> Graph:
    graph = Graph()
    for name in ("A", "B", "C"):
        graph.add_node(name)
    graph.add_edge("A", "B", 1)
    graph.add_edge("B", "C", 2)
    graph.add_edge("A", "C", 4)
    return graph
