import pytest

from shortpath import console


def _scripted(answers):
    it = iter(answers)
    return lambda prompt: next(it)


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    monkeypatch.setattr(console, "configure_logging", lambda: None)


def test_default_graph_session():
    output = []

    console.main(
        _scripted(["3", "1", "a", "i", "Y", "i", "a", "n"]),
        output.append,
    )

    assert "Invalid mode selected. Please try again." in output
    assert "Default graph loaded." in output
    assert any(line.startswith("Graph Visualization:") for line in output)
    assert "Shortest path from A to I: A, B, F, G, I" in output
    assert "Total Distance: 15" in output
    assert "Shortest path from I to A: I, E, B, A" in output
    assert "Total Distance: 14" in output


def test_custom_graph_session():
    output = []
    answers = [
        "2",
        "3", "a", "b", "c",
        "2",
        "a b",          # malformed
        "a b 1", "n",
        "a b 5",        # duplicate
        "a z 2",        # unknown node
        "b c 2", "y",
        "a",            # source
        "q",            # unknown destination
        "c",
        "N",
    ]

    console.main(_scripted(answers), output.append)

    assert any(line.startswith("Invalid edge:") for line in output)
    assert "This edge already exists. Please enter a different edge." in output
    assert "Node z does not exist. Please enter a valid edge." in output
    assert "Destination node does not exist. Please enter a valid node." in output
    assert "Custom graph loaded." in output
    assert any("Node C -> B(2)" in line for line in output)
    assert "Shortest path from A to C: A, B, C" in output
    assert "Total Distance: 3" in output


def test_reports_missing_path():
    output = []
    answers = ["2", "2", "a", "b", "0", "a", "b", "n"]

    console.main(_scripted(answers), output.append)

    assert "There is no path from A to B." in output


def test_count_prompt_repeats_on_non_decimal_digits():
    output = []

    graph = console.input_graph(_scripted(["²", "-1", "1", "a", "0"]), output.append)

    assert output.count("Enter the number of nodes:") == 3
    assert output.count("Please enter a non-negative whole number.") == 2
    assert [node.name for node in graph.nodes()] == ["A"]


def test_bidirectional_edge_rejected_when_reverse_exists():
    output = []
    answers = [
        "2", "a", "b",
        "2",
        "b a 3", "n",
        "a b 3", "y",   # reverse B -> A already present
        "a b 3", "n",
    ]

    graph = console.input_graph(_scripted(answers), output.append)

    assert "The reverse edge already exists. Please enter a different edge." in output
    views = {node.name: node.edges for node in graph.nodes()}
    assert views["A"] == (("B", 3),)
    assert views["B"] == (("A", 3),)


def test_unknown_endpoint_reported_before_bidirectional_question():
    output = []
    answers = ["1", "a", "1", "a z 2", "a a 1", "n"]

    console.input_graph(_scripted(answers), output.append)

    assert "Node z does not exist. Please enter a valid edge." in output
    assert output.count("Bidirectional? (Y/N)") == 1
    z_at = output.index("Node z does not exist. Please enter a valid edge.")
    assert "Bidirectional? (Y/N)" not in output[:z_at]
