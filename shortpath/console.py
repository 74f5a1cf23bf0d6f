"""Interactive console for building a graph and querying shortest paths.

The user either loads the demo graph or types their own nodes and
edges, then asks for shortest paths until answering something other
than Y to the continuation prompt.
"""

from __future__ import annotations

from typing import Callable

from .domain.errors import GraphError
from .graph.load_graph import default_graph, parse_edge_line
from .graph.store import Graph
from .logging_setup import configure_logging

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def _ask(input_fn: InputFn, output_fn: OutputFn, prompt: str) -> str:
    output_fn(prompt)
    return input_fn("").strip()


def _ask_count(input_fn: InputFn, output_fn: OutputFn, prompt: str) -> int:
    while True:
        answer = _ask(input_fn, output_fn, prompt)
        if answer.isdecimal():
            return int(answer)
        output_fn("Please enter a non-negative whole number.")


def select_graph(input_fn: InputFn = input, output_fn: OutputFn = print) -> Graph:
    """Ask for a mode until a valid one is chosen and return the graph."""
    while True:
        mode = _ask(
            input_fn,
            output_fn,
            "Select mode: (1) Use default graph, (2) Enter own graph",
        )
        if mode == "1":
            graph = default_graph()
            output_fn("Default graph loaded.")
            return graph
        if mode == "2":
            return input_graph(input_fn, output_fn)
        output_fn("Invalid mode selected. Please try again.")


def input_graph(input_fn: InputFn = input, output_fn: OutputFn = print) -> Graph:
    """Read node names and edges from the user."""
    graph = Graph()

    node_count = _ask_count(input_fn, output_fn, "Enter the number of nodes:")
    for i in range(node_count):
        graph.add_node(_ask(input_fn, output_fn, f"Enter node name #{i + 1}:"))

    edge_count = _ask_count(input_fn, output_fn, "Enter the number of edges:")
    for i in range(edge_count):
        while True:
            line = _ask(
                input_fn,
                output_fn,
                f"Enter edge #{i + 1} in the format 'FromNode ToNode Weight':",
            )
            try:
                from_name, to_name, weight = parse_edge_line(line)
            except GraphError as e:
                output_fn(f"Invalid edge: {e.message}. Please try again.")
                continue

            missing = next((name for name in (from_name, to_name) if name not in graph), None)
            if missing is not None:
                output_fn(f"Node {missing} does not exist. Please enter a valid edge.")
                continue

            if graph.has_edge(from_name, to_name):
                output_fn("This edge already exists. Please enter a different edge.")
                continue

            bidirectional = _ask(input_fn, output_fn, "Bidirectional? (Y/N)").upper() == "Y"
            if bidirectional and graph.has_edge(to_name, from_name):
                output_fn("The reverse edge already exists. Please enter a different edge.")
                continue

            graph.add_edge(from_name, to_name, weight, bidirectional=bidirectional)
            break

    output_fn("Custom graph loaded.")
    return graph


def _ask_node(graph: Graph, input_fn: InputFn, output_fn: OutputFn, role: str) -> str:
    while True:
        name = _ask(input_fn, output_fn, f"Enter {role} node:")
        if name in graph:
            return graph.normalize(name)
        output_fn(f"{role.capitalize()} node does not exist. Please enter a valid node.")


def query_loop(graph: Graph, input_fn: InputFn = input, output_fn: OutputFn = print) -> None:
    """Answer shortest-path queries until the user stops."""
    while True:
        source = _ask_node(graph, input_fn, output_fn, "source")
        destination = _ask_node(graph, input_fn, output_fn, "destination")

        result = graph.shortest_path(source, destination)
        if result.found:
            output_fn(
                f"Shortest path from {source} to {destination}: "
                + ", ".join(result.node_names)
            )
            output_fn(f"Total Distance: {result.distance}")
        else:
            output_fn(f"There is no path from {source} to {destination}.")

        answer = _ask(
            input_fn,
            output_fn,
            "Do you want to find another shortest path? (Y/N)",
        )
        if answer.upper() != "Y":
            break


def main(input_fn: InputFn = input, output_fn: OutputFn = print) -> None:
    configure_logging()
    graph = select_graph(input_fn, output_fn)
    output_fn(graph.render())
    query_loop(graph, input_fn, output_fn)


if __name__ == "__main__":
    main()
