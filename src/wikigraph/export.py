"""Serialise link graphs for display in other tools."""

import os
from typing import Any

from .graph.accumulator import LinkGraph
from .graph.reducer import shortest_paths


def to_dot(graph: LinkGraph) -> str:
    """Render the graph in DOT, using file names as node labels."""
    lines = ["digraph wiki {", "  node [shape=box];"]
    for target, source, _ in graph.edges():
        lines.append(f'  "{os.path.basename(source)}" -> "{os.path.basename(target)}";')
    lines.append("}")
    return "\n".join(lines) + "\n"


def to_rows(graph: LinkGraph) -> list[dict[str, Any]]:
    """Flat ``node``/``path_length`` listing, one row per document."""
    return [
        {"node": n.path, "path_length": n.distance}
        for n in shortest_paths(graph)
    ]


def to_json_dict(graph: LinkGraph) -> dict[str, Any]:
    return {
        "start": graph.start,
        "start_found": graph.start_found,
        "cancelled": graph.cancelled,
        "edges": [
            {"target": target, "source": source, "distance": distance}
            for target, source, distance in graph.edges()
        ],
        "nodes": [
            {"node": n.path, "distance": n.distance}
            for n in shortest_paths(graph)
        ],
    }
