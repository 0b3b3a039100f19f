"""Flatten a link graph into per-document shortest distances."""

from ..models import NodeDistance
from .accumulator import LinkGraph


def shortest_paths(graph: LinkGraph, start: str | None = None) -> list[NodeDistance]:
    """Return every document in ``graph`` with its minimum recorded distance.

    A document's distance is the smallest value recorded for it as a source
    under any target. The start is always 0. Documents that only ever appear
    as targets get ``None``.
    """
    start = start if start is not None else graph.start
    best: dict[str, int | None] = {start: 0}

    for target, entry in graph.items():
        best.setdefault(target, None)
        for source in entry.sources:
            if source == start:
                continue
            distance = entry.distances[source]
            current = best.get(source)
            best[source] = distance if current is None else min(current, distance)

    return sorted(
        (NodeDistance(path, distance) for path, distance in best.items()),
        key=lambda n: (n.distance is None, n.distance or 0, n.path),
    )
