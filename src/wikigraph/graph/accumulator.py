"""Adjacency/distance map accumulated over a traversal run."""

import threading
from typing import Iterator

from ..models import LinkEntry


class LinkGraph:
    """Maps each target document to the documents linking to it.

    Every source carries the shortest distance from the start at which it
    was offered for that target. ``record`` is atomic, so a graph handed
    back after cancellation never holds a half-written edge.
    """

    def __init__(self, start: str):
        self.start = start
        self.start_found = True
        self.cancelled = False
        self.visited: dict[str, int] = {}
        self._entries: dict[str, LinkEntry] = {}
        self._lock = threading.Lock()

    def record(self, target: str, source: str, distance: int) -> None:
        """Add the edge ``source -> target``, keeping the minimum distance."""
        with self._lock:
            entry = self._entries.setdefault(target, LinkEntry())
            if source not in entry.distances:
                entry.sources.append(source)
                entry.distances[source] = distance
            elif distance < entry.distances[source]:
                entry.distances[source] = distance

    def sources(self, target: str) -> list[str]:
        entry = self._entries.get(target)
        return sorted(entry.sources) if entry else []

    def distance(self, target: str, source: str) -> int | None:
        entry = self._entries.get(target)
        if entry is None:
            return None
        return entry.distances.get(source)

    def targets(self) -> list[str]:
        return sorted(self._entries)

    def edges(self) -> Iterator[tuple[str, str, int]]:
        """Yield ``(target, source, distance)`` in sorted order."""
        for target in self.targets():
            entry = self._entries[target]
            for source in sorted(entry.sources):
                yield target, source, entry.distances[source]

    def items(self) -> Iterator[tuple[str, LinkEntry]]:
        for target in self.targets():
            yield target, self._entries[target]

    @property
    def edge_count(self) -> int:
        return sum(len(entry.sources) for entry in self._entries.values())

    def to_dict(self) -> dict[str, tuple[list[str], dict[str, int]]]:
        """Snapshot independent of the order edges were recorded in."""
        result: dict[str, tuple[list[str], dict[str, int]]] = {}
        for target, entry in self.items():
            sources = sorted(entry.sources)
            result[target] = (sources, {s: entry.distances[s] for s in sources})
        return result

    def __contains__(self, target: str) -> bool:
        return target in self._entries

    def __len__(self) -> int:
        return len(self._entries)
