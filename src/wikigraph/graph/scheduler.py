"""Breadth-first link graph construction over a wiki."""

import logging
import os
import threading
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable

from ..links.extractor import DEFAULT_EXTENSION, extract_links
from ..links.paths import normalize
from ..models import ExtractionResult, Node
from .accumulator import LinkGraph

Extractor = Callable[[str, str], ExtractionResult]


class TraversalRun:
    """One invocation of the graph build, owning all of its state.

    Layers are expanded strictly in order. Every node of a layer is submitted
    to the worker pool before any result is awaited, and results are folded
    one at a time by the calling thread as they complete.
    """

    def __init__(
        self,
        start: str,
        max_depth: int,
        extension: str = DEFAULT_EXTENSION,
        max_workers: int | None = None,
        extract: Extractor = extract_links,
        cancel: threading.Event | None = None,
        timeout: float | None = None,
        logger: logging.Logger | None = None,
    ):
        if max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")
        if not os.path.isabs(start):
            raise ValueError(f"start must be an absolute path: {start}")

        self.start = os.path.normpath(start)
        self.max_depth = max_depth
        self.extension = extension
        self.max_workers = max_workers
        self.extract = extract
        self.cancel = cancel
        self.deadline = time.monotonic() + timeout if timeout is not None else None
        self.log = logger or logging.getLogger(__name__)

        self.graph = LinkGraph(self.start)
        self.visited: dict[str, int] = {}

    def _should_stop(self) -> bool:
        if self.cancel is not None and self.cancel.is_set():
            return True
        return self.deadline is not None and time.monotonic() >= self.deadline

    def _claim(self, path: str, distance: int) -> bool:
        """Enter ``path`` into the visited set. First claim wins."""
        if path in self.visited:
            return False
        self.visited[path] = distance
        return True

    def _fold(self, node: Node, result: ExtractionResult) -> list[Node]:
        """Merge one extraction into the graph; return newly claimed nodes."""
        next_distance = node.distance + 1
        new_nodes = []
        for path in result.candidates:
            if self._claim(path, next_distance):
                new_nodes.append(Node(path, next_distance))

        for target in result.forward:
            self.graph.record(target, node.path, node.distance)
        for source in result.backward:
            self.graph.record(node.path, source, self.visited[source])

        return new_nodes

    def _expand(self, pool: ThreadPoolExecutor, layer: list[Node]) -> list[Node]:
        futures = {pool.submit(self.extract, node.path, self.extension): node for node in layer}
        next_layer: list[Node] = []
        for future in as_completed(futures):
            node = futures[future]
            next_layer.extend(self._fold(node, future.result()))
        return sorted(next_layer, key=lambda n: n.path)

    def run(self) -> LinkGraph:
        """Build the graph. Safe to call once per instance."""
        if not os.path.isfile(self.start):
            self.log.warning(f"Start document not found: {self.start}")
            self.graph.start_found = False
            return self.graph

        self._claim(self.start, 0)
        layer = [Node(self.start, 0)]

        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            for depth in range(self.max_depth):
                if not layer:
                    break
                if self._should_stop():
                    self.log.info(f"Traversal stopped before layer {depth}")
                    self.graph.cancelled = True
                    break
                self.log.info(f"Expanding layer {depth}: {len(layer)} document(s)")
                layer = self._expand(pool, layer)

        self.graph.visited = dict(self.visited)
        self.log.info(
            f"Discovered {len(self.visited)} document(s), {self.graph.edge_count} link(s)"
        )
        return self.graph


def build_graph(
    start: str,
    max_depth: int,
    base_dir: str,
    **kwargs,
) -> LinkGraph:
    """Build the link graph reachable from ``start`` within ``max_depth`` hops.

    Args:
        start: Start document; relative paths are resolved against ``base_dir``.
        max_depth: Number of layers to expand. 0 expands nothing.
        base_dir: Absolute path to the wiki root.
        **kwargs: Passed through to TraversalRun (extension, max_workers,
            extract, cancel, timeout, logger).

    Returns:
        The accumulated LinkGraph. ``start_found`` is False when the start
        document does not exist.
    """
    if not os.path.isabs(base_dir):
        raise ValueError(f"base_dir must be an absolute path: {base_dir}")
    return TraversalRun(normalize(start, base_dir), max_depth, **kwargs).run()
