"""Data models used throughout wikigraph."""

import os
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Node:
    """A frontier node: a document and its distance from the start."""
    path: str
    distance: int


@dataclass
class ExtractionResult:
    """Links found for one document."""
    path: str
    forward: list[str] = field(default_factory=list)
    backward: list[str] = field(default_factory=list)

    @property
    def candidates(self) -> list[str]:
        return self.forward + self.backward


@dataclass
class LinkEntry:
    """Documents linking to one target, with each source's distance."""
    sources: list[str] = field(default_factory=list)
    distances: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class NodeDistance:
    """A document and its shortest distance, or None when unreachable."""
    path: str
    distance: int | None

    @property
    def reachable(self) -> bool:
        return self.distance is not None

    @property
    def name(self) -> str:
        return os.path.basename(self.path)
