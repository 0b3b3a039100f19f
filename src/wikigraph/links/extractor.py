"""Forward and backward link discovery for wiki documents."""

import logging
import os
import re
from pathlib import Path

from ..models import ExtractionResult
from .paths import normalize

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".md"


def _forward_pattern(extension: str) -> re.Pattern:
    return re.compile(r"\[[^\]]*\]\(([^)]+?" + re.escape(extension) + r")\)")


def _backward_pattern(filename: str) -> re.Pattern:
    return re.compile(r"\[[^\]]*\]\((?:\./)?" + re.escape(filename) + r"\)")


def _read_text(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.debug(f"Could not read {path}: {e}")
        return None


def _links_in_text(text: str, filepath: str, extension: str) -> list[str]:
    base_dir = os.path.dirname(filepath)
    links = []
    for match in _forward_pattern(extension).finditer(text):
        target = match.group(1)
        # Remote pages are not part of the wiki
        if "://" in target:
            continue
        links.append(normalize(target, base_dir))
    return links


def find_forward_links(filepath: str, extension: str = DEFAULT_EXTENSION) -> list[str]:
    """Return the documents ``filepath`` links to, in order of appearance.

    Targets are resolved relative to the document's own directory. An
    unreadable document has no forward links.
    """
    text = _read_text(Path(filepath))
    if text is None:
        return []
    return _links_in_text(text, filepath, extension)


def _siblings(filepath: str, extension: str) -> list[Path]:
    """Other documents with the same extension in the directory of ``filepath``."""
    path = Path(filepath)
    try:
        entries = sorted(path.parent.iterdir())
    except OSError as e:
        logger.debug(f"Could not list {path.parent}: {e}")
        return []

    siblings = []
    for entry in entries:
        if entry.name == path.name or entry.name.startswith("."):
            continue
        if entry.suffix != extension:
            continue
        try:
            if not entry.is_file():
                continue
        except OSError:
            continue
        siblings.append(entry)
    return siblings


def find_backward_links(filepath: str, extension: str = DEFAULT_EXTENSION) -> list[str]:
    """Return sibling documents that link to ``filepath``.

    Each sibling is reported at most once, however many times it links here.
    Subdirectories are not searched.
    """
    filename = os.path.basename(filepath)
    pattern = _backward_pattern(filename)
    sources = []

    for sibling in _siblings(filepath, extension):
        text = _read_text(sibling)
        if not text or filename not in text:
            continue
        for line in text.splitlines():
            if pattern.search(line):
                sources.append(os.path.normpath(str(sibling)))
                break

    return sources


def extract_links(filepath: str, extension: str = DEFAULT_EXTENSION) -> ExtractionResult:
    """Collect forward and backward links for a single document.

    A document that cannot be read is a dead end: it contributes neither
    forward nor backward links.
    """
    text = _read_text(Path(filepath))
    if text is None:
        return ExtractionResult(path=filepath)
    return ExtractionResult(
        path=filepath,
        forward=_links_in_text(text, filepath, extension),
        backward=find_backward_links(filepath, extension),
    )
