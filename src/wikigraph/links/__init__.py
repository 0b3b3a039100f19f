"""Link discovery over wiki documents."""

from .extractor import extract_links, find_backward_links, find_forward_links
from .paths import normalize

__all__ = ["extract_links", "find_backward_links", "find_forward_links", "normalize"]
