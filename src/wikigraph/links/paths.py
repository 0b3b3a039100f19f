"""Resolve link targets to absolute wiki paths."""

import os

CURRENT_DIR_PREFIX = "./"


def normalize(raw_path: str, base_dir: str) -> str:
    """Resolve a link target against the directory of the referencing document.

    Absolute paths come back unchanged. Relative ones lose any leading ``./``
    and are joined onto ``base_dir``. No filesystem access happens here.
    """
    if os.path.isabs(raw_path):
        return raw_path
    while raw_path.startswith(CURRENT_DIR_PREFIX):
        raw_path = raw_path[len(CURRENT_DIR_PREFIX):]
    return os.path.normpath(os.path.join(base_dir, raw_path))
