from __future__ import annotations

from typing import List, Optional

from pathdoc.config import PATH_CONFIG, PathConfig


def split_path(path: Optional[str], separator: Optional[str] = None) -> List[str]:
    """Split a dotted path into its segments.

    Empty segments are skipped, so ``"a..b"`` gives ``["a", "b"]`` and
    ``".a."`` gives ``["a"]``. A ``None``, empty, or separator-only path gives
    an empty list, which callers treat as "no path".

    Args:
        path: Path in dot-notation (or using ``separator``).
        separator: Override for ``PATH_CONFIG.separator``.

    Returns:
        List of segments; the last one is the leaf key.
    """
    if separator is None:
        return PATH_CONFIG.split(path)
    return PathConfig(separator=separator).split(path)
