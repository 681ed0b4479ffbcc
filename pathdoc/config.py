"""Configuration classes for pathdoc."""

from dataclasses import dataclass
from typing import List, Optional


@dataclass
class PathConfig:
    """Configuration for dotted path handling."""

    # Character sequence separating path segments
    separator: str = "."

    def __post_init__(self) -> None:
        if not self.separator:
            raise ValueError("PathConfig.separator must be a non-empty string")

    def split(self, path: Optional[str]) -> List[str]:
        """Split a path into segments, dropping empty ones.

        ``None``, ``""`` and separator-only paths yield an empty list.
        """
        if not path:
            return []
        return [segment for segment in path.split(self.separator) if segment]


# Global configuration instance
PATH_CONFIG = PathConfig()
