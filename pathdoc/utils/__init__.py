"""Utility helpers for pathdoc."""

from pathdoc.utils.paths import split_path

__all__ = ["split_path"]
