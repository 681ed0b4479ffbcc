"""pathdoc: dot-notation path access over decoded JSON-like documents.

Primary API:
    PathDocument - Record identity plus a nested mapping, with get/set/has/remove
        operations addressed by dotted paths and a monotonic ``modified`` flag
    ValueKind, TypedValue - Closed set of value kinds and a tagged value wrapper
    split_path() - Split a dotted path into segments

Example:
    from pathdoc import PathDocument

    doc = PathDocument("logs", "_doc", "1", {"user": {"name": "ada"}})
    doc.set_value("user.address.city", "London")
    doc.get_value("user.name", str)  # "ada"
    doc.remove_value("user.name")
    assert doc.modified
"""

from __future__ import annotations

from pathdoc import logging
from pathdoc._version import __version__
from pathdoc.config import PATH_CONFIG, PathConfig
from pathdoc.errors import (
    EmptyPathError,
    FieldTypeMismatchError,
    InvalidDocumentError,
    InvalidPathError,
    NonMappingParentError,
    NullParentError,
    PathDocumentError,
    UnsupportedValueError,
)
from pathdoc.model.document import PathDocument
from pathdoc.types.base import ValueKind
from pathdoc.types.value import TypedValue
from pathdoc.utils.paths import split_path

__all__ = [
    # Version
    "__version__",
    # Model
    "PathDocument",
    # Types
    "ValueKind",
    "TypedValue",
    # Errors
    "PathDocumentError",
    "FieldTypeMismatchError",
    "InvalidPathError",
    "EmptyPathError",
    "NullParentError",
    "NonMappingParentError",
    "InvalidDocumentError",
    "UnsupportedValueError",
    # Configuration
    "PathConfig",
    "PATH_CONFIG",
    # Utilities
    "split_path",
    "logging",
]
