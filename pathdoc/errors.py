"""Exceptions raised by path-addressed document access.

Each class also derives from the built-in exception a caller would catch for
the same condition: type conflicts are ``TypeError``, bad arguments are
``ValueError``. Missing paths are never an error.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Tuple, Type, Union


def type_name(tp: Any) -> str:
    """Return a readable name for a type, a tuple of types, or a ValueKind."""
    if isinstance(tp, tuple):
        return " | ".join(type_name(t) for t in tp)
    if isinstance(tp, type):
        return tp.__name__
    if isinstance(tp, Enum):
        return tp.name
    return str(tp)


class PathDocumentError(Exception):
    """Base class for all pathdoc errors."""


class FieldTypeMismatchError(PathDocumentError, TypeError):
    """A value exists at the path but is not of the expected type."""

    def __init__(
        self,
        path: str | None,
        actual_type: type,
        expected_type: Union[type, Tuple[Type[Any], ...], Any],
    ) -> None:
        self.path = path
        self.actual_type = actual_type
        self.expected_type = expected_type
        super().__init__(
            f"field [{path}] of type [{type_name(actual_type)}] "
            f"cannot be cast to [{type_name(expected_type)}]"
        )


class InvalidPathError(PathDocumentError, ValueError):
    """A write was requested with a path that cannot be written."""


class EmptyPathError(InvalidPathError):
    def __init__(self) -> None:
        super().__init__("cannot add null or empty field")


class NullParentError(InvalidPathError):
    """An intermediate segment of a write path holds ``None``."""

    def __init__(self, path: str, segment: str) -> None:
        self.path = path
        self.segment = segment
        super().__init__(
            f"cannot add field to null parent [{segment}], [dict] expected instead."
        )


class NonMappingParentError(InvalidPathError):
    """An intermediate segment of a write path holds a non-mapping value."""

    def __init__(self, path: str, segment: str, actual_type: type) -> None:
        self.path = path
        self.segment = segment
        self.actual_type = actual_type
        super().__init__(
            f"cannot add field to parent [{segment}] of type "
            f"[{type_name(actual_type)}], [dict] expected instead."
        )


class InvalidDocumentError(PathDocumentError, ValueError):
    """The document root is not a mapping."""

    def __init__(self, actual_type: type) -> None:
        self.actual_type = actual_type
        super().__init__(
            f"document root must be a mapping, got [{type_name(actual_type)}]"
        )


class UnsupportedValueError(PathDocumentError, TypeError):
    """A value falls outside the closed set of document value kinds."""

    def __init__(self, actual_type: type) -> None:
        self.actual_type = actual_type
        super().__init__(f"unsupported document value type [{type_name(actual_type)}]")
