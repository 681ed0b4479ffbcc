"""Tagged value variant and type-matching helpers.

`TypedValue` pairs a raw document value with its `ValueKind` so callers can
branch on the kind, or ask for a specific type with `TypedValue.as_type` and
get either the raw value or a `FieldTypeMismatchError`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Tuple, Type, Union

from pathdoc.errors import FieldTypeMismatchError, UnsupportedValueError
from pathdoc.types.base import ValueKind

#: What callers may pass as an expected type.
ExpectedType = Union[ValueKind, Type[Any], Tuple[Type[Any], ...]]


def matches_type(value: Any, expected: ExpectedType) -> bool:
    """Return True if ``value`` satisfies ``expected``.

    ``expected`` may be a `ValueKind`, a type, or a tuple of types. A bool only
    satisfies ``bool`` or ``object``, never ``int`` or ``float``.
    """
    if isinstance(expected, ValueKind):
        try:
            return ValueKind.of(value) is expected
        except UnsupportedValueError:
            return False
    types = expected if isinstance(expected, tuple) else (expected,)
    if isinstance(value, bool):
        return any(t is bool or t is object for t in types)
    return isinstance(value, types)


# Marks frozen booleans; no document value can be this object
_BOOLEAN_TAG = object()


def freeze_value(value: Any) -> Any:
    """Return a hashable equivalent of a nested document value.

    Booleans are tagged so ``True`` and ``1`` freeze differently, keeping
    BOOLEAN and NUMBER distinct under comparison and hashing.
    """
    if isinstance(value, bool):
        return (_BOOLEAN_TAG, value)
    if isinstance(value, Mapping):
        return frozenset((key, freeze_value(val)) for key, val in value.items())
    if isinstance(value, (list, tuple)):
        return tuple(freeze_value(item) for item in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(freeze_value(item) for item in value)
    return value


@dataclass(frozen=True, eq=False)
class TypedValue:
    """A document value tagged with its kind.

    Equality and hashing go through `freeze_value`, so wrapped mappings and
    lists are hashable.

    Attributes:
        kind: Classification of ``value``.
        value: The raw value, shared with the document it came from.
    """

    kind: ValueKind
    value: Any

    @classmethod
    def wrap(cls, value: Any) -> "TypedValue":
        """Classify ``value`` and wrap it.

        Raises:
            UnsupportedValueError: If the value is not a JSON-like type.
        """
        return cls(kind=ValueKind.of(value), value=value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypedValue):
            return NotImplemented
        return self.kind is other.kind and freeze_value(self.value) == freeze_value(
            other.value
        )

    def __hash__(self) -> int:
        return hash((self.kind, freeze_value(self.value)))

    @property
    def is_null(self) -> bool:
        return self.kind is ValueKind.NULL

    def as_type(self, expected: ExpectedType, path: Optional[str] = None) -> Any:
        """Return the raw value if it satisfies ``expected``.

        Args:
            expected: A `ValueKind`, a type, or a tuple of types.
            path: Path the value was read from, used in the error message.

        Raises:
            FieldTypeMismatchError: If the value does not match.
        """
        if matches_type(self.value, expected):
            return self.value
        raise FieldTypeMismatchError(path, type(self.value), expected)
