"""Closed set of value kinds a document may hold."""

from __future__ import annotations

from collections.abc import Mapping
from enum import IntEnum
from typing import Any, Tuple

from pathdoc.errors import UnsupportedValueError


class ValueKind(IntEnum):
    """Kind of a decoded JSON-like value.

    Booleans are their own kind even though ``bool`` subclasses ``int``.
    """

    NULL = 1
    STRING = 2
    NUMBER = 3
    BOOLEAN = 4
    MAPPING = 5
    SEQUENCE = 6

    @property
    def python_types(self) -> Tuple[type, ...]:
        """Python types that carry values of this kind."""
        return _PYTHON_TYPES[self]

    @classmethod
    def of(cls, value: Any) -> "ValueKind":
        """Classify a Python value.

        Raises:
            UnsupportedValueError: If the value is not a JSON-like type.
        """
        if value is None:
            return cls.NULL
        if isinstance(value, str):
            return cls.STRING
        # bool before numbers: bool is an int subclass
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, (int, float)):
            return cls.NUMBER
        if isinstance(value, Mapping):
            return cls.MAPPING
        if isinstance(value, (list, tuple)):
            return cls.SEQUENCE
        raise UnsupportedValueError(type(value))

    @classmethod
    def from_string(cls, value: str) -> "ValueKind":
        """Parse a case-insensitive kind name (e.g. "string", "MAPPING").

        Raises:
            ValueError: If the string doesn't match any member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid value kind '{value}'. Valid values are: {valid}"
            ) from None


_PYTHON_TYPES = {
    ValueKind.NULL: (type(None),),
    ValueKind.STRING: (str,),
    ValueKind.NUMBER: (int, float),
    ValueKind.BOOLEAN: (bool,),
    ValueKind.MAPPING: (Mapping,),
    ValueKind.SEQUENCE: (list, tuple),
}
