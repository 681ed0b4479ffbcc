"""Tests for ValueKind classification."""

import pytest

from pathdoc.errors import UnsupportedValueError
from pathdoc.types.base import ValueKind


@pytest.mark.parametrize(
    "value,kind",
    [
        (None, ValueKind.NULL),
        ("text", ValueKind.STRING),
        ("", ValueKind.STRING),
        (0, ValueKind.NUMBER),
        (1.5, ValueKind.NUMBER),
        (True, ValueKind.BOOLEAN),
        (False, ValueKind.BOOLEAN),
        ({}, ValueKind.MAPPING),
        ({"a": 1}, ValueKind.MAPPING),
        ([], ValueKind.SEQUENCE),
        ((1, 2), ValueKind.SEQUENCE),
    ],
)
def test_of_classifies_json_like_values(value, kind):
    assert ValueKind.of(value) is kind


def test_of_rejects_other_types():
    with pytest.raises(UnsupportedValueError, match=r"\[set\]"):
        ValueKind.of({1, 2})
    with pytest.raises(TypeError):
        ValueKind.of(object())


def test_from_string_is_case_insensitive():
    assert ValueKind.from_string("string") is ValueKind.STRING
    assert ValueKind.from_string("Mapping") is ValueKind.MAPPING


def test_from_string_invalid_lists_valid_names():
    with pytest.raises(ValueError, match="Valid values are: NULL, STRING"):
        ValueKind.from_string("integer")


def test_python_types():
    assert ValueKind.NUMBER.python_types == (int, float)
    assert ValueKind.NULL.python_types == (type(None),)
    assert bool in ValueKind.BOOLEAN.python_types
