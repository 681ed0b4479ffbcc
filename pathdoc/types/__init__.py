"""Document value kinds and the tagged value wrapper."""

from pathdoc.types.base import ValueKind
from pathdoc.types.value import TypedValue, freeze_value, matches_type

__all__ = ["ValueKind", "TypedValue", "freeze_value", "matches_type"]
