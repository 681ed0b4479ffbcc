"""Document model."""

from pathdoc.model.document import PathDocument

__all__ = ["PathDocument"]
