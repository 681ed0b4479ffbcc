"""Path-addressed access to a single decoded document.

`PathDocument` wraps the identity of one record (container, type and record
ids) together with its nested, JSON-like body, and reads or writes values at
dotted paths such as ``"user.address.city"``.

Reads, existence checks and deletes treat any path that does not resolve as
absent. Writes create missing intermediate mappings and refuse to descend
through ``None`` or non-mapping values. Writes are not transactional: a
failing ``set_value`` leaves any mappings it already created in place.

The document is mutated in place and is owned by one caller at a time.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping, MutableMapping
from typing import Any, Dict, List, Optional, Tuple

from pathdoc.errors import (
    EmptyPathError,
    FieldTypeMismatchError,
    InvalidDocumentError,
    NonMappingParentError,
    NullParentError,
)
from pathdoc.logging import get_logger
from pathdoc.types.value import ExpectedType, TypedValue, freeze_value, matches_type
from pathdoc.utils.paths import split_path

logger = get_logger(__name__)


class PathDocument:
    """A record identity plus a mutable nested mapping addressed by path.

    Attributes:
        container_id: Identifier of the container (e.g. index) holding the record.
        type_id: Identifier of the record type.
        record_id: Identifier of the record itself.
        document: The nested mapping. Returned by reference.
        modified: True once any write or delete has changed the document.
    """

    def __init__(
        self,
        container_id: str,
        type_id: str,
        record_id: str,
        document: Optional[MutableMapping[str, Any]] = None,
    ) -> None:
        """Wrap ``document`` without copying it.

        Args:
            container_id: Container identifier.
            type_id: Type identifier.
            record_id: Record identifier.
            document: Root mapping. ``None`` starts an empty document.

        Raises:
            InvalidDocumentError: If ``document`` is not a mapping.
        """
        if document is None:
            document = {}
        elif not isinstance(document, MutableMapping):
            raise InvalidDocumentError(type(document))
        self._container_id = container_id
        self._type_id = type_id
        self._record_id = record_id
        self._document: MutableMapping[str, Any] = document
        self._modified = False

    # ---- Identity and state -----------------------------------------------
    @property
    def container_id(self) -> str:
        return self._container_id

    @property
    def type_id(self) -> str:
        return self._type_id

    @property
    def record_id(self) -> str:
        return self._record_id

    @property
    def identity(self) -> Tuple[str, str, str]:
        """Return ``(container_id, type_id, record_id)``."""
        return (self._container_id, self._type_id, self._record_id)

    @property
    def document(self) -> MutableMapping[str, Any]:
        return self._document

    @property
    def modified(self) -> bool:
        return self._modified

    # ---- Path accessors ---------------------------------------------------
    def get_value(
        self, path: Optional[str], expected_type: ExpectedType = object
    ) -> Any:
        """Return the value at ``path``.

        Args:
            path: Path within the document in dot-notation.
            expected_type: Type, tuple of types, or `ValueKind` the value must
                satisfy. Defaults to ``object`` (any value).

        Returns:
            The value if present and not ``None``, otherwise ``None``.

        Raises:
            FieldTypeMismatchError: If a value is present but does not satisfy
                ``expected_type``.
        """
        segments = split_path(path)
        if not segments:
            return None
        parent = self._resolve_parent(segments)
        if parent is None:
            return None
        value = parent.get(segments[-1])
        if value is None:
            return None
        if matches_type(value, expected_type):
            return value
        raise FieldTypeMismatchError(path, type(value), expected_type)

    def get_typed_value(self, path: Optional[str]) -> Optional[TypedValue]:
        """Return the value at ``path`` tagged with its kind.

        A present ``None`` value yields a NULL `TypedValue`, so absence and
        null are distinguishable.

        Raises:
            UnsupportedValueError: If the value is not a JSON-like type.
        """
        segments = split_path(path)
        if not segments:
            return None
        parent = self._resolve_parent(segments)
        if parent is None or segments[-1] not in parent:
            return None
        return TypedValue.wrap(parent[segments[-1]])

    def has_value(self, path: Optional[str]) -> bool:
        """Return True if the document contains a key at ``path``.

        A key holding ``None`` counts as present.
        """
        segments = split_path(path)
        if not segments:
            return False
        parent = self._resolve_parent(segments)
        if parent is None:
            return False
        return segments[-1] in parent

    def remove_value(self, path: Optional[str]) -> None:
        """Remove the key at ``path`` if present; otherwise do nothing.

        A key below a read-only mapping is treated as unreachable and left in
        place.
        """
        segments = split_path(path)
        if not segments:
            return
        parent = self._resolve_parent(segments, MutableMapping)
        if parent is None:
            return
        leaf = segments[-1]
        if leaf in parent:
            del parent[leaf]
            self._modified = True

    def set_value(self, path: Optional[str], value: Any) -> None:
        """Set ``value`` at ``path``, creating missing parent mappings.

        Args:
            path: Path within the document in dot-notation.
            value: Value to store. Replaces any existing value at the leaf.

        Raises:
            EmptyPathError: If ``path`` is empty or ``None``.
            NullParentError: If an intermediate segment holds ``None``.
            NonMappingParentError: If an intermediate segment holds a
                non-mapping value.
        """
        segments = split_path(path)
        if not segments:
            raise EmptyPathError()

        inner = self._document
        for segment in segments[:-1]:
            if segment not in inner:
                logger.debug("Creating parent [%s] for path [%s]", segment, path)
                child: Dict[str, Any] = {}
                inner[segment] = child
                inner = child
                continue
            obj = inner[segment]
            if isinstance(obj, MutableMapping):
                inner = obj
            elif obj is None:
                logger.debug(
                    "Rejected write to [%s]: parent [%s] is null", path, segment
                )
                raise NullParentError(path, segment)
            else:
                logger.debug(
                    "Rejected write to [%s]: parent [%s] is %s",
                    path,
                    segment,
                    type(obj).__name__,
                )
                raise NonMappingParentError(path, segment, type(obj))

        inner[segments[-1]] = value
        self._modified = True

    def _resolve_parent(
        self, segments: List[str], mapping_type: type = Mapping
    ) -> Optional[Any]:
        """Walk all but the last segment; return None if any is not a mapping.

        Deletes pass ``MutableMapping`` so that, as with writes, a read-only
        mapping counts as a non-mapping parent.
        """
        inner: Any = self._document
        for segment in segments[:-1]:
            inner = inner.get(segment)
            if not isinstance(inner, mapping_type):
                return None
        return inner

    # ---- Copies -----------------------------------------------------------
    def shallow_clone(self) -> "PathDocument":
        """Return a copy with a new top-level mapping.

        Nested mappings and lists are shared with this document: writing
        through an existing nested mapping of the clone is visible here. The
        clone starts unmodified.
        """
        return PathDocument(
            self._container_id, self._type_id, self._record_id, dict(self._document)
        )

    def deep_clone(self) -> "PathDocument":
        """Return a fully independent copy. The clone starts unmodified."""
        return PathDocument(
            self._container_id,
            self._type_id,
            self._record_id,
            copy.deepcopy(self._document),
        )

    def __copy__(self) -> "PathDocument":
        return self.shallow_clone()

    def __deepcopy__(self, memo: Dict[int, Any]) -> "PathDocument":
        return self.deep_clone()

    # ---- Comparison -------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, PathDocument):
            return NotImplemented
        # Frozen comparison keeps booleans apart from numbers (True != 1)
        return self.identity == other.identity and freeze_value(
            self._document
        ) == freeze_value(other._document)

    def __hash__(self) -> int:
        return hash((self.identity, freeze_value(self._document)))

    def __repr__(self) -> str:
        return (
            f"PathDocument(container_id={self._container_id!r}, "
            f"type_id={self._type_id!r}, record_id={self._record_id!r}, "
            f"modified={self._modified})"
        )
