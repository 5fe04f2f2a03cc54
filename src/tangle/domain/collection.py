"""CardFieldCollection: name-unique, ownership-exclusive field container.

INVARIANT: At most one field per name at any time.
INVARIANT: Every stored field is keyed by its current ``name``. Owned
fields reject direct renames; :meth:`CardFieldCollection.rename` is the
only path that changes the name of a stored field.

Iteration follows insertion order and is stable while the collection is
not mutated. The collection is not thread-safe; callers that share one
across threads must hold their own lock around mutation and iteration.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from tangle.domain.errors import (
    FIELD_ALREADY_ADDED_MESSAGE,
    DuplicateNameError,
    FieldOwnershipError,
)
from tangle.domain.fields import CardField

logger = logging.getLogger(__name__)


def _key_of(item: CardField | str | None) -> str | None:
    if item is None or isinstance(item, str):
        return item
    return item.name


class CardFieldCollection:
    """Ordered mapping of field name to :class:`CardField`."""

    def __init__(self) -> None:
        self._fields: dict[str, CardField] = {}

    @property
    def count(self) -> int:
        """Number of fields in the collection."""
        return len(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[CardField]:
        return iter(self._fields.values())

    def __contains__(self, item: object) -> bool:
        if item is None or isinstance(item, (str, CardField)):
            return self.contains(item)
        return False

    def __repr__(self) -> str:
        return f"CardFieldCollection({list(self._fields)!r})"

    def add(self, field: CardField) -> None:
        """Insert *field*.

        Raises:
            DuplicateNameError: If a field with the same name exists.
                The collection is left unchanged.
            FieldOwnershipError: If *field* already belongs to a collection.
        """
        if field._owned:
            raise FieldOwnershipError(field.name, FIELD_ALREADY_ADDED_MESSAGE)
        if field.name in self._fields:
            raise DuplicateNameError(field.name)
        self._fields[field.name] = field
        field._owned = True
        logger.debug("Added %s field %r", field.type, field.name)

    def remove(self, item: CardField | str) -> bool:
        """Remove a field by instance or by name.

        Returns:
            True if a field was removed, False if the name was absent.
        """
        key = _key_of(item)
        if key is None:
            return False
        removed = self._fields.pop(key, None)
        if removed is None:
            return False
        removed._owned = False
        logger.debug("Removed field %r", key)
        return True

    def clear(self) -> None:
        """Remove every field, releasing ownership."""
        for field in self._fields.values():
            field._owned = False
        self._fields.clear()

    def contains(self, item: CardField | str | None) -> bool:
        """Check whether a field with this name (or this field's name) exists.

        Blank or None names are never present.
        """
        key = _key_of(item)
        if key is None or not key.strip():
            return False
        return key in self._fields

    def get(self, name: str | None) -> CardField | None:
        """Return the field called *name*, or None."""
        if name is None:
            return None
        return self._fields.get(name)

    def rename(self, old_name: str, new_name: str) -> CardField:
        """Rename the field *old_name* to *new_name*, keeping its position.

        Raises:
            KeyError: If no field is called *old_name*.
            DuplicateNameError: If another field is already called *new_name*.
        """
        field = self._fields.get(old_name)
        if field is None:
            msg = f"No field named {old_name!r} in the collection"
            raise KeyError(msg)
        if new_name == old_name:
            return field
        if new_name in self._fields:
            raise DuplicateNameError(new_name)

        self._fields = {
            (new_name if key == old_name else key): value for key, value in self._fields.items()
        }
        field._name = new_name
        logger.debug("Renamed field %r -> %r", old_name, new_name)
        return field

    def to_list(self) -> list[CardField]:
        """Return a snapshot list of the current fields."""
        return list(self._fields.values())

    def copy_to(self, target: list[CardField | None], index: int = 0) -> None:
        """Write the current fields into *target* starting at *index*.

        Raises:
            ValueError: If *index* is negative or *target* is too short.
        """
        if index < 0:
            msg = f"Index must be non-negative, got {index}"
            raise ValueError(msg)
        if len(target) - index < len(self._fields):
            msg = (
                f"Target has room for {max(len(target) - index, 0)} fields "
                f"from index {index}; {len(self._fields)} needed"
            )
            raise ValueError(msg)
        for offset, field in enumerate(self._fields.values()):
            target[index + offset] = field
