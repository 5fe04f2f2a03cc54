"""Card error hierarchy and message templates.

INVARIANT: Every error carries the offending name or value so callers can
report it without re-parsing the message.
"""

from __future__ import annotations

FIELD_EXISTS_MESSAGE = "A field named {name!r} already exists in the collection"
FIELD_OWNED_MESSAGE = "Field {name!r} belongs to a collection; rename it through the collection"
FIELD_ALREADY_ADDED_MESSAGE = "Field {name!r} is already owned by another collection"
INVALID_NUMBER_MESSAGE = "Value {value!r} is not a valid number"


class CardError(Exception):
    """Base class for card and field errors."""


class DuplicateNameError(CardError, ValueError):
    """A field with the same name is already in the collection."""

    def __init__(self, name: str) -> None:
        super().__init__(FIELD_EXISTS_MESSAGE.format(name=name))
        self.name = name


class NumberFormatError(CardError, ValueError):
    """A string matched neither the invariant nor the current numeric grammar."""

    def __init__(self, value: str) -> None:
        super().__init__(INVALID_NUMBER_MESSAGE.format(value=value))
        self.value = value


FormatError = NumberFormatError


class FieldOwnershipError(CardError, RuntimeError):
    """A field was mutated or re-added in a way that would break its owner's index."""

    def __init__(self, name: str, message: str = FIELD_OWNED_MESSAGE) -> None:
        super().__init__(message.format(name=name))
        self.name = name
