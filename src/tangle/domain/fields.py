"""Card field ABC, concrete field variants, and the field registry.

A field is a named container for exactly one value of a specific kind.
The public ``value`` surface is always text; each variant owns the
conversion between that text and its internal representation:

- :class:`TextCardField` strips line breaks so the stored value is single-line.
- :class:`NumberCardField` parses invariant text first, then the field's
  current locale, and renders back to invariant text.

Name uniqueness is not a field concern. It is enforced by
:class:`~tangle.domain.collection.CardFieldCollection`, which is also the
only place an owned field may be renamed.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod

from tangle.domain.errors import FieldOwnershipError, NumberFormatError
from tangle.domain.numbers import INVARIANT_LOCALE, LocaleProfile, format_number
from tangle.domain.types import CardFieldType

logger = logging.getLogger(__name__)

_LINE_BREAK_RE = re.compile("\r\n|[\r\n\u2028\u2029]")


class CardField(ABC):
    """Abstract base class for card fields.

    Subclasses implement ``type`` and the ``value`` accessors.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._owned = False

    @property
    def name(self) -> str:
        """Field name, unique within the owning collection."""
        return self._name

    @name.setter
    def name(self, new_name: str) -> None:
        # INVARIANT: an owned field is keyed by its name; only the owner re-keys it.
        if self._owned:
            raise FieldOwnershipError(self._name)
        self._name = new_name

    @property
    @abstractmethod
    def type(self) -> CardFieldType:
        """Discriminator for the value kind."""
        ...

    @property
    @abstractmethod
    def value(self) -> str | None:
        """The value rendered as text, or None when unset."""
        ...

    @value.setter
    @abstractmethod
    def value(self, raw: str | None) -> None: ...

    def __str__(self) -> str:
        return self.value or ""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, value={self.value!r})"


class TextCardField(CardField):
    """Single-line text field."""

    def __init__(self, name: str, value: str | None = None) -> None:
        super().__init__(name)
        self._value: str | None = None
        self.value = value

    @property
    def type(self) -> CardFieldType:
        return CardFieldType.TEXT

    @property
    def value(self) -> str | None:
        return self._value

    @value.setter
    def value(self, raw: str | None) -> None:
        self._value = None if raw is None else strip_line_breaks(raw)


def strip_line_breaks(text: str) -> str:
    """Remove every line-break sequence from *text*.

    Line breaks are ``\\r\\n``, ``\\n``, ``\\r`` and the Unicode line and
    paragraph separators. Other control characters are kept.

    Examples:
        >>> strip_line_breaks("abc\\r\\ndef\\n")
        'abcdef'
    """
    return _LINE_BREAK_RE.sub("", text)


class NumberCardField(CardField):
    """Floating-point field with invariant-then-locale parsing.

    Args:
        name: Field name.
        value: Initial number, or None for unset.
        locale: The field's *current* locale profile, tried after the
            invariant grammar when text is assigned to ``value``.
    """

    def __init__(
        self,
        name: str,
        value: float | None = None,
        *,
        locale: LocaleProfile = INVARIANT_LOCALE,
    ) -> None:
        super().__init__(name)
        self._number = None if value is None else float(value)
        self.locale = locale

    @property
    def type(self) -> CardFieldType:
        return CardFieldType.NUMBER

    @property
    def number(self) -> float | None:
        """The stored number, or None when unset."""
        return self._number

    @property
    def value(self) -> str | None:
        if self._number is None:
            return None
        return format_number(self._number)

    @value.setter
    def value(self, raw: str | None) -> None:
        self.set_value(raw)

    def set_value(self, raw: str | None, *, locale: LocaleProfile | None = None) -> None:
        """Parse *raw* and store it.

        Blank input clears the field. Otherwise the invariant grammar is
        tried first, then *locale* (default: the field's own profile).

        Raises:
            NumberFormatError: If neither grammar accepts *raw*. The
                previous value is left unchanged.
        """
        if raw is None or not raw.strip():
            self._number = None
            return

        parsed = INVARIANT_LOCALE.parse(raw)
        if parsed is None:
            current = locale or self.locale
            parsed = current.parse(raw)
            if parsed is None:
                raise NumberFormatError(raw)
            logger.debug("Parsed %r for field %r with locale %s", raw, self.name, current.name)

        self._number = parsed


# ---------------------------------------------------------------------------
# Field registry
# ---------------------------------------------------------------------------

FIELD_REGISTRY: dict[CardFieldType, type[CardField]] = {
    CardFieldType.TEXT: TextCardField,
    CardFieldType.NUMBER: NumberCardField,
}


def create_field(
    field_type: CardFieldType | str,
    name: str,
    value: str | None = None,
    *,
    locale: LocaleProfile | None = None,
) -> CardField:
    """Build an empty field of *field_type* and assign *value* as text.

    *locale* becomes the current locale profile of a number field; text
    fields ignore it.

    Raises:
        KeyError: If *field_type* is not a registered field type.
        NumberFormatError: If a number field rejects *value*.
    """
    try:
        key = CardFieldType(field_type)
    except ValueError:
        msg = f"No field type registered for {field_type!r}"
        raise KeyError(msg) from None
    field_cls = FIELD_REGISTRY[key]
    if key is CardFieldType.NUMBER and locale is not None:
        field = field_cls(name, locale=locale)
    else:
        field = field_cls(name)
    field.value = value
    return field
