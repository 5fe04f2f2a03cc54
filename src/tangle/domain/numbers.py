"""Locale profiles and the numeric grammar used by number fields.

A :class:`LocaleProfile` is an explicit description of how numbers are
written: decimal separator, group (thousands) separator, and the symbols
for not-a-number and infinity. Parsing never consults process-wide locale
state; callers pass the profile they mean.

The accepted grammar mirrors a "float with thousands" style:

- optional surrounding whitespace
- optional leading sign
- integer digits, optionally interleaved with group separators
- optional decimal separator followed by digits
- optional exponent (``e``/``E``, optional sign, digits)

At least one digit must appear before the exponent.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field

# Characters the grammar itself uses; never valid as separators.
RESERVED_NUMBER_CHARS = frozenset("0123456789+-eE")


@dataclass(frozen=True)
class LocaleProfile:
    """Numeric formatting rules for one locale."""

    name: str
    decimal_separator: str = "."
    group_separator: str = ","
    nan_symbol: str = "NaN"
    infinity_symbol: str = "Infinity"
    _pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.decimal_separator) != 1:
            msg = f"Decimal separator must be a single character, got {self.decimal_separator!r}"
            raise ValueError(msg)
        for separator in (self.decimal_separator, self.group_separator):
            if any(ch in RESERVED_NUMBER_CHARS for ch in separator):
                msg = f"Separator {separator!r} collides with digits, signs, or exponent markers"
                raise ValueError(msg)
        if self.group_separator == self.decimal_separator:
            msg = f"Group and decimal separators must differ (both {self.decimal_separator!r})"
            raise ValueError(msg)
        object.__setattr__(self, "_pattern", _build_pattern(self))

    def parse(self, text: str) -> float | None:
        """Parse *text* under this profile; return None when it does not match.

        Examples:
            >>> INVARIANT_LOCALE.parse("1,234.56")
            1234.56
            >>> LocaleProfile("de", ",", ".").parse("1.234,56")
            1234.56
            >>> INVARIANT_LOCALE.parse("1.234,56") is None
            True
        """
        candidate = text.strip()
        special = self._parse_special(candidate)
        if special is not None:
            return special

        if not self._pattern.match(candidate):
            return None

        if self.group_separator:
            candidate = candidate.replace(self.group_separator, "")
        candidate = candidate.replace(self.decimal_separator, ".")
        return float(candidate)

    def _parse_special(self, candidate: str) -> float | None:
        sign = 1.0
        body = candidate
        if body[:1] in ("+", "-"):
            sign = -1.0 if body[0] == "-" else 1.0
            body = body[1:]
        lowered = body.casefold()
        if lowered == self.nan_symbol.casefold():
            return math.nan
        if lowered == self.infinity_symbol.casefold():
            return sign * math.inf
        return None


def _build_pattern(profile: LocaleProfile) -> re.Pattern[str]:
    dec = re.escape(profile.decimal_separator)
    if profile.group_separator:
        grp = re.escape(profile.group_separator)
        integer = rf"[0-9](?:[0-9]|{grp})*"
    else:
        integer = r"[0-9]+"
    return re.compile(
        rf"^[+-]?(?=[0-9]|{dec}[0-9])(?:{integer})?(?:{dec}[0-9]*)?(?:[eE][+-]?[0-9]+)?$"
    )


INVARIANT_LOCALE = LocaleProfile("invariant")


def format_number(value: float) -> str:
    """Render *value* as invariant text that parses back to the same float.

    Integral values drop the trailing ``.0`` (``5.0`` -> ``"5"``).
    """
    if math.isnan(value):
        return INVARIANT_LOCALE.nan_symbol
    if math.isinf(value):
        prefix = "-" if value < 0 else ""
        return f"{prefix}{INVARIANT_LOCALE.infinity_symbol}"
    text = repr(value)
    if text.endswith(".0"):
        text = text[:-2]
    return text
