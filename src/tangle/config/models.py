"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, tangle.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from tangle.domain.numbers import RESERVED_NUMBER_CHARS, LocaleProfile


class LocaleConfig(BaseModel):
    """[locale] section: the *current* numeric locale for number fields."""

    model_config = {"frozen": True}

    name: str = "current"
    decimal_separator: str = Field(default=".", min_length=1, max_length=1)
    group_separator: str = Field(default=",", max_length=1)

    @field_validator("decimal_separator", "group_separator")
    @classmethod
    def _not_number_syntax(cls, value: str) -> str:
        if any(ch in RESERVED_NUMBER_CHARS for ch in value):
            msg = f"separator {value!r} collides with digits, signs, or exponent markers"
            raise ValueError(msg)
        return value

    @model_validator(mode="after")
    def _separators_differ(self) -> LocaleConfig:
        if self.decimal_separator == self.group_separator:
            msg = "locale.decimal_separator and locale.group_separator must differ"
            raise ValueError(msg)
        return self

    def to_profile(self) -> LocaleProfile:
        """Build the domain :class:`LocaleProfile` for this section."""
        return LocaleProfile(
            self.name,
            decimal_separator=self.decimal_separator,
            group_separator=self.group_separator,
        )


class CardConfig(BaseModel):
    """[card] section."""

    model_config = {"frozen": True}

    default_name: str = "Card"

