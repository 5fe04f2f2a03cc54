"""Discriminator enums for entities and card fields."""

from __future__ import annotations

from enum import StrEnum


class EntityType(StrEnum):
    """Concrete entity kinds."""

    CARD = "card"


class CardFieldType(StrEnum):
    """Value kinds a card field can hold."""

    TEXT = "text"
    NUMBER = "number"
