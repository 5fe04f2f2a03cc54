"""Entity base class and the Card entity.

INVARIANT: An entity's ``id`` is generated once at construction and never
changes. ``kind`` is fixed by the concrete class.
"""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod

from tangle.domain.collection import CardFieldCollection
from tangle.domain.types import EntityType


class Entity(ABC):
    """Uniquely identified, named domain object."""

    def __init__(self, name: str) -> None:
        self._id = uuid.uuid4()
        self.name = name

    @property
    def id(self) -> uuid.UUID:
        """Random 128-bit identifier assigned at construction."""
        return self._id

    @property
    @abstractmethod
    def kind(self) -> EntityType:
        """Discriminator for the concrete entity class."""
        ...

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id}, name={self.name!r})"


class Card(Entity):
    """Entity that owns one :class:`CardFieldCollection`.

    The card does no field validation of its own; name uniqueness is the
    collection's job and value rules belong to each field.
    """

    DEFAULT_NAME = "Card"

    def __init__(self, name: str = DEFAULT_NAME) -> None:
        super().__init__(name)
        self._fields = CardFieldCollection()

    @property
    def kind(self) -> EntityType:
        return EntityType.CARD

    @property
    def fields(self) -> CardFieldCollection:
        return self._fields
