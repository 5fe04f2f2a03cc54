"""CardService: assemble a Card from (name, raw value) pairs.

Fields are built through the field registry by type. Number fields get
the settings' current locale. Fields are added in argument order, texts first.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from tangle.domain.entities import Card
from tangle.domain.errors import DuplicateNameError, NumberFormatError
from tangle.domain.fields import create_field
from tangle.domain.numbers import INVARIANT_LOCALE, LocaleProfile
from tangle.domain.types import CardFieldType
from tangle.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


def card_to_data(card: Card) -> dict[str, Any]:
    """Snapshot a card's identity and fields as plain data."""
    return {
        "id": str(card.id),
        "name": card.name,
        "kind": str(card.kind),
        "fields": [
            {"name": f.name, "type": str(f.type), "value": f.value} for f in card.fields
        ],
    }


class CardService:
    """Build cards for the CLI and other adapters.

    Args:
        locale: Current-locale profile handed to every number field.
        default_name: Card name used when none is given.
    """

    def __init__(
        self,
        *,
        locale: LocaleProfile = INVARIANT_LOCALE,
        default_name: str = Card.DEFAULT_NAME,
    ) -> None:
        self._locale = locale
        self._default_name = default_name

    def build_card(
        self,
        name: str | None = None,
        *,
        text: Sequence[tuple[str, str]] = (),
        number: Sequence[tuple[str, str]] = (),
    ) -> ServiceResult:
        op = "build_card"
        card = Card(name or self._default_name)
        warnings: list[str] = []

        try:
            for field_type, pairs in ((CardFieldType.TEXT, text), (CardFieldType.NUMBER, number)):
                for field_name, raw in pairs:
                    field = create_field(field_type, field_name, raw, locale=self._locale)
                    if field.type is CardFieldType.TEXT and field.value != raw:
                        warnings.append(f"Line breaks removed from text field {field_name!r}")
                    card.fields.add(field)
        except DuplicateNameError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="DUPLICATE_FIELD",
                    message=str(exc),
                    detail={"name": exc.name},
                ),
            )
        except NumberFormatError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="INVALID_NUMBER",
                    message=str(exc),
                    detail={"value": exc.value, "locale": self._locale.name},
                ),
            )

        logger.debug("Built card %s with %d fields", card.id, card.fields.count)
        return ServiceResult(ok=True, op=op, data=card_to_data(card), warnings=warnings)
