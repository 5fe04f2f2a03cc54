"""Command: build a card from field options and print it."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from tangle.commands._context import AppContext


def _split_pairs(
    ctx: click.Context, param: click.Parameter, values: tuple[str, ...]
) -> list[tuple[str, str]]:
    pairs: list[tuple[str, str]] = []
    for item in values:
        name, sep, raw = item.partition("=")
        if not sep or not name:
            msg = f"expected NAME=VALUE, got {item!r}"
            raise click.BadParameter(msg, ctx=ctx, param=param)
        pairs.append((name, raw))
    return pairs


@click.command()
@click.option("-n", "--name", default=None, help="Card name (default from config).")
@click.option(
    "-t",
    "--text",
    "text_fields",
    multiple=True,
    callback=_split_pairs,
    metavar="NAME=VALUE",
    help="Add a text field. Repeatable.",
)
@click.option(
    "-N",
    "--number",
    "number_fields",
    multiple=True,
    callback=_split_pairs,
    metavar="NAME=VALUE",
    help="Add a number field. Repeatable.",
)
@click.pass_obj
def card(
    app: AppContext,
    name: str | None,
    text_fields: list[tuple[str, str]],
    number_fields: list[tuple[str, str]],
) -> None:
    """Build a card from text and number fields.

    \b
    Examples:
      tangle card -n Apple -t colour=red -N weight=1234.5
      tangle --json card -t title=Hello -N price=12.50
    """
    from tangle.services.card import CardService

    service = CardService(
        locale=app.settings.current_locale(),
        default_name=app.settings.card.default_name,
    )
    result = service.build_card(name, text=text_fields, number=number_fields)
    app.emit(result)
