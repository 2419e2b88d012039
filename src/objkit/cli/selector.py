"""CLI command: objkit selector -- build a compound CSS selector."""

from __future__ import annotations

import sys

import click

from objkit.config import ObjkitConfig
from objkit.errors import SelectorError
from objkit.selector import Category, CssSelectorBuilder

_KINDS = {
    "element": Category.ELEMENT,
    "id": Category.ID,
    "class": Category.CLASS,
    "attr": Category.ATTRIBUTE,
    "pseudo-class": Category.PSEUDO_CLASS,
    "pseudo-element": Category.PSEUDO_ELEMENT,
}

# Facade entry point used for the first fragment of each category.
_ENTRY_POINTS = {
    Category.ELEMENT: "element",
    Category.ID: "id",
    Category.CLASS: "class_",
    Category.ATTRIBUTE: "attr",
    Category.PSEUDO_CLASS: "pseudo_class",
    Category.PSEUDO_ELEMENT: "pseudo_element",
}


def _parse_part(raw: str) -> tuple[Category, str]:
    """Split a ``kind:value`` argument at its first colon."""
    kind, sep, value = raw.partition(":")
    if not sep or not value:
        raise click.BadParameter(
            f"{raw!r} is not of the form kind:value", param_hint="PARTS"
        )
    try:
        return _KINDS[kind.strip().lower()], value
    except KeyError:
        choices = ", ".join(_KINDS)
        raise click.BadParameter(
            f"unknown kind {kind!r} (expected one of: {choices})",
            param_hint="PARTS",
        ) from None


@click.command()
@click.argument("parts", nargs=-1, required=True)
@click.pass_obj
def selector(config: ObjkitConfig | None, parts: tuple[str, ...]) -> None:
    """Build a selector from PARTS given as kind:value, in order.

    Kinds: element, id, class, attr, pseudo-class, pseudo-element.

    Example: objkit selector element:a attr:href pseudo-class:focus
    """
    fragments = [_parse_part(raw) for raw in parts]
    facade = CssSelectorBuilder(config)

    first_category, first_value = fragments[0]
    try:
        builder = getattr(facade, _ENTRY_POINTS[first_category])(first_value)
        for category, value in fragments[1:]:
            builder.add(category, value)
    except SelectorError as exc:
        click.echo(f"Selector error ({exc.category.label}): {exc}", err=True)
        sys.exit(1)

    click.echo(builder.stringify())
