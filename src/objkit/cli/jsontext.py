"""CLI command: objkit json -- parse JSON text and print it canonically."""

from __future__ import annotations

import sys

import click

from objkit.errors import ParseError
from objkit.jsonbridge import from_json_text, to_json_text


@click.command(name="json")
@click.argument("text")
def json_cmd(text: str) -> None:
    """Parse TEXT as JSON and print its compact canonical form."""
    try:
        value = from_json_text({}, text)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
    click.echo(to_json_text(value))
