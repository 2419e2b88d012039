"""CLI command: objkit rect -- build a rectangle and report its area."""

from __future__ import annotations

import click

from objkit.rectangle import create_rectangle


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
def rect(width: float, height: float) -> None:
    """Create a WIDTH x HEIGHT rectangle and print its area."""
    r = create_rectangle(width, height)
    click.echo(f"width:  {r.width:g}")
    click.echo(f"height: {r.height:g}")
    click.echo(f"area:   {r.area():g}")
