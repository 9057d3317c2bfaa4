"""CLI command: selector-builder parts -- list part kinds in rank order."""

from __future__ import annotations

import click

from selector_builder.model import PartKind


@click.command()
def parts() -> None:
    """List selector part kinds in the order they must appear."""
    for kind in PartKind:
        multiplicity = "once" if kind.singleton else "repeatable"
        example = kind.render("value")
        click.echo(f"{kind.rank}  {kind.label:<15} {example:<10} {multiplicity}")
