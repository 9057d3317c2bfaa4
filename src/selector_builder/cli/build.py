"""CLI command: selector-builder build -- assemble a selector from tokens."""

from __future__ import annotations

import sys

import click

from selector_builder.builder import SelectorBuilder
from selector_builder.config import BuilderConfig
from selector_builder.errors import SelectorError
from selector_builder.model import PartKind, Renderable, Selector


def _split_compounds(
    tokens: tuple[str, ...],
) -> tuple[list[list[tuple[PartKind, str]]], list[str]]:
    """Split tokens into per-compound part lists and the combinators between them."""
    compounds: list[list[tuple[PartKind, str]]] = [[]]
    combinators: list[str] = []
    for token in tokens:
        label, sep, value = token.partition("=")
        if sep:
            try:
                kind = PartKind.from_label(label)
            except ValueError as exc:
                raise click.BadParameter(str(exc), param_hint="TOKENS") from exc
            compounds[-1].append((kind, value))
            continue
        if not compounds[-1]:
            raise click.UsageError(f"Combinator {token!r} has no selector on its left")
        combinators.append(token)
        compounds.append([])
    if not compounds[-1]:
        raise click.UsageError("Selector is empty after the last combinator")
    return compounds, combinators


def assemble(tokens: tuple[str, ...], builder: SelectorBuilder) -> Renderable:
    """Build the selector described by *tokens*.

    Compounds are combined right to left, so ``a + b ~ c`` becomes
    ``combine(a, '+', combine(b, '~', c))``.
    """
    compounds, combinators = _split_compounds(tokens)
    built: list[Selector] = []
    for parts in compounds:
        selector = Selector()
        for kind, value in parts:
            selector = selector.append(kind, value)
        built.append(selector)

    result: Renderable = built[-1]
    for left, combinator in zip(reversed(built[:-1]), reversed(combinators)):
        result = builder.combine(left, combinator, result)
    return result


@click.command()
@click.argument("tokens", nargs=-1, required=True)
@click.pass_obj
def build(config: BuilderConfig | None, tokens: tuple[str, ...]) -> None:
    """Assemble a selector from KIND=VALUE tokens and combinators.

    KIND is one of element, id, class, attr, pseudo-class or pseudo-element.
    Any token without '=' is a combinator joining the compounds around it.

    Example: selector-builder build element=div id=main + element=p class=lead
    """
    builder = SelectorBuilder(config=config)
    try:
        selector = assemble(tokens, builder)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(builder.stringify(selector))
