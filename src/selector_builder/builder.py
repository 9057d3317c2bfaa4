"""SelectorBuilder: the entry point for assembling CSS selectors.

Example:
    builder = css_selector_builder
    builder.id("main").class_("container").class_("editable").stringify()
    # '#main.container.editable'
"""

from __future__ import annotations

import logging

from selector_builder.config import BuilderConfig
from selector_builder.model import CombinedSelector, Renderable, Selector

__all__ = ["SelectorBuilder", "css_selector_builder"]

logger = logging.getLogger("selector_builder")

_EMPTY = Selector()


class SelectorBuilder:
    """Facade that starts selector chains and joins finished selectors."""

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self.config = config or BuilderConfig()

    def element(self, value: str) -> Selector:
        return _EMPTY.element(value)

    def id(self, value: str) -> Selector:
        return _EMPTY.id(value)

    def class_(self, value: str) -> Selector:
        return _EMPTY.class_(value)

    def attr(self, value: str) -> Selector:
        return _EMPTY.attr(value)

    def pseudo_class(self, value: str) -> Selector:
        return _EMPTY.pseudo_class(value)

    def pseudo_element(self, value: str) -> Selector:
        return _EMPTY.pseudo_element(value)

    def combine(
        self, left: Renderable, combinator: str, right: Renderable
    ) -> CombinedSelector:
        """Join *left* and *right* with *combinator*, padded by one space each side.

        The symbol is inserted verbatim. Nested combines keep the padding of
        the inner result, so ``' '`` between two compounds renders as three
        spaces.
        """
        if (
            self.config.warn_unknown_combinators
            and combinator not in self.config.combinators
        ):
            logger.warning("Non-standard combinator %r", combinator)
        text = f"{left.text} {combinator} {right.text}"
        logger.debug("Combined: %r", text)
        return CombinedSelector(text=text)

    def stringify(self, selector: Renderable) -> str:
        return selector.text


setattr(SelectorBuilder, "class", SelectorBuilder.class_)

css_selector_builder = SelectorBuilder()
