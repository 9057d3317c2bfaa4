"""Selector model: part kinds and the immutable selector values.

A compound selector is built by appending parts in rank order:

    element -> id -> class -> attribute -> pseudo-class -> pseudo-element

Element, id and pseudo-element may each appear once. Class, attribute and
pseudo-class repeat freely.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Union

from selector_builder.errors import DuplicateSingletonError, OrderError

__all__ = ["PartKind", "Selector", "CombinedSelector", "Renderable"]

logger = logging.getLogger("selector_builder")


class PartKind(Enum):
    """The six kinds of simple selector, in the order they must appear."""

    ELEMENT = ("element", 1, "{}", True)
    ID = ("id", 2, "#{}", True)
    CLASS = ("class", 3, ".{}", False)
    ATTRIBUTE = ("attr", 4, "[{}]", False)
    PSEUDO_CLASS = ("pseudo-class", 5, ":{}", False)
    PSEUDO_ELEMENT = ("pseudo-element", 6, "::{}", True)

    def __init__(self, label: str, rank: int, template: str, singleton: bool) -> None:
        self.label = label
        self.rank = rank
        self.template = template
        self.singleton = singleton

    def render(self, value: str) -> str:
        return self.template.format(value)

    @classmethod
    def from_label(cls, label: str) -> PartKind:
        for kind in cls:
            if kind.label == label:
                return kind
        raise ValueError(f"Unknown selector part: {label!r}")


@dataclass(frozen=True)
class Selector:
    """A compound selector under construction.

    Every part method returns a new ``Selector``; the receiver is never
    modified, so one value can be the base of several chains.

    Attributes:
        text: The rendered selector so far.
        last_rank: Rank of the last appended part, 0 when empty.
        seen: Singleton kinds already used.
    """

    text: str = ""
    last_rank: int = 0
    seen: frozenset[PartKind] = frozenset()

    def append(self, kind: PartKind, value: str) -> Selector:
        """Return a copy of this selector with one more part.

        Raises:
            OrderError: *kind* ranks before the last appended part.
            DuplicateSingletonError: *kind* is a singleton already present.
        """
        if kind.rank < self.last_rank:
            logger.debug("Rejected %s %r after rank %d", kind.label, value, self.last_rank)
            raise OrderError(kind, value)
        if kind.singleton and kind in self.seen:
            logger.debug("Rejected duplicate %s %r", kind.label, value)
            raise DuplicateSingletonError(kind, value)

        seen = self.seen | {kind} if kind.singleton else self.seen
        text = self.text + kind.render(value)
        logger.debug("Appended %s: %r", kind.label, text)
        return replace(self, text=text, last_rank=kind.rank, seen=seen)

    def element(self, value: str) -> Selector:
        return self.append(PartKind.ELEMENT, value)

    def id(self, value: str) -> Selector:
        return self.append(PartKind.ID, value)

    def class_(self, value: str) -> Selector:
        return self.append(PartKind.CLASS, value)

    def attr(self, value: str) -> Selector:
        return self.append(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        return self.append(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return self.append(PartKind.PSEUDO_ELEMENT, value)

    def stringify(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text


# ``class`` is a keyword, so the method is only reachable via getattr.
setattr(Selector, "class", Selector.class_)


@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator.

    Only the rendered text is kept: a combined selector accepts no further
    parts, but may be combined again.
    """

    text: str

    def stringify(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text


Renderable = Union[Selector, CombinedSelector]
