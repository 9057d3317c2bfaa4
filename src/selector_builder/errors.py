"""Error types raised while assembling a selector."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selector_builder.model import PartKind


class SelectorError(Exception):
    """Base error for all selector construction failures."""

    def __init__(
        self, message: str, kind: PartKind | None = None, value: str | None = None
    ):
        self.kind = kind
        self.value = value
        super().__init__(message)


class OrderError(SelectorError):
    """A part was appended after a part that must come later."""

    MESSAGE = (
        "Selector parts should be arranged in the following order: "
        "element, id, class, attribute, pseudo-class, pseudo-element"
    )

    def __init__(self, kind: PartKind | None = None, value: str | None = None):
        super().__init__(self.MESSAGE, kind=kind, value=value)


class DuplicateSingletonError(SelectorError):
    """A second element, id or pseudo-element was appended."""

    MESSAGE = (
        "Element, id and pseudo-element should not occur more than one time "
        "inside the selector"
    )

    def __init__(self, kind: PartKind | None = None, value: str | None = None):
        super().__init__(self.MESSAGE, kind=kind, value=value)
