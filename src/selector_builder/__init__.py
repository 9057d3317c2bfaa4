"""Selector Builder: assemble CSS selectors from structured calls."""
from __future__ import annotations

__version__ = "0.1.0"

from selector_builder.builder import SelectorBuilder, css_selector_builder
from selector_builder.config import CSS_COMBINATORS, BuilderConfig
from selector_builder.errors import DuplicateSingletonError, OrderError, SelectorError
from selector_builder.model import CombinedSelector, PartKind, Renderable, Selector

# Module-level shortcuts bound to the default builder
element = css_selector_builder.element
id = css_selector_builder.id  # kept out of __all__ to avoid shadowing the builtin
class_ = css_selector_builder.class_
attr = css_selector_builder.attr
pseudo_class = css_selector_builder.pseudo_class
pseudo_element = css_selector_builder.pseudo_element
combine = css_selector_builder.combine
stringify = css_selector_builder.stringify

__all__ = [
    "__version__",
    # Builder
    "SelectorBuilder",
    "css_selector_builder",
    "element",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    "stringify",
    # Model
    "PartKind",
    "Selector",
    "CombinedSelector",
    "Renderable",
    # Config
    "BuilderConfig",
    "CSS_COMBINATORS",
    # Errors
    "SelectorError",
    "OrderError",
    "DuplicateSingletonError",
]
