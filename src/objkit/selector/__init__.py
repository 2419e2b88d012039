from objkit.selector.builder import (
    CssSelectorBuilder,
    SelectorBuilder,
    css_selector_builder,
)
from objkit.selector.category import Category, Combinator
from objkit.selector.state import SelectorState

__all__ = [
    "CssSelectorBuilder",
    "SelectorBuilder",
    "css_selector_builder",
    "Category",
    "Combinator",
    "SelectorState",
]
