"""CSS selector builder and its facade.

A compound selector is built by chaining fragment calls in grammar order::

    element#id.class[attr]:pseudo-class::pseudo-element

``class``, ``attr`` and ``pseudo-class`` may repeat; ``element``, ``id`` and
``pseudo-element`` appear at most once. Compound selectors are joined with
:meth:`CssSelectorBuilder.combine`.

Example:
    >>> b = css_selector_builder
    >>> b.combine(b.element("div").id("main"), "+", b.element("span")).stringify()
    'div#main + span'
"""

from __future__ import annotations

import logging

from objkit.config import DEFAULT_CONFIG, ObjkitConfig
from objkit.errors import SelectorError
from objkit.selector.category import Category, Combinator
from objkit.selector.state import SelectorState

__all__ = ["SelectorBuilder", "CssSelectorBuilder", "css_selector_builder"]

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Accumulates fragments of one selector.

    Every fragment method returns the builder itself so calls can be chained.
    A call that breaks the ordering or cardinality rules raises a
    :class:`~objkit.errors.SelectorError` subclass; the builder should then be
    discarded.
    """

    def __init__(self, config: ObjkitConfig | None = None) -> None:
        self._config = config or DEFAULT_CONFIG
        self._state = SelectorState()

    @property
    def state(self) -> SelectorState:
        return self._state

    # --- fragments ------------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        return self._append(Category.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self._append(Category.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._append(Category.CLASS, value)

    def __getattr__(self, name: str):
        # ``class`` is a keyword; getattr(obj, "class") resolves to class_.
        if name == "class":
            return self.class_
        raise AttributeError(
            f"{type(self).__name__!r} object has no attribute {name!r}"
        )

    def attr(self, value: str) -> SelectorBuilder:
        return self._append(Category.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._append(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._append(Category.PSEUDO_ELEMENT, value)

    def add(self, category: Category, value: str) -> SelectorBuilder:
        """Append a fragment by category; the named methods delegate here."""
        return self._append(Category(category), value)

    def combine(
        self, left: SelectorBuilder, combinator: str, right: SelectorBuilder
    ) -> SelectorBuilder:
        """Append ``"<left> <combinator> <right>"`` to this builder's text.

        The operands are read with :meth:`render`, so they are not consumed.
        """
        token = combinator.value if isinstance(combinator, Combinator) else combinator
        if not Combinator.is_known(token):
            logger.warning("Unknown selector combinator %r", token)
        text = f"{left.render()} {token} {right.render()}"
        self._state = self._state.with_text(self._state.text + text)
        return self

    # --- output ---------------------------------------------------------------

    def render(self) -> str:
        """Return the accumulated text without clearing it."""
        return self._state.text

    def stringify(self) -> str:
        """Return the accumulated text.

        With the default configuration the text buffer is cleared, so a
        second call returns an empty string. Set
        ``ObjkitConfig.reset_on_stringify`` to False to keep it.
        """
        text = self._state.text
        if self._config.reset_on_stringify:
            self._state = self._state.with_text("")
        return text

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self._state.text!r})"

    def _append(self, category: Category, value: str) -> SelectorBuilder:
        try:
            self._state = self._state.append(category, value)
        except SelectorError as exc:
            logger.debug(
                "Rejected %s fragment %r after %r: %s",
                category.label,
                value,
                self._state.text,
                exc,
            )
            raise
        return self


class CssSelectorBuilder:
    """Facade creating a fresh :class:`SelectorBuilder` for every call.

    The facade holds nothing but configuration and can be shared freely.
    """

    def __init__(self, config: ObjkitConfig | None = None) -> None:
        self._config = config or DEFAULT_CONFIG

    def _builder(self) -> SelectorBuilder:
        return SelectorBuilder(self._config)

    def element(self, value: str) -> SelectorBuilder:
        return self._builder().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return self._builder().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._builder().class_(value)

    def __getattr__(self, name: str):
        # ``class`` is a keyword; getattr(obj, "class") resolves to class_.
        if name == "class":
            return self.class_
        raise AttributeError(
            f"{type(self).__name__!r} object has no attribute {name!r}"
        )

    def attr(self, value: str) -> SelectorBuilder:
        return self._builder().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._builder().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._builder().pseudo_element(value)

    def combine(
        self, left: SelectorBuilder, combinator: str, right: SelectorBuilder
    ) -> SelectorBuilder:
        return self._builder().combine(left, combinator, right)


css_selector_builder = CssSelectorBuilder()
