"""Immutable builder state and the ordering/cardinality rules."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from objkit.errors import DuplicateError, OrderError
from objkit.selector.category import Category


@dataclass(frozen=True)
class SelectorState:
    """Watermark, seen flags and accumulated text of one compound selector.

    Attributes:
        watermark: Highest category appended so far, or None when empty.
        seen: Unique categories already appended.
        text: The rendered fragments, concatenated.
    """

    watermark: Category | None = None
    seen: frozenset[Category] = field(default_factory=frozenset)
    text: str = ""

    def check(self, category: Category) -> None:
        """Raise if appending *category* would break the grammar."""
        if category.unique and category in self.seen:
            raise DuplicateError(category)
        if self.watermark is not None and category < self.watermark:
            raise OrderError(category, after=self.watermark)

    def append(self, category: Category, value: str) -> SelectorState:
        """Return the state after appending a *category* fragment of *value*."""
        self.check(category)
        watermark = (
            category if self.watermark is None else max(self.watermark, category)
        )
        seen = self.seen | {category} if category.unique else self.seen
        return SelectorState(
            watermark=watermark,
            seen=seen,
            text=self.text + category.render(value),
        )

    def with_text(self, text: str) -> SelectorState:
        return replace(self, text=text)
