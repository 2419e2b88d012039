"""Error hierarchy for objkit."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from objkit.selector.category import Category


class ObjkitError(Exception):
    """Base error for all objkit errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Selector builder errors
# ---------------------------------------------------------------------------

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: element, id, "
    "class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(ObjkitError):
    """A selector fragment was appended in violation of the grammar."""

    def __init__(self, message: str, *, category: Category, **kwargs) -> None:
        super().__init__(message, **kwargs)
        self.category = category


class DuplicateError(SelectorError):
    """An element, id or pseudo-element was appended a second time."""

    def __init__(self, category: Category) -> None:
        super().__init__(DUPLICATE_MESSAGE, category=category)


class OrderError(SelectorError):
    """A fragment was appended after a strictly later category."""

    def __init__(self, category: Category, after: Category) -> None:
        super().__init__(ORDER_MESSAGE, category=category)
        self.after = after


# ---------------------------------------------------------------------------
# JSON bridge errors
# ---------------------------------------------------------------------------


class ParseError(ObjkitError):
    """Raised when JSON text cannot be parsed."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        *,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.line = line
        self.column = column
