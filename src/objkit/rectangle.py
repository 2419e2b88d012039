"""Rectangle value with a computed area."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Rectangle:
    """A width/height pair. Inputs are stored as given, without validation."""

    width: Any
    height: Any

    def area(self) -> Any:
        return self.width * self.height


def create_rectangle(width: Any, height: Any) -> Rectangle:
    """Return a Rectangle with the given dimensions.

    Example:
        >>> r = create_rectangle(10, 20)
        >>> r.area()
        200
    """
    return Rectangle(width=width, height=height)
