"""JSON bridge: compact serialization and capability reattachment.

``to_json_text`` renders values as compact JSON text. ``from_json_text``
parses text back into plain data and wraps it in a :class:`Reattached`
adapter so that methods defined on a capability set (a class, an instance or
a mapping) can be called on the parsed fields.

Example:
    >>> r = from_json_text(Rectangle, '{"width": 10, "height": 20}')
    >>> r.area()
    200
"""

from __future__ import annotations

import dataclasses
import inspect
import json
import logging
import math
import types
from collections.abc import Mapping
from typing import Any

from objkit.errors import ParseError

__all__ = [
    "Reattached",
    "to_json_text",
    "from_json_text",
    "unwrap",
    "capabilities_of",
]

logger = logging.getLogger(__name__)


class Reattached:
    """Parsed JSON data paired with the capability set it was loaded against.

    Attribute lookup checks the parsed object's own fields first, then the
    capability set. Functions found on the capability set are bound to this
    adapter, so ``self.width`` inside a capability method reads the parsed
    field. The adapter defines no public attributes of its own; use
    :func:`unwrap` and :func:`capabilities_of` to reach the raw parts.
    """

    __slots__ = ("_data", "_capabilities")

    def __init__(self, capabilities: Any, data: Any) -> None:
        object.__setattr__(self, "_capabilities", capabilities)
        object.__setattr__(self, "_data", data)

    # --- attribute protocol ---------------------------------------------------

    def __getattr__(self, name: str) -> Any:
        if name in Reattached.__slots__:
            raise AttributeError(name)  # slot not yet assigned
        data = self._data
        if isinstance(data, dict) and name in data:
            return data[name]
        return self._capability(name)

    def __setattr__(self, name: str, value: Any) -> None:
        if not isinstance(self._data, dict):
            raise AttributeError(
                f"cannot set field {name!r} on non-object JSON value"
            )
        self._data[name] = value

    def __delattr__(self, name: str) -> None:
        if isinstance(self._data, dict) and name in self._data:
            del self._data[name]
            return
        raise AttributeError(name)

    def _capability(self, name: str) -> Any:
        caps = self._capabilities
        if isinstance(caps, Mapping):
            if name not in caps:
                raise AttributeError(name)
            value = caps[name]
            if inspect.isfunction(value):
                return types.MethodType(value, self)
            return value

        try:
            raw = inspect.getattr_static(caps, name)
        except AttributeError:
            raise AttributeError(
                f"{type(self).__name__!r} has no field or capability {name!r}"
            ) from None

        if isinstance(raw, (staticmethod, classmethod)):
            return getattr(caps, name)
        if isinstance(raw, property):
            if raw.fget is None:
                raise AttributeError(f"property {name!r} is not readable")
            return raw.fget(self)
        if inspect.isfunction(raw):
            return types.MethodType(raw, self)
        return raw

    # --- dunder helpers -------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Reattached):
            return NotImplemented
        return (
            self._data == other._data
            and self._capabilities is other._capabilities
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        caps = self._capabilities
        label = getattr(caps, "__name__", type(caps).__name__)
        return f"Reattached({label}, {self._data!r})"


def unwrap(value: Reattached) -> Any:
    """Return the plain parsed value (dict, list or scalar) behind *value*."""
    return object.__getattribute__(value, "_data")


def capabilities_of(value: Reattached) -> Any:
    """Return the capability set *value* was loaded against."""
    return object.__getattribute__(value, "_capabilities")


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def _own_fields(value: Any) -> dict[str, Any]:
    if dataclasses.is_dataclass(value):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    return {key: item for key, item in vars(value).items() if not key.startswith("_")}


def _to_plain(value: Any) -> Any:
    """Reduce *value* to JSON-encodable data.

    Non-finite floats become None. Callables are dropped from objects and
    become None inside arrays.
    """
    if value is None or isinstance(value, (str, bool, int)):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, Reattached):
        return _to_plain(unwrap(value))
    if isinstance(value, Mapping):
        return {
            key: _to_plain(item)
            for key, item in value.items()
            if not callable(item)
        }
    if isinstance(value, (list, tuple)):
        return [None if callable(item) else _to_plain(item) for item in value]
    if callable(value) or isinstance(value, type):
        raise TypeError(
            f"Object of type {type(value).__name__} is not JSON serializable"
        )
    if dataclasses.is_dataclass(value) or hasattr(value, "__dict__"):
        return _to_plain(_own_fields(value))
    raise TypeError(
        f"Object of type {type(value).__name__} is not JSON serializable"
    )


def to_json_text(value: Any) -> str:
    """Return the compact JSON text representation of *value*.

    Object keys keep insertion order and arrays keep index order.
    """
    return json.dumps(
        _to_plain(value),
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def from_json_text(capabilities: Any, text: str) -> Reattached:
    """Parse *text* and attach *capabilities* to the result.

    Raises:
        ParseError: if *text* is not valid JSON, including the non-standard
            ``NaN``, ``Infinity`` and ``-Infinity`` constants.
    """
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        logger.debug(
            "JSON parse failed at %d:%d: %s", exc.lineno, exc.colno, exc.msg
        )
        raise ParseError(
            str(exc), line=exc.lineno, column=exc.colno, cause=exc
        ) from exc
    except ValueError as exc:
        logger.debug("JSON parse failed: %s", exc)
        raise ParseError(str(exc), cause=exc) from exc
    return Reattached(capabilities, data)
