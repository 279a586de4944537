"""JSON helpers: render values as canonical text and rebuild typed objects.

``from_json`` attaches the behaviour of a target class to parsed data:

    rect = from_json(Rectangle, '{"width": 10, "height": 20}')
    rect.get_area()  # => 200
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

from css_builder.errors import DecodeError
from css_builder.model.selector import Selector, selector_from_dict

T = TypeVar("T")

__all__ = ["to_json", "from_json", "selector_to_json", "selector_from_json"]


def _default(obj: Any) -> Any:
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if hasattr(obj, "__dict__"):
        return vars(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(obj: Any, *, indent: int | None = None) -> str:
    """Serialise *obj* to JSON text.

    Compact separators are used unless *indent* is given, so ``[1, 2, 3]``
    becomes ``'[1,2,3]'``.
    """
    separators = (",", ":") if indent is None else None
    return json.dumps(obj, default=_default, indent=indent, separators=separators)


def _parse(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DecodeError(f"Invalid JSON: {exc}", cause=exc) from exc


def from_json(cls: type[T], text: str) -> T:
    """Parse *text* and return an instance of *cls* carrying the data."""
    data = _parse(text)
    if not isinstance(data, dict):
        raise DecodeError(f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}")

    from_dict = getattr(cls, "from_dict", None)
    if callable(from_dict):
        return from_dict(data)

    if dataclasses.is_dataclass(cls):
        try:
            return cls(**data)
        except TypeError as exc:
            raise DecodeError(f"Cannot build {cls.__name__}: {exc}", cause=exc) from exc

    # Plain classes: attach the data without running __init__.
    instance = cls.__new__(cls)
    instance.__dict__.update(data)
    return instance


def selector_to_json(selector: Selector, *, indent: int | None = None) -> str:
    return to_json(selector.to_dict(), indent=indent)


def selector_from_json(text: str) -> Selector:
    return selector_from_dict(_parse(text))
