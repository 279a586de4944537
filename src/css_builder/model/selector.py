"""Selector model: the renderable protocol, SimpleSelector and CombinedSelector."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from css_builder.errors import (
    DecodeError,
    DuplicateFragmentError,
    OutOfOrderFragmentError,
)
from css_builder.model.fragment import FragmentKind

logger = logging.getLogger(__name__)


@runtime_checkable
class Selector(Protocol):
    """Anything that renders to a CSS selector string."""

    def render(self) -> str: ...

    def to_dict(self) -> dict[str, Any]: ...


class SimpleSelector:
    """A compound selector assembled fragment by fragment.

    Fragments must be added in category order and element, id and
    pseudo-element may each be set only once.  Every mutating method
    returns ``self`` so calls can be chained::

        SimpleSelector().set_element("a").add_attribute('href$=".png"')

    The short names ``element``, ``id``, ``class_``, ``attr``,
    ``pseudo_class`` and ``pseudo_element`` are aliases for chaining.
    """

    def __init__(self) -> None:
        self._element: str | None = None
        self._id: str | None = None
        self._classes: list[str] = []
        self._attributes: list[str] = []
        self._pseudo_classes: list[str] = []
        self._pseudo_element: str | None = None

    # --- fragment operations ----------------------------------------------------

    def set_element(self, value: str) -> SimpleSelector:
        self._check(FragmentKind.ELEMENT)
        self._element = value
        return self

    def set_id(self, value: str) -> SimpleSelector:
        self._check(FragmentKind.ID)
        self._id = value
        return self

    def add_class(self, value: str) -> SimpleSelector:
        self._check(FragmentKind.CLASS)
        self._classes.append(value)
        return self

    def add_attribute(self, value: str) -> SimpleSelector:
        self._check(FragmentKind.ATTRIBUTE)
        self._attributes.append(value)
        return self

    def add_pseudo_class(self, value: str) -> SimpleSelector:
        self._check(FragmentKind.PSEUDO_CLASS)
        self._pseudo_classes.append(value)
        return self

    def set_pseudo_element(self, value: str) -> SimpleSelector:
        self._check(FragmentKind.PSEUDO_ELEMENT)
        self._pseudo_element = value
        return self

    element = set_element
    id = set_id
    class_ = add_class
    attr = add_attribute
    pseudo_class = add_pseudo_class
    pseudo_element = set_pseudo_element

    def add(self, kind: FragmentKind | str, value: str) -> SimpleSelector:
        """Add a fragment of the given category."""
        kind = FragmentKind(kind)
        if kind is FragmentKind.ELEMENT:
            return self.set_element(value)
        if kind is FragmentKind.ID:
            return self.set_id(value)
        if kind is FragmentKind.CLASS:
            return self.add_class(value)
        if kind is FragmentKind.ATTRIBUTE:
            return self.add_attribute(value)
        if kind is FragmentKind.PSEUDO_CLASS:
            return self.add_pseudo_class(value)
        return self.set_pseudo_element(value)

    # --- validation -------------------------------------------------------------

    def _populated(self) -> dict[FragmentKind, bool]:
        return {
            FragmentKind.ELEMENT: self._element is not None,
            FragmentKind.ID: self._id is not None,
            FragmentKind.CLASS: bool(self._classes),
            FragmentKind.ATTRIBUTE: bool(self._attributes),
            FragmentKind.PSEUDO_CLASS: bool(self._pseudo_classes),
            FragmentKind.PSEUDO_ELEMENT: self._pseudo_element is not None,
        }

    def _check(self, kind: FragmentKind) -> None:
        """Reject a fragment that repeats a singleton or breaks the order."""
        populated = self._populated()
        if kind.is_singleton and populated[kind]:
            logger.debug("Rejected duplicate %s fragment on %r", kind, self)
            raise DuplicateFragmentError(kind)
        for later in kind.later_kinds():
            if populated[later]:
                logger.debug("Rejected %s fragment after %s on %r", kind, later, self)
                raise OutOfOrderFragmentError(kind, blocking=later)

    # --- queries ----------------------------------------------------------------

    def fragments(self) -> list[tuple[FragmentKind, str]]:
        """Return the populated fragments in render order."""
        pairs: list[tuple[FragmentKind, str]] = []
        if self._element is not None:
            pairs.append((FragmentKind.ELEMENT, self._element))
        if self._id is not None:
            pairs.append((FragmentKind.ID, self._id))
        pairs.extend((FragmentKind.CLASS, v) for v in self._classes)
        pairs.extend((FragmentKind.ATTRIBUTE, v) for v in self._attributes)
        pairs.extend((FragmentKind.PSEUDO_CLASS, v) for v in self._pseudo_classes)
        if self._pseudo_element is not None:
            pairs.append((FragmentKind.PSEUDO_ELEMENT, self._pseudo_element))
        return pairs

    def is_empty(self) -> bool:
        return not any(self._populated().values())

    # --- rendering --------------------------------------------------------------

    def render(self) -> str:
        return "".join(
            [
                self._element or "",
                f"#{self._id}" if self._id is not None else "",
                "".join(f".{v}" for v in self._classes),
                "".join(f"[{v}]" for v in self._attributes),
                "".join(f":{v}" for v in self._pseudo_classes),
                f"::{self._pseudo_element}" if self._pseudo_element is not None else "",
            ]
        )

    stringify = render

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"SimpleSelector({self.render()!r})"

    # --- serialisation ----------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {
            "fragments": [
                {"kind": kind.value, "value": value} for kind, value in self.fragments()
            ]
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SimpleSelector:
        """Rebuild a selector, re-checking order and singleton rules."""
        items = data.get("fragments") if isinstance(data, dict) else None
        if not isinstance(items, list):
            raise DecodeError(f"Expected a 'fragments' list, got {data!r}")
        selector = cls()
        for item in items:
            try:
                kind = FragmentKind(item["kind"])
                value = item["value"]
            except (KeyError, TypeError, ValueError) as exc:
                raise DecodeError(f"Invalid fragment entry: {item!r}", cause=exc) from exc
            if not isinstance(value, str):
                raise DecodeError(f"Fragment value must be a string: {item!r}")
            selector.add(kind, value)
        return selector


@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator token.

    Operands may themselves be combined selectors.  The combinator is kept
    verbatim and rendered with one space on each side.
    """

    left: Selector
    combinator: str
    right: Selector

    def render(self) -> str:
        return f"{self.left.render()} {self.combinator} {self.right.render()}"

    stringify = render

    def __str__(self) -> str:
        return self.render()

    def to_dict(self) -> dict[str, Any]:
        return {
            "left": self.left.to_dict(),
            "combinator": self.combinator,
            "right": self.right.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CombinedSelector:
        try:
            left, combinator, right = data["left"], data["combinator"], data["right"]
        except (KeyError, TypeError) as exc:
            raise DecodeError(f"Invalid combined selector: {data!r}", cause=exc) from exc
        return cls(
            left=selector_from_dict(left),
            combinator=combinator,
            right=selector_from_dict(right),
        )


def selector_from_dict(data: dict[str, Any]) -> Selector:
    """Rebuild a selector tree from its ``to_dict`` form."""
    if not isinstance(data, dict):
        raise DecodeError(f"Expected an object, got {type(data).__name__}")
    if "combinator" in data:
        return CombinedSelector.from_dict(data)
    if "fragments" in data:
        return SimpleSelector.from_dict(data)
    raise DecodeError(f"Not a selector: {data!r}")


__all__ = [
    "Selector",
    "SimpleSelector",
    "CombinedSelector",
    "selector_from_dict",
]
