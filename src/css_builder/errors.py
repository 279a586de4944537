"""Error hierarchy for css_builder."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from css_builder.model.fragment import FragmentKind

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(Exception):
    """Base error for all css_builder errors."""


# ---------------------------------------------------------------------------
# Fragment rule violations
# ---------------------------------------------------------------------------


class FragmentError(SelectorError):
    """A fragment could not be added to a simple selector."""

    def __init__(self, message: str, *, kind: FragmentKind) -> None:
        super().__init__(message)
        self.kind = kind


class DuplicateFragmentError(FragmentError):
    """Element, id or pseudo-element was set a second time."""

    def __init__(self, kind: FragmentKind) -> None:
        super().__init__(DUPLICATE_MESSAGE, kind=kind)


class OutOfOrderFragmentError(FragmentError):
    """A fragment was added after a category that must follow it."""

    def __init__(self, kind: FragmentKind, *, blocking: FragmentKind) -> None:
        super().__init__(ORDER_MESSAGE, kind=kind)
        self.blocking = blocking


# ---------------------------------------------------------------------------
# Other errors
# ---------------------------------------------------------------------------


class InvalidCombinatorError(SelectorError):
    """A combinator outside the allowed set was used in strict mode."""

    def __init__(self, combinator: str, allowed: tuple[str, ...]) -> None:
        shown = ", ".join(repr(token) for token in allowed)
        super().__init__(f"Unsupported combinator {combinator!r}; expected one of {shown}")
        self.combinator = combinator
        self.allowed = allowed


class RecipeError(SelectorError):
    """Raised when recipe text cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ) -> None:
        self.line = line
        self.column = column
        super().__init__(message)


class DecodeError(SelectorError):
    """Raised when text or a dict cannot be turned into the requested type."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause
