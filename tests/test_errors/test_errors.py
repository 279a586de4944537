"""Tests for the css_builder error hierarchy."""

import pytest

from css_builder.errors import (
    DecodeError,
    DuplicateFragmentError,
    FragmentError,
    InvalidCombinatorError,
    OutOfOrderFragmentError,
    RecipeError,
    SelectorError,
)
from css_builder.model import FragmentKind


class TestHierarchy:
    @pytest.mark.parametrize(
        "error",
        [
            DuplicateFragmentError(FragmentKind.ID),
            OutOfOrderFragmentError(FragmentKind.ELEMENT, blocking=FragmentKind.ID),
            InvalidCombinatorError("x", (">",)),
            RecipeError("bad"),
            DecodeError("bad"),
        ],
    )
    def test_all_are_selector_errors(self, error: Exception) -> None:
        assert isinstance(error, SelectorError)

    def test_fragment_errors(self) -> None:
        assert issubclass(DuplicateFragmentError, FragmentError)
        assert issubclass(OutOfOrderFragmentError, FragmentError)


class TestMessages:
    def test_duplicate_message_names_singletons(self) -> None:
        message = str(DuplicateFragmentError(FragmentKind.ELEMENT))
        assert message == (
            "Element, id and pseudo-element should not occur more then one time "
            "inside the selector"
        )

    def test_order_message_lists_categories(self) -> None:
        message = str(OutOfOrderFragmentError(FragmentKind.ID, blocking=FragmentKind.CLASS))
        assert message.endswith(
            "element, id, class, attribute, pseudo-class, pseudo-element"
        )

    def test_invalid_combinator_message(self) -> None:
        error = InvalidCombinatorError("xyz", (" ", ">"))
        assert "'xyz'" in str(error)
        assert error.allowed == (" ", ">")


class TestAttributes:
    def test_recipe_error_position(self) -> None:
        error = RecipeError("oops", line=2, column=5)
        assert (error.line, error.column) == (2, 5)
        assert str(error) == "oops"

    def test_recipe_error_defaults(self) -> None:
        error = RecipeError("oops")
        assert error.line is None
        assert error.column is None

    def test_decode_error_cause(self) -> None:
        cause = ValueError("inner")
        assert DecodeError("outer", cause=cause).cause is cause

    def test_out_of_order_carries_kinds(self) -> None:
        error = OutOfOrderFragmentError(FragmentKind.CLASS, blocking=FragmentKind.ATTRIBUTE)
        assert error.kind is FragmentKind.CLASS
        assert error.blocking is FragmentKind.ATTRIBUTE
