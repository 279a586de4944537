"""css_builder - fluent builder for CSS compound and complex selectors."""

__version__ = "0.1.0"

from css_builder.builder import SelectorBuilder, css_selector_builder  # noqa: E402
from css_builder.config import BuilderConfig  # noqa: E402
from css_builder.errors import (  # noqa: E402
    DecodeError,
    DuplicateFragmentError,
    FragmentError,
    InvalidCombinatorError,
    OutOfOrderFragmentError,
    RecipeError,
    SelectorError,
)
from css_builder.model import (  # noqa: E402
    Combinator,
    CombinedSelector,
    FragmentKind,
    Selector,
    SimpleSelector,
)
from css_builder.recipe import parse_recipe  # noqa: E402
from css_builder.serialization import from_json, to_json  # noqa: E402
from css_builder.shapes import Rectangle  # noqa: E402

__all__ = [
    "__version__",
    # facade
    "SelectorBuilder",
    "css_selector_builder",
    "BuilderConfig",
    # model
    "FragmentKind",
    "Combinator",
    "Selector",
    "SimpleSelector",
    "CombinedSelector",
    # errors
    "SelectorError",
    "FragmentError",
    "DuplicateFragmentError",
    "OutOfOrderFragmentError",
    "InvalidCombinatorError",
    "RecipeError",
    "DecodeError",
    # recipe
    "parse_recipe",
    # utilities
    "Rectangle",
    "to_json",
    "from_json",
]
