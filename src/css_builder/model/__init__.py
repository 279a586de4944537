"""css_builder model layer -- public type re-exports."""

from css_builder.model.fragment import (
    FRAGMENT_ORDER,
    SINGLETON_KINDS,
    Combinator,
    FragmentKind,
)
from css_builder.model.selector import (
    CombinedSelector,
    Selector,
    SimpleSelector,
    selector_from_dict,
)

__all__ = [
    # fragment
    "FragmentKind",
    "Combinator",
    "FRAGMENT_ORDER",
    "SINGLETON_KINDS",
    # selector
    "Selector",
    "SimpleSelector",
    "CombinedSelector",
    "selector_from_dict",
]
