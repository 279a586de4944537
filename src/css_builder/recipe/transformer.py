"""Lark Transformer that turns recipe text into a selector tree."""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError, VisitError

from css_builder.builder import SelectorBuilder
from css_builder.config import BuilderConfig
from css_builder.errors import RecipeError
from css_builder.model.fragment import FragmentKind
from css_builder.model.selector import CombinedSelector, Selector, SimpleSelector

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

# Call names accepted in a chain, both snake_case and the camelCase facade names.
_CALLS: dict[str, FragmentKind] = {
    "element": FragmentKind.ELEMENT,
    "id": FragmentKind.ID,
    "class": FragmentKind.CLASS,
    "class_": FragmentKind.CLASS,
    "attr": FragmentKind.ATTRIBUTE,
    "pseudo_class": FragmentKind.PSEUDO_CLASS,
    "pseudoClass": FragmentKind.PSEUDO_CLASS,
    "pseudo_element": FragmentKind.PSEUDO_ELEMENT,
    "pseudoElement": FragmentKind.PSEUDO_ELEMENT,
}

_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)


class RecipeTransformer(Transformer):  # type: ignore[type-arg]
    """Build selectors bottom-up from a recipe parse tree."""

    def __init__(self, builder: SelectorBuilder) -> None:
        super().__init__()
        self._builder = builder

    def STRING(self, token: Token) -> str:
        return _ESCAPE_RE.sub(r"\1", str(token)[1:-1])

    def call(self, items: list[object]) -> tuple[FragmentKind, str]:
        name, value = str(items[0]), str(items[1])
        kind = _CALLS.get(name)
        if kind is None:
            line = getattr(items[0], "line", None)
            column = getattr(items[0], "column", None)
            raise RecipeError(f"Unknown call {name!r}", line=line, column=column)
        return (kind, value)

    def chain(self, items: list[tuple[FragmentKind, str]]) -> SimpleSelector:
        selector = SimpleSelector()
        for kind, value in items:
            selector.add(kind, value)
        return selector

    def combine(self, items: list[object]) -> CombinedSelector:
        left, combinator, right = items
        return self._builder.combine(left, str(combinator), right)  # type: ignore[arg-type]


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(encoding="utf-8"), parser="lalr", start="start")


def parse_recipe(source: str, config: BuilderConfig | None = None) -> Selector:
    """Parse recipe text into a selector tree.

    Syntax errors raise :class:`RecipeError`; fragment rule violations raise
    the builder's own errors unchanged.
    """
    logger.debug("Parsing recipe: %s", source)
    try:
        tree = _parser().parse(source)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        logger.warning("Recipe syntax error at %s:%s", line, column)
        raise RecipeError(str(e), line=line, column=column) from e
    transformer = RecipeTransformer(SelectorBuilder(config))
    try:
        return transformer.transform(tree)
    except VisitError as e:
        raise e.orig_exc from None
