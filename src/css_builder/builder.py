"""Facade for building CSS selectors.

Each fragment method starts a fresh :class:`SimpleSelector`, so the facade
itself holds no per-selector state::

    builder = SelectorBuilder()
    builder.id("main").class_("container").class_("editable").render()
    # => '#main.container.editable'
"""

from __future__ import annotations

import logging

from css_builder.config import BuilderConfig
from css_builder.errors import InvalidCombinatorError
from css_builder.model.selector import CombinedSelector, Selector, SimpleSelector

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Stateless entry point: one method per fragment kind plus ``combine``."""

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self.config = config or BuilderConfig()

    def element(self, value: str) -> SimpleSelector:
        return SimpleSelector().set_element(value)

    def id(self, value: str) -> SimpleSelector:
        return SimpleSelector().set_id(value)

    def class_(self, value: str) -> SimpleSelector:
        return SimpleSelector().add_class(value)

    def attr(self, value: str) -> SimpleSelector:
        return SimpleSelector().add_attribute(value)

    def pseudo_class(self, value: str) -> SimpleSelector:
        return SimpleSelector().add_pseudo_class(value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        return SimpleSelector().set_pseudo_element(value)

    def combine(self, left: Selector, combinator: str, right: Selector) -> CombinedSelector:
        """Join two selectors with *combinator*.

        The token is reproduced verbatim.  Only when the config enables
        ``strict_combinators`` is it checked against ``allowed_combinators``.
        """
        if self.config.strict_combinators and combinator not in self.config.allowed_combinators:
            logger.debug("Rejected combinator %r", combinator)
            raise InvalidCombinatorError(combinator, self.config.allowed_combinators)
        return CombinedSelector(left=left, combinator=combinator, right=right)


css_selector_builder = SelectorBuilder()
