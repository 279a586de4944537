from __future__ import annotations

from dataclasses import dataclass

from css_builder.model.fragment import Combinator


@dataclass(frozen=True)
class BuilderConfig:
    strict_combinators: bool = False  # reject tokens outside allowed_combinators
    allowed_combinators: tuple[str, ...] = tuple(c.value for c in Combinator)
