from css_builder.recipe.transformer import parse_recipe

__all__ = ["parse_recipe"]
