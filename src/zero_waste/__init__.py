"""Zero Waste - Match the ingredients you have against a recipe collection."""

__version__ = "0.1.0"

from . import export, fetching, ingredients, matching, recipes

__all__ = ["export", "fetching", "ingredients", "matching", "recipes"]
