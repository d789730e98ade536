"""Recipe ingest: CSV tokenizing, header resolution and record building."""

from .csv_parser import parse_csv
from .directions import split_directions
from .models import Catalog, Recipe
from .parsing import build_recipe, load_recipes_from_csv_text, parse_recipes
from .schema import ColumnSchema, SlotColumns, parse_slot_index, resolve_schema
from .sources import (
    FileRecipeSource,
    RecipeSource,
    UrlRecipeSource,
    get_recipe_source,
    is_url,
    load_catalog,
)

__all__ = [
    "parse_csv",
    "split_directions",
    "Catalog",
    "Recipe",
    "build_recipe",
    "load_recipes_from_csv_text",
    "parse_recipes",
    "ColumnSchema",
    "SlotColumns",
    "parse_slot_index",
    "resolve_schema",
    "RecipeSource",
    "FileRecipeSource",
    "UrlRecipeSource",
    "get_recipe_source",
    "is_url",
    "load_catalog",
]
