"""Turning tokenized CSV rows into Recipe records."""

import logging
from typing import List, Optional, Sequence

from ..errors import IngestError
from ..ingredients import build_measured_ingredient, normalize
from .csv_parser import parse_csv
from .models import Recipe
from .schema import ColumnSchema, resolve_schema

logger = logging.getLogger(__name__)


def _cell(row: Sequence[str], position: Optional[int]) -> str:
    """Cell at ``position``, or "" for a missing column or short row."""
    if position is None or position >= len(row):
        return ""
    return row[position] or ""


def build_recipe(row: Sequence[str], schema: ColumnSchema) -> Optional[Recipe]:
    """Build a Recipe from one data row.

    Args:
        row: Cells of a data row
        schema: Resolved header layout

    Returns:
        The Recipe, or None when the row has no title or no ingredients.
    """
    title = _cell(row, schema.title).strip()
    directions = _cell(row, schema.directions).strip()
    if not title:
        return None

    measured = []
    normalized = []
    for slot in schema.slots():
        ingredient = _cell(row, slot.ingredient)
        line = build_measured_ingredient(
            _cell(row, slot.quantity), _cell(row, slot.unit), ingredient
        )
        if not line:
            continue
        measured.append(line)
        # Match on the bare name, not the measured line
        normalized.append(normalize(ingredient))

    if not measured:
        return None

    return Recipe(
        title=title,
        directions=directions,
        measured_ingredients=tuple(measured),
        normalized_ingredients=tuple(normalized),
    )


def parse_recipes(rows: List[List[str]]) -> List[Recipe]:
    """Build recipes from tokenized rows, the first of which is the header.

    Raises:
        IngestError: If there is no data row, or a required column is missing.
    """
    if len(rows) < 2:
        raise IngestError("CSV seems empty or missing header.")

    schema = resolve_schema(rows[0])

    recipes = []
    for line_number, row in enumerate(rows[1:], start=2):
        recipe = build_recipe(row, schema)
        if recipe is None:
            logger.debug(f"Skipping row {line_number}: no title or no ingredients")
            continue
        recipes.append(recipe)
    return recipes


def load_recipes_from_csv_text(text: str) -> List[Recipe]:
    """Tokenize CSV text and build its recipes.

    Args:
        text: Complete CSV text, header first.

    Returns:
        Recipes in file order.

    Raises:
        IngestError: If the CSV has no data rows or lacks Title/Directions.
    """
    return parse_recipes(parse_csv(text))
