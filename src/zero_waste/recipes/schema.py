"""Header resolution for recipe CSV files.

Recipe spreadsheets carry a variable number of ingredient columns. Each
ingredient "slot" spans up to three columns named ``Quantity<N>``,
``Unit<N>`` and ``Ingredient<N>``; bare ``Quantity`` and ``Unit`` columns
are accepted for slot 1.
"""

import dataclasses
import logging
import re
from typing import Dict, List, Optional, Sequence

from ..errors import MissingColumnError

logger = logging.getLogger(__name__)

TITLE_COLUMN = "Title"
DIRECTIONS_COLUMN = "Directions"

SLOT_PREFIXES = ("Quantity", "Unit", "Ingredient")

# Unnumbered headers that belong to slot 1
SLOT_ONE_ALIASES = {"quantity": "Quantity", "unit": "Unit"}

_SLOT_PATTERNS = {
    prefix: re.compile(rf"^{prefix}(\d+)$", re.IGNORECASE) for prefix in SLOT_PREFIXES
}


@dataclasses.dataclass(frozen=True)
class SlotColumns:
    """Column positions of one ingredient slot; None where a column is absent."""

    quantity: Optional[int] = None
    unit: Optional[int] = None
    ingredient: Optional[int] = None


@dataclasses.dataclass(frozen=True)
class ColumnSchema:
    """Where everything lives in a recipe CSV header."""

    title: int
    directions: int
    quantities: Dict[int, int]
    units: Dict[int, int]
    ingredients: Dict[int, int]

    @property
    def max_slot(self) -> int:
        """Highest ingredient slot number, never less than 1."""
        return max([1, *self.ingredients])

    def slot(self, index: int) -> SlotColumns:
        """Column positions for slot ``index`` (1-based)."""
        return SlotColumns(
            quantity=self.quantities.get(index),
            unit=self.units.get(index),
            ingredient=self.ingredients.get(index),
        )

    def slots(self) -> List[SlotColumns]:
        """Column positions for slots 1..max_slot, in order."""
        return [self.slot(k) for k in range(1, self.max_slot + 1)]


def parse_slot_index(name: str, prefix: str) -> Optional[int]:
    """Return N for a column named ``<prefix><N>`` (any case), else None.

    Examples:
        >>> parse_slot_index("ingredient12", "Ingredient")
        12
        >>> parse_slot_index("Ingredient", "Ingredient") is None
        True
    """
    match = _SLOT_PATTERNS[prefix].match(name or "")
    if not match:
        return None
    return int(match.group(1))


def resolve_schema(header: Sequence[str]) -> ColumnSchema:
    """Map a header row onto title, directions and ingredient slot columns.

    Args:
        header: Cells of the first CSV row.

    Returns:
        The resolved ColumnSchema.

    Raises:
        MissingColumnError: If the Title or Directions column is missing.
    """
    names = [(h or "").strip() for h in header]

    if TITLE_COLUMN not in names:
        raise MissingColumnError(TITLE_COLUMN)
    if DIRECTIONS_COLUMN not in names:
        raise MissingColumnError(DIRECTIONS_COLUMN)

    slots = {prefix: {} for prefix in SLOT_PREFIXES}
    for position, name in enumerate(names):
        if not name:
            continue
        alias = SLOT_ONE_ALIASES.get(name.lower())
        if alias:
            slots[alias][1] = position
            continue
        for prefix in SLOT_PREFIXES:
            index = parse_slot_index(name, prefix)
            if index is not None:
                slots[prefix][index] = position
                break

    schema = ColumnSchema(
        title=names.index(TITLE_COLUMN),
        directions=names.index(DIRECTIONS_COLUMN),
        quantities=slots["Quantity"],
        units=slots["Unit"],
        ingredients=slots["Ingredient"],
    )
    if not schema.ingredients:
        logger.warning("No Ingredient<N> columns found in header")
    logger.debug(f"Resolved {schema.max_slot} ingredient slot(s) from header")
    return schema
