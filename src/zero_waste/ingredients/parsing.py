"""Ingredient line parsing utilities."""

from typing import List, Optional

from .number_utils import fix_excel_fraction


def build_measured_ingredient(
    quantity: Optional[str], unit: Optional[str], ingredient: Optional[str]
) -> str:
    """Combine the three cells of an ingredient slot into a display line.

    Args:
        quantity: Quantity cell, possibly mangled into a date by Excel
        unit: Unit cell
        ingredient: Ingredient name cell

    Returns:
        "<quantity> <unit> <ingredient>" with empty parts left out, or an
        empty string when there is no ingredient name.

    Examples:
        >>> build_measured_ingredient("4-Jan", "cup", "sugar")
        '1/4 cup sugar'
        >>> build_measured_ingredient("", "", " salt ")
        'salt'
    """
    name = (ingredient or "").strip()
    if not name:
        return ""

    parts = []
    q = fix_excel_fraction(quantity).strip()
    u = (unit or "").strip()
    if q:
        parts.append(q)
    if u:
        parts.append(u)
    parts.append(name)
    return " ".join(parts)


def split_ingredient_list(text: Optional[str]) -> List[str]:
    """Split a comma-separated ingredient list, dropping blank entries."""
    return [part.strip() for part in (text or "").split(",") if part.strip()]
