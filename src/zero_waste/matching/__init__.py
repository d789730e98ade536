"""Matching user ingredients against recipes."""

from .matcher import (
    Match,
    count_matches,
    is_ingredient_match,
    matched_ingredients,
    rank_recipes,
    require_ingredients,
    shuffle_matches,
)

__all__ = [
    "Match",
    "count_matches",
    "is_ingredient_match",
    "matched_ingredients",
    "rank_recipes",
    "require_ingredients",
    "shuffle_matches",
]
