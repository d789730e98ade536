"""Scoring and ranking recipes against the ingredients a user has on hand."""

import dataclasses
import random
import re
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from ..config import DEFAULT_THRESHOLD, MIN_THRESHOLD
from ..errors import UsageError
from ..ingredients import normalize, split_ingredient_list
from ..recipes import Recipe


@dataclasses.dataclass(frozen=True)
class Match:
    """A recipe that scored at least the threshold for one query.

    Attributes:
        recipe: The matched recipe
        score: Number of distinct user ingredients found in the recipe
        matched: The user's own spelling of each ingredient that hit
    """

    recipe: Recipe
    score: int
    matched: Tuple[str, ...] = ()


def is_ingredient_match(
    recipe_ingredient: str, user_ingredient: str, strict: bool = False
) -> bool:
    """Test one normalized recipe ingredient against one normalized user term.

    Args:
        recipe_ingredient: Normalized recipe ingredient, e.g. "long grain rice"
        user_ingredient: Normalized user term, e.g. "rice"
        strict: Require the term to appear as whole words rather than as
            any substring

    Returns:
        True on a match; an empty user term never matches.

    Examples:
        >>> is_ingredient_match("eggplant", "egg")
        True
        >>> is_ingredient_match("eggplant", "egg", strict=True)
        False
    """
    if not user_ingredient:
        return False
    if not strict:
        return user_ingredient in recipe_ingredient
    pattern = r"\b" + re.escape(user_ingredient) + r"\b"
    return re.search(pattern, recipe_ingredient, re.IGNORECASE) is not None


def _recipe_has(recipe: Recipe, user_ingredient: str, strict: bool) -> bool:
    return any(
        is_ingredient_match(ri, user_ingredient, strict)
        for ri in recipe.normalized_ingredients
    )


def _unique_terms(user_ingredients: Iterable[str]) -> List[Tuple[str, str]]:
    """Pair each raw user ingredient with its normalized form.

    Later entries that normalize to an already seen term are dropped, as are
    entries that normalize to nothing.
    """
    seen = set()
    terms = []
    for raw in user_ingredients:
        norm = normalize(raw)
        if not norm or norm in seen:
            continue
        seen.add(norm)
        terms.append((raw, norm))
    return terms


def count_matches(
    recipe: Recipe, user_ingredients: Iterable[str], strict: bool = False
) -> int:
    """Count the distinct user ingredients that appear in ``recipe``."""
    return sum(
        1
        for _, norm in _unique_terms(user_ingredients)
        if _recipe_has(recipe, norm, strict)
    )


def matched_ingredients(
    recipe: Recipe, user_ingredients: Iterable[str], strict: bool = False
) -> List[str]:
    """User ingredients (as typed) that appear in ``recipe``, in input order."""
    return [
        raw
        for raw, norm in _unique_terms(user_ingredients)
        if _recipe_has(recipe, norm, strict)
    ]


def require_ingredients(text: Optional[str]) -> List[str]:
    """Split a user ingredient list, rejecting an empty one.

    Raises:
        UsageError: If no ingredient is left after splitting
    """
    user_ingredients = split_ingredient_list(text)
    if not user_ingredients:
        raise UsageError("Enter at least one ingredient.")
    return user_ingredients


def shuffle_matches(matches: List[Match], rng: Optional[random.Random] = None) -> None:
    """Shuffle ``matches`` in place with a uniform Fisher-Yates shuffle."""
    (rng or random.Random()).shuffle(matches)


def rank_recipes(
    recipes: Iterable[Recipe],
    ingredients: Union[str, Sequence[str]],
    strict: bool = False,
    threshold: int = DEFAULT_THRESHOLD,
    randomize: bool = False,
    rng: Optional[random.Random] = None,
) -> List[Match]:
    """Score every recipe against the user's ingredients and rank the hits.

    Recipes scoring below ``threshold`` are dropped and the rest sorted by
    descending score, keeping catalog order among equal scores. With
    ``randomize`` the sorted list is shuffled instead, replacing that order.
    Nothing is truncated here; limiting the number shown is up to the caller.

    Args:
        recipes: The catalog (or any iterable of recipes)
        ingredients: Comma-separated ingredient list, or an already split list
        strict: Use whole-word matching
        threshold: Minimum score; values below 1 are treated as 1
        randomize: Shuffle the ranked list
        rng: Random source for the shuffle

    Returns:
        The ranked matches, possibly empty.
    """
    if isinstance(ingredients, str):
        user_ingredients = split_ingredient_list(ingredients)
    else:
        user_ingredients = [i.strip() for i in ingredients if i and i.strip()]
    terms = _unique_terms(user_ingredients)
    threshold = max(MIN_THRESHOLD, threshold)

    matches = []
    for recipe in recipes:
        hits = tuple(raw for raw, norm in terms if _recipe_has(recipe, norm, strict))
        if len(hits) >= threshold:
            matches.append(Match(recipe=recipe, score=len(hits), matched=hits))

    # list.sort is stable, so ties keep catalog order
    matches.sort(key=lambda m: m.score, reverse=True)

    if randomize:
        shuffle_matches(matches, rng)
    return matches
