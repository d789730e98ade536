"""Plain-text report for the command line."""

from typing import List, Sequence

from ..matching import Match
from ..recipes import Recipe

SEPARATOR = "=" * 60
NO_DIRECTIONS = "(No directions provided)"


def format_recipe(recipe: Recipe, matched: Sequence[str]) -> str:
    """Render one recipe block: title, matched ingredients, ingredients, steps."""
    lines = [
        f"RECIPE: {recipe.title}",
        f"MATCHED: {', '.join(matched) if matched else 'none'}",
        "",
        "INGREDIENTS:",
    ]
    lines.extend(f"- {ing}" for ing in recipe.measured_ingredients)
    lines.append("")
    lines.append("DIRECTIONS:")

    steps = recipe.steps
    if steps:
        lines.extend(f"{i}. {step}" for i, step in enumerate(steps, start=1))
    else:
        lines.append(NO_DIRECTIONS)
    return "\n".join(lines)


def format_no_matches(
    user_ingredients: Sequence[str], threshold: int, strict: bool = False
) -> str:
    return "\n".join(
        [
            "No matches found.",
            f"Input ingredients: {', '.join(user_ingredients)}",
            f"Threshold: {threshold}",
            f"Strict: {'on' if strict else 'off'}",
        ]
    )


def format_report(
    matches: Sequence[Match],
    user_ingredients: Sequence[str],
    threshold: int,
    max_results: int,
    strict: bool = False,
) -> str:
    """Render the full command-line report for a ranked match list.

    Only the first ``max_results`` matches are shown; the header still
    reports how many were found in total.
    """
    if not matches:
        return format_no_matches(user_ingredients, threshold, strict)

    lines: List[str] = [
        "ZERO-WASTE RECIPE GENERATOR OUTPUT",
        f"Input ingredients: {', '.join(user_ingredients)}",
        f"Threshold: {threshold}",
        f"Strict: {'on' if strict else 'off'}",
        f"Matches found: {len(matches)}",
        SEPARATOR,
    ]
    for match in matches[:max_results]:
        lines.append(format_recipe(match.recipe, match.matched))
        lines.append(SEPARATOR)
    return "\n".join(lines)
