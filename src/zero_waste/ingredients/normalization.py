"""Ingredient normalization utilities."""

import re

_NON_ALNUM = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")


def singularize_token(token: str) -> str:
    """Strip a common English plural ending from a single word.

    This is a light heuristic, not a real stemmer: irregular plurals
    ("leaves", "geese") come out wrong, and so do some singulars ending in s.

    Examples:
        >>> singularize_token("berries")
        'berry'
        >>> singularize_token("tomatoes")
        'tomato'
        >>> singularize_token("eggs")
        'egg'
        >>> singularize_token("rice")
        'rice'
    """
    w = (token or "").strip()
    if not w:
        return ""
    if w.endswith("ies") and len(w) > 4:
        return w[:-3] + "y"
    if w.endswith("es") and len(w) > 3:
        return w[:-2]
    if w.endswith("s") and len(w) > 3:
        return w[:-1]
    return w


def normalize(text: str) -> str:
    """Normalize ingredient text for matching.

    Lowercases, replaces anything other than ASCII letters, digits and
    whitespace with a space, collapses whitespace and singularizes each word.

    Args:
        text: Raw ingredient name or user-entered ingredient.

    Returns:
        Normalized text, or an empty string for empty input.

    Examples:
        >>> normalize("Fresh Tomatoes, diced")
        'fresh tomato diced'
        >>> normalize("Brown RICE!")
        'brown rice'
    """
    cleaned = _NON_ALNUM.sub(" ", (text or "").lower())
    cleaned = _WHITESPACE.sub(" ", cleaned).strip()
    if not cleaned:
        return ""
    return " ".join(singularize_token(word) for word in cleaned.split(" "))
