"""Defaults and query options shared by the command line and web front ends."""

import dataclasses
import random
from typing import Any, Optional

DEFAULT_CSV_SOURCE = "recipes.csv"
DEFAULT_THRESHOLD = 2
DEFAULT_MAX_RESULTS = 5
MIN_THRESHOLD = 1
MIN_MAX_RESULTS = 1

# Prefilled into the web form on first visit
DEFAULT_INGREDIENTS_PROMPT = "rice, eggs"

USER_AGENT = "zero-waste-recipes/0.1"
REQUEST_TIMEOUT = 30  # seconds


def _coerce_int(value: Any, default: int) -> int:
    """Parse an int from a form field or flag, falling back to ``default``."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return default


def _coerce_bool(value: Any) -> bool:
    """Interpret checkbox style values ("on", "true", "1") as booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in {"1", "true", "on", "yes"}


@dataclasses.dataclass(frozen=True)
class QueryOptions:
    """One matching request, as entered on the command line or in the form.

    Attributes:
        ingredients: Raw comma-separated ingredient list
        threshold: Minimum score a recipe needs to be listed
        max_results: How many ranked recipes to display
        strict: Require whole-word matches instead of substrings
        randomize: Shuffle the ranked list
        seed: Optional seed for the shuffle
    """

    ingredients: str = ""
    threshold: int = DEFAULT_THRESHOLD
    max_results: int = DEFAULT_MAX_RESULTS
    strict: bool = False
    randomize: bool = False
    seed: Optional[int] = None

    @classmethod
    def create(
        cls,
        ingredients: Optional[str] = "",
        threshold: Any = DEFAULT_THRESHOLD,
        max_results: Any = DEFAULT_MAX_RESULTS,
        strict: Any = False,
        randomize: Any = False,
        seed: Any = None,
    ) -> "QueryOptions":
        """Build options from loosely typed input, clamping numbers to their floors."""
        return cls(
            ingredients=(ingredients or "").strip(),
            threshold=max(MIN_THRESHOLD, _coerce_int(threshold, DEFAULT_THRESHOLD)),
            max_results=max(
                MIN_MAX_RESULTS, _coerce_int(max_results, DEFAULT_MAX_RESULTS)
            ),
            strict=_coerce_bool(strict),
            randomize=_coerce_bool(randomize),
            seed=None if seed in (None, "") else _coerce_int(seed, None),
        )

    def rng(self) -> random.Random:
        """Random source for shuffling, seeded when a seed was given."""
        return random.Random(self.seed)
