"""Splitting free-text directions into numbered steps."""

import re
from typing import List

# Sentence end: ". ", "! " or "? " followed by a letter or an opening paren.
# Decimals such as "7.5 cups" have no space after the dot and stay intact.
_STEP_BOUNDARY = re.compile(r"(?<=[.!?]) (?=[A-Za-z(])")


def split_directions(text: str) -> List[str]:
    """Split recipe directions into individual steps.

    Args:
        text: Free-text directions.

    Returns:
        List of trimmed steps; empty for blank input.

    Examples:
        >>> split_directions("Cook rice. Add eggs.")
        ['Cook rice.', 'Add eggs.']
        >>> split_directions("Add 7.5 cups water. Stir!")
        ['Add 7.5 cups water.', 'Stir!']
    """
    t = (text or "").strip()
    if not t:
        return []

    steps = [part.strip() for part in _STEP_BOUNDARY.split(t)]
    steps = [step for step in steps if step]
    return steps or [t]
