"""Quantity cleanup helpers."""

import re

# Spreadsheet date corruption: "1/4" typed into Excel becomes "4-Jan"
MONTH_NUMERATORS = {
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "may": 5,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}

_EXCEL_DATE = re.compile(
    r"^(\d+)-(" + "|".join(MONTH_NUMERATORS) + r")$", re.IGNORECASE
)


def fix_excel_fraction(quantity: str) -> str:
    """Undo Excel's habit of turning fractions into dates.

    A quantity such as "1/4" saved through a spreadsheet comes back as
    "4-Jan": the day is the denominator and the month number the numerator.

    Args:
        quantity: Raw quantity cell.

    Returns:
        The repaired fraction, or the trimmed input when it is not a
        date-shaped value.

    Examples:
        >>> fix_excel_fraction("4-Jan")
        '1/4'
        >>> fix_excel_fraction("3-feb")
        '2/3'
        >>> fix_excel_fraction("1 1/2")
        '1 1/2'
    """
    text = (quantity or "").strip()
    if not text:
        return ""

    match = _EXCEL_DATE.match(text)
    if not match:
        return text

    denominator = int(match.group(1))
    if denominator == 0:
        return text
    numerator = MONTH_NUMERATORS[match.group(2).lower()]
    return f"{numerator}/{denominator}"
