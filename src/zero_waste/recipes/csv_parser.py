"""Minimal CSV tokenizer for recipe spreadsheets."""

from typing import List


def _keep_row(row: List[str]) -> bool:
    # A lone blank cell is what a trailing empty line produces
    return len(row) > 1 or (len(row) == 1 and row[0].strip() != "")


def parse_csv(text: str) -> List[List[str]]:
    """Split CSV text into rows of cell strings.

    Double quotes delimit fields that may contain commas and line breaks; a
    doubled quote inside a quoted field stands for one literal quote. Rows
    end at "\\n", "\\r\\n" or a bare "\\r". Quoting errors are tolerated: an
    unmatched quote simply runs to the end of the input.

    Args:
        text: Raw CSV text.

    Returns:
        List of rows, each a list of cell strings.

    Examples:
        >>> parse_csv('"a,b",c')
        [['a,b', 'c']]
        >>> parse_csv('x\\r\\n\\r\\ny\\n')
        [['x'], ['y']]
    """
    rows: List[List[str]] = []
    row: List[str] = []
    cell: List[str] = []
    in_quotes = False

    i = 0
    n = len(text)
    while i < n:
        char = text[i]
        nxt = text[i + 1] if i + 1 < n else ""

        if char == '"' and in_quotes and nxt == '"':
            cell.append('"')
            i += 2
            continue

        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            row.append("".join(cell))
            cell = []
        elif char in "\r\n" and not in_quotes:
            if char == "\r" and nxt == "\n":
                i += 1
            row.append("".join(cell))
            cell = []
            if _keep_row(row):
                rows.append(row)
            row = []
        else:
            cell.append(char)
        i += 1

    # Input without a trailing newline
    if cell or row:
        row.append("".join(cell))
        rows.append(row)

    return rows
