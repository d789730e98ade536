import io

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen.canvas import Canvas

from zero_waste.export import (
    export_recipe_pdf,
    format_recipe,
    format_report,
    recipe_pdf_bytes,
    safe_filename,
    wrap_text,
)
from zero_waste.export.pdf import MARGIN, _PageWriter
from zero_waste.matching import Match
from zero_waste.recipes import Recipe

FRIED_RICE = Recipe(
    title="Fried Rice",
    directions="Cook rice. Add eggs.",
    measured_ingredients=("2 cups rice", "2 eggs"),
    normalized_ingredients=("rice", "egg"),
)
PLAIN_TOAST = Recipe(
    title="Toast",
    directions="",
    measured_ingredients=("1 slice bread",),
    normalized_ingredients=("bread",),
)


def test_format_recipe():
    assert format_recipe(FRIED_RICE, ["rice"]).splitlines() == [
        "RECIPE: Fried Rice",
        "MATCHED: rice",
        "",
        "INGREDIENTS:",
        "- 2 cups rice",
        "- 2 eggs",
        "",
        "DIRECTIONS:",
        "1. Cook rice.",
        "2. Add eggs.",
    ]


def test_format_recipe_without_directions_or_matches():
    lines = format_recipe(PLAIN_TOAST, []).splitlines()
    assert lines[1] == "MATCHED: none"
    assert lines[-1] == "(No directions provided)"


def test_format_report_truncates_to_max_results():
    matches = [
        Match(recipe=FRIED_RICE, score=2, matched=("rice", "eggs")),
        Match(recipe=PLAIN_TOAST, score=1, matched=("bread",)),
    ]
    report = format_report(matches, ["rice", "eggs", "bread"], threshold=1, max_results=1)
    assert report.startswith("ZERO-WASTE RECIPE GENERATOR OUTPUT\n")
    assert "Matches found: 2" in report
    assert "Input ingredients: rice, eggs, bread" in report
    assert "RECIPE: Fried Rice" in report
    assert "RECIPE: Toast" not in report


def test_format_report_no_matches():
    report = format_report([], ["caviar"], threshold=2, max_results=5, strict=True)
    assert report.splitlines() == [
        "No matches found.",
        "Input ingredients: caviar",
        "Threshold: 2",
        "Strict: on",
    ]


@pytest.mark.parametrize(
    "title, expected",
    [
        ("Fried Rice", "Fried Rice.pdf"),
        ('Mac & Cheese: "Best" Ever?', "Mac & Cheese Best Ever.pdf"),
        ("a/b\\c|d<e>f*g", "abcdefg.pdf"),
        ("  ?? ", "recipe.pdf"),
        ("", "recipe.pdf"),
    ],
)
def test_safe_filename(title, expected):
    assert safe_filename(title) == expected


def test_wrap_text_respects_width():
    text = "word " * 60
    lines = wrap_text(text, "Helvetica", 12, 200)
    assert len(lines) > 1
    assert " ".join(lines) == text.strip()


def test_wrap_text_breaks_words_wider_than_the_line():
    url = "https://example.com/" + "very-long-recipe-path-" * 20
    lines = wrap_text(f"See {url} for details", "Helvetica", 12, 200)
    assert len(lines) > 2
    assert all(stringWidth(line, "Helvetica", 12) <= 200 for line in lines)
    assert "".join(lines).replace(" ", "") == f"See{url}fordetails"
    assert lines[0] == "See"


def test_wrap_text_single_character_wider_than_line_is_kept():
    assert wrap_text("ab", "Helvetica", 12, 1) == ["a", "b"]


def test_recipe_pdf_bytes():
    data = recipe_pdf_bytes(FRIED_RICE)
    assert data.startswith(b"%PDF")


def test_export_long_recipe_to_path(tmp_path):
    long_recipe = Recipe(
        title="Big Batch Stew",
        directions=" ".join(f"Step number {i} of the stew." for i in range(200)),
        measured_ingredients=tuple(f"{i} cups stock" for i in range(60)),
        normalized_ingredients=tuple("stock" for _ in range(60)),
    )
    path = tmp_path / safe_filename(long_recipe.title)
    export_recipe_pdf(long_recipe, path)
    assert path.read_bytes().startswith(b"%PDF")


def test_page_writer_adds_pages():
    canvas = Canvas(io.BytesIO(), pagesize=letter)
    page = _PageWriter(canvas)
    for i in range(100):
        page.write(f"- {i} cups stock")
    assert canvas.getPageNumber() > 1
    assert page.y >= MARGIN - 16


def test_export_to_buffer():
    buf = io.BytesIO()
    export_recipe_pdf(PLAIN_TOAST, buf)
    assert buf.getvalue().startswith(b"%PDF")
