"""Printable PDF export of a single recipe."""

import io
import pathlib
import re
from typing import BinaryIO, List, Union

from reportlab.lib.pagesizes import letter
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen.canvas import Canvas

from ..recipes import Recipe
from .text import NO_DIRECTIONS

MARGIN = 48
FONT = "Helvetica"
BOLD_FONT = "Helvetica-Bold"

_ILLEGAL_FILENAME_CHARS = re.compile(r'[/\\:*?"<>|]+')


def safe_filename(title: str) -> str:
    """File name for a recipe PDF, without characters filesystems reject.

    Examples:
        >>> safe_filename('Mac & Cheese: "Best" Ever?')
        'Mac & Cheese Best Ever.pdf'
        >>> safe_filename("///")
        'recipe.pdf'
    """
    name = _ILLEGAL_FILENAME_CHARS.sub("", title or "").strip() or "recipe"
    return f"{name}.pdf"


def _break_word(word: str, font_name: str, font_size: float, max_width: float) -> List[str]:
    """Cut a word that is wider than the line into pieces that fit."""
    pieces = []
    current = ""
    for char in word:
        if current and stringWidth(current + char, font_name, font_size) > max_width:
            pieces.append(current)
            current = char
        else:
            current += char
    pieces.append(current)
    return pieces


def wrap_text(text: str, font_name: str, font_size: float, max_width: float) -> List[str]:
    """Break ``text`` into lines no wider than ``max_width`` points.

    Words wider than a whole line (long URLs, for instance) are split
    across lines by character.
    """
    wrapped: List[str] = []
    for paragraph in str(text or "").split("\n"):
        words = paragraph.split()
        if not words:
            wrapped.append("")
            continue
        current = ""
        for w in words:
            test = f"{current} {w}" if current else w
            if stringWidth(test, font_name, font_size) <= max_width:
                current = test
                continue
            if current:
                wrapped.append(current)
            pieces = _break_word(w, font_name, font_size, max_width)
            wrapped.extend(pieces[:-1])
            current = pieces[-1]
        wrapped.append(current)
    return wrapped


class _PageWriter:
    """Top-down text cursor over a reportlab canvas, adding pages as needed."""

    def __init__(self, canvas: Canvas, pagesize=letter):
        self.canvas = canvas
        self.width, self.height = pagesize
        self.max_width = self.width - 2 * MARGIN
        self.y = self.height - MARGIN

    def skip(self, points: float) -> None:
        self.y -= points

    def write(self, text: str, font_size: float = 12, leading: float = 16, font: str = FONT) -> None:
        for line in wrap_text(text, font, font_size, self.max_width):
            if self.y < MARGIN:
                self.canvas.showPage()
                self.y = self.height - MARGIN
            self.canvas.setFont(font, font_size)
            self.canvas.drawString(MARGIN, self.y, line)
            self.y -= leading


def export_recipe_pdf(recipe: Recipe, target: Union[str, pathlib.Path, BinaryIO]) -> None:
    """Write ``recipe`` as a paginated, word-wrapped PDF.

    Args:
        recipe: Recipe to export
        target: Output path or writable binary file object
    """
    if isinstance(target, pathlib.Path):
        target = str(target)
    canvas = Canvas(target, pagesize=letter)
    canvas.setTitle(recipe.title)
    page = _PageWriter(canvas)

    page.write(recipe.title, 18, 22, BOLD_FONT)
    page.skip(6)

    page.write("Ingredients:", 13, 18, BOLD_FONT)
    for ing in recipe.measured_ingredients:
        page.write(f"- {ing}")
    page.skip(8)

    page.write("Directions:", 13, 18, BOLD_FONT)
    steps = recipe.steps
    if not steps:
        page.write(NO_DIRECTIONS)
    for i, step in enumerate(steps, start=1):
        page.write(f"{i}. {' '.join(step.split())}")

    canvas.save()


def recipe_pdf_bytes(recipe: Recipe) -> bytes:
    """Render ``recipe`` to PDF and return the document bytes."""
    buf = io.BytesIO()
    export_recipe_pdf(recipe, buf)
    return buf.getvalue()
