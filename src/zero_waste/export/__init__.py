"""Presentation of ranked recipes: command-line text and PDF documents."""

from .pdf import export_recipe_pdf, recipe_pdf_bytes, safe_filename, wrap_text
from .text import format_no_matches, format_recipe, format_report

__all__ = [
    "export_recipe_pdf",
    "recipe_pdf_bytes",
    "safe_filename",
    "wrap_text",
    "format_no_matches",
    "format_recipe",
    "format_report",
]
