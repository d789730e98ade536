"""Ingredient normalization and parsing utilities."""

from .normalization import normalize, singularize_token
from .number_utils import MONTH_NUMERATORS, fix_excel_fraction
from .parsing import build_measured_ingredient, split_ingredient_list

__all__ = [
    "normalize",
    "singularize_token",
    "MONTH_NUMERATORS",
    "fix_excel_fraction",
    "build_measured_ingredient",
    "split_ingredient_list",
]
