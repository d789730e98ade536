#!/usr/bin/env python3
"""
Zero-waste recipe generator
---------------------------
Loads a recipe CSV, scores every recipe against the ingredients you have
and prints the best matches.

Usage:
    zero-waste --ingredients "rice, egg" --threshold 1 --max 3
    zero-waste --ingredients "rice, egg" --csv https://example.com/recipes.csv --strict
"""

import argparse
import logging
import pathlib
import sys
from typing import List, Optional, Sequence

from tqdm import tqdm

from .config import (
    DEFAULT_CSV_SOURCE,
    DEFAULT_MAX_RESULTS,
    DEFAULT_THRESHOLD,
    QueryOptions,
)
from .errors import UsageError, ZeroWasteError
from .export import export_recipe_pdf, format_report, safe_filename
from .matching import Match, rank_recipes, require_ingredients
from .recipes import load_catalog

logger = logging.getLogger(__name__)

USAGE = 'Usage: zero-waste --ingredients "rice, egg" --threshold 1 --max 3'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find recipes that use the ingredients you already have"
    )
    parser.add_argument(
        "--ingredients",
        type=str,
        default="",
        help='Comma-separated ingredients, e.g. "rice, egg, spinach"',
    )
    parser.add_argument(
        "--csv",
        type=str,
        default=DEFAULT_CSV_SOURCE,
        help=f"Recipe CSV path or http(s) URL (default: {DEFAULT_CSV_SOURCE})",
    )
    parser.add_argument(
        "--threshold",
        type=int,
        default=DEFAULT_THRESHOLD,
        help=f"Minimum number of your ingredients a recipe must use (default: {DEFAULT_THRESHOLD})",
    )
    parser.add_argument(
        "--max",
        dest="max_results",
        type=int,
        default=DEFAULT_MAX_RESULTS,
        help=f"Maximum number of recipes to print (default: {DEFAULT_MAX_RESULTS})",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Match whole words only (egg will not match eggplant)",
    )
    parser.add_argument(
        "--random",
        dest="randomize",
        action="store_true",
        help="Shuffle the matches instead of ranking by score",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for --random, for repeatable output",
    )
    parser.add_argument(
        "--pdf-dir",
        type=pathlib.Path,
        default=None,
        help="Also write each printed recipe as a PDF into this directory",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log progress information",
    )
    return parser


def export_pdfs(matches: Sequence[Match], output_dir: pathlib.Path) -> List[pathlib.Path]:
    """Write one PDF per match into ``output_dir``."""
    output_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for match in tqdm(matches, desc="Exporting PDFs"):
        path = output_dir / safe_filename(match.recipe.title)
        export_recipe_pdf(match.recipe, path)
        written.append(path)
    logger.info(f"Wrote {len(written)} PDF(s) to {output_dir}")
    return written


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command-line generator; returns the process exit status."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    options = QueryOptions.create(
        ingredients=args.ingredients,
        threshold=args.threshold,
        max_results=args.max_results,
        strict=args.strict,
        randomize=args.randomize,
        seed=args.seed,
    )

    try:
        user_ingredients = require_ingredients(options.ingredients)
    except UsageError:
        print(USAGE)
        return 1

    print(f"Loading CSV: {args.csv}")
    try:
        catalog = load_catalog(args.csv)
    except ZeroWasteError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"Loaded recipes: {len(catalog)}")

    matches = rank_recipes(
        catalog,
        user_ingredients,
        strict=options.strict,
        threshold=options.threshold,
        randomize=options.randomize,
        rng=options.rng(),
    )

    print(
        format_report(
            matches,
            user_ingredients,
            options.threshold,
            options.max_results,
            strict=options.strict,
        )
    )

    if args.pdf_dir is not None and matches:
        export_pdfs(matches[: options.max_results], args.pdf_dir)

    return 0


if __name__ == "__main__":
    sys.exit(main())
