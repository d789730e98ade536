"""
Interactive recipe finder web app.

Usage:
    flask --app zero_waste.web run
    python -m zero_waste.web.app --csv recipes.csv --port 5000
"""

import argparse
import io
import logging
from typing import Optional

from flask import (
    Flask,
    abort,
    current_app,
    jsonify,
    redirect,
    render_template,
    request,
    send_file,
    url_for,
)

from ..config import DEFAULT_CSV_SOURCE, DEFAULT_INGREDIENTS_PROMPT, QueryOptions
from ..errors import UsageError, ZeroWasteError
from ..export import recipe_pdf_bytes, safe_filename
from ..matching import rank_recipes, require_ingredients
from ..recipes import Catalog, load_catalog

logger = logging.getLogger(__name__)

CATALOG_KEY = "zero_waste.catalog"
LOAD_ERROR_KEY = "zero_waste.load_error"


def _catalog() -> Catalog:
    return current_app.extensions[CATALOG_KEY]


def reload_catalog(app: Flask) -> Optional[str]:
    """(Re)load the app's catalog from its CSV_SOURCE.

    On failure the previous catalog is kept and the error message is stored
    and returned, so the page can report it and the user can try again.
    """
    source = app.config["CSV_SOURCE"]
    try:
        catalog = load_catalog(source)
    except ZeroWasteError as e:
        logger.error(f"Could not load recipes from {source}: {e}")
        app.extensions[LOAD_ERROR_KEY] = str(e)
        return str(e)
    app.extensions[CATALOG_KEY] = catalog
    app.extensions[LOAD_ERROR_KEY] = None
    return None


def _query_options() -> QueryOptions:
    args = request.args
    return QueryOptions.create(
        ingredients=args.get("ingredients", ""),
        threshold=args.get("threshold"),
        max_results=args.get("max"),
        strict=args.get("strict"),
        randomize=args.get("random"),
        seed=args.get("seed"),
    )


def _run_query(options: QueryOptions):
    """Rank the catalog for ``options``; raises UsageError for a blank query."""
    user_ingredients = require_ingredients(options.ingredients)
    matches = rank_recipes(
        _catalog(),
        user_ingredients,
        strict=options.strict,
        threshold=options.threshold,
        randomize=options.randomize,
        rng=options.rng(),
    )
    return user_ingredients, matches


def index():
    """Search form and result cards."""
    catalog = _catalog()
    load_error = current_app.extensions.get(LOAD_ERROR_KEY)
    options = _query_options()
    if "clear" in request.args:
        options = QueryOptions.create()
    elif "ingredients" not in request.args:
        options = QueryOptions.create(ingredients=DEFAULT_INGREDIENTS_PROMPT)

    context = {
        "options": options,
        "catalog": catalog,
        "load_error": load_error,
        "source": current_app.config["CSV_SOURCE"],
        "cards": [],
        "status": "Ready.",
        "status_kind": "ok",
        "stats": "",
    }

    if "clear" in request.args:
        context.update(status="Cleared.", status_kind="")
    else:
        context.update(_search_results(catalog, options))

    # A failed reload keeps the previous catalog, so results still show
    if load_error:
        context.update(status=load_error, status_kind="error")
    return render_template("index.html", **context)


def _search_results(catalog: Catalog, options: QueryOptions) -> dict:
    try:
        user_ingredients, matches = _run_query(options)
    except UsageError as e:
        return {"status": str(e), "status_kind": "error"}

    if not matches:
        return {
            "status": "No matches found.",
            "status_kind": "error",
            "stats": (
                f"Input: {', '.join(user_ingredients)} | threshold: {options.threshold}"
                f" | strict: {'on' if options.strict else 'off'}"
            ),
        }

    shown = matches[: options.max_results]
    # Catalog position of each recipe, for its PDF download link
    positions = {id(recipe): i for i, recipe in enumerate(catalog)}
    return {
        "cards": [(m, positions[id(m.recipe)]) for m in shown],
        "stats": (
            f"Recipes loaded: {len(catalog)} | matches: {len(matches)}"
            f" | showing: {len(shown)}"
        ),
    }


def api_match():
    """JSON version of the search: every ranked match, untruncated."""
    options = _query_options()
    try:
        user_ingredients, matches = _run_query(options)
    except UsageError as e:
        return jsonify({"error": str(e)}), 400

    return jsonify(
        {
            "ingredients": user_ingredients,
            "threshold": options.threshold,
            "strict": options.strict,
            "total": len(matches),
            "results": [
                {
                    "title": m.recipe.title,
                    "score": m.score,
                    "matched": list(m.matched),
                    "ingredients": list(m.recipe.measured_ingredients),
                    "steps": m.recipe.steps,
                }
                for m in matches
            ],
        }
    )


def recipe_pdf(index: int):
    """Download one catalog recipe as a PDF."""
    catalog = _catalog()
    if index < 0 or index >= len(catalog):
        abort(404)
    recipe = catalog[index]
    return send_file(
        io.BytesIO(recipe_pdf_bytes(recipe)),
        mimetype="application/pdf",
        as_attachment=True,
        download_name=safe_filename(recipe.title),
    )


def reload():
    """Re-read the CSV source.

    API callers get a JSON result. The page's Reload form sends
    ``next=index`` and is redirected back to the page, which shows the
    outcome.
    """
    error = reload_catalog(current_app)
    if request.form.get("next") == "index":
        return redirect(url_for("index"))
    if error:
        return jsonify({"success": False, "message": error}), 503
    return jsonify({"success": True, "recipes": len(_catalog())})


def create_app(catalog: Optional[Catalog] = None, csv_source: Optional[str] = None) -> Flask:
    """Build the web app around its own catalog.

    Args:
        catalog: Pre-loaded catalog; when omitted it is loaded from csv_source
        csv_source: CSV path or URL (default: DEFAULT_CSV_SOURCE)

    Returns:
        The configured Flask app
    """
    app = Flask(__name__)
    app.config["CSV_SOURCE"] = csv_source or DEFAULT_CSV_SOURCE
    app.extensions[CATALOG_KEY] = Catalog(recipes=(), source=app.config["CSV_SOURCE"])
    app.extensions[LOAD_ERROR_KEY] = None

    if catalog is not None:
        app.extensions[CATALOG_KEY] = catalog
    else:
        reload_catalog(app)

    app.add_url_rule("/", view_func=index)
    app.add_url_rule("/api/match", view_func=api_match)
    app.add_url_rule("/recipes/<int:index>/pdf", view_func=recipe_pdf)
    app.add_url_rule("/reload", view_func=reload, methods=["POST"])
    return app


def main():
    """Run the web app."""
    parser = argparse.ArgumentParser(description="Zero-waste recipe finder web app")
    parser.add_argument(
        "--csv",
        type=str,
        default=DEFAULT_CSV_SOURCE,
        help=f"Recipe CSV path or http(s) URL (default: {DEFAULT_CSV_SOURCE})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=5000,
        help="Port to run Flask app on (default: 5000)",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
    )
    app = create_app(csv_source=args.csv)
    app.run(debug=False, port=args.port)


if __name__ == "__main__":
    main()
