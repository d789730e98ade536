"""Recipe source utilities for reading CSV files from disk or over HTTP."""

import logging
import pathlib
from abc import ABC, abstractmethod
from typing import Optional, Union

import requests

from ..config import DEFAULT_CSV_SOURCE
from ..errors import SourceUnavailableError
from ..fetching import HttpSession
from .models import Catalog
from .parsing import load_recipes_from_csv_text

logger = logging.getLogger(__name__)


def is_url(location: str) -> bool:
    """Check whether a CSV location is an http(s) URL rather than a path."""
    return location.lower().startswith(("http://", "https://"))


class RecipeSource(ABC):
    """Abstract base class for places a recipe CSV can come from."""

    @property
    @abstractmethod
    def location(self) -> str:
        """Return the path or URL of the CSV."""
        pass

    @abstractmethod
    def read_text(self) -> str:
        """Return the complete CSV text.

        Raises:
            SourceUnavailableError: If the CSV cannot be read
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.location!r})"


class FileRecipeSource(RecipeSource):
    """Recipe CSV stored on the local filesystem."""

    def __init__(self, path: Union[str, pathlib.Path]):
        self.path = pathlib.Path(path)

    @property
    def location(self) -> str:
        return str(self.path)

    def read_text(self) -> str:
        try:
            # utf-8-sig drops the BOM that spreadsheet exports like to add
            return self.path.read_text(encoding="utf-8-sig")
        except FileNotFoundError as e:
            raise SourceUnavailableError(self.location, "file not found") from e
        except UnicodeDecodeError as e:
            raise SourceUnavailableError(self.location, "not valid UTF-8") from e
        except OSError as e:
            raise SourceUnavailableError(self.location, e.strerror or str(e)) from e


class UrlRecipeSource(RecipeSource):
    """Recipe CSV served over HTTP."""

    def __init__(self, url: str, session: Optional[HttpSession] = None):
        self.url = url
        self.session = session or HttpSession()

    @property
    def location(self) -> str:
        return self.url

    def read_text(self) -> str:
        try:
            return self.session.get_text(self.url)
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else "error"
            raise SourceUnavailableError(self.url, str(status)) from e
        except requests.exceptions.RequestException as e:
            raise SourceUnavailableError(self.url, str(e)) from e


def get_recipe_source(location: Union[str, pathlib.Path, None] = None) -> RecipeSource:
    """Pick the source type for a path or URL.

    Args:
        location: File path or http(s) URL; defaults to DEFAULT_CSV_SOURCE

    Returns:
        A UrlRecipeSource for URLs, a FileRecipeSource otherwise
    """
    location = location or DEFAULT_CSV_SOURCE
    if isinstance(location, str) and is_url(location):
        return UrlRecipeSource(location)
    return FileRecipeSource(location)


def load_catalog(
    source: Union[RecipeSource, str, pathlib.Path, None] = None,
) -> Catalog:
    """Read, tokenize and normalize a recipe CSV into a Catalog.

    Nothing is returned unless the whole file loads.

    Args:
        source: A RecipeSource, or a path/URL handed to get_recipe_source()

    Returns:
        The loaded Catalog

    Raises:
        SourceUnavailableError: If the CSV cannot be read or fetched
        IngestError: If the CSV is empty or lacks required columns
    """
    if not isinstance(source, RecipeSource):
        source = get_recipe_source(source)

    text = source.read_text()
    recipes = load_recipes_from_csv_text(text)
    logger.info(f"Loaded {len(recipes)} recipes from {source.location}")
    return Catalog(recipes=tuple(recipes), source=source.location)
