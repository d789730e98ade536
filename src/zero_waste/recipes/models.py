import dataclasses
from typing import Iterator, List, Tuple

from .directions import split_directions


@dataclasses.dataclass(frozen=True)
class Recipe:
    """A recipe loaded from one CSV row.

    ``normalized_ingredients[i]`` is the matching form of the ingredient
    named in ``measured_ingredients[i]``.
    """

    title: str
    directions: str
    measured_ingredients: Tuple[str, ...]
    normalized_ingredients: Tuple[str, ...]

    @property
    def steps(self) -> List[str]:
        return split_directions(self.directions)


@dataclasses.dataclass(frozen=True)
class Catalog:
    """All recipes loaded from a single CSV source."""

    recipes: Tuple[Recipe, ...]
    source: str = ""

    def __iter__(self) -> Iterator[Recipe]:
        return iter(self.recipes)

    def __len__(self) -> int:
        return len(self.recipes)

    def __getitem__(self, index: int) -> Recipe:
        return self.recipes[index]
