import pytest

from zero_waste.errors import IngestError, MissingColumnError
from zero_waste.matching import rank_recipes
from zero_waste.recipes import Recipe, load_recipes_from_csv_text
from zero_waste.recipes.parsing import build_recipe
from zero_waste.recipes.schema import resolve_schema

FRIED_RICE_CSV = "Title,Quantity,Unit,Ingredient1,Directions\nFried Rice,2,cups,rice,Cook rice. Add eggs.\n"


def test_fried_rice_end_to_end():
    recipes = load_recipes_from_csv_text(FRIED_RICE_CSV)
    assert len(recipes) == 1
    recipe = recipes[0]
    assert recipe.title == "Fried Rice"
    assert recipe.measured_ingredients == ("2 cups rice",)
    assert recipe.normalized_ingredients == ("rice",)
    assert recipe.steps == ["Cook rice.", "Add eggs."]

    matches = rank_recipes(recipes, "rice", threshold=1)
    assert len(matches) == 1
    assert matches[0].recipe is recipe
    assert matches[0].score == 1


def test_multiple_slots_and_excel_fractions():
    text = (
        "Title,Quantity1,Unit1,Ingredient1,Quantity2,Unit2,Ingredient2,Quantity3,Unit3,Ingredient3,Directions\n"
        '"Pancakes, Fluffy",1,cup,Flour,4-Jan,tsp,Salt,,,,"Mix. Fry in 2.5 tbsp butter."\n'
    )
    recipe = load_recipes_from_csv_text(text)[0]
    assert recipe.title == "Pancakes, Fluffy"
    assert recipe.measured_ingredients == ("1 cup Flour", "1/4 tsp Salt")
    assert recipe.normalized_ingredients == ("flour", "salt")
    assert recipe.steps == ["Mix.", "Fry in 2.5 tbsp butter."]


def test_normalized_ingredients_use_name_not_measured_line():
    text = "Title,Quantity1,Unit1,Ingredient1,Directions\nOmelette,3,large,Eggs,Whisk.\n"
    recipe = load_recipes_from_csv_text(text)[0]
    assert recipe.measured_ingredients == ("3 large Eggs",)
    assert recipe.normalized_ingredients == ("egg",)


def test_empty_slots_are_skipped_and_order_kept():
    text = (
        "Title,Ingredient1,Ingredient2,Ingredient3,Directions\n"
        "Salad,lettuce,,tomatoes,Toss.\n"
    )
    recipe = load_recipes_from_csv_text(text)[0]
    assert recipe.measured_ingredients == ("lettuce", "tomatoes")
    assert recipe.normalized_ingredients == ("lettuce", "tomato")


def test_rows_without_title_or_ingredients_are_dropped():
    text = (
        "Title,Ingredient1,Directions\n"
        ",rice,Cook.\n"
        "Water,,Pour.\n"
        "  ,  ,\n"
        "Rice,rice,\n"
    )
    recipes = load_recipes_from_csv_text(text)
    assert [r.title for r in recipes] == ["Rice"]
    assert recipes[0].directions == ""
    assert recipes[0].steps == []


def test_short_rows_read_missing_cells_as_empty():
    text = "Title,Directions,Ingredient1,Ingredient2\nToast,Toast it.,bread\n"
    recipe = load_recipes_from_csv_text(text)[0]
    assert recipe.measured_ingredients == ("bread",)


def test_title_and_directions_are_trimmed():
    text = 'Title,Ingredient1,Directions\n  Porridge  ,oats,"  Simmer.  "\n'
    recipe = load_recipes_from_csv_text(text)[0]
    assert recipe.title == "Porridge"
    assert recipe.directions == "Simmer."


def test_no_ingredient_columns_yields_no_recipes():
    assert load_recipes_from_csv_text("Title,Directions\nNothing,Do nothing.\n") == []


@pytest.mark.parametrize("text", ["", "Title,Ingredient1,Directions\n", "\n\n"])
def test_too_few_rows(text):
    with pytest.raises(IngestError):
        load_recipes_from_csv_text(text)


def test_missing_directions_column():
    with pytest.raises(MissingColumnError) as exc_info:
        load_recipes_from_csv_text("Title,Ingredient1\nRice,rice\n")
    assert exc_info.value.column == "Directions"


def test_build_recipe_returns_immutable_record():
    schema = resolve_schema(["Title", "Ingredient1", "Directions"])
    recipe = build_recipe(["Rice", "rice", "Boil."], schema)
    assert isinstance(recipe, Recipe)
    with pytest.raises(AttributeError):
        recipe.title = "Other"
