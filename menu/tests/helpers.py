"""Small catalogs shared by the planning tests."""
from menu.domain.NutritionalInfo import NutritionalInfo
from menu.domain.Recipe import Recipe
from menu.infra.Recipe_Repository import RecipeRepository
from menu.utilities.constants import (
    CATEGORY_DESSERT, CATEGORY_MAIN_DISH, CATEGORY_SALAD, CATEGORY_SIDE_DISH, CATEGORY_SOUP,
    DIFFICULTY_EASY
)


def make_recipe(recipe_id, name=None, category=CATEGORY_MAIN_DISH, calories=None, prep_time="30 min",
                difficulty=DIFFICULTY_EASY, ingredients=None, steps=None, protein=0.0, carbs=0.0, fat=0.0):
    nutrition = None
    if calories is not None:
        nutrition = NutritionalInfo(calories=calories, protein=protein, carbs=carbs, fat=fat)
    return Recipe(
        id=recipe_id,
        name=name or recipe_id,
        description=f"Descripción de {name or recipe_id}",
        prep_time=prep_time,
        difficulty=difficulty,
        ingredients=ingredients if ingredients is not None else [f"{recipe_id} ingrediente 1", f"{recipe_id} ingrediente 2"],
        steps=steps if steps is not None else [f"{recipe_id} paso 1"],
        nutrition=nutrition,
        category=category,
    )


def scenario_recipes():
    """One complete main, one side-requiring main, one side, one soup, one dessert, five salads."""
    recipes = [
        make_recipe("M1", calories=500),
        make_recipe("M2", name="Plateada", calories=600),
        make_recipe("S1", name="Arroz Graneado", category=CATEGORY_SIDE_DISH, calories=200),
        make_recipe("Q1", category=CATEGORY_SOUP, calories=350),
        make_recipe("D1", category=CATEGORY_DESSERT, calories=250),
    ]
    recipes += [make_recipe(f"L{i}", category=CATEGORY_SALAD, calories=80) for i in range(1, 6)]
    return recipes


def scenario_catalog():
    return RecipeRepository(scenario_recipes())


def large_recipes():
    """A catalog with enough of every category to fill weeks without repeats."""
    recipes = [make_recipe(f"M{i}", calories=400 + i * 10) for i in range(1, 9)]
    recipes += [
        make_recipe("R1", name="Pollo Asado", calories=480),
        make_recipe("R2", name="Pescado sobre Cebolla", calories=290),
        make_recipe("S1", name="Puré de Papas", category=CATEGORY_SIDE_DISH, calories=230),
        make_recipe("S2", name="Arroz Graneado", category=CATEGORY_SIDE_DISH, calories=210),
        make_recipe("X1", name="Salsa Blanca", category=CATEGORY_SIDE_DISH),
        make_recipe("Q1", category=CATEGORY_SOUP, calories=380),
        make_recipe("Q2", category=CATEGORY_SOUP, calories=360),
        make_recipe("D1", category=CATEGORY_DESSERT, calories=260),
        make_recipe("D2", category=CATEGORY_DESSERT, calories=310),
    ]
    recipes += [make_recipe(f"L{i}", category=CATEGORY_SALAD, calories=70) for i in range(1, 8)]
    return recipes
