from typing import TypedDict, List
from mealdb_desserts.schema.summary_schema import RecipeStub
from mealdb_desserts.schema.detail_schema import RecipeDetail, IngredientLine


class DessertState(TypedDict, total=False):
    recipe_options: List[RecipeStub]
    selected_recipe: RecipeStub
    recipe_detail: RecipeDetail
    ingredient_lines: List[IngredientLine]
