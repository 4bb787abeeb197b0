from .summary_schema import RecipeStub, RecipeStubList
from .detail_schema import (
    INGREDIENT_SLOTS,
    IngredientLine,
    RecipeDetail,
    RecipeDetailList,
    normalize_ingredients,
)
from .interface_agent_schema import DessertState
__all__ = ["RecipeStub", "RecipeStubList", "RecipeDetail", "RecipeDetailList", "IngredientLine",
           "INGREDIENT_SLOTS", "normalize_ingredients", "DessertState"]
