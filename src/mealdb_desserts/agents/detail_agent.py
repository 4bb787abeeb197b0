import logging

from mealdb_desserts.agents.mealdb_client import MealDBClient
from mealdb_desserts.errors import NotFound
from mealdb_desserts.schema import DessertState, RecipeDetail, RecipeDetailList, RecipeStub


logger = logging.getLogger("mealdb_desserts.detail")


class DetailAgent(MealDBClient):
    endpoint = "lookup.php"

    def fetch(self, recipe_id: str) -> RecipeDetail:
        self._check_id(recipe_id)
        logger.info(f"Fetching recipe detail for id {recipe_id}")
        result = self._get(self.endpoint, {"i": recipe_id}, RecipeDetailList)
        return self._first(recipe_id, result)

    async def afetch(self, recipe_id: str) -> RecipeDetail:
        self._check_id(recipe_id)
        logger.info(f"Fetching recipe detail for id {recipe_id}")
        result = await self._aget(self.endpoint, {"i": recipe_id}, RecipeDetailList)
        return self._first(recipe_id, result)

    def invoke(self, state: DessertState) -> DessertState:
        # Handle both Pydantic model and dict for selected_recipe
        selected_raw = state.get("selected_recipe")
        if selected_raw is None:
            raise ValueError("No recipe selected")
        if isinstance(selected_raw, RecipeStub):
            selected = selected_raw
        else:
            selected = RecipeStub.model_validate(selected_raw)

        detail = self.fetch(selected.id)

        return {
            **state,
            "recipe_detail": detail,
            "ingredient_lines": detail.ingredients_with_measurements,
        }

    @staticmethod
    def _check_id(recipe_id: str) -> None:
        if not recipe_id:
            raise ValueError("recipe_id must be a non-empty string")

    @staticmethod
    def _first(recipe_id: str, result: RecipeDetailList) -> RecipeDetail:
        if not result.meals:
            logger.warning(f"Lookup for id {recipe_id} returned no records")
            raise NotFound(recipe_id)
        return result.meals[0]
