import logging
from typing import Optional

from mealdb_desserts.agents.mealdb_client import MealDBClient
from mealdb_desserts.schema import RecipeStubList
from mealdb_desserts.settings import settings

logger = logging.getLogger("mealdb_desserts.summary")


class SummaryAgent(MealDBClient):
    endpoint = "filter.php"

    def invoke(self, category: Optional[str] = None) -> RecipeStubList:
        category = category or settings.category
        logger.info(f"Fetching recipe summaries for category {category!r}")
        result = self._get(self.endpoint, {"c": category}, RecipeStubList)
        logger.info(f"Received {len(result.meals)} summaries")
        return result

    async def ainvoke(self, category: Optional[str] = None) -> RecipeStubList:
        category = category or settings.category
        logger.info(f"Fetching recipe summaries for category {category!r}")
        result = await self._aget(self.endpoint, {"c": category}, RecipeStubList)
        logger.info(f"Received {len(result.meals)} summaries")
        return result
