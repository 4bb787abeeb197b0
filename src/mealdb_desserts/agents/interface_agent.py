import logging
from typing import List, Optional

from langchain_core.runnables import Runnable
from mealdb_desserts.schema import DessertState, RecipeStub

logger = logging.getLogger("mealdb_desserts.selection")


class InterfaceAgent(Runnable):
    """Picks the dessert the user chose (1-based, as numbered on screen)."""

    def __init__(self, user_choice: int):
        self.user_choice = user_choice

    def invoke(self, state: DessertState, config: Optional[dict] = None, **kwargs) -> DessertState:
        options: List[RecipeStub] = [
            option if isinstance(option, RecipeStub) else RecipeStub.model_validate(option)
            for option in state.get("recipe_options") or []
        ]

        if not options:
            raise ValueError("There are no desserts to choose from")
        if not 1 <= self.user_choice <= len(options):
            raise ValueError(f"Dessert {self.user_choice} is not listed, choose between 1 and {len(options)}")

        selected = options[self.user_choice - 1]
        logger.info(f"Selected {selected.name!r} ({selected.id})")
        return {**state, "recipe_options": options, "selected_recipe": selected}
