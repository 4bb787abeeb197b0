from typing import Callable, List, Optional

from langgraph.graph import StateGraph
from pydantic import BaseModel

from mealdb_desserts.agents import DetailAgent, InterfaceAgent, SummaryAgent
from mealdb_desserts.schema import IngredientLine, RecipeDetail, RecipeStub
from mealdb_desserts.settings import settings


class PipelineState(BaseModel):
    category: str = settings.category
    recipes: Optional[List[RecipeStub]] = None
    selected_recipe: Optional[RecipeStub] = None
    recipe_detail: Optional[RecipeDetail] = None
    ingredient_lines: Optional[List[IngredientLine]] = None


Chooser = Callable[[List[RecipeStub]], int]


def build_pipeline(summary_agent: SummaryAgent, detail_agent: DetailAgent, chooser: Chooser):
    """
    Compile the list -> select -> detail graph.

    `chooser` receives the fetched stubs and returns the 1-based position
    of the one to open. Fetch errors are not caught here; they surface from
    the compiled graph's invoke().
    """

    def fetch_summaries_node(state: PipelineState) -> dict:
        results_obj = summary_agent.invoke(state.category)
        return {"recipes": results_obj.meals}

    def select_recipe_node(state: PipelineState) -> dict:
        interface_agent = InterfaceAgent(chooser(state.recipes))
        dessert_state = {
            "recipe_options": state.recipes,
        }
        selected = interface_agent.invoke(dessert_state)
        return {"selected_recipe": selected["selected_recipe"]}

    def fetch_detail_node(state: PipelineState) -> dict:
        dessert_state = {
            "recipe_options": state.recipes,
            "selected_recipe": state.selected_recipe
        }
        new_state = detail_agent.invoke(dessert_state)
        return {
            "recipe_detail": new_state["recipe_detail"],
            "ingredient_lines": new_state["ingredient_lines"],
        }

    graph = StateGraph(state_schema=PipelineState)
    graph.add_node("fetch_summaries", fetch_summaries_node)
    graph.add_node("select_recipe", select_recipe_node)
    graph.add_node("fetch_detail", fetch_detail_node)

    graph.add_edge("fetch_summaries", "select_recipe")
    graph.add_edge("select_recipe", "fetch_detail")
    graph.set_entry_point("fetch_summaries")
    graph.set_finish_point("fetch_detail")

    return graph.compile()
