import asyncio
import logging
import uuid
from typing import List, Literal, Optional

from mealdb_desserts.agents.checklist import CheckedIngredients
from mealdb_desserts.agents.detail_agent import DetailAgent
from mealdb_desserts.errors import FetchError, NotFound
from mealdb_desserts.schema import IngredientLine, RecipeDetail, RecipeStub, normalize_ingredients

logger = logging.getLogger("mealdb_desserts.session")

SessionStatus = Literal["loading", "loaded", "not_found", "failed"]


class DetailSession:
    """
    State behind one open recipe detail view.

    Create one per view and call close() when the view goes away: an
    in-flight fetch is cancelled and the checked ingredients are dropped,
    so opening the recipe again starts from a clean slate. `token` is
    unique per session and scopes UI widget keys to this view.
    """

    def __init__(self, recipe: RecipeStub, agent: Optional[DetailAgent] = None):
        self.recipe = recipe
        self.token = uuid.uuid4().hex
        self.agent = agent or DetailAgent()
        self.checked = CheckedIngredients()

        self.status: SessionStatus = "loading"
        self.detail: Optional[RecipeDetail] = None
        self.lines: List[IngredientLine] = []
        self.error: Optional[str] = None

        self._task: Optional[asyncio.Task] = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    async def load(self) -> SessionStatus:
        try:
            detail = await self.agent.afetch(self.recipe.id)
        except NotFound as e:
            self._finish("not_found", error=str(e))
            return self.status
        except FetchError as e:
            self._finish("failed", error=str(e))
            return self.status

        if self._closed:
            logger.info(f"Dropping detail for {self.recipe.id}, view already closed")
            return self.status

        self.detail = detail
        self.lines = normalize_ingredients(detail)
        self.status = "loaded"
        return self.status

    def start(self) -> asyncio.Task:
        """Schedule load() on the running loop; repeated calls return the same task."""
        if self._closed:
            raise RuntimeError("Session is closed")
        if self._task is None:
            self._task = asyncio.get_running_loop().create_task(self.load())
        return self._task

    def close(self) -> None:
        self._closed = True
        if self._task is not None and not self._task.done():
            logger.info(f"Cancelling detail fetch for {self.recipe.id}")
            self._task.cancel()
        self.checked.clear()

    def _finish(self, status: SessionStatus, error: str) -> None:
        if self._closed:
            return
        logger.warning(f"Detail for {self.recipe.id} ended as {status}: {error}")
        self.status = status
        self.error = error
