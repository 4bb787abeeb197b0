from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional
from urllib.parse import urlparse


class RecipeStub(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str = Field(alias="idMeal", min_length=1)
    name: str = Field(alias="strMeal")
    thumbnail_url: Optional[str] = Field(default=None, alias="strMealThumb")

    @property
    def image_url(self) -> Optional[str]:
        """Thumbnail URL when it can actually be displayed, otherwise None."""
        if not self.thumbnail_url:
            return None
        parsed = urlparse(self.thumbnail_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            return None
        return self.thumbnail_url


class RecipeStubList(BaseModel):
    meals: List[RecipeStub]

    # Upstream answers an unknown category with "meals": null
    @field_validator("meals", mode="before")
    @classmethod
    def _null_meals(cls, value):
        return [] if value is None else value
