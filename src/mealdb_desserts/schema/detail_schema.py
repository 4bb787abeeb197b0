from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, NamedTuple, Optional

SLOT_COUNT = 20

# (ingredient field, measure field) for slots 1..20, in slot order
INGREDIENT_SLOTS = tuple(
    (f"ingredient_{i}", f"measure_{i}") for i in range(1, SLOT_COUNT + 1)
)


class IngredientLine(NamedTuple):
    name: str
    measurement: str


class RecipeDetail(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    instructions: str = Field(alias="strInstructions")

    id: Optional[str] = Field(default=None, alias="idMeal")
    name: Optional[str] = Field(default=None, alias="strMeal")
    thumbnail_url: Optional[str] = Field(default=None, alias="strMealThumb")
    category: Optional[str] = Field(default=None, alias="strCategory")
    area: Optional[str] = Field(default=None, alias="strArea")
    source_url: Optional[str] = Field(default=None, alias="strSource")
    youtube_url: Optional[str] = Field(default=None, alias="strYoutube")

    ingredient_1: Optional[str] = Field(default=None, alias="strIngredient1")
    measure_1: Optional[str] = Field(default=None, alias="strMeasure1")
    ingredient_2: Optional[str] = Field(default=None, alias="strIngredient2")
    measure_2: Optional[str] = Field(default=None, alias="strMeasure2")
    ingredient_3: Optional[str] = Field(default=None, alias="strIngredient3")
    measure_3: Optional[str] = Field(default=None, alias="strMeasure3")
    ingredient_4: Optional[str] = Field(default=None, alias="strIngredient4")
    measure_4: Optional[str] = Field(default=None, alias="strMeasure4")
    ingredient_5: Optional[str] = Field(default=None, alias="strIngredient5")
    measure_5: Optional[str] = Field(default=None, alias="strMeasure5")
    ingredient_6: Optional[str] = Field(default=None, alias="strIngredient6")
    measure_6: Optional[str] = Field(default=None, alias="strMeasure6")
    ingredient_7: Optional[str] = Field(default=None, alias="strIngredient7")
    measure_7: Optional[str] = Field(default=None, alias="strMeasure7")
    ingredient_8: Optional[str] = Field(default=None, alias="strIngredient8")
    measure_8: Optional[str] = Field(default=None, alias="strMeasure8")
    ingredient_9: Optional[str] = Field(default=None, alias="strIngredient9")
    measure_9: Optional[str] = Field(default=None, alias="strMeasure9")
    ingredient_10: Optional[str] = Field(default=None, alias="strIngredient10")
    measure_10: Optional[str] = Field(default=None, alias="strMeasure10")
    ingredient_11: Optional[str] = Field(default=None, alias="strIngredient11")
    measure_11: Optional[str] = Field(default=None, alias="strMeasure11")
    ingredient_12: Optional[str] = Field(default=None, alias="strIngredient12")
    measure_12: Optional[str] = Field(default=None, alias="strMeasure12")
    ingredient_13: Optional[str] = Field(default=None, alias="strIngredient13")
    measure_13: Optional[str] = Field(default=None, alias="strMeasure13")
    ingredient_14: Optional[str] = Field(default=None, alias="strIngredient14")
    measure_14: Optional[str] = Field(default=None, alias="strMeasure14")
    ingredient_15: Optional[str] = Field(default=None, alias="strIngredient15")
    measure_15: Optional[str] = Field(default=None, alias="strMeasure15")
    ingredient_16: Optional[str] = Field(default=None, alias="strIngredient16")
    measure_16: Optional[str] = Field(default=None, alias="strMeasure16")
    ingredient_17: Optional[str] = Field(default=None, alias="strIngredient17")
    measure_17: Optional[str] = Field(default=None, alias="strMeasure17")
    ingredient_18: Optional[str] = Field(default=None, alias="strIngredient18")
    measure_18: Optional[str] = Field(default=None, alias="strMeasure18")
    ingredient_19: Optional[str] = Field(default=None, alias="strIngredient19")
    measure_19: Optional[str] = Field(default=None, alias="strMeasure19")
    ingredient_20: Optional[str] = Field(default=None, alias="strIngredient20")
    measure_20: Optional[str] = Field(default=None, alias="strMeasure20")

    @property
    def ingredients_with_measurements(self) -> List[IngredientLine]:
        return normalize_ingredients(self)


def normalize_ingredients(detail: RecipeDetail) -> List[IngredientLine]:
    """
    Flatten the numbered ingredient/measure slots into ordered lines.

    Slots are read 1..20. A slot is kept only when its ingredient is a
    non-empty string; values are used exactly as upstream sent them.
    A missing measure becomes "" rather than dropping the line.
    """
    lines = []
    for ingredient_field, measure_field in INGREDIENT_SLOTS:
        ingredient = getattr(detail, ingredient_field)
        if not ingredient:
            continue
        measure = getattr(detail, measure_field)
        lines.append(IngredientLine(ingredient, measure or ""))
    return lines


class RecipeDetailList(BaseModel):
    meals: List[RecipeDetail]

    # A lookup with no match comes back as "meals": null
    @field_validator("meals", mode="before")
    @classmethod
    def _null_meals(cls, value):
        return [] if value is None else value
