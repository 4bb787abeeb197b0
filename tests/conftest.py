import httpx
import pytest


BASE_URL = "https://mealdb.test/api/json/v1/1"


def make_transport(payload=None, status_code=200, content=None, seen=None):
    """MockTransport answering every request with the same body."""
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        if content is not None:
            return httpx.Response(status_code, content=content)
        return httpx.Response(status_code, json=payload)
    return httpx.MockTransport(handler)


@pytest.fixture
def summary_payload():
    return {
        "meals": [
            {"idMeal": "53049", "strMeal": "Apam balik",
             "strMealThumb": "https://www.themealdb.com/images/media/meals/adxcbq1619787919.jpg"},
            {"idMeal": "52893", "strMeal": "Apple & Blackberry Crumble",
             "strMealThumb": "https://www.themealdb.com/images/media/meals/xvsurr1511719182.jpg"},
            {"idMeal": "52768", "strMeal": "Apple Frangipan Tart", "strMealThumb": None},
        ]
    }


@pytest.fixture
def detail_record():
    record = {
        "idMeal": "52893",
        "strMeal": "Apple & Blackberry Crumble",
        "strCategory": "Dessert",
        "strArea": "British",
        "strInstructions": "Heat oven to 190C/170C fan/gas 5.",
        "strMealThumb": "https://www.themealdb.com/images/media/meals/xvsurr1511719182.jpg",
        "strTags": "Pudding",
        "strYoutube": "https://www.youtube.com/watch?v=4vhcOwVBDO4",
        "strSource": "https://www.bbcgoodfood.com/recipes/778642/apple-and-blackberry-crumble",
    }
    for i in range(1, 21):
        record[f"strIngredient{i}"] = ""
        record[f"strMeasure{i}"] = ""
    record.update({
        "strIngredient1": "Plain Flour", "strMeasure1": "120g",
        "strIngredient2": "Caster Sugar", "strMeasure2": "60g",
        "strIngredient3": "Butter", "strMeasure3": "60g",
        "strIngredient4": "Braeburn Apples", "strMeasure4": "300g",
        "strIngredient5": "Blackberrys", "strMeasure5": "120g",
        "strIngredient6": "Demerara Sugar", "strMeasure6": "2 tbs",
        "strIngredient7": "Cinnamon", "strMeasure7": "1/4 teaspoon",
        "strIngredient8": "Ice Cream", "strMeasure8": "to serve",
    })
    return record


@pytest.fixture
def detail_payload(detail_record):
    return {"meals": [detail_record]}
