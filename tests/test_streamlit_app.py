from pathlib import Path

import httpx
import pytest
from streamlit.testing.v1 import AppTest

from mealdb_desserts.agents import DetailAgent, SummaryAgent

from conftest import BASE_URL, make_transport

APP_PATH = str(Path(__file__).resolve().parent.parent / "pipelines" / "streamlit_dessert_app.py")

pie_list = {"meals": [
    {"idMeal": "1", "strMeal": "Pie", "strMealThumb": None},
    {"idMeal": "2", "strMeal": "Tart", "strMealThumb": None},
]}


def pie_detail(*ingredients):
    record = {"idMeal": "1", "strMeal": "Pie", "strInstructions": "Bake it."}
    for i, (name, measure) in enumerate(ingredients, 1):
        record[f"strIngredient{i}"] = name
        record[f"strMeasure{i}"] = measure
    return {"meals": [record]}


def start_app(summary_transport, detail_transport) -> AppTest:
    at = AppTest.from_file(APP_PATH, default_timeout=10)
    at.session_state["summary_agent"] = SummaryAgent(base_url=BASE_URL, transport=summary_transport)
    at.session_state["detail_agent"] = DetailAgent(base_url=BASE_URL, transport=detail_transport)
    return at.run()


def open_pie(at: AppTest) -> AppTest:
    return at.button(key="open-1").click().run()


def ingredient_key(at: AppTest, idx: int) -> str:
    return f"{at.session_state['detail_session'].token}-{idx}"


def test_lists_desserts_and_shows_detail():
    detail = pie_detail(("Flour", "2 cups"), ("Butter", ""))
    at = open_pie(start_app(make_transport(pie_list), make_transport(detail)))

    assert not at.exception
    assert at.header[0].value == "Pie"
    assert [cb.label for cb in at.checkbox] == ["Flour", "Butter"]
    assert [c.value for c in at.caption] == ["2 cups"]
    assert not any(cb.value for cb in at.checkbox)


def test_checking_updates_the_tracker():
    at = open_pie(start_app(make_transport(pie_list), make_transport(pie_detail(("Flour", ""), ("Butter", "")))))

    at.checkbox(key=ingredient_key(at, 1)).check().run()

    session = at.session_state["detail_session"]
    assert session.checked.checked == frozenset({"Butter"})
    at.checkbox(key=ingredient_key(at, 1)).uncheck().run()
    assert session.checked.checked == frozenset()


def test_reopening_a_recipe_starts_unchecked():
    at = open_pie(start_app(make_transport(pie_list), make_transport(pie_detail(("Flour", ""), ("Butter", "")))))
    at.checkbox(key=ingredient_key(at, 1)).check().run()
    first = at.session_state["detail_session"]

    open_pie(at)

    second = at.session_state["detail_session"]
    assert second is not first
    assert first.closed
    assert not second.checked.is_checked("Butter")
    assert not any(cb.value for cb in at.checkbox)


def test_duplicate_names_share_one_flag():
    detail = pie_detail(("Sugar", "1 tbsp"), ("Butter", "50g"), ("Sugar", "2 tbsp"))
    at = open_pie(start_app(make_transport(pie_list), make_transport(detail)))

    at.checkbox(key=ingredient_key(at, 0)).check().run()

    session = at.session_state["detail_session"]
    assert session.checked.is_checked("Sugar")
    assert at.checkbox(key=ingredient_key(at, 0)).value is True
    assert at.checkbox(key=ingredient_key(at, 2)).value is True
    assert at.checkbox(key=ingredient_key(at, 1)).value is False


def test_missing_recipe_shows_warning():
    at = open_pie(start_app(make_transport(pie_list), make_transport({"meals": []})))

    assert at.session_state["detail_session"].status == "not_found"
    assert at.warning[0].value == "This recipe is no longer available."
    assert len(at.checkbox) == 0


def test_failed_fetch_shows_error_and_retries():
    calls = []

    def handler(request):
        calls.append(request)
        if len(calls) == 1:
            return httpx.Response(500)
        return httpx.Response(200, json=pie_detail(("Flour", "")))

    at = open_pie(start_app(make_transport(pie_list), httpx.MockTransport(handler)))

    assert at.session_state["detail_session"].status == "failed"
    assert at.error[0].value.startswith("Could not load the recipe")

    retry = [b for b in at.button if b.label == "Retry"][0]
    retry.click().run()

    assert at.session_state["detail_session"].status == "loaded"
    assert [cb.label for cb in at.checkbox] == ["Flour"]
    assert len(at.error) == 0


def test_list_failure_shows_error():
    at = start_app(make_transport(status_code=502, content=b""), make_transport({"meals": []}))

    assert at.error[0].value.startswith("Could not load the list")
    assert len(at.checkbox) == 0


def test_empty_list_shows_info():
    at = start_app(make_transport({"meals": None}), make_transport({"meals": []}))

    assert at.info[0].value == "No desserts found."
