import asyncio
import streamlit as st
from dotenv import load_dotenv
load_dotenv()

from mealdb_desserts.agents import SummaryAgent, DetailAgent, DetailSession
from mealdb_desserts.errors import FetchError
from mealdb_desserts.settings import settings, configure_logging

configure_logging()

# Session state: agents and the dessert list are owned here and handed to the widgets below
if "summary_agent" not in st.session_state:
    st.session_state.summary_agent = SummaryAgent()
if "detail_agent" not in st.session_state:
    st.session_state.detail_agent = DetailAgent()
if "recipes" not in st.session_state:
    st.session_state.recipes = None
if "summary_error" not in st.session_state:
    st.session_state.summary_error = None
if "detail_session" not in st.session_state:
    st.session_state.detail_session = None


def open_detail(recipe):
    # Opening a recipe (even the same one) starts a fresh detail view
    if st.session_state.detail_session is not None:
        st.session_state.detail_session.close()
    st.session_state.detail_session = DetailSession(recipe, st.session_state.detail_agent)


async def fetch_detail(session: DetailSession):
    await session.start()


def on_ingredient_change(key, set_checked):
    set_checked(st.session_state[key])


st.title(f"🍰 {settings.category}s")

if st.session_state.recipes is None and st.session_state.summary_error is None:
    with st.spinner("⏳ Loading desserts..."):
        try:
            st.session_state.recipes = st.session_state.summary_agent.invoke(settings.category).meals
        except FetchError as e:
            st.session_state.summary_error = str(e)

if st.session_state.summary_error:
    st.error(f"Could not load the list: {st.session_state.summary_error}")
    if st.button("Try again"):
        st.session_state.summary_error = None
        st.rerun()
    st.stop()

recipes = st.session_state.recipes
if not recipes:
    st.info(f"No {settings.category.lower()}s found.")
    st.stop()

with st.sidebar:
    for recipe in recipes:
        cols = st.columns([1, 3])
        if recipe.image_url:
            cols[0].image(recipe.image_url, width=50)
        cols[1].button(recipe.name, key=f"open-{recipe.id}", on_click=open_detail, args=(recipe,))

session = st.session_state.detail_session
if session is None:
    st.write("👈 Pick a dessert to see how it is made.")
    st.stop()

if session.status == "loading":
    with st.spinner("⏳ Fetching recipe..."):
        asyncio.run(fetch_detail(session))

recipe = session.recipe
if recipe.image_url:
    st.image(recipe.image_url)
else:
    st.markdown("🖼️ *No image available*")
st.header(recipe.name)

if session.status == "not_found":
    st.warning("This recipe is no longer available.")
elif session.status == "failed":
    st.error(f"Could not load the recipe: {session.error}")
    st.button("Retry", on_click=open_detail, args=(recipe,))
else:
    st.write(session.detail.instructions)

    st.subheader("Ingredients")
    for idx, (ingredient, measurement) in enumerate(session.lines):
        # Keys are per session so a reopened view never inherits old widget values
        key = f"{session.token}-{idx}"
        is_checked, set_checked = session.checked.binding(ingredient)
        st.session_state[key] = is_checked()
        st.checkbox(ingredient, key=key, on_change=on_ingredient_change, args=(key, set_checked))
        if measurement:
            st.caption(measurement)
