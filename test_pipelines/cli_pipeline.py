from dotenv import load_dotenv
load_dotenv()

from mealdb_desserts.agents import SummaryAgent, DetailAgent, CheckedIngredients
from mealdb_desserts.errors import FetchError, NotFound
from mealdb_desserts.pipeline import build_pipeline
from mealdb_desserts.settings import settings, configure_logging


class NoRecipesFound(Exception):
    pass


def choose_recipe(recipes) -> int:
    if not recipes:
        raise NoRecipesFound(f"No {settings.category.lower()}s found.")
    print(f"\n{settings.category}s found:")
    for idx, recipe in enumerate(recipes, 1):
        print(f"{idx}: {recipe.name}")
    while True:
        try:
            user_choice = int(input(f"\nSelect a recipe (1-{len(recipes)}): "))
            if 1 <= user_choice <= len(recipes):
                return user_choice
            print("Invalid choice. Try again.")
        except ValueError:
            print("Invalid input. Enter a number.")


def print_checklist(lines, checked: CheckedIngredients):
    print("\n--- Ingredients ---")
    for idx, (ingredient, measurement) in enumerate(lines, 1):
        mark = "x" if checked.is_checked(ingredient) else " "
        suffix = f" ({measurement})" if measurement else ""
        print(f"{idx:2}. [{mark}] {ingredient}{suffix}")


def main(app=None) -> int:
    app = app or build_pipeline(SummaryAgent(), DetailAgent(), choose_recipe)

    print("Welcome to the Dessert Browser CLI!")
    try:
        result = app.invoke({"category": settings.category})
    except NoRecipesFound as e:
        print(f"\n{e}")
        return 1
    except NotFound as e:
        print(f"\n{e}")
        return 1
    except FetchError as e:
        print(f"\nFetch failed: {e}")
        return 1

    selected = result["selected_recipe"]
    detail = result["recipe_detail"]
    lines = result["ingredient_lines"]

    print(f"\n=== {selected.name} ===\n")
    print(detail.instructions)

    checked = CheckedIngredients()
    while True:
        print_checklist(lines, checked)
        answer = input("\nToggle an ingredient by number (or type 'exit' to quit): ").strip()
        if answer.lower() == "exit":
            print("Enjoy your dessert!")
            return 0
        if not answer.isdigit() or not 1 <= int(answer) <= len(lines):
            print("Please enter a listed number or 'exit'.")
            continue
        ingredient = lines[int(answer) - 1].name
        checked.toggle(ingredient, not checked.is_checked(ingredient))


if __name__ == "__main__":
    configure_logging("WARNING")
    raise SystemExit(main())
