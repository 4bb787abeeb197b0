from typing import Callable, FrozenSet, Set, Tuple


class CheckedIngredients:
    """
    Ingredient names the user has ticked off in one detail view.

    Lives exactly as long as the view that owns it; nothing is persisted.
    Names are not validated against the recipe, so a stale name is just
    never shown as checked.
    """

    def __init__(self):
        self._names: Set[str] = set()

    def toggle(self, name: str, checked: bool) -> None:
        if checked:
            self._names.add(name)
        else:
            self._names.discard(name)

    def is_checked(self, name: str) -> bool:
        return name in self._names

    def binding(self, name: str) -> Tuple[Callable[[], bool], Callable[[bool], None]]:
        """Getter/setter pair for a checkbox widget bound to one ingredient."""
        return (lambda: self.is_checked(name)), (lambda value: self.toggle(name, value))

    def clear(self) -> None:
        self._names.clear()

    @property
    def checked(self) -> FrozenSet[str]:
        return frozenset(self._names)

    def __contains__(self, name) -> bool:
        return name in self._names

    def __len__(self) -> int:
        return len(self._names)
