from typing import Optional


class FetchError(Exception):
    """Terminal failure of a single fetch against the recipe API."""


class NetworkError(FetchError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(FetchError):
    pass


class NotFound(FetchError):
    def __init__(self, recipe_id: str):
        super().__init__(f"No recipe found for id {recipe_id!r}")
        self.recipe_id = recipe_id
