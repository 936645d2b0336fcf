"""
Cached food queries and mutations.

Reads go through the cache; every successful mutation drops all cached
"foods" pages so the next read refetches.
"""
from typing import Any, Mapping, Optional

from .api import FoodApi
from .cache import QueryCache

FOODS_KEY = "foods"


class FoodQueries:

    def __init__(self, api: FoodApi, cache: Optional[QueryCache] = None):
        self.api = api
        self.cache = cache if cache is not None else QueryCache()

    def foods(self, page: int = 1, limit: int = 10, name: str = "") -> dict:
        key = (FOODS_KEY, page, limit, name or "")
        return self.cache.fetch(
            key, lambda: self.api.get_foods(page=page, limit=limit, name=name))

    def add_food(self, food: Mapping[str, Any]) -> dict:
        created = self.api.add_food(food)
        self.cache.invalidate(FOODS_KEY)
        return created

    def update_food(self, food_id: int, **fields) -> dict:
        updated = self.api.update_food(food_id, **fields)
        self.cache.invalidate(FOODS_KEY)
        return updated

    def delete_food(self, food_id: int) -> None:
        self.api.delete_food(food_id)
        self.cache.invalidate(FOODS_KEY)
