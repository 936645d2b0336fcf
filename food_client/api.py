"""
HTTP client for the Food Catalog API
"""
import logging
from typing import Any, Dict, Mapping, Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:8000"
FOODS_PATH = "/api/foods"


class ApiError(Exception):
    """A failed API call. `status_code` is None when the server was never reached."""

    def __init__(self, status_code: Optional[int], error: str, details: Any = None):
        self.status_code = status_code
        self.error = error
        self.details = details
        super().__init__(error)

    def __str__(self):
        if isinstance(self.details, str) and self.details:
            return f"{self.error}: {self.details}"
        return self.error

    @property
    def field_errors(self) -> Dict[str, str]:
        if self.status_code == 400 and isinstance(self.details, dict):
            return dict(self.details)
        return {}

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ApiError":
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and "error" in body:
            return cls(response.status_code, body["error"], body.get("details"))
        return cls(response.status_code, response.reason_phrase or f"HTTP {response.status_code}")


class FoodApi:
    """Thin wrapper over the four food endpoints"""

    def __init__(self, base_url: str = DEFAULT_API_URL,
                 client: Optional[httpx.Client] = None, timeout: float = 10.0):
        self.client = client or httpx.Client(base_url=base_url, timeout=timeout)

    def close(self):
        self.client.close()

    def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            response = self.client.request(method, path, **kwargs)
        except httpx.TransportError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise ApiError(None, "Could not reach the food API", str(e)) from e

        if response.is_error:
            error = ApiError.from_response(response)
            logger.info(f"{method} {path} -> {response.status_code} {error.error}")
            raise error
        return response

    # GET all foods with optional search & pagination
    def get_foods(self, page: int = 1, limit: int = 10, name: str = "") -> dict:
        params = {"page": page, "limit": limit}
        if name:
            params["name"] = name
        return self._request("GET", FOODS_PATH, params=params).json()

    def add_food(self, food: Mapping[str, Any]) -> dict:
        return self._request("POST", FOODS_PATH, json=dict(food)).json()

    def update_food(self, food_id: int, **fields) -> dict:
        return self._request("PUT", f"{FOODS_PATH}/{food_id}", json=fields).json()

    def delete_food(self, food_id: int) -> None:
        self._request("DELETE", f"{FOODS_PATH}/{food_id}")
