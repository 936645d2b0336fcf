"""
View state of the foods page: paging, search, the edit form and errors.
"""
import logging
import time
from typing import Any, Callable, Dict, List, Mapping, Optional

from .api import ApiError
from .forms import validate_food_form
from .queries import FoodQueries

logger = logging.getLogger(__name__)

PAGE_SIZE = 10
DELETE_PROMPT = "Delete this food?"


class FoodPage:
    """State behind one screen of the catalog.

    Search changes can be debounced: with `debounce_seconds` > 0 a new search
    text waits until that much time has passed on `clock` before it replaces
    the current one (and resets the page to 1).
    """

    def __init__(self, queries: FoodQueries, limit: int = PAGE_SIZE,
                 debounce_seconds: float = 0.0,
                 clock: Callable[[], float] = time.monotonic):
        if limit < 1:
            raise ValueError("limit must be a positive integer")
        self.queries = queries
        self.limit = limit
        self.debounce_seconds = debounce_seconds
        self.clock = clock

        self.page = 1
        self.search = ""
        self._pending_search: Optional[str] = None
        self._pending_since = 0.0

        self.result: Optional[dict] = None
        self.form_open = False
        self.editing: Optional[dict] = None
        self.error: Optional[str] = None
        self.field_errors: Dict[str, str] = {}

    # ---- search ---------------------------------------------------------

    def set_search(self, text: str) -> None:
        text = text or ""
        if self.debounce_seconds <= 0:
            self._apply_search(text)
            return
        self._pending_search = text
        self._pending_since = self.clock()

    def flush_search(self, force: bool = False) -> bool:
        """Apply a pending search once the debounce delay is over."""
        if self._pending_search is None:
            return False
        if not force and self.clock() - self._pending_since < self.debounce_seconds:
            return False
        text, self._pending_search = self._pending_search, None
        return self._apply_search(text)

    @property
    def search_pending(self) -> bool:
        return self._pending_search is not None

    def _apply_search(self, text: str) -> bool:
        if text == self.search:
            return False
        self.search = text
        self.page = 1
        return True

    # ---- data -----------------------------------------------------------

    def load(self) -> Optional[dict]:
        """Fetch the current page. On failure the previous result stays shown."""
        self.flush_search()
        try:
            self.result = self.queries.foods(
                page=self.page, limit=self.limit, name=self.search)
        except ApiError as e:
            self.error = str(e)
            return self.result

        # the page we were on disappeared, e.g. after deleting its last row
        last_page = max(self.total_pages, 1)
        if self.page > last_page:
            self.page = last_page
            return self.load()
        return self.result

    @property
    def items(self) -> List[dict]:
        return (self.result or {}).get("data", [])

    @property
    def meta(self) -> dict:
        return (self.result or {}).get("meta", {})

    @property
    def total_pages(self) -> int:
        return self.meta.get("totalPages", 0)

    # ---- paging ---------------------------------------------------------

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    def next_page(self) -> bool:
        if not self.has_next:
            return False
        self.page += 1
        return True

    def prev_page(self) -> bool:
        if not self.has_prev:
            return False
        self.page -= 1
        return True

    # ---- create / edit --------------------------------------------------

    def open_create(self) -> None:
        self.editing = None
        self.field_errors = {}
        self.form_open = True

    def open_edit(self, food: Mapping[str, Any]) -> None:
        self.editing = dict(food)
        self.field_errors = {}
        self.form_open = True

    def close_form(self) -> None:
        self.form_open = False
        self.editing = None
        self.field_errors = {}

    def submit(self, form: Mapping[str, Any]) -> Optional[dict]:
        """Validate and send the form. Returns the saved food, or None on failure."""
        # edits send only what the form holds, omitted fields keep their stored value
        result = validate_food_form(form, partial=self.editing is not None)
        if not result.ok:
            self.field_errors = result.errors
            return None

        try:
            if self.editing is not None:
                saved = self.queries.update_food(self.editing["id"], **result.data)
            else:
                saved = self.queries.add_food(result.data)
        except ApiError as e:
            if e.field_errors:
                self.field_errors = e.field_errors
            else:
                self.error = str(e)
            return None

        logger.info(f"Saved food {saved.get('id')}")
        self.close_form()
        return saved

    # ---- delete ---------------------------------------------------------

    def delete(self, food_id: int, confirm: Callable[[str], bool]) -> bool:
        """Delete after `confirm` agrees. Nothing is sent otherwise."""
        if not confirm(DELETE_PROMPT):
            return False
        try:
            self.queries.delete_food(food_id)
        except ApiError as e:
            self.error = str(e)
            return False
        return True

    def dismiss_error(self) -> None:
        self.error = None
