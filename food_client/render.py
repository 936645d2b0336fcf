"""
Plain-text rendering of a page of foods
"""
from typing import Dict, List, Optional

COLUMNS = (
    ("id", "ID", 5),
    ("name", "Name", 28),
    ("rating", "Rating", 6),
    ("restaurant_name", "Restaurant", 24),
    ("restaurant_status", "Status", 6),
)


def _cell(value, width: int) -> str:
    if value is None:
        text = "-"
    elif isinstance(value, float):
        text = f"{value:g}"
    else:
        text = str(value)
    if len(text) > width:
        text = text[:width - 1] + "…"
    return text.ljust(width)


def render_table(items: List[dict]) -> str:
    header = " | ".join(title.ljust(width) for _, title, width in COLUMNS)
    rule = "-+-".join("-" * width for _, _, width in COLUMNS)
    lines = [header, rule]
    if not items:
        lines.append("No foods found.")
    for item in items:
        lines.append(" | ".join(_cell(item.get(key), width) for key, _, width in COLUMNS))
    return "\n".join(line.rstrip() for line in lines)


def render_pager(meta: Dict, search: str = "") -> str:
    total_pages = meta.get("totalPages", 0)
    page = meta.get("page", 1) if total_pages else 0
    text = f"Page {page} of {total_pages} ({meta.get('total', 0)} foods)"
    if search:
        text += f", matching {search!r}"
    return text


def render_field_errors(errors: Dict[str, str]) -> str:
    return "\n".join(f"  {field}: {message}" for field, message in errors.items())


def render_food(food: Dict, title: Optional[str] = None) -> str:
    lines = [title] if title else []
    for key in ("id", "name", "rating", "food_image", "restaurant_name",
                "restaurant_image", "restaurant_status"):
        value = food.get(key)
        lines.append(f"  {key}: {'-' if value is None else value}")
    return "\n".join(lines)
