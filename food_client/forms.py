"""
Client-side validation of food forms.

Raw form values are strings. They are checked against the same pydantic
schemas the API uses, so a form that passes here is accepted by the server.
"""
from typing import Any, Dict, Mapping, NamedTuple, Optional

from pydantic import ValidationError

from food_api.errors import validation_details
from food_api.schemas.food import FoodCreate, FoodUpdate

FORM_FIELDS = (
    "name",
    "rating",
    "food_image",
    "restaurant_name",
    "restaurant_image",
    "restaurant_status",
)

# blank inputs for these mean "no value"
OPTIONAL_FIELDS = ("rating", "food_image", "restaurant_name", "restaurant_image")


class FormResult(NamedTuple):
    data: Optional[Dict[str, Any]]
    errors: Dict[str, str]

    @property
    def ok(self) -> bool:
        return not self.errors


def clean_form(raw: Mapping[str, Any], partial: bool = False) -> Dict[str, Any]:
    """Strip text inputs and turn blank optional inputs into None.

    Without `partial`, a missing field counts as blank. With `partial`, only
    the fields present in `raw` are kept.
    """
    cleaned: Dict[str, Any] = {}
    for field in FORM_FIELDS:
        if field not in raw:
            if partial:
                continue
            value = None
        else:
            value = raw[field]
        if isinstance(value, str):
            value = value.strip()
        if field in OPTIONAL_FIELDS and value in ("", None):
            value = None
        elif field == "rating":
            value = _to_number(value)
        elif field == "name" and value is None:
            value = ""  # reported as "Food name is required"
        elif field == "restaurant_status" and value in ("", None):
            continue  # server default, or stored value when partial
        cleaned[field] = value
    return cleaned


def _to_number(value: Any) -> Any:
    """Rating text as a float. Anything else is left for the schema to reject."""
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return value
    return value


def validate_food_form(raw: Mapping[str, Any], partial: bool = False) -> FormResult:
    """Validate a create/edit form, or only the given fields when `partial`.

    On success `data` is the JSON-ready payload to send. On failure `data` is
    None and `errors` maps each bad field to its message.
    """
    schema = FoodUpdate if partial else FoodCreate
    try:
        model = schema.model_validate(clean_form(raw, partial=partial))
    except ValidationError as e:
        return FormResult(None, validation_details(e.errors()))
    return FormResult(model.model_dump(mode="json", exclude_unset=partial), {})
