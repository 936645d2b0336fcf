"""
Food Schemas for the Food Catalog
Path: food_api/schemas/food.py
"""
from typing import Annotated, Dict, List, Optional, Union

from pydantic import AfterValidator, AnyHttpUrl, BaseModel, Field, TypeAdapter, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from ..models.food import RestaurantStatus


# largest value an Integer column (ids, paging) can hold
MAX_INT = 2**31 - 1

_http_url = TypeAdapter(AnyHttpUrl)


def _check_url(value: str) -> str:
    """Accept only absolute http(s) URLs, stored exactly as given."""
    try:
        _http_url.validate_python(value)
    except ValidationError:
        raise PydanticCustomError("url_invalid", "Invalid URL format") from None
    return value


UrlStr = Annotated[str, AfterValidator(_check_url)]


def _require_name(value: Optional[str]) -> str:
    if value is None or not value.strip():
        raise PydanticCustomError("name_required", "Food name is required")
    return value.strip()


class FoodBase(BaseModel):
    """Fields shared by every food payload"""
    name: str = Field(..., description="Name of the food")
    rating: Optional[float] = Field(
        None, ge=0, le=5, strict=True, allow_inf_nan=False, description="Rating from 0 to 5")
    food_image: Optional[UrlStr] = Field(
        None, description="URL of the food picture")
    restaurant_name: Optional[str] = Field(
        None, description="Restaurant serving the food")
    restaurant_image: Optional[UrlStr] = Field(
        None, description="URL of the restaurant picture")
    restaurant_status: RestaurantStatus = Field(
        RestaurantStatus.open, description="open or closed")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value):
        return _require_name(value)


class FoodCreate(FoodBase):
    """Schema for creating a food item"""
    pass


class FoodUpdate(BaseModel):
    """Schema for partial updates, only the fields sent are applied"""
    name: Optional[str] = None
    rating: Optional[float] = Field(None, ge=0, le=5, strict=True, allow_inf_nan=False)
    food_image: Optional[UrlStr] = None
    restaurant_name: Optional[str] = None
    restaurant_image: Optional[UrlStr] = None
    restaurant_status: Optional[RestaurantStatus] = None

    # may be left out, but never cleared
    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value):
        return _require_name(value)

    @field_validator("restaurant_status")
    @classmethod
    def status_not_null(cls, value):
        if value is None:
            raise PydanticCustomError(
                "status_required", "Restaurant status must be 'open' or 'closed'")
        return value


class FoodOut(BaseModel):
    id: int
    name: str
    rating: Optional[float] = None
    food_image: Optional[str] = None
    restaurant_name: Optional[str] = None
    restaurant_image: Optional[str] = None
    restaurant_status: RestaurantStatus

    class Config:
        from_attributes = True


class PaginationMeta(BaseModel):
    """Pagination metadata returned with every list"""
    total: int
    page: int
    limit: int
    total_pages: int = Field(..., alias="totalPages")

    class Config:
        populate_by_name = True


class FoodListResponse(BaseModel):
    data: List[FoodOut]
    meta: PaginationMeta


class ErrorResponse(BaseModel):
    """Error envelope for 400, 404 and 500 responses"""
    error: str
    details: Optional[Union[str, Dict[str, str]]] = None


def count_pages(total: int, limit: int) -> int:
    """ceil(total / limit) without going through floats"""
    return -(-total // limit)
