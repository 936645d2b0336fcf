# Import models so Base.metadata knows every table

from .food import Food, RestaurantStatus

# Export all models
__all__ = [
    "Food",
    "RestaurantStatus",
]
