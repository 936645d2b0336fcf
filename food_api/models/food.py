"""
Food model: a food item together with the restaurant that serves it.
Path: food_api/models/food.py
"""
from sqlalchemy import Column, Integer, Float, Text, Enum
import enum

from ..db import Base


class RestaurantStatus(str, enum.Enum):
    open = "open"
    closed = "closed"


class Food(Base):

    __tablename__ = "foods"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False)
    rating = Column(Float, nullable=True)  # 0 - 5
    food_image = Column(Text, nullable=True)

    restaurant_name = Column(Text, nullable=True)
    restaurant_image = Column(Text, nullable=True)
    restaurant_status = Column(
        Enum(RestaurantStatus, name="restaurantstatus"),
        nullable=False,
        default=RestaurantStatus.open,
        server_default=RestaurantStatus.open.value,
    )

    def __repr__(self):
        return f"<Food id={self.id} name={self.name!r}>"
