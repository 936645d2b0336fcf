import logging
from typing import List, Optional, Tuple

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from food_api.errors import NotFoundError, StorageError
from food_api.models.food import Food
from food_api.schemas.food import FoodCreate, FoodUpdate

logger = logging.getLogger(__name__)


def _storage_failure(db: Session, action: str, exc: SQLAlchemyError) -> StorageError:
    db.rollback()
    logger.error(f"Database error while {action}: {exc}")
    return StorageError()


def get_by_id(db: Session, food_id: int) -> Optional[Food]:
    """Get a food item by ID"""
    try:
        return db.get(Food, food_id)
    except SQLAlchemyError as e:
        raise _storage_failure(db, f"loading food {food_id}", e) from e


def get_page(db: Session, name: Optional[str] = None, page: int = 1,
             limit: int = 10) -> Tuple[List[Food], int]:
    """One page of food items plus the total number of matches.

    `name` matches anywhere in the food name, ignoring case. `%` and `_` are
    taken literally.
    """
    query = select(Food)
    if name:
        query = query.where(Food.name.icontains(name, autoescape=True))

    try:
        total = db.scalar(
            select(func.count()).select_from(query.subquery()))
        items = db.scalars(
            query.order_by(Food.id).offset((page - 1) * limit).limit(limit)
        ).all()
    except SQLAlchemyError as e:
        raise _storage_failure(db, "listing foods", e) from e

    return list(items), total or 0


def create(db: Session, food_data: FoodCreate) -> Food:
    """Create a new food item"""
    db_food = Food(**food_data.model_dump())
    try:
        db.add(db_food)
        db.commit()
        db.refresh(db_food)
    except SQLAlchemyError as e:
        raise _storage_failure(db, "creating food", e) from e

    logger.info(f"Created food {db_food.id} ({db_food.name!r})")
    return db_food


def update(db: Session, food_id: int, food_data: FoodUpdate) -> Food:
    """Merge the fields that were sent into the stored food item"""
    db_obj = get_by_id(db, food_id)
    if not db_obj:
        raise NotFoundError.food(food_id)

    update_data = food_data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(db_obj, field, value)

    try:
        db.commit()
        db.refresh(db_obj)
    except SQLAlchemyError as e:
        raise _storage_failure(db, f"updating food {food_id}", e) from e

    logger.info(f"Updated food {food_id}: {sorted(update_data)}")
    return db_obj


def delete(db: Session, food_id: int) -> None:
    """Delete a food item"""
    db_obj = get_by_id(db, food_id)
    if not db_obj:
        raise NotFoundError.food(food_id)

    try:
        db.delete(db_obj)
        db.commit()
    except SQLAlchemyError as e:
        raise _storage_failure(db, f"deleting food {food_id}", e) from e

    logger.info(f"Deleted food {food_id}")
