"""
Food Routes for the Food Catalog
Path: food_api/routes/food_route.py
"""
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, Request, Response, status
from sqlalchemy.orm import Session

from food_api.CRUD import food_crud

from ..db import get_db
from ..schemas.food import (
    ErrorResponse,
    FoodCreate,
    FoodListResponse,
    FoodOut,
    FoodUpdate,
    MAX_INT,
    PaginationMeta,
    count_pages,
)

router = APIRouter(
    prefix="/api/foods",
    tags=["Foods"],
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


# GET /api/foods?name=[searchTerm]&page=[pageNumber]&limit=[itemsPerPage]
@router.get("", response_model=FoodListResponse)
def get_foods(
    request: Request,
    name: Optional[str] = Query(
        None, description="Case-insensitive part of the food name"),
    page: int = Query(1, ge=1, le=MAX_INT, description="Page number, starting at 1"),
    limit: Optional[int] = Query(None, ge=1, le=MAX_INT, description="Items per page"),
    db: Session = Depends(get_db),
):
    """Get food items with search and pagination"""
    if limit is None:
        limit = request.app.state.settings.page_size

    items, total = food_crud.get_page(db, name=name, page=page, limit=limit)

    return FoodListResponse(
        data=[FoodOut.model_validate(item) for item in items],
        meta=PaginationMeta(
            total=total,
            page=page,
            limit=limit,
            total_pages=count_pages(total, limit),
        ),
    )


# POST /api/foods
@router.post("", response_model=FoodOut, status_code=status.HTTP_201_CREATED)
def add_food(food: FoodCreate, db: Session = Depends(get_db)):
    """Add a new food item"""
    return food_crud.create(db, food)


# PUT /api/foods/:id
@router.put("/{food_id}", response_model=FoodOut,
            responses={404: {"model": ErrorResponse}})
def update_food(
    food: FoodUpdate,
    food_id: int = Path(..., gt=0, le=MAX_INT, description="ID must be a positive integer"),
    db: Session = Depends(get_db),
):
    """Update an existing food item, only the fields sent are changed"""
    return food_crud.update(db, food_id, food)


# DELETE /api/foods/:id
@router.delete("/{food_id}", status_code=status.HTTP_204_NO_CONTENT,
               response_class=Response,
               responses={404: {"model": ErrorResponse}})
def delete_food(
    food_id: int = Path(..., gt=0, le=MAX_INT, description="ID must be a positive integer"),
    db: Session = Depends(get_db),
):
    """Delete a food item"""
    food_crud.delete(db, food_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
