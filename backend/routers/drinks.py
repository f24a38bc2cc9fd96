from fastapi import APIRouter, Depends, Path, Query, Request

from core.errors import NotFoundError
from db.drink import DrinkRepository, get_drink_repository
from schemas.drinks import DrinkList, DrinkResponse

router = APIRouter()


@router.get(
    "",
    response_model=DrinkList,
    summary="get drinks",
    description="get all the drinks",
    openapi_extra={"security": []},
)
async def get_drinks(
    limit: int = Query(default=20, ge=1, le=100, description="number of drinks to return"),
    skip: int = Query(default=0, ge=0, description="number of drinks to skip"),
    repo: DrinkRepository = Depends(get_drink_repository),
):
    """Get a page of drinks, ingredients not expanded"""
    drinks = await repo.find_many(skip=skip, limit=limit)
    return {"drinks": drinks}


@router.get(
    "/{drink_id}",
    response_model=DrinkResponse,
    summary="get drink",
    description="get one drink",
    openapi_extra={"security": []},
)
async def get_drink(
    request: Request,
    drink_id: str = Path(description="drink slug"),
    repo: DrinkRepository = Depends(get_drink_repository),
):
    """Get a single drink by slug with its ingredients expanded"""
    drink = await repo.find_by_id(drink_id)
    if drink is None and request.app.state.settings.strict_not_found:
        raise NotFoundError("Drink", drink_id)
    return {"drink": drink}
