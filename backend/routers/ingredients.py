from fastapi import APIRouter, Depends, Path, Query, Request

from core.errors import NotFoundError
from db.ingredient import IngredientRepository, get_ingredient_repository
from schemas.ingredient import IngredientList, IngredientResponse

router = APIRouter()


@router.get(
    "/ingredients",
    response_model=IngredientList,
    summary="get ingredients",
    description="get all the ingredients",
    openapi_extra={"security": []},
)
async def get_ingredients(
    limit: int = Query(default=20, ge=1, le=100, description="number of ingredients to return"),
    skip: int = Query(default=0, ge=0, description="number of ingredients to skip"),
    repo: IngredientRepository = Depends(get_ingredient_repository),
):
    """Get a page of ingredients"""
    ingredients = await repo.find_many(skip=skip, limit=limit)
    return {"ingredients": ingredients}


# Singular path kept for compatibility with existing clients
@router.get(
    "/ingredient/{ingredient_id}",
    response_model=IngredientResponse,
    summary="get ingredient",
    description="get one ingredient",
    openapi_extra={"security": []},
)
async def get_ingredient(
    request: Request,
    ingredient_id: str = Path(description="ingredient slug"),
    repo: IngredientRepository = Depends(get_ingredient_repository),
):
    """Get an ingredient by slug"""
    ingredient = await repo.find_by_id(ingredient_id)
    if ingredient is None and request.app.state.settings.strict_not_found:
        raise NotFoundError("Ingredient", ingredient_id)
    return {"ingredient": ingredient}
