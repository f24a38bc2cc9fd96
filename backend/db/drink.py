from typing import Any, Dict, List, Optional

from fastapi import Depends

from .database import Database, get_database
from .ingredient import IngredientRepository


class DrinkRepository:
    """Read access to the drinks collection.

    List results keep `ingredients[].ingredient` as stored references; a single
    drink fetched by slug has them replaced with the referenced ingredient
    documents.
    """

    def __init__(self, database: Database):
        self.database = database
        self.ingredients = IngredientRepository(database)

    async def find_many(self, skip: int = 0, limit: int = 20) -> List[Dict[str, Any]]:
        cursor = self.database.drinks.find({}, skip=skip, limit=limit)
        return await cursor.to_list(length=limit)

    async def find_by_id(self, drink_id: str) -> Optional[Dict[str, Any]]:
        drink = await self.database.drinks.find_one({"id": drink_id})
        if drink is None:
            return None
        return await self.populate_ingredients(drink)

    async def populate_ingredients(self, drink: Dict[str, Any]) -> Dict[str, Any]:
        """Expand ingredient references in place, keeping entry order.

        References to ingredients that no longer exist become None.
        """
        entries = drink.get("ingredients") or []
        refs = [entry.get("ingredient") for entry in entries if entry.get("ingredient") is not None]
        by_object_id = await self.ingredients.find_by_object_ids(list(dict.fromkeys(refs)))

        drink["ingredients"] = [
            {**entry, "ingredient": by_object_id.get(entry.get("ingredient"))}
            for entry in entries
        ]
        return drink


def get_drink_repository(database: Database = Depends(get_database)) -> DrinkRepository:
    return DrinkRepository(database)
