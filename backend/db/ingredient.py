from typing import Any, Dict, List, Optional

from fastapi import Depends

from .database import Database, get_database


class IngredientRepository:
    """Read access to the ingredients collection"""

    def __init__(self, database: Database):
        self.database = database

    async def find_many(self, skip: int = 0, limit: int = 20) -> List[Dict[str, Any]]:
        cursor = self.database.ingredients.find({}, skip=skip, limit=limit)
        return await cursor.to_list(length=limit)

    async def find_by_id(self, ingredient_id: str) -> Optional[Dict[str, Any]]:
        return await self.database.ingredients.find_one({"id": ingredient_id})

    async def find_by_object_ids(self, object_ids: List[Any]) -> Dict[Any, Dict[str, Any]]:
        """Load ingredients by storage `_id`, keyed by that `_id`"""
        if not object_ids:
            return {}
        cursor = self.database.ingredients.find({"_id": {"$in": list(object_ids)}})
        return {doc["_id"]: doc for doc in await cursor.to_list(length=None)}


def get_ingredient_repository(database: Database = Depends(get_database)) -> IngredientRepository:
    return IngredientRepository(database)
