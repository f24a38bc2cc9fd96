"""
Seed a small sample catalog (ingredients + drinks) into MongoDB.

Run locally:
  cd backend && python -m scripts.seed_catalog

It uses the same MONGO_URL env var as the backend (dotenv supported by core.config).
Documents are upserted by slug, so running it twice does not duplicate anything.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from core.config import settings
from core.observability import setup_logging
from db.database import Database

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeedIngredient:
    id: str
    name: str
    image_url: Optional[str] = None


@dataclass(frozen=True)
class SeedDrinkLine:
    ingredient: str  # ingredient slug
    amount: float
    amount_unit: str


@dataclass(frozen=True)
class SeedDrink:
    id: str
    name: str
    tags: list[str] = field(default_factory=list)
    ingredients: list[SeedDrinkLine] = field(default_factory=list)
    image_url: Optional[str] = None


SEED_INGREDIENTS: list[SeedIngredient] = [
    SeedIngredient(id="vodka", name="Vodka"),
    SeedIngredient(id="blue-curacau", name="Blue Curaçau"),
    SeedIngredient(id="lime-juice", name="Lime Juice"),
    SeedIngredient(id="triple-sec", name="Triple Sec"),
]

SEED_DRINKS: list[SeedDrink] = [
    SeedDrink(
        id="blue-kamikaze",
        name="Blue Kamikaze",
        tags=["shot"],
        ingredients=[
            SeedDrinkLine("vodka", 1, "part"),
            SeedDrinkLine("blue-curacau", 1, "part"),
            SeedDrinkLine("lime-juice", 1, "part"),
        ],
    ),
    SeedDrink(
        id="kamikaze",
        name="Kamikaze",
        tags=["shot", "sour"],
        ingredients=[
            SeedDrinkLine("vodka", 1, "part"),
            SeedDrinkLine("triple-sec", 1, "part"),
            SeedDrinkLine("lime-juice", 1, "part"),
        ],
    ),
]


async def _upsert(collection, slug: str, fields: dict, now: datetime) -> None:
    await collection.update_one(
        {"id": slug},
        {
            "$set": {**fields, "id": slug, "updatedAt": now},
            "$setOnInsert": {"createdAt": now},
        },
        upsert=True,
    )


async def seed_catalog(
    database: Database,
    ingredients: list[SeedIngredient] = SEED_INGREDIENTS,
    drinks: list[SeedDrink] = SEED_DRINKS,
) -> tuple[int, int]:
    """Upsert the given catalog. Returns (ingredients, drinks) written."""
    now = datetime.now(timezone.utc)

    for ing in ingredients:
        await _upsert(database.ingredients, ing.id, {"name": ing.name, "imageUrl": ing.image_url}, now)

    # Drinks reference ingredients by storage _id
    cursor = database.ingredients.find({}, {"_id": 1, "id": 1})
    object_ids = {doc["id"]: doc["_id"] for doc in await cursor.to_list(length=None)}

    for drink in drinks:
        missing = [line.ingredient for line in drink.ingredients if line.ingredient not in object_ids]
        if missing:
            raise ValueError(f"Drink {drink.id} references unknown ingredients: {', '.join(missing)}")
        await _upsert(
            database.drinks,
            drink.id,
            {
                "name": drink.name,
                "tags": list(drink.tags),
                "imageUrl": drink.image_url,
                "ingredients": [
                    {
                        "ingredient": object_ids[line.ingredient],
                        "amount": line.amount,
                        "amountUnit": line.amount_unit,
                    }
                    for line in drink.ingredients
                ],
            },
            now,
        )

    return len(ingredients), len(drinks)


async def main() -> None:
    setup_logging(settings.log_level, settings.log_format)
    database = Database(settings.mongo_url)
    await database.connect()
    try:
        ingredient_count, drink_count = await seed_catalog(database)
    finally:
        database.close()
    logger.info(f"Done. Ingredients upserted: {ingredient_count}. Drinks upserted: {drink_count}.")


if __name__ == "__main__":
    asyncio.run(main())
