from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Ingredient(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(default=None, examples=["blue-curacau"])
    name: Optional[str] = Field(default=None, examples=["Blue Curaçau"])
    image_url: Optional[str] = Field(default=None, alias="imageUrl", json_schema_extra={"format": "url"})


class IngredientList(BaseModel):
    ingredients: List[Ingredient]


class IngredientResponse(BaseModel):
    ingredient: Optional[Ingredient] = None
