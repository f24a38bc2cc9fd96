from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, NonNegativeFloat, NonNegativeInt
from .ingredient import Ingredient


# Ingredient line of a drink, with the reference already expanded
class DrinkIngredient(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ingredient: Optional[Ingredient] = None
    # int stays int on the wire
    amount: Optional[Union[NonNegativeInt, NonNegativeFloat]] = Field(default=None, examples=[1])
    amount_unit: Optional[str] = Field(default=None, alias="amountUnit", examples=["part"])


class DrinkSummary(BaseModel):
    """Drink as shown in list views (no ingredient lines)"""
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(default=None, examples=["blue-kamikaze"])
    name: Optional[str] = Field(default=None, examples=["Blue Kamikaze"])
    tags: Optional[List[str]] = Field(default_factory=list, examples=[["shot"]])
    image_url: Optional[str] = Field(default=None, alias="imageUrl", json_schema_extra={"format": "url"})


class Drink(DrinkSummary):
    """Full drink with expanded ingredients"""
    ingredients: List[DrinkIngredient] = Field(default_factory=list)


class DrinkList(BaseModel):
    drinks: List[DrinkSummary]


class DrinkResponse(BaseModel):
    drink: Optional[Drink] = None
