from __future__ import annotations

import math
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Ingredient(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    quantity: str = ""


class RecipeInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    headline: str = ""
    ingredients: tuple[Ingredient, ...] = ()
    rating: Optional[float] = None
    file: str = ""
    calories: Optional[float] = None

    @field_validator("rating")
    @classmethod
    def _rating_is_comparable(cls, value: Optional[float]) -> Optional[float]:
        # NaN never compares, which would leave the ranking without a total order.
        if value is not None and math.isnan(value):
            raise ValueError("rating must be a number or null, not NaN")
        return value


class RandomPick(BaseModel):
    recipe: Optional[RecipeInfo] = None
    url: Optional[str] = None
    notice: str = ""
