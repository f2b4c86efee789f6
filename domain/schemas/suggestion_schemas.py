"""Schemas for tonight's dinner suggestion"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from domain.schemas.meal_schemas import MealResponse


class SuggestionRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    eating_tonight: Optional[List[StrictInt]] = Field(
        default=None,
        alias="eatingTonight",
        description="Member ids eating tonight; empty or missing means everyone",
    )


class SuggestionResponse(BaseModel):
    meal: str
    meal_data: MealResponse
    eating_tonight: str
    reason: str
    warnings: List[str] = Field(default_factory=list)
    tips: str = ""
    score: float
