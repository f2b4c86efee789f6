"""Schemas for family members"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class FamilyMemberCreate(BaseModel):
    name: str = Field(..., description="Display name (required, non-empty)")
    avatar: Optional[str] = Field(None, description="Avatar glyph, defaults to 👤")
    likes: Optional[str] = Field(None, description="Comma separated likes")
    dislikes: Optional[str] = Field(None, description="Comma separated dislikes")
    dietary: Optional[str] = Field(None, description="Dietary restrictions, e.g. vegetarian")


class FamilyMemberUpdate(BaseModel):
    """Partial update: omitted or null fields are left unchanged."""

    name: Optional[str] = None
    avatar: Optional[str] = None
    likes: Optional[str] = None
    dislikes: Optional[str] = None
    dietary: Optional[str] = None


class FamilyMemberResponse(BaseModel):
    id: int
    name: str
    avatar: str
    likes: str
    dislikes: str
    dietary: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
