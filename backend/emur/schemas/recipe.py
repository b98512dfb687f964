"""
Recipe Schemas
Recipes are created through a multipart form (fields + image), so
RecipeCreate is assembled by the endpoint from the form fields; updates are
plain JSON.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from emur.core.constants import MAX_VOTE, MIN_VOTE


class RecipeBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    ingredients: str = Field(..., min_length=1)
    elaboration: str = Field(..., min_length=1)
    category: int
    time: int = Field(..., ge=0, description="Total time in minutes")
    prep_time: Optional[int] = Field(None, ge=0)
    cook_time: Optional[int] = Field(None, ge=0)
    serving: Optional[int] = Field(None, ge=0)
    difficulty: Optional[str] = None
    nutrition: Optional[str] = None
    is_published: bool = False


class RecipeCreate(RecipeBase):
    pass


class RecipeUpdate(RecipeBase):
    pass


class RecipeResponse(RecipeBase):
    uuid: UUID
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class RecipeWithMedia(BaseModel):
    """
    List item of GET /recipes.

    Example:
        {"recipe": {...}, "media": ["https://bucket.endpoint/uploads/...png"]}
    """
    recipe: RecipeResponse
    media: List[str] = Field(default_factory=list)


class VoteRequest(BaseModel):
    """
    Vote level. Range checked by the service so that out-of-range values get
    a 400 with a specific message.
    """
    vote: int = Field(..., description=f"Level between {MIN_VOTE} and {MAX_VOTE}")
