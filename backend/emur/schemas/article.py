"""
Article and Category Schemas
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Category Schemas
# ============================================================================

class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)


class CategoryUpdate(CategoryCreate):
    pass


class CategoryResponse(BaseModel):
    uuid: UUID
    name: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# ============================================================================
# Article Schemas
# ============================================================================

class ArticleUpdate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    is_published: Optional[bool] = None


class ArticleCategoryRequest(BaseModel):
    """{"category": "<category uuid>"}"""
    category: UUID


class ArticleResponse(BaseModel):
    uuid: UUID
    title: str
    content: str
    image: Optional[str] = None
    is_published: bool
    created_at: datetime
    categories: List[CategoryResponse] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class ArticleWithMedia(BaseModel):
    article: ArticleResponse
    media: List[str] = Field(default_factory=list)
