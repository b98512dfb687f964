"""
Article API Endpoints
Published content with a cover image and category tags.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session

from emur.api.v1.deps import get_media_service, require_admin, require_member, to_uploaded_file
from emur.db.session import get_db
from emur.schemas.article import ArticleCategoryRequest, ArticleResponse, ArticleUpdate, ArticleWithMedia
from emur.schemas.common import APIResponse, envelope
from emur.services.article_service import ArticleService
from emur.services.auth_service import TokenClaims
from emur.services.media_service import MediaService


router = APIRouter(prefix="/articles")


def _with_media(article) -> ArticleWithMedia:
    return ArticleWithMedia(
        article=ArticleResponse.model_validate(article),
        media=ArticleService.media_urls(article),
    )


@router.get("", response_model=APIResponse, dependencies=[Depends(require_member)])
def list_articles(db: Session = Depends(get_db), media: MediaService = Depends(get_media_service)):
    articles = ArticleService(db, media).list_articles()
    return envelope(status.HTTP_200_OK, "Articles retrieved successfully", [_with_media(a) for a in articles])


@router.post("", response_model=APIResponse, status_code=status.HTTP_201_CREATED)
def create_article(
    title: str = Form(..., min_length=1),
    content: str = Form(..., min_length=1),
    file: Optional[UploadFile] = File(None),
    claims: TokenClaims = Depends(require_admin),
    db: Session = Depends(get_db),
    media: MediaService = Depends(get_media_service),
):
    """
    Create an article from a multipart form.

    Form fields: title, content; optional image in "file" (png or jpeg).
    """
    upload = to_uploaded_file(file) if file is not None and file.filename else None
    article = ArticleService(db, media).create(claims, title, content, upload)
    return envelope(status.HTTP_201_CREATED, "Article created successfully", _with_media(article))


@router.put("/{article_uuid}", response_model=APIResponse, dependencies=[Depends(require_admin)])
def update_article(
    article_uuid: UUID,
    data: ArticleUpdate,
    db: Session = Depends(get_db),
    media: MediaService = Depends(get_media_service),
):
    article = ArticleService(db, media).update(article_uuid, data)
    return envelope(status.HTTP_200_OK, "Article updated successfully", ArticleResponse.model_validate(article))


@router.delete("/{article_uuid}", response_model=APIResponse, dependencies=[Depends(require_admin)])
def delete_article(
    article_uuid: UUID,
    db: Session = Depends(get_db),
    media: MediaService = Depends(get_media_service),
):
    ArticleService(db, media).delete(article_uuid)
    return envelope(status.HTTP_200_OK, "Article deleted successfully")


@router.post("/{article_uuid}/categories", response_model=APIResponse, dependencies=[Depends(require_admin)])
def add_article_category(
    article_uuid: UUID,
    body: ArticleCategoryRequest,
    db: Session = Depends(get_db),
    media: MediaService = Depends(get_media_service),
):
    """Tag an article with a category. Tagging twice -> 409."""
    article = ArticleService(db, media).add_category(article_uuid, body.category)
    return envelope(status.HTTP_200_OK, "Category added to article", ArticleResponse.model_validate(article))
