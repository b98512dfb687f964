"""
Recipes API Endpoints
Recipes are created from a multipart form; the image gets a thumbnail.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.orm import Session

from emur.api.v1.deps import get_media_service, require_admin, require_member, to_uploaded_file
from emur.db.session import get_db
from emur.schemas.common import APIResponse, envelope
from emur.schemas.recipe import RecipeCreate, RecipeResponse, RecipeUpdate, RecipeWithMedia, VoteRequest
from emur.services.auth_service import TokenClaims
from emur.services.media_service import MediaService
from emur.services.recipe_service import RecipeService


router = APIRouter(prefix="/recipes")


def _with_media(recipe) -> RecipeWithMedia:
    return RecipeWithMedia(recipe=RecipeResponse.model_validate(recipe), media=RecipeService.media_urls(recipe))


@router.get("", response_model=APIResponse, dependencies=[Depends(require_member)])
def list_recipes(db: Session = Depends(get_db), media: MediaService = Depends(get_media_service)):
    """
    List recipes with their media URLs.

    Example item:
        {"recipe": {"uuid": "...", "name": "Lentil soup", ...}, "media": ["https://..."]}
    """
    recipes = RecipeService(db, media).list_recipes()
    return envelope(status.HTTP_200_OK, "Recipes retrieved successfully", [_with_media(r) for r in recipes])


@router.post("", response_model=APIResponse, status_code=status.HTTP_201_CREATED)
def create_recipe(
    name: str = Form(...),
    description: Optional[str] = Form(None),
    ingredients: str = Form(...),
    elaboration: str = Form(...),
    category: int = Form(...),
    time: int = Form(...),
    prep_time: Optional[int] = Form(None),
    cook_time: Optional[int] = Form(None),
    serving: Optional[int] = Form(None),
    difficulty: Optional[str] = Form(None),
    nutrition: Optional[str] = Form(None),
    is_published: bool = Form(False),
    file: Optional[UploadFile] = File(None),
    claims: TokenClaims = Depends(require_admin),
    db: Session = Depends(get_db),
    media: MediaService = Depends(get_media_service),
):
    try:
        data = RecipeCreate(
            name=name,
            description=description,
            ingredients=ingredients,
            elaboration=elaboration,
            category=category,
            time=time,
            prep_time=prep_time,
            cook_time=cook_time,
            serving=serving,
            difficulty=difficulty,
            nutrition=nutrition,
            is_published=is_published,
        )
    except ValidationError as e:
        raise RequestValidationError(e.errors())

    upload = to_uploaded_file(file) if file is not None and file.filename else None
    recipe = RecipeService(db, media).create(claims, data, upload)
    return envelope(status.HTTP_201_CREATED, "Recipe created successfully", _with_media(recipe))


@router.put("/{recipe_uuid}", response_model=APIResponse, dependencies=[Depends(require_admin)])
def update_recipe(
    recipe_uuid: UUID,
    data: RecipeUpdate,
    db: Session = Depends(get_db),
    media: MediaService = Depends(get_media_service),
):
    recipe = RecipeService(db, media).update(recipe_uuid, data)
    return envelope(status.HTTP_200_OK, "Recipe updated successfully", RecipeResponse.model_validate(recipe))


@router.delete("/{recipe_uuid}", response_model=APIResponse, dependencies=[Depends(require_admin)])
def delete_recipe(
    recipe_uuid: UUID,
    db: Session = Depends(get_db),
    media: MediaService = Depends(get_media_service),
):
    RecipeService(db, media).delete(recipe_uuid)
    return envelope(status.HTTP_200_OK, "Recipe deleted successfully")


@router.post("/{recipe_uuid}/vote", response_model=APIResponse)
def vote_recipe(
    recipe_uuid: UUID,
    body: VoteRequest,
    claims: TokenClaims = Depends(require_member),
    db: Session = Depends(get_db),
    media: MediaService = Depends(get_media_service),
):
    """Vote 1..5; a second vote from the same user replaces the first."""
    vote = RecipeService(db, media).vote(claims, recipe_uuid, body.vote)
    return envelope(status.HTTP_200_OK, "Vote registered successfully", {"vote": vote.level})
