"""
Recipe Service
Recipes with a thumbnailed image, and per-user votes.
"""

import logging
from typing import List, Optional
from uuid import UUID

from emur.core.constants import MAX_VOTE, MIN_VOTE
from emur.core.exceptions import BadRequestError
from emur.models.media import RecipeMedia
from emur.models.recipe import RatingRecipe, Recipe
from emur.repositories.base import PersistenceError
from emur.repositories.content import RatingRecipeRepository, RecipeRepository
from emur.repositories.media import RecipeMediaRepository
from emur.schemas.recipe import RecipeCreate, RecipeUpdate
from emur.services.base import BaseService
from emur.services.media_service import MediaService, UploadedFile

logger = logging.getLogger(__name__)

ERR_INVALID_VOTE = f"invalid vote value, must be between {MIN_VOTE} and {MAX_VOTE}"


class RecipeService(BaseService):
    def __init__(self, db, media: MediaService):
        super().__init__(db)
        self.media = media
        self.recipes = RecipeRepository(db)
        self.recipe_media = RecipeMediaRepository(db)
        self.votes = RatingRecipeRepository(db)

    def list_recipes(self) -> List[Recipe]:
        return self.recipes.find(order_by=Recipe.created_at.desc())

    @staticmethod
    def media_urls(recipe: Recipe) -> List[str]:
        return [link.media.media_url for link in recipe.media_links]

    def create(self, claims, data: RecipeCreate, upload: Optional[UploadedFile]) -> Recipe:
        """Create the recipe, its image and thumbnail, and the join row together."""
        user = self.requester(claims)
        recipe = Recipe(user_id=user.id, **data.model_dump())
        try:
            self.recipes.create_with_omit(recipe, "uuid")
            if upload is not None:
                media = self.media.store_image(upload, thumbnail=True)
                link = RecipeMedia(recipe_id=recipe.id, media_id=media.id)
                recipe.media_links.append(link)
                self.recipe_media.create(link)
            self.commit()
        except PersistenceError as e:
            raise self.persistence_failure("creating recipe", e)
        self.db.refresh(recipe)
        logger.info(f"[Recipe] Created {recipe.uuid} by {user.uuid}")
        return recipe

    def update(self, recipe_uuid: UUID, data: RecipeUpdate) -> Recipe:
        recipe = self.get_or_404(self.recipes, recipe_uuid, "recipe")
        for field, value in data.model_dump().items():
            setattr(recipe, field, value)
        try:
            self.recipes.update(recipe)
            self.commit()
        except PersistenceError as e:
            raise self.persistence_failure("updating recipe", e)
        return recipe

    def delete(self, recipe_uuid: UUID) -> None:
        """Delete the recipe with its join rows, media rows and stored objects."""
        recipe = self.get_or_404(self.recipes, recipe_uuid, "recipe")
        media_rows = [link.media for link in recipe.media_links]
        stale_urls = []
        try:
            self.recipes.delete(recipe)
            for media in media_rows:
                stale_urls.extend(self.media.remove(media))
            self.commit()
        except PersistenceError as e:
            raise self.persistence_failure("deleting recipe", e)
        self.media.purge(stale_urls)

    def vote(self, claims, recipe_uuid: UUID, level: int) -> RatingRecipe:
        """
        Record the caller's vote, replacing a previous one.

        Raises:
            BadRequestError: level outside MIN_VOTE..MAX_VOTE
            NotFoundError: unknown recipe
        """
        if level < MIN_VOTE or level > MAX_VOTE:
            raise BadRequestError(ERR_INVALID_VOTE)

        user = self.requester(claims)
        recipe = self.get_or_404(self.recipes, recipe_uuid, "recipe")
        existing = self.votes.find_item_by_ids(user.id, recipe.id, "user_id", "recipe_id")
        try:
            if existing is not None:
                existing.level = level
                vote = self.votes.update(existing)
            else:
                vote = self.votes.create(RatingRecipe(user_id=user.id, recipe_id=recipe.id, level=level))
            self.commit()
        except PersistenceError as e:
            raise self.persistence_failure("voting recipe", e)
        return vote
