"""Media rows and the per-owner join tables."""

from sqlalchemy.orm import Session

from emur.models.media import ArticleMedia, Media, RecipeMedia, ReminderMedia
from emur.repositories.base import Repository


class MediaRepository(Repository[Media]):
    def __init__(self, db: Session):
        super().__init__(db, Media)


class ArticleMediaRepository(Repository[ArticleMedia]):
    def __init__(self, db: Session):
        super().__init__(db, ArticleMedia)


class RecipeMediaRepository(Repository[RecipeMedia]):
    def __init__(self, db: Session):
        super().__init__(db, RecipeMedia)


class ReminderMediaRepository(Repository[ReminderMedia]):
    def __init__(self, db: Session):
        super().__init__(db, ReminderMedia)
