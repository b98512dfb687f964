"""
Article Service
Articles with a cover image, and their category tags.
"""

import logging
from typing import List, Optional
from uuid import UUID

from emur.core.exceptions import ConflictError
from emur.models.article import Article, ArticleCategory
from emur.models.media import ArticleMedia
from emur.repositories.base import DuplicateRecordError, PersistenceError
from emur.repositories.content import ArticleCategoryRepository, ArticleRepository, CategoryRepository
from emur.repositories.media import ArticleMediaRepository
from emur.schemas.article import ArticleUpdate
from emur.services.base import BaseService
from emur.services.media_service import MediaService, UploadedFile

logger = logging.getLogger(__name__)


class ArticleService(BaseService):
    def __init__(self, db, media: MediaService):
        super().__init__(db)
        self.media = media
        self.articles = ArticleRepository(db)
        self.article_media = ArticleMediaRepository(db)
        self.categories = CategoryRepository(db)
        self.article_categories = ArticleCategoryRepository(db)

    def list_articles(self) -> List[Article]:
        return self.articles.find(order_by=Article.created_at.desc())

    @staticmethod
    def media_urls(article: Article) -> List[str]:
        return [link.media.media_url for link in article.media_links]

    def create(self, claims, title: str, content: str, upload: Optional[UploadedFile]) -> Article:
        """The cover image URL is stored on the article and linked as media."""
        user = self.requester(claims)
        article = Article(user_id=user.id, title=title, content=content)
        try:
            media = self.media.store_image(upload) if upload is not None else None
            if media is not None:
                article.image = media.media_url
            self.articles.create_with_omit(article, "uuid")
            if media is not None:
                link = ArticleMedia(article_id=article.id, media_id=media.id)
                article.media_links.append(link)
                self.article_media.create(link)
            self.commit()
        except PersistenceError as e:
            raise self.persistence_failure("creating article", e)
        self.db.refresh(article)
        logger.info(f"[Article] Created {article.uuid}")
        return article

    def update(self, article_uuid: UUID, data: ArticleUpdate) -> Article:
        article = self.get_or_404(self.articles, article_uuid, "article")
        article.title = data.title
        article.content = data.content
        if data.is_published is not None:
            article.is_published = data.is_published
        try:
            self.articles.update(article)
            self.commit()
        except PersistenceError as e:
            raise self.persistence_failure("updating article", e)
        return article

    def delete(self, article_uuid: UUID) -> None:
        article = self.get_or_404(self.articles, article_uuid, "article")
        media_rows = [link.media for link in article.media_links]
        stale_urls = []
        try:
            self.articles.delete(article)
            for media in media_rows:
                stale_urls.extend(self.media.remove(media))
            self.commit()
        except PersistenceError as e:
            raise self.persistence_failure("deleting article", e)
        self.media.purge(stale_urls)

    def add_category(self, article_uuid: UUID, category_uuid: UUID) -> Article:
        article = self.get_or_404(self.articles, article_uuid, "article")
        category = self.get_or_404(self.categories, category_uuid, "category")
        try:
            self.article_categories.create(ArticleCategory(article_id=article.id, category_id=category.id))
            self.commit()
        except DuplicateRecordError:
            raise ConflictError("article already has this category")
        except PersistenceError as e:
            raise self.persistence_failure("adding category to article", e)
        self.db.refresh(article)
        return article
