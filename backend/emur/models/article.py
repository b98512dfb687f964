"""
Article and Category Models
Editorial content published by administrators, tagged with flat categories.
"""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from emur.models.base import BaseModel, PublicModel


class Article(PublicModel):
    """
    Fields:
        user_id (int): Author
        title (str): Headline
        content (str): Body
        image (str): Public URL of the cover image
        is_published (bool): Visible to users
    """
    __tablename__ = "articles"

    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    image = Column(Text, nullable=True)
    is_published = Column(Boolean, default=False, nullable=False)

    categories = relationship("Category", secondary="article_category", lazy="selectin", viewonly=True)
    media_links = relationship("ArticleMedia", lazy="selectin", cascade="all, delete-orphan", passive_deletes=True)


class Category(PublicModel):
    __tablename__ = "categories"

    name = Column(String(255), nullable=False)


class ArticleCategory(BaseModel):
    """Tags an article with a category."""
    __tablename__ = "article_category"
    __table_args__ = (
        UniqueConstraint("article_id", "category_id", name="uq_article_category_pair"),
    )

    article_id = Column(Integer, ForeignKey("articles.id", ondelete="CASCADE"), nullable=False, index=True)
    category_id = Column(Integer, ForeignKey("categories.id", ondelete="CASCADE"), nullable=False, index=True)
