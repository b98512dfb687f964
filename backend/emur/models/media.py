"""
Media Models
Generic attachment pattern: a Media row (URL + thumbnail) joined to its
owning entity through a per-entity join table.

The join rows cascade with their owner; the Media row itself has its own
lifecycle and is removed explicitly by the owning service.
"""

from sqlalchemy import Column, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from emur.models.base import BaseModel


class Media(BaseModel):
    """
    Fields:
        media_type (str): Top-level MIME type ("image")
        media_url (str): Public URL in object storage
        media_thumb (str): Public URL of the thumbnail, when one was generated
    """
    __tablename__ = "media"

    media_type = Column(String(50), nullable=True)
    media_url = Column(Text, nullable=False)
    media_thumb = Column(Text, nullable=True)


class ArticleMedia(BaseModel):
    __tablename__ = "article_media"
    __table_args__ = (UniqueConstraint("article_id", "media_id", name="uq_article_media_pair"),)

    article_id = Column(Integer, ForeignKey("articles.id", ondelete="CASCADE"), nullable=False, index=True)
    media_id = Column(Integer, ForeignKey("media.id", ondelete="CASCADE"), nullable=False)

    media = relationship("Media", lazy="joined")


class RecipeMedia(BaseModel):
    __tablename__ = "recipe_media"
    __table_args__ = (UniqueConstraint("recipe_id", "media_id", name="uq_recipe_media_pair"),)

    recipe_id = Column(Integer, ForeignKey("recipes.id", ondelete="CASCADE"), nullable=False, index=True)
    media_id = Column(Integer, ForeignKey("media.id", ondelete="CASCADE"), nullable=False)

    media = relationship("Media", lazy="joined")


class ReminderMedia(BaseModel):
    __tablename__ = "reminder_media"
    __table_args__ = (UniqueConstraint("reminder_id", "media_id", name="uq_reminder_media_pair"),)

    reminder_id = Column(Integer, ForeignKey("reminders.id", ondelete="CASCADE"), nullable=False, index=True)
    media_id = Column(Integer, ForeignKey("media.id", ondelete="CASCADE"), nullable=False)

    media = relationship("Media", lazy="joined")
