"""
Recipe Models
Recipes published by administrators and the per-user votes on them.

Votes are upserted: a second vote by the same user on the same recipe
updates the stored level instead of adding a row (unique constraint on
(user_id, recipe_id)).
"""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from emur.models.base import BaseModel, PublicModel


class Recipe(PublicModel):
    """
    Recipe model.

    Fields:
        user_id (int): Author
        name (str): Recipe name
        description (str): Short description
        ingredients (str): Free text ingredient list
        elaboration (str): Preparation steps
        category (int): Recipe category code
        time (int): Total time in minutes
        prep_time, cook_time (int): Minutes
        serving (int): Number of servings
        difficulty (str): Free text difficulty
        nutrition (str): Free text nutrition facts
        is_published (bool): Visible to users

    Relationships:
        media_links: RecipeMedia rows (image + thumbnail)
    """
    __tablename__ = "recipes"

    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    ingredients = Column(Text, nullable=False)
    elaboration = Column(Text, nullable=False)
    category = Column("category_id", Integer, nullable=True)
    time = Column(Integer, nullable=True, comment="Total time in minutes")
    prep_time = Column(Integer, nullable=True)
    cook_time = Column(Integer, nullable=True)
    serving = Column(Integer, nullable=True)
    difficulty = Column(String(50), nullable=True)
    nutrition = Column(Text, nullable=True)
    is_published = Column(Boolean, default=False, nullable=False)

    media_links = relationship("RecipeMedia", lazy="selectin", cascade="all, delete-orphan", passive_deletes=True)


class RatingRecipe(BaseModel):
    """One vote (level 1..5) per (user, recipe)."""
    __tablename__ = "rating_recipes"
    __table_args__ = (
        UniqueConstraint("user_id", "recipe_id", name="uq_rating_recipes_user_recipe"),
    )

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    recipe_id = Column(Integer, ForeignKey("recipes.id", ondelete="CASCADE"), nullable=False, index=True)
    level = Column(Integer, nullable=False)
