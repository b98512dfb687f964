"""
Editorial content repositories: articles, categories, recipes, votes,
questions and answers.
"""

from typing import List

from sqlalchemy.orm import Session

from emur.models.article import Article, ArticleCategory, Category
from emur.models.question import Answer, Question
from emur.models.recipe import RatingRecipe, Recipe
from emur.repositories.base import Repository


class ArticleRepository(Repository[Article]):
    def __init__(self, db: Session):
        super().__init__(db, Article)


class CategoryRepository(Repository[Category]):
    def __init__(self, db: Session):
        super().__init__(db, Category)


class ArticleCategoryRepository(Repository[ArticleCategory]):
    def __init__(self, db: Session):
        super().__init__(db, ArticleCategory)


class RecipeRepository(Repository[Recipe]):
    def __init__(self, db: Session):
        super().__init__(db, Recipe)


class RatingRecipeRepository(Repository[RatingRecipe]):
    def __init__(self, db: Session):
        super().__init__(db, RatingRecipe)


class QuestionRepository(Repository[Question]):
    def __init__(self, db: Session):
        super().__init__(db, Question)


class AnswerRepository(Repository[Answer]):
    def __init__(self, db: Session):
        super().__init__(db, Answer)

    def list_for_question(self, question_id: int) -> List[Answer]:
        return self.find(Answer.question_id == question_id, order_by=Answer.created_at)
