"""
Category Service
Flat catalog of article categories.
"""

from typing import List
from uuid import UUID

from emur.models.article import Category
from emur.repositories.base import PersistenceError
from emur.repositories.content import CategoryRepository
from emur.schemas.article import CategoryCreate, CategoryUpdate
from emur.services.base import BaseService


class CategoryService(BaseService):
    def __init__(self, db):
        super().__init__(db)
        self.categories = CategoryRepository(db)

    def list_categories(self) -> List[Category]:
        return self.categories.find(order_by=Category.name)

    def create(self, data: CategoryCreate) -> Category:
        category = Category(name=data.name)
        try:
            self.categories.create_with_omit(category, "uuid")
            self.commit()
        except PersistenceError as e:
            raise self.persistence_failure("creating category", e)
        return category

    def update(self, category_uuid: UUID, data: CategoryUpdate) -> Category:
        category = self.get_or_404(self.categories, category_uuid, "category")
        category.name = data.name
        try:
            self.categories.update(category)
            self.commit()
        except PersistenceError as e:
            raise self.persistence_failure("updating category", e)
        return category

    def delete(self, category_uuid: UUID) -> None:
        category = self.get_or_404(self.categories, category_uuid, "category")
        try:
            self.categories.delete(category)
            self.commit()
        except PersistenceError as e:
            raise self.persistence_failure("deleting category", e)
