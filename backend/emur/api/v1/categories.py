"""
Categories API Endpoints
Article categories (admin managed).
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from emur.api.v1.deps import require_admin, require_member
from emur.db.session import get_db
from emur.schemas.article import CategoryCreate, CategoryResponse, CategoryUpdate
from emur.schemas.common import APIResponse, envelope
from emur.services.category_service import CategoryService


router = APIRouter(prefix="/categories")


@router.get("", response_model=APIResponse, dependencies=[Depends(require_member)])
def list_categories(db: Session = Depends(get_db)):
    categories = CategoryService(db).list_categories()
    return envelope(status.HTTP_200_OK, "Categories retrieved successfully",
                    [CategoryResponse.model_validate(c) for c in categories])


@router.post("", response_model=APIResponse, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_admin)])
def create_category(data: CategoryCreate, db: Session = Depends(get_db)):
    category = CategoryService(db).create(data)
    return envelope(status.HTTP_201_CREATED, "Category created successfully", CategoryResponse.model_validate(category))


@router.put("/{category_uuid}", response_model=APIResponse, dependencies=[Depends(require_admin)])
def update_category(category_uuid: UUID, data: CategoryUpdate, db: Session = Depends(get_db)):
    category = CategoryService(db).update(category_uuid, data)
    return envelope(status.HTTP_200_OK, "Category updated successfully", CategoryResponse.model_validate(category))


@router.delete("/{category_uuid}", response_model=APIResponse, dependencies=[Depends(require_admin)])
def delete_category(category_uuid: UUID, db: Session = Depends(get_db)):
    CategoryService(db).delete(category_uuid)
    return envelope(status.HTTP_200_OK, "Category deleted successfully")
