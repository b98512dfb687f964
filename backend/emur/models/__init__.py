"""
Database Models Module
Contains SQLAlchemy ORM models for all database tables.

All models must be imported here to be registered with SQLAlchemy
and created during Base.metadata.create_all().
"""

from emur.db.base import Base
from emur.models.base import BaseModel, PublicModel
from emur.models.user import Role, User, UserRole
from emur.models.symptom import Symptom, SymptomUser
from emur.models.monitoring import Monitoring
from emur.models.treatment import Treatment
from emur.models.medical_record import MedicalRecord
from emur.models.media import ArticleMedia, Media, RecipeMedia, ReminderMedia
from emur.models.recipe import RatingRecipe, Recipe
from emur.models.article import Article, ArticleCategory, Category
from emur.models.question import Answer, Question
from emur.models.reminder import Reminder
from emur.models.map import MapLocation
from emur.models.health_service import HealthService, HealthServiceRating
from emur.models.medical import Medical, MedicalRating
from emur.models.forecast import Forecast
from emur.models.error_log import ErrorLog

__all__ = [
    "Base",
    "BaseModel",
    "PublicModel",
    "User",
    "Role",
    "UserRole",
    "Symptom",
    "SymptomUser",
    "Monitoring",
    "Treatment",
    "MedicalRecord",
    "Media",
    "ArticleMedia",
    "RecipeMedia",
    "ReminderMedia",
    "Recipe",
    "RatingRecipe",
    "Article",
    "Category",
    "ArticleCategory",
    "Question",
    "Answer",
    "Reminder",
    "MapLocation",
    "HealthService",
    "HealthServiceRating",
    "Medical",
    "MedicalRating",
    "Forecast",
    "ErrorLog",
]
