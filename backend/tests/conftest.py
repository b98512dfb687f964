import io
import os
import tempfile

import pytest
from fastapi.testclient import TestClient
from PIL import Image
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Ensure tests use an in-memory SQLite DB and never need a .env file
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_TOKEN_KEY", "test-signing-key")
os.environ.setdefault("LOGS_DIR", tempfile.mkdtemp(prefix="emur-logs-"))

from emur.api.v1.deps import get_storage
from emur.core.config import get_settings
from emur.core.constants import ROLE_ADMIN, ROLE_USER
from emur.core.security import hash_password
from emur.db.base import Base
from emur.db.seed import seed_roles
from emur.db.session import get_db
from emur.main import app
from emur.models.user import Role, User, UserRole
from emur.services.auth_service import create_access_token


# In-memory SQLite shared across connections
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)

DEFAULT_PASSWORD = "Secret123!"


class FakeStorage:
    """In-memory ObjectStorage keeping uploaded bytes by public URL."""

    def __init__(self):
        self.objects = {}
        self.deleted = []

    def upload(self, data, key, content_type):
        url = f"https://emur-test.storage.local/{key}"
        self.objects[url] = data
        return url

    def delete(self, url):
        self.deleted.append(url)
        self.objects.pop(url, None)

    def presigned_url(self, key, expires=None):
        return f"https://emur-test.storage.local/{key}?expires={expires}"


@pytest.fixture(autouse=True)
def schema():
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        seed_roles(db)
    finally:
        db.close()
    yield
    Base.metadata.drop_all(bind=engine)


def _override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def client(storage):
    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_storage] = lambda: storage
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def db():
    session = TestingSessionLocal()
    yield session
    session.close()


def make_user(db, email, role=ROLE_USER, password=DEFAULT_PASSWORD, **fields):
    fields.setdefault("is_active", True)
    fields.setdefault("is_banned", False)
    user = User(email=email, password=hash_password(password), **fields)
    db.add(user)
    db.flush()
    role_row = db.query(Role).filter(Role.role == role).one()
    db.add(UserRole(user_id=user.id, role_id=role_row.id))
    db.commit()
    db.refresh(user)
    return user


def auth_headers(user, role=ROLE_USER):
    token = create_access_token(get_settings(), user.email, user.uuid, role)
    return {"Authorization": f"Bearer {token}"}


def png_bytes(size=(640, 480), color=(200, 30, 30)):
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def user(db):
    return make_user(db, "maria@emur.org")


@pytest.fixture
def other_user(db):
    return make_user(db, "juan@emur.org")


@pytest.fixture
def admin(db):
    return make_user(db, "admin@emur.org", role=ROLE_ADMIN)


@pytest.fixture
def user_headers(user):
    return auth_headers(user, ROLE_USER)


@pytest.fixture
def other_headers(other_user):
    return auth_headers(other_user, ROLE_USER)


@pytest.fixture
def admin_headers(admin):
    return auth_headers(admin, ROLE_ADMIN)
