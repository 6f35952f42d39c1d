"""Shared fixtures for FileHub tests."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from werkzeug.security import generate_password_hash

from filehub.core.config import Settings, get_settings
from filehub.core.namespace import NamespaceResolver
from filehub.core.security import sign_user_id
from filehub.main import app
from filehub.models.database import Base, get_db
from filehub.models.user import User


@pytest.fixture
def storage_root(tmp_path):
    """Root directory holding every user's namespace.

    Returns:
        Path under pytest's tmp_path (not created yet).
    """
    return tmp_path / "UserFiles"


@pytest.fixture
def settings(storage_root):
    return Settings(storage_root=storage_root, database_url="sqlite://")


@pytest.fixture
def resolver(storage_root):
    return NamespaceResolver(storage_root)


@pytest.fixture
def namespace(resolver):
    """Resolved (and created) directory of user ``alice``."""
    return resolver.resolve("alice")


@pytest.fixture
def db_session():
    """In-memory SQLite session shared across threads.

    Yields:
        SQLAlchemy session with all tables created.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def user(db_session):
    """Registered user ``alice`` with password ``secret``."""
    alice = User(username="alice", password=generate_password_hash("secret"))
    db_session.add(alice)
    db_session.commit()
    db_session.refresh(alice)
    return alice


@pytest.fixture
def client(settings, db_session):
    """Anonymous test client wired to the temporary storage and DB."""
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_db] = lambda: db_session
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def auth_client(client, user, settings):
    """Test client signed in as ``alice``."""
    client.cookies.set("user_id", sign_user_id(user.id, settings.secret_key))
    return client
