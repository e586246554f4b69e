"""Shared fixtures: an isolated in-memory database and an API client bound to it."""

import os

# Keep the application engine off the filesystem while tests import it
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from flowplanner.database import Base, get_db
from flowplanner.models import Activity, ActivityStatus, User


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def user(db_session):
    user = User(username="sam", email="sam@example.com")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def add_activity(db_session, user):
    """Factory fixture that stores an activity for the default user."""
    def _add(title, priority="normal", status=ActivityStatus.PLANNED, owner=None, **kwargs):
        activity = Activity(
            title=title,
            priority=priority,
            status=status,
            created_by=(owner or user).id,
            **kwargs
        )
        db_session.add(activity)
        db_session.commit()
        db_session.refresh(activity)
        return activity
    return _add


@pytest.fixture
def client(session_factory):
    from flowplanner.main import app

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
