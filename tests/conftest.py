import os

# Point the app at an in-memory database before anything imports database.py
os.environ["DATABASE_URL"] = "sqlite://"

import pytest

from app import app as flask_app
from database import Base, SessionLocal, engine


@pytest.fixture(autouse=True)
def reset_tables():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def client():
    flask_app.config["TESTING"] = True
    with flask_app.test_client() as client:
        yield client
