"""Shared fixtures: an in-memory SQLite database and repositories per test."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from storerate.infrastructure.database import Base
from storerate.domain.models.user import User
from storerate.domain.models.store import Store
from storerate.domain.models.store_rating import StoreRating
from storerate.domain.schemas.user import UserCreate
from storerate.domain.schemas.store import StoreCreate
from storerate.domain.schemas.store_rating import StoreRatingCreate
from storerate.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from storerate.infrastructure.repositories.store_repository import SQLAlchemyStoreRepository
from storerate.infrastructure.repositories.store_rating_repository import SQLAlchemyStoreRatingRepository
from storerate.application.services import rating_service, store_service, user_service

PASSWORD = "Abcdef1!"


@pytest.fixture
def db():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def users(db):
    return SQLAlchemyUserRepository(db, User)


@pytest.fixture
def stores(db):
    return SQLAlchemyStoreRepository(db, Store)


@pytest.fixture
def ratings(db):
    return SQLAlchemyStoreRatingRepository(db, StoreRating)


@pytest.fixture
def make_user(users):
    counter = {"n": 0}

    def _make(role="regular", name=None, email=None, address="10 Downing Street, London", password=PASSWORD):
        counter["n"] += 1
        n = counter["n"]
        result = user_service.create_user(
            users,
            UserCreate(
                name=name or f"Test User Number {n:04d}",
                email=email or f"user{n}@example.com",
                address=address,
                password=password,
                role=role,
            ),
        )
        return result.unwrap()

    return _make


@pytest.fixture
def make_store(stores, users, make_user):
    counter = {"n": 0}

    def _make(proprietor=None, name=None, email=None, address="221B Baker Street, London"):
        counter["n"] += 1
        n = counter["n"]
        owner = proprietor or make_user(role="proprietor")
        result = store_service.create_store(
            stores,
            users,
            StoreCreate(
                name=name or f"Neighbourhood Store {n:04d}",
                email=email or f"store{n}@example.com",
                address=address,
                proprietor_id=owner.id,
            ),
        )
        return result.unwrap()

    return _make


@pytest.fixture
def rate(ratings, users, stores):
    def _rate(user, store, value):
        return rating_service.create_rating(
            ratings,
            users,
            stores,
            StoreRatingCreate(user_id=user.id, store_id=store.id, value=value),
        )

    return _rate
