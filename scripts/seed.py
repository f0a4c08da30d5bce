"""Create tables and load demo users, stores and ratings."""

import sys
import os

# Add parent dir to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import structlog

from storerate.core.exceptions import AppError
from storerate.core.logging import configure_logging
from storerate.infrastructure.database import SessionLocal, init_db
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

logger = structlog.get_logger(__name__)

DEMO_PASSWORD = "Welcome123!"

USERS = [
    ("Supervisor Account 01", "supervisor@example.com", "1 Main Street, Springfield", "supervisor"),
    ("Corner Shop Owner 01", "owner1@example.com", "12 Market Road, Springfield", "proprietor"),
    ("Book Nook Proprietor 2", "owner2@example.com", "48 Elm Avenue, Shelbyville", "proprietor"),
    ("Regular Shopper Number 1", "shopper1@example.com", "7 Oak Lane, Springfield", "regular"),
    ("Regular Shopper Number 2", "shopper2@example.com", "9 Pine Court, Shelbyville", "regular"),
]

STORES = [
    ("Corner Shop Groceries 24", "corner@example.com", "12 Market Road, Springfield", "owner1@example.com"),
    ("Book Nook 2nd Hand Books", "books@example.com", "48 Elm Avenue, Shelbyville", "owner2@example.com"),
]

RATINGS = [
    ("shopper1@example.com", "corner@example.com", 5),
    ("shopper2@example.com", "corner@example.com", 4),
    ("shopper1@example.com", "books@example.com", 3),
    ("supervisor@example.com", "books@example.com", 2),
]


def seed():
    configure_logging()
    init_db()

    db = SessionLocal()
    users = SQLAlchemyUserRepository(db, User)
    stores = SQLAlchemyStoreRepository(db, Store)
    ratings = SQLAlchemyStoreRatingRepository(db, StoreRating)

    try:
        if users.get_by_email(USERS[0][1]):
            logger.info("Demo data already present, nothing to do")
            return

        for name, email, address, role in USERS:
            user_service.create_user(
                users,
                UserCreate(name=name, email=email, address=address, password=DEMO_PASSWORD, role=role),
            ).unwrap()

        for name, email, address, owner_email in STORES:
            owner = users.get_by_email(owner_email)
            store_service.create_store(
                stores,
                users,
                StoreCreate(name=name, email=email, address=address, proprietor_id=owner.id),
            ).unwrap()

        store_ids = {}
        for user_email, store_email, value in RATINGS:
            user = users.get_by_email(user_email)
            store = next(s for s in stores.list() if s.email == store_email)
            store_ids[store_email] = store.id
            rating_service.create_rating(
                ratings,
                users,
                stores,
                StoreRatingCreate(user_id=user.id, store_id=store.id, value=value),
            ).unwrap()

        for store_email, store_id in store_ids.items():
            stats = store_service.rating_statistics(stores, stores.get_by_id(store_id))
            logger.info(
                "Seeded store",
                store=store_email,
                average=stats.average,
                total_ratings=stats.total_ratings,
                distribution=stats.rating_distribution,
            )
    except AppError as e:
        logger.error("Seeding failed", error=e.message, details=e.details)
        db.rollback()
        raise SystemExit(1)
    finally:
        db.close()


if __name__ == "__main__":
    seed()
