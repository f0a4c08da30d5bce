"""
Rating service — validates ratings and keeps Store.average_rating current.

Every rating write and the matching average recompute run in one transaction,
with the store row locked first so concurrent raters are serialized.
"""

from typing import Optional

import structlog

from storerate.application.services.store_service import round_average
from storerate.domain.models.store_rating import StoreRating
from storerate.domain.repositories.store_rating_repository import StoreRatingRepository
from storerate.domain.repositories.store_repository import StoreRepository
from storerate.domain.repositories.user_repository import UserRepository
from storerate.domain.schemas.store_rating import StoreRatingCreate, StoreRatingUpdate
from storerate.domain.validation import BASE, SaveResult, ValidationErrors
from storerate.domain import validators

logger = structlog.get_logger(__name__)

OWN_STORE_MESSAGE = "Store owners cannot rate their own stores"


def validate_store_rating(
    rating_repo: StoreRatingRepository,
    user_repo: UserRepository,
    store_repo: StoreRepository,
    rating: StoreRating,
) -> ValidationErrors:
    errors = ValidationErrors()

    validators.validate_rating_value(rating.value, errors)

    user = user_repo.get_by_id(rating.user_id) if rating.user_id else None
    if user is None:
        errors.add("user", "must exist")

    store = store_repo.get_by_id(rating.store_id) if rating.store_id else None
    if store is None:
        errors.add("store", "must exist")

    if user is not None and store is not None:
        if rating_repo.rating_exists(user.id, store.id, exclude_id=rating.id):
            errors.add("user_id", "has already rated this store")
        if store.proprietor_id == user.id:
            errors.add(BASE, OWN_STORE_MESSAGE)

    return errors


def recompute_store_average(store_repo: StoreRepository, store_id: int) -> Optional[float]:
    """Write AVG(value) to the store, skipping store validation. None when unrated."""
    average = round_average(store_repo.average_rating(store_id))
    store_repo.write_average_rating(store_id, average)
    logger.debug("Store average recomputed", store_id=store_id, average_rating=average)
    return average


def create_rating(
    rating_repo: StoreRatingRepository,
    user_repo: UserRepository,
    store_repo: StoreRepository,
    data: StoreRatingCreate,
) -> SaveResult[StoreRating]:
    rating = StoreRating(**data.model_dump())

    errors = validate_store_rating(rating_repo, user_repo, store_repo, rating)
    if errors:
        logger.debug("Rating rejected", errors=errors.as_dict())
        return SaveResult(rating, errors)

    store_repo.lock(rating.store_id)
    rating_repo.add(rating)
    recompute_store_average(store_repo, rating.store_id)
    rating_repo.commit()

    logger.info(
        "Rating created",
        rating_id=rating.id,
        store_id=rating.store_id,
        user_id=rating.user_id,
        value=rating.value,
    )
    return SaveResult(rating)


def update_rating(
    rating_repo: StoreRatingRepository,
    user_repo: UserRepository,
    store_repo: StoreRepository,
    rating: StoreRating,
    data: StoreRatingUpdate,
) -> SaveResult[StoreRating]:
    """Change a rating's value. On failure the rating is reloaded from the database."""
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(rating, field, value)

    errors = validate_store_rating(rating_repo, user_repo, store_repo, rating)
    if errors:
        logger.debug("Rating update rejected", rating_id=rating.id, errors=errors.as_dict())
        rating_repo.reset(rating)
        return SaveResult(rating, errors)

    store_repo.lock(rating.store_id)
    rating_repo.add(rating)
    recompute_store_average(store_repo, rating.store_id)
    rating_repo.commit()

    logger.info("Rating updated", rating_id=rating.id, store_id=rating.store_id, value=rating.value)
    return SaveResult(rating)


def delete_rating(
    rating_repo: StoreRatingRepository,
    store_repo: StoreRepository,
    rating: StoreRating,
) -> None:
    rating_id, store_id = rating.id, rating.store_id

    store_repo.lock(store_id)
    rating_repo.remove(rating)
    recompute_store_average(store_repo, store_id)
    rating_repo.commit()

    logger.info("Rating deleted", rating_id=rating_id, store_id=store_id)
