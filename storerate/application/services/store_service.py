"""Store service — validation, persistence and rating statistics for stores."""

from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional

import structlog

from storerate.config import get_settings
from storerate.domain.models.store import Store
from storerate.domain.repositories.store_repository import StoreRepository
from storerate.domain.repositories.user_repository import UserRepository
from storerate.domain.schemas.store import RatingStatistics, StoreCreate, StoreUpdate
from storerate.domain.schemas.store_rating import StoreRatingRead
from storerate.domain.validation import SaveResult, ValidationErrors
from storerate.domain import validators

settings = get_settings()
logger = structlog.get_logger(__name__)


def round_average(value: Optional[float]) -> Optional[float]:
    """Round half-up to two decimals (3.125 -> 3.13)."""
    if value is None:
        return None
    return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def validate_store(store_repo: StoreRepository, user_repo: UserRepository, store: Store) -> ValidationErrors:
    errors = ValidationErrors()

    validators.validate_presence(store.name, errors, "name")
    validators.validate_name(store.name, errors)

    if validators.validate_presence(store.email, errors, "email"):
        if store_repo.email_taken(store.email, exclude_id=store.id):
            errors.add("email", validators.TAKEN)
        validators.validate_email_format(store.email, errors)

    if validators.validate_presence(store.address, errors, "address"):
        validators.validate_max_length(store.address, errors, "address", validators.ADDRESS_MAX_LENGTH)

    proprietor = user_repo.get_by_id(store.proprietor_id) if store.proprietor_id else None
    if proprietor is None:
        errors.add("proprietor", "must exist")
    else:
        owned = store_repo.get_by_proprietor(proprietor.id)
        if owned is not None and owned.id != store.id:
            errors.add("proprietor", "already owns a different store")
        if not proprietor.is_proprietor:
            errors.add("proprietor", "must have the proprietor role")

    return errors


def create_store(store_repo: StoreRepository, user_repo: UserRepository, data: StoreCreate) -> SaveResult[Store]:
    store = Store(**data.model_dump())

    errors = validate_store(store_repo, user_repo, store)
    if errors:
        logger.debug("Store rejected", errors=errors.as_dict())
        return SaveResult(store, errors)

    store_repo.add(store)
    store_repo.commit()
    logger.info("Store created", store_id=store.id, proprietor_id=store.proprietor_id)
    return SaveResult(store)


def update_store(
    store_repo: StoreRepository,
    user_repo: UserRepository,
    store: Store,
    data: StoreUpdate,
) -> SaveResult[Store]:
    """Apply changes and save. On failure the store is reloaded from the database."""
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(store, field, value)

    errors = validate_store(store_repo, user_repo, store)
    if errors:
        logger.debug("Store update rejected", store_id=store.id, errors=errors.as_dict())
        store_repo.reset(store)
        return SaveResult(store, errors)

    store_repo.add(store)
    store_repo.commit()
    logger.info("Store updated", store_id=store.id)
    return SaveResult(store)


def delete_store(store_repo: StoreRepository, store: Store) -> None:
    """Delete the store together with its ratings."""
    store_id = store.id
    store_repo.remove(store)
    store_repo.commit()
    logger.info("Store deleted", store_id=store_id)


def rating_statistics(store_repo: StoreRepository, store: Store, recent_limit: Optional[int] = None) -> RatingStatistics:
    limit = settings.RECENT_RATINGS_LIMIT if recent_limit is None else recent_limit
    average = round_average(store_repo.average_rating(store.id))
    recent = store_repo.recent_ratings(store.id, limit=limit)

    return RatingStatistics(
        average=average if average is not None else 0.0,
        total_ratings=store_repo.rating_count(store.id),
        rating_distribution=store_repo.rating_distribution(store.id),
        recent_ratings=[StoreRatingRead.model_validate(r) for r in recent],
    )


def highly_rated_stores(store_repo: StoreRepository, threshold: Optional[float] = None) -> List[Store]:
    if threshold is None:
        threshold = settings.HIGHLY_RATED_THRESHOLD
    return store_repo.highly_rated(threshold)
