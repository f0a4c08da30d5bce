"""User service — validation and persistence for users."""

from typing import Optional

import structlog

from storerate.application.services.auth_service import generate_auth_token, hash_password
from storerate.application.services.rating_service import recompute_store_average
from storerate.domain.models.user import ROLES, User
from storerate.domain.repositories.store_rating_repository import StoreRatingRepository
from storerate.domain.repositories.store_repository import StoreRepository
from storerate.domain.repositories.user_repository import UserRepository
from storerate.domain.schemas.user import UserCreate, UserUpdate
from storerate.domain.validation import BASE, SaveResult, ValidationErrors
from storerate.domain import validators

logger = structlog.get_logger(__name__)


def validate_user(
    repo: UserRepository,
    user: User,
    password: Optional[str] = None,
    password_required: bool = False,
) -> ValidationErrors:
    """Run every User rule. The cleartext password is checked but never stored."""
    errors = ValidationErrors()

    validators.validate_presence(user.name, errors, "name")
    validators.validate_name(user.name, errors)

    if validators.validate_presence(user.email, errors, "email"):
        if repo.email_taken(user.email, exclude_id=user.id):
            errors.add("email", validators.TAKEN)
        validators.validate_email_format(user.email, errors)

    if validators.validate_presence(user.address, errors, "address"):
        validators.validate_max_length(user.address, errors, "address", validators.ADDRESS_MAX_LENGTH)
        validators.validate_address_charset(user.address, errors)

    if password_required:
        validators.validate_presence(password, errors, "password")
    validators.validate_password_strength(password, errors)

    if user.role not in ROLES:
        errors.add("role", "is not included in the list")

    if user.active not in (True, False):
        errors.add("active", "is not included in the list")

    return errors


def create_user(repo: UserRepository, data: UserCreate) -> SaveResult[User]:
    fields = data.model_dump(exclude={"password"})
    user = User(**fields)

    errors = validate_user(repo, user, password=data.password, password_required=True)
    if errors:
        logger.debug("User rejected", errors=errors.as_dict())
        return SaveResult(user, errors)

    user.password_digest = hash_password(data.password)
    user.auth_token = generate_auth_token(repo)
    repo.add(user)
    repo.commit()

    logger.info("User created", user_id=user.id, role=user.role)
    return SaveResult(user)


def update_user(repo: UserRepository, user: User, data: UserUpdate) -> SaveResult[User]:
    """Apply changes and save. On failure the user is reloaded from the database."""
    changes = data.model_dump(exclude_unset=True, exclude={"password"})
    for field, value in changes.items():
        setattr(user, field, value)

    errors = validate_user(repo, user, password=data.password)
    if errors:
        logger.debug("User update rejected", user_id=user.id, errors=errors.as_dict())
        repo.reset(user)
        return SaveResult(user, errors)

    if data.password:
        user.password_digest = hash_password(data.password)
    repo.add(user)
    repo.commit()

    logger.info("User updated", user_id=user.id, fields=sorted(changes))
    return SaveResult(user)


def regenerate_auth_token(repo: UserRepository, user: User) -> str:
    user.auth_token = generate_auth_token(repo)
    repo.add(user)
    repo.commit()
    logger.info("Auth token regenerated", user_id=user.id)
    return user.auth_token


def delete_user(
    user_repo: UserRepository,
    rating_repo: StoreRatingRepository,
    store_repo: StoreRepository,
    user: User,
) -> ValidationErrors:
    """Delete a user and their ratings, refreshing the averages of the stores they rated.

    Proprietors must hand over or delete their store first.
    """
    errors = ValidationErrors()
    if store_repo.get_by_proprietor(user.id) is not None:
        errors.add(BASE, "Cannot delete a user who owns a store")
        return errors

    user_id = user.id
    store_ids = sorted({rating.store_id for rating in rating_repo.for_user(user_id)})
    for store_id in store_ids:
        store_repo.lock(store_id)

    user_repo.remove(user)
    for store_id in store_ids:
        recompute_store_average(store_repo, store_id)
    user_repo.commit()

    logger.info("User deleted", user_id=user_id, rated_stores=len(store_ids))
    return errors
