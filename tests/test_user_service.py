"""Tests for user creation, update, deletion and authentication."""

from storerate.application.services import auth_service, user_service
from storerate.domain.schemas.user import UserCreate, UserFilter, UserUpdate

PASSWORD = "Abcdef1!"


def user_data(**overrides):
    data = {
        "name": "Alice Wonderland 1865",
        "email": "alice@example.com",
        "address": "1 Rabbit Hole, Oxford",
        "password": PASSWORD,
    }
    data.update(overrides)
    return UserCreate(**data)


def test_create_user_defaults_role_and_hashes_password(users):
    result = user_service.create_user(users, user_data())

    assert result.ok
    user = result.record
    assert user.id is not None
    assert user.role == "regular"
    assert user.active is True
    assert user.password_digest != PASSWORD
    assert auth_service.verify_password(PASSWORD, user.password_digest)
    assert len(user.auth_token) == 24


def test_duplicate_email_is_case_insensitive(users):
    assert user_service.create_user(users, user_data(email="a@x.com")).ok

    result = user_service.create_user(users, user_data(email="A@X.com"))

    assert not result.ok
    assert result.errors["email"] == ["has already been taken"]
    assert result.record.id is None


def test_invalid_fields_are_all_reported(users):
    result = user_service.create_user(
        users,
        UserCreate(name="short", email="nope", address="Flat #3", password="abcdefgh", role="owner"),
    )

    errors = result.errors.as_dict()
    assert set(errors) == {"name", "email", "address", "password", "role"}
    assert errors["email"] == ["is invalid"]
    assert errors["address"] == ["contains invalid characters"]
    assert errors["role"] == ["is not included in the list"]


def test_missing_fields(users):
    result = user_service.create_user(users, UserCreate())

    errors = result.errors.as_dict()
    for field in ("name", "email", "address", "password"):
        assert errors[field] == ["can't be blank"]


def test_address_longer_than_400_is_rejected(users):
    result = user_service.create_user(users, user_data(address="a" * 401))
    assert result.errors["address"] == ["is too long (maximum is 400 characters)"]


def test_update_keeps_password_when_not_supplied(users, make_user):
    user = make_user()
    digest = user.password_digest

    result = user_service.update_user(users, user, UserUpdate(address="2 New Road, Leeds"))

    assert result.ok
    assert user.address == "2 New Road, Leeds"
    assert user.password_digest == digest


def test_update_with_weak_password_fails_and_reloads(users, make_user):
    user = make_user()
    old_name = user.name

    result = user_service.update_user(
        users, user, UserUpdate(name="Renamed User Number 99", password="weak")
    )

    assert result.errors["password"]
    assert user.name == old_name


def test_update_email_to_own_email_in_other_case(users, make_user):
    user = make_user(email="bob@example.com")

    result = user_service.update_user(users, user, UserUpdate(email="BOB@example.com"))

    assert result.ok


def test_authenticate(users, make_user):
    user = make_user(email="carol@example.com")

    assert auth_service.authenticate_user(users, "CAROL@example.com", PASSWORD).id == user.id
    assert auth_service.authenticate_user(users, "carol@example.com", "Wrong123!") is None
    assert auth_service.authenticate_token(users, user.auth_token).id == user.id

    user_service.update_user(users, user, UserUpdate(active=False))
    assert auth_service.authenticate_user(users, "carol@example.com", PASSWORD) is None
    assert auth_service.authenticate_token(users, user.auth_token) is None


def test_regenerate_auth_token(users, make_user):
    user = make_user()
    old_token = user.auth_token

    new_token = user_service.regenerate_auth_token(users, user)

    assert new_token != old_token
    assert users.get_by_auth_token(old_token) is None
    assert users.get_by_auth_token(new_token).id == user.id


def test_query_helpers(users, make_user):
    alice = make_user(name="Alice Proprietor 0001", role="proprietor")
    bob = make_user(name="Bob Regular User 0002")
    carol = make_user(name="Carol Supervisor 0003", role="supervisor")
    user_service.update_user(users, bob, UserUpdate(active=False))

    assert [u.id for u in users.by_role("proprietor")] == [alice.id]
    assert [u.id for u in users.active_users()] == [alice.id, carol.id]
    assert [u.id for u in users.search_by_name("SUPERVISOR")] == [carol.id]
    assert users.search_by_name("nobody") == []


def test_get_with_filters_paginates(users, make_user):
    for _ in range(5):
        make_user()
    make_user(role="supervisor")

    page = users.get_with_filters(UserFilter(role="regular", page=2, page_size=2))

    assert page["total"] == 5
    assert page["total_pages"] == 3
    assert len(page["items"]) == 2
    assert all(u.role == "regular" for u in page["items"])


def test_update_active_to_none_is_a_field_error(users, make_user):
    user = make_user()

    result = user_service.update_user(users, user, UserUpdate(active=None))

    assert result.errors["active"] == ["is not included in the list"]
    assert user.active is True


def test_is_proprietor(make_user):
    assert make_user(role="proprietor").is_proprietor
    assert not make_user(role="supervisor").is_proprietor
