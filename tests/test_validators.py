"""Tests for the field rules in storerate.domain.validators."""

import pytest

from storerate.domain import validators
from storerate.domain.validation import SaveResult, ValidationErrors
from storerate.core.exceptions import RecordInvalidException


def run(rule, value):
    errors = ValidationErrors()
    rule(value, errors)
    return errors


class TestName:
    @pytest.mark.parametrize("name", [
        "a" * 9 + "1" * 10,     # 19 chars
        "a" * 30 + "1" * 31,    # 61 chars
    ])
    def test_rejects_length_outside_bounds(self, name):
        errors = run(validators.validate_name, name)
        assert errors["name"] == ["must be between 20 and 60 characters"]

    @pytest.mark.parametrize("name", [
        "a" * 19 + "1",         # 20 chars
        "a" * 30 + "1" * 30,    # 60 chars
        "Corner Shop Number 42",
    ])
    def test_accepts_letters_and_digits_in_bounds(self, name):
        assert not run(validators.validate_name, name)

    def test_requires_a_digit(self):
        errors = run(validators.validate_name, "Just Letters In This Name")
        assert errors["name"] == ["must contain both letters and numbers"]

    def test_requires_a_letter(self):
        errors = run(validators.validate_name, "1234567890 1234567890")
        assert errors["name"] == ["must contain both letters and numbers"]

    def test_reports_length_and_format_together(self):
        errors = run(validators.validate_name, "short")
        assert len(errors["name"]) == 2

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_blank_is_exempt(self, name):
        assert not run(validators.validate_name, name)

    def test_letter_and_digit_must_share_a_line(self):
        errors = run(validators.validate_name, "Letters Only Line\n1234567")
        assert errors["name"] == ["must contain both letters and numbers"]

    def test_one_line_with_letters_and_digits_is_enough(self):
        assert not run(validators.validate_name, "Corner Shop 42\nsecond line")

    def test_non_ascii_letters_do_not_count(self):
        errors = run(validators.validate_name, "éééééééééééééééééééé1")
        assert errors["name"] == ["must contain both letters and numbers"]


class TestEmail:
    @pytest.mark.parametrize("email", ["a@x.com", "first.last+tag@sub.example.org", "user@localhost"])
    def test_accepts(self, email):
        assert not run(validators.validate_email_format, email)

    @pytest.mark.parametrize("email", ["plainaddress", "a@", "@x.com", "a b@x.com", "a@-x.com"])
    def test_rejects(self, email):
        assert run(validators.validate_email_format, email)["email"] == ["is invalid"]


class TestAddress:
    def test_accepts_word_space_comma_dot_dash(self):
        assert not run(validators.validate_address_charset, "12-B Main St., Apt 4, Springfield")

    @pytest.mark.parametrize("address", ["12 Main St #4", "Rua São João 10", "a;b"])
    def test_rejects_other_characters(self, address):
        errors = run(validators.validate_address_charset, address)
        assert errors["address"] == ["contains invalid characters"]

    def test_max_length(self):
        errors = ValidationErrors()
        validators.validate_max_length("a" * 401, errors, "address", 400)
        assert errors["address"] == ["is too long (maximum is 400 characters)"]

        errors = ValidationErrors()
        validators.validate_max_length("a" * 400, errors, "address", 400)
        assert not errors


class TestPassword:
    @pytest.mark.parametrize("password", ["Abcdef1!", "Zz9&Zz9&Zz9&Zz9&"])
    def test_accepts_strong(self, password):
        assert not run(validators.validate_password_strength, password)

    @pytest.mark.parametrize("password", [
        "abcdefgh",             # no upper, digit or special
        "ABCDEF1!",             # no lower
        "Abcdefg!",             # no digit
        "Abcdefg1",             # no special
        "Abcde1%x",             # % is not in the special set
        "Abc1!",                # too short
        "Abcdefgh1!Abcdefg",    # 17 chars
    ])
    def test_rejects_weak(self, password):
        errors = run(validators.validate_password_strength, password)
        assert errors["password"] == [validators.PASSWORD_MESSAGE]

    def test_blank_is_skipped(self):
        assert not run(validators.validate_password_strength, "")


class TestRatingValue:
    @pytest.mark.parametrize("value", [1, 2, 3, 4, 5])
    def test_accepts_one_to_five(self, value):
        assert not run(validators.validate_rating_value, value)

    @pytest.mark.parametrize("value", [0, 6, -1, True, 3.5])
    def test_rejects_out_of_range(self, value):
        assert run(validators.validate_rating_value, value)["value"] == ["must be between 1 and 5"]

    def test_missing(self):
        assert run(validators.validate_rating_value, None)["value"] == ["can't be blank"]


class TestValidationErrors:
    def test_full_messages(self):
        errors = ValidationErrors()
        errors.add("email", "has already been taken")
        errors.add("base", "Store owners cannot rate their own stores")
        assert errors.full_messages() == [
            "Email has already been taken",
            "Store owners cannot rate their own stores",
        ]
        assert len(errors) == 2
        assert "email" in errors
        assert errors["missing"] == []

    def test_unwrap_raises_with_details(self):
        errors = ValidationErrors()
        errors.add("name", "can't be blank")
        result = SaveResult(object(), errors)
        assert not result.ok
        with pytest.raises(RecordInvalidException) as exc_info:
            result.unwrap()
        assert exc_info.value.details == {"name": ["can't be blank"]}
        assert "Name can't be blank" in exc_info.value.message
