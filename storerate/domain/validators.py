"""
Field rules shared by the User, Store and StoreRating validators.

Each rule takes the value and a ValidationErrors collection and appends
messages under the given field; none of them raise.
"""

import re
from typing import Any, Optional

from storerate.domain.validation import ValidationErrors

NAME_MIN_LENGTH = 20
NAME_MAX_LENGTH = 60
ADDRESS_MAX_LENGTH = 400
RATING_MIN = 1
RATING_MAX = 5

# Same character classes as Ruby's URI::MailTo::EMAIL_REGEXP
EMAIL_PATTERN = re.compile(
    r"[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*"
)
ADDRESS_PATTERN = re.compile(r"[\w\s,.-]+", re.ASCII)
PASSWORD_PATTERN = re.compile(r"(?=.*[A-Z])(?=.*[!@#$&*])(?=.*[0-9])(?=.*[a-z]).{8,16}")
LETTER_PATTERN = re.compile(r"[a-zA-Z]")
DIGIT_PATTERN = re.compile(r"[0-9]")

BLANK = "can't be blank"
TAKEN = "has already been taken"
INVALID = "is invalid"
PASSWORD_MESSAGE = "must include: 1 uppercase, 1 special character, 1 number, and be 8-16 characters"


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def validate_presence(value: Any, errors: ValidationErrors, field: str) -> bool:
    """Add "can't be blank" when value is blank. Returns True when present."""
    if is_blank(value):
        errors.add(field, BLANK)
        return False
    return True


def validate_max_length(value: Optional[str], errors: ValidationErrors, field: str, maximum: int) -> None:
    if value is not None and len(value) > maximum:
        errors.add(field, f"is too long (maximum is {maximum} characters)")


def validate_name(name: Optional[str], errors: ValidationErrors, field: str = "name") -> None:
    """Name rule shared by users and stores: 20-60 chars with letters and digits.

    Blank names are left to the presence check.
    """
    if is_blank(name):
        return

    if len(name) < NAME_MIN_LENGTH or len(name) > NAME_MAX_LENGTH:
        errors.add(field, f"must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters")

    # Letter and digit must share a line; "Letters\n123" fails
    if not any(LETTER_PATTERN.search(line) and DIGIT_PATTERN.search(line) for line in name.split("\n")):
        errors.add(field, "must contain both letters and numbers")


def validate_email_format(email: Optional[str], errors: ValidationErrors, field: str = "email") -> None:
    if is_blank(email):
        return
    if not EMAIL_PATTERN.fullmatch(email):
        errors.add(field, INVALID)


def validate_address_charset(address: Optional[str], errors: ValidationErrors, field: str = "address") -> None:
    if is_blank(address):
        return
    if not ADDRESS_PATTERN.fullmatch(address):
        errors.add(field, "contains invalid characters")


def validate_password_strength(password: Optional[str], errors: ValidationErrors, field: str = "password") -> None:
    if is_blank(password):
        return
    if not PASSWORD_PATTERN.fullmatch(password):
        errors.add(field, PASSWORD_MESSAGE)


def validate_rating_value(value: Any, errors: ValidationErrors, field: str = "value") -> None:
    if not validate_presence(value, errors, field):
        return
    # bool is an int subclass; True must not pass as a 1-star rating
    if isinstance(value, bool) or not isinstance(value, int) or not RATING_MIN <= value <= RATING_MAX:
        errors.add(field, f"must be between {RATING_MIN} and {RATING_MAX}")
