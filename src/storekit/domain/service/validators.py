"""Domain service: input validators.

Every function here returns a boolean or a status string; none of them
raise for bad input.
"""

from __future__ import annotations

from typing import Mapping

from storekit.domain.service.discount import is_number

# ---------------------------------------------------------------------------
# Business rule constants
# ---------------------------------------------------------------------------
MIN_SIGNUP_USERNAME_LENGTH = 3
MIN_SIGNUP_AGE = 18

USERNAME_MIN_LENGTH = 5
USERNAME_MAX_LENGTH = 15

DEFAULT_LEGAL_DRIVING_AGES: Mapping[str, int] = {"US": 16, "UK": 17}

INVALID_USERNAME = "Invalid username"
INVALID_AGE = "Invalid age"
INVALID_COUNTRY_CODE = "Invalid country code"
VALIDATION_SUCCESSFUL = "Validation successful"


def validate_user_input(username: object, age: object) -> str:
    """Check a sign-up form and describe every problem found.

    Both fields are checked independently, so a form with two bad fields
    reports both messages joined by ", ".
    """
    errors: list[str] = []

    if not isinstance(username, str) or len(username) < MIN_SIGNUP_USERNAME_LENGTH:
        errors.append(INVALID_USERNAME)

    if not is_number(age) or age < MIN_SIGNUP_AGE:  # type: ignore[operator]
        errors.append(INVALID_AGE)

    if errors:
        return ", ".join(errors)
    return VALIDATION_SUCCESSFUL


def is_valid_username(
    username: object,
    min_length: int = USERNAME_MIN_LENGTH,
    max_length: int = USERNAME_MAX_LENGTH,
) -> bool:
    if not isinstance(username, str):
        return False
    return min_length <= len(username) <= max_length


def is_price_in_range(price: object, min_price: object, max_price: object) -> bool:
    """Inclusive at both ends. Non-numeric arguments are never in range."""
    if not all(is_number(value) for value in (price, min_price, max_price)):
        return False
    return min_price <= price <= max_price  # type: ignore[operator]


def can_drive(
    age: object,
    country_code: object,
    legal_driving_ages: Mapping[str, int] | None = None,
) -> bool | str:
    """Whether someone of *age* may drive in the given country.

    Unknown or non-string country codes, and non-numeric ages, yield a
    status string instead of a boolean.
    """
    if legal_driving_ages is None:
        legal_driving_ages = DEFAULT_LEGAL_DRIVING_AGES

    if not isinstance(country_code, str) or country_code not in legal_driving_ages:
        return INVALID_COUNTRY_CODE
    if not is_number(age):
        return INVALID_AGE
    return age >= legal_driving_ages[country_code]  # type: ignore[operator]
