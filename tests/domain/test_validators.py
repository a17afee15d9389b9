"""Unit tests for the input validators."""

import math

import pytest

from storekit.domain.service.validators import (
    can_drive,
    is_price_in_range,
    is_valid_username,
    validate_user_input,
)


class TestValidateUserInput:

    def test_valid_input(self):
        assert "success" in validate_user_input("Mona", 20).lower()

    def test_username_not_string(self):
        assert "Invalid username" in validate_user_input(1, 20)

    def test_username_too_short(self):
        assert "Invalid username" in validate_user_input("mo", 20)

    def test_username_of_minimum_length(self):
        assert "success" in validate_user_input("mon", 20).lower()

    def test_age_not_number(self):
        assert "Invalid age" in validate_user_input("mona", "10")

    def test_age_bool_rejected(self):
        assert "Invalid age" in validate_user_input("mona", True)

    @pytest.mark.parametrize("age", [math.nan, math.inf])
    def test_age_not_finite(self, age):
        assert "Invalid age" in validate_user_input("mona", age)

    def test_age_under_18(self):
        assert "Invalid age" in validate_user_input("mona", 10)

    def test_age_exactly_18(self):
        assert "success" in validate_user_input("mona", 18).lower()

    def test_both_invalid_reports_both(self):
        result = validate_user_input("", 0)
        assert "Invalid username" in result
        assert "Invalid age" in result
        assert "success" not in result.lower()


class TestIsValidUsername:

    @pytest.mark.parametrize(
        "length, expected",
        [(4, False), (5, True), (6, True), (14, True), (15, True), (16, False)],
    )
    def test_length_bounds(self, length, expected):
        assert is_valid_username("m" * length) is expected

    @pytest.mark.parametrize("username", [None, 1, ["mmmmmm"]])
    def test_non_string_rejected(self, username):
        assert is_valid_username(username) is False

    def test_custom_bounds(self):
        assert is_valid_username("ab", min_length=2, max_length=3) is True
        assert is_valid_username("abcd", min_length=2, max_length=3) is False


class TestIsPriceInRange:

    @pytest.mark.parametrize(
        "scenario, price, expected",
        [
            ("below min", -10, False),
            ("above max", 110, False),
            ("equal to min", 0, True),
            ("equal to max", 100, True),
            ("within range", 15, True),
        ],
    )
    def test_range(self, scenario, price, expected):
        assert is_price_in_range(price, 0, 100) is expected

    @pytest.mark.parametrize(
        "price, min_price, max_price",
        [("50", 0, 100), (50, "0", 100), (50, 0, None), (math.nan, 0, 100), (True, 0, 100)],
    )
    def test_non_numeric_arguments_are_out_of_range(self, price, min_price, max_price):
        assert is_price_in_range(price, min_price, max_price) is False


class TestCanDrive:

    def test_unknown_country_code(self):
        assert "invalid" in can_drive(18, "Invalid").lower()

    def test_non_string_country_code(self):
        assert "invalid" in can_drive(18, 1).lower()

    def test_old_enough(self):
        assert can_drive(17, "US") is True
        assert can_drive(17, "UK") is True

    def test_too_young(self):
        assert can_drive(15, "US") is False
        assert can_drive(16, "UK") is False

    @pytest.mark.parametrize("age", ["17", None, math.nan, True])
    def test_non_numeric_age(self, age):
        assert can_drive(age, "US") == "Invalid age"

    def test_unknown_country_reported_before_bad_age(self):
        assert can_drive("17", "XX") == "Invalid country code"

    def test_exactly_minimum_age(self):
        assert can_drive(16, "US") is True

    def test_country_code_is_case_sensitive(self):
        assert "invalid" in can_drive(18, "us").lower()

    def test_custom_table(self):
        table = {"DE": 18}
        assert can_drive(18, "DE", table) is True
        assert can_drive(17, "DE", table) is False
        assert "invalid" in can_drive(18, "US", table).lower()
