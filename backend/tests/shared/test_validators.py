"""Tests for shared/validators.py."""

from datetime import date, datetime, timezone

import pytest

from shared.exceptions import (
    InvalidBirthdateError,
    InvalidEmailError,
    InvalidFieldError,
    MissingFieldError,
    WeakPasswordError,
)
from shared.validators import (
    REQUIRED_FIELDS,
    require_fields,
    validate_birthdate,
    validate_choice,
    validate_date,
    validate_datetime,
    validate_email,
    validate_password,
    validate_range,
    validate_text,
)


class TestRequireFields:
    def test_all_present(self):
        require_fields({"email": "a@b.co", "password": "secret1"}, REQUIRED_FIELDS["login"])

    def test_reports_first_missing_field_in_order(self):
        data = {"fullName": "Jo", "gender": None, "birthdate": None, "email": "a@b.co"}
        with pytest.raises(MissingFieldError) as exc_info:
            require_fields(data, REQUIRED_FIELDS["registration"])
        assert exc_info.value.field == "gender"

    def test_blank_string_counts_as_missing(self):
        with pytest.raises(MissingFieldError) as exc_info:
            require_fields({"email": "   ", "password": "x"}, ("email", "password"))
        assert exc_info.value.field == "email"

    def test_whitespace_password_is_present(self):
        data = {
            "fullName": "Jo Lee",
            "gender": "Female",
            "birthdate": "1990-01-01",
            "email": "jo@example.com",
            "password": "      ",
        }
        require_fields(data, REQUIRED_FIELDS["registration"])
        assert validate_password(data["password"]) == "      "

    def test_empty_password_is_missing(self):
        with pytest.raises(MissingFieldError) as exc_info:
            require_fields({"email": "a@b.co", "password": ""}, REQUIRED_FIELDS["login"])
        assert exc_info.value.field == "password"

    def test_zero_is_present(self):
        require_fields({"name": "Rex", "age": 0, "type": "Dog", "breed": "Lab"}, REQUIRED_FIELDS["pet"])

    def test_post_requires_nothing(self):
        require_fields({}, REQUIRED_FIELDS["post"])


class TestValidateEmail:
    def test_normalizes(self):
        assert validate_email("  Jo@Example.COM ") == "jo@example.com"

    @pytest.mark.parametrize("value", ["jo", "jo@example", "jo @example.com", "@example.com", "", None, 42])
    def test_rejects_malformed(self, value):
        with pytest.raises(InvalidEmailError):
            validate_email(value)


class TestValidatePassword:
    def test_six_characters_is_enough(self):
        assert validate_password("abcdef") == "abcdef"

    @pytest.mark.parametrize("value", ["", "abc", "abcde", None])
    def test_rejects_short(self, value):
        with pytest.raises(WeakPasswordError):
            validate_password(value)


class TestValidateBirthdate:
    def test_accepts_past_date(self):
        assert validate_birthdate("1990-05-01", today=date(2026, 1, 1)) == date(1990, 5, 1)

    def test_accepts_today(self):
        assert validate_birthdate("2026-01-01", today=date(2026, 1, 1)) == date(2026, 1, 1)

    def test_accepts_iso_datetime_with_z(self):
        parsed = validate_birthdate("1990-05-01T00:00:00.000Z", today=date(2026, 1, 1))
        assert parsed == date(1990, 5, 1)

    def test_accepts_date_object(self):
        assert validate_birthdate(date(2000, 1, 1), today=date(2026, 1, 1)) == date(2000, 1, 1)

    def test_rejects_future(self):
        with pytest.raises(InvalidBirthdateError):
            validate_birthdate("2026-01-02", today=date(2026, 1, 1))

    @pytest.mark.parametrize("value", ["not-a-date", "1990-13-01", "", 19900501, None])
    def test_rejects_unparsable(self, value):
        with pytest.raises(InvalidBirthdateError):
            validate_birthdate(value, today=date(2026, 1, 1))


class TestValidateDate:
    def test_date_string(self):
        assert validate_date("2025-03-04", "date") == date(2025, 3, 4)

    def test_datetime_string_keeps_date(self):
        assert validate_date("2025-03-04T10:00:00", "date") == date(2025, 3, 4)

    def test_rejects_garbage(self):
        with pytest.raises(InvalidFieldError) as exc_info:
            validate_date("yesterday", "date")
        assert exc_info.value.field == "date"


class TestValidateDatetime:
    def test_with_offset(self):
        parsed = validate_datetime("2026-01-15T08:00:00+02:00", "time")
        assert parsed == datetime(2026, 1, 15, 6, 0, tzinfo=timezone.utc)

    def test_z_suffix(self):
        parsed = validate_datetime("2026-01-15T08:00:00Z", "time")
        assert parsed == datetime(2026, 1, 15, 8, 0, tzinfo=timezone.utc)

    def test_naive_is_utc(self):
        assert validate_datetime("2026-01-15T08:00:00", "time").tzinfo == timezone.utc

    def test_rejects_garbage(self):
        with pytest.raises(InvalidFieldError):
            validate_datetime("8 o'clock", "time")


class TestValidateChoice:
    def test_accepts_member(self):
        assert validate_choice("daily", ["daily", "weekly"], "frequency") == "daily"

    def test_rejects_non_member(self):
        with pytest.raises(InvalidFieldError) as exc_info:
            validate_choice("hourly", ["daily", "weekly"], "frequency")
        assert "daily, weekly" in exc_info.value.message


class TestValidateText:
    def test_trims(self):
        assert validate_text("  Rex ", "name") == "Rex"

    def test_blank_is_missing(self):
        with pytest.raises(MissingFieldError):
            validate_text("   ", "name")


class TestValidateRange:
    def test_bounds_are_inclusive(self):
        assert validate_range(90, "latitude", -90, 90) == 90
        assert validate_range(-90, "latitude", -90, 90) == -90

    @pytest.mark.parametrize("value", [90.0001, -91])
    def test_out_of_range(self, value):
        with pytest.raises(InvalidFieldError):
            validate_range(value, "latitude", -90, 90)

    def test_minimum_only(self):
        with pytest.raises(InvalidFieldError):
            validate_range(-1, "age", minimum=0)
