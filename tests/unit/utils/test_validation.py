"""Unit tests for registration validation functions."""
import pytest

from meetup.models.registration import Registration
from meetup.utils.exceptions import ValidationError
from meetup.utils.validation import (
    INVALID_EMAIL_MESSAGE,
    NAME_TOO_SHORT_MESSAGE,
    require_valid_registration,
    validate_email,
    validate_name,
    validate_registration,
)


class TestValidateName:
    """Test validate_name function."""

    def test_valid_name(self):
        """Test valid full name."""
        is_valid, error_msg = validate_name("Jane Doe")
        assert is_valid is True
        assert error_msg == ""

    def test_two_character_name_is_valid(self):
        """Test name at minimum length."""
        is_valid, error_msg = validate_name("Jo")
        assert is_valid is True

    @pytest.mark.parametrize("name", ["", "J", "é"])
    def test_short_name_is_invalid(self, name):
        """Test names shorter than 2 characters."""
        is_valid, error_msg = validate_name(name)
        assert is_valid is False
        assert error_msg == "Name must be at least 2 characters."

    def test_length_counts_raw_value(self):
        """Test whitespace counts toward the minimum length."""
        is_valid, _ = validate_name(" J")
        assert is_valid is True

    def test_length_counts_code_points(self):
        """Test a single emoji is one character."""
        is_valid, error_msg = validate_name("\U0001F600")
        assert is_valid is False
        assert error_msg == NAME_TOO_SHORT_MESSAGE

        is_valid, _ = validate_name("\U0001F600\U0001F600")
        assert is_valid is True

    def test_none_is_invalid(self):
        """Test missing name."""
        is_valid, error_msg = validate_name(None)
        assert is_valid is False
        assert error_msg == NAME_TOO_SHORT_MESSAGE


class TestValidateEmail:
    """Test validate_email function."""

    @pytest.mark.parametrize("email", [
        "jane@example.com",
        "jane.doe+meetup@mail.example.org",
        "o'brien@chainspace.ng",
        "JANE_DOE@EXAMPLE.COM",
    ])
    def test_valid_email(self, email):
        """Test well-formed addresses."""
        is_valid, error_msg = validate_email(email)
        assert is_valid is True
        assert error_msg == ""

    @pytest.mark.parametrize("email", [
        "",
        "plainaddress",
        "@example.com",
        "jane@",
        "jane@example",
        "jane@example.c",
        "jane..doe@example.com",
        ".jane@example.com",
        "jane.@example.com",
        "jane doe@example.com",
        "jane@@example.com",
        "jane@exam_ple.com",
        "jane@example.com\n",
    ])
    def test_invalid_email(self, email):
        """Test malformed addresses."""
        is_valid, error_msg = validate_email(email)
        assert is_valid is False
        assert error_msg == "Invalid email address."

    @pytest.mark.parametrize("email", [
        "jane@example.co\u017f",
        "\u212a@example.com",
        "j\u00e9r\u00f4me@example.com",
        "jane@ex\u00e4mple.com",
    ])
    def test_non_ascii_letters_are_invalid(self, email):
        """Test case-insensitive matching stays within ASCII letters."""
        is_valid, error_msg = validate_email(email)
        assert is_valid is False
        assert error_msg == INVALID_EMAIL_MESSAGE

    def test_non_string_is_invalid(self):
        """Test non-string input."""
        is_valid, error_msg = validate_email(None)
        assert is_valid is False
        assert error_msg == INVALID_EMAIL_MESSAGE


class TestValidateRegistration:
    """Test validate_registration function."""

    def test_valid_fields_build_registration(self):
        """Test valid input returns a Registration and no errors."""
        registration, errors = validate_registration("Jane Doe", "jane@example.com", "", "")

        assert errors == {}
        assert registration == Registration(name="Jane Doe", email="jane@example.com")

    def test_both_required_fields_reported(self):
        """Test every failing field gets a message."""
        registration, errors = validate_registration("J", "not-an-email")

        assert registration is None
        assert errors == {
            "name": NAME_TOO_SHORT_MESSAGE,
            "email": INVALID_EMAIL_MESSAGE,
        }

    def test_only_failing_field_reported(self):
        """Test a valid name is not reported when the email fails."""
        registration, errors = validate_registration("Jane Doe", "jane@")

        assert registration is None
        assert list(errors) == ["email"]

    @pytest.mark.parametrize("organization,role", [
        ("", ""),
        (None, None),
        ("Chainspace", "Developer"),
        ("x", "a" * 500),
        ("<b>Org</b>", "   "),
    ])
    def test_optional_fields_never_fail(self, organization, role):
        """Test organization and role are unconstrained."""
        registration, errors = validate_registration(
            "Jane Doe", "jane@example.com", organization, role
        )

        assert errors == {}
        assert registration.organization == (organization or "")
        assert registration.role == (role or "")


class TestRequireValidRegistration:
    """Test require_valid_registration function."""

    def test_returns_registration(self):
        """Test valid input returns a Registration."""
        registration = require_valid_registration("Jane Doe", "jane@example.com")
        assert registration.name == "Jane Doe"

    def test_raises_validation_error(self):
        """Test invalid input raises ValidationError with field messages."""
        with pytest.raises(ValidationError) as exc_info:
            require_valid_registration("J", "jane@example.com")

        assert exc_info.value.errors == {"name": NAME_TOO_SHORT_MESSAGE}
        assert "Name must be at least 2 characters." in str(exc_info.value)
