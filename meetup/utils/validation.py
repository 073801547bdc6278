"""Registration form validation utilities."""
import re
from typing import Dict, Optional, Tuple

from meetup.models.registration import Registration
from meetup.utils.exceptions import ValidationError

NAME_MIN_LENGTH = 2

NAME_TOO_SHORT_MESSAGE = "Name must be at least 2 characters."
INVALID_EMAIL_MESSAGE = "Invalid email address."

# Local part may not start with a dot, contain "..", or end with a dot.
EMAIL_PATTERN = re.compile(
    r"(?!\.)(?!.*\.\.)[A-Z0-9_'+\-.]*[A-Z0-9_+\-]@([A-Z0-9][A-Z0-9\-]*\.)+[A-Z]{2,}",
    re.IGNORECASE | re.ASCII,
)


def validate_name(name: str) -> Tuple[bool, str]:
    """
    Validate attendee name.

    Args:
        name: Name to validate

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (True, "") if valid
        - (False, "Name must be at least 2 characters.") if shorter than 2 characters

    Behavior:
        - Length is measured on the raw value, whitespace included
    """
    if not isinstance(name, str) or len(name) < NAME_MIN_LENGTH:
        return False, NAME_TOO_SHORT_MESSAGE
    return True, ""


def validate_email(email: str) -> Tuple[bool, str]:
    """
    Validate attendee email address syntax.

    Args:
        email: Email address to validate

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (True, "") if valid
        - (False, "Invalid email address.") if not a well-formed address
    """
    if not isinstance(email, str) or not EMAIL_PATTERN.fullmatch(email):
        return False, INVALID_EMAIL_MESSAGE
    return True, ""


def validate_registration(
    name: str,
    email: str,
    organization: Optional[str] = "",
    role: Optional[str] = "",
) -> Tuple[Optional[Registration], Dict[str, str]]:
    """
    Validate raw form fields into a Registration.

    Args:
        name: Full name (required, at least 2 characters)
        email: Email address (required)
        organization: Organization (optional, unconstrained)
        role: Role (optional, unconstrained)

    Returns:
        Tuple of (registration, errors)
        - (Registration, {}) if name and email are valid
        - (None, {field: message, ...}) listing every failing field
    """
    errors: Dict[str, str] = {}

    is_valid, error_msg = validate_name(name)
    if not is_valid:
        errors["name"] = error_msg

    is_valid, error_msg = validate_email(email)
    if not is_valid:
        errors["email"] = error_msg

    if errors:
        return None, errors

    registration = Registration(
        name=name,
        email=email,
        organization=organization or "",
        role=role or "",
    )
    return registration, {}


def require_valid_registration(
    name: str,
    email: str,
    organization: Optional[str] = "",
    role: Optional[str] = "",
) -> Registration:
    """
    Validate raw form fields, raising on failure.

    Raises:
        ValidationError: With field-keyed messages if any required field is invalid
    """
    registration, errors = validate_registration(name, email, organization, role)
    if registration is None:
        raise ValidationError(errors)
    return registration
