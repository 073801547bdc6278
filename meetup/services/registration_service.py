"""Registration service for saving attendee sign-ups."""
import logging
from dataclasses import replace
from typing import Any, Tuple

from meetup.models.registration import Registration
from meetup.models.registration_form import EDITING, SUBMITTED, RegistrationFormState
from meetup.services.config_service import REGISTRATIONS_TABLE
from meetup.services.storage_service import insert_row
from meetup.utils.exceptions import SubmissionError, ValidationError
from meetup.utils.validation import require_valid_registration

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Thank you for registering! We look forward to seeing you at the event."
SUBMIT_ERROR_MESSAGE = "An error occurred while saving your registration. Please try again."


def save_registration(registration: Registration, client: Any = None) -> None:
    """
    Persist one registration with a single insert.

    Args:
        registration: Validated registration
        client: Storage client; defaults to the shared Supabase client

    Raises:
        SubmissionError: If the insert fails for any reason. The underlying
            cause is logged and chained; the message is safe to show users.

    Behavior:
        - No retry and no idempotency key: a request that succeeds remotely
          but fails locally may leave a duplicate row
    """
    try:
        data = insert_row(REGISTRATIONS_TABLE, registration.to_row(), client=client)
    except Exception as e:
        logger.exception("Error saving registration for %s", registration.email)
        raise SubmissionError(SUBMIT_ERROR_MESSAGE, cause=e) from e

    logger.info("Registration saved for %s (%d row(s) returned)", registration.email, len(data))


def register_attendee(registration: Registration, client: Any = None) -> Tuple[bool, str]:
    """
    Save a registration and report the outcome.

    Returns:
        Tuple of (success: bool, message: str)
        - (True, SUCCESS_MESSAGE) on success
        - (False, SUBMIT_ERROR_MESSAGE) on any storage failure
    """
    try:
        save_registration(registration, client=client)
    except SubmissionError as e:
        return False, str(e)
    return True, SUCCESS_MESSAGE


def submit_form(state: RegistrationFormState, client: Any = None) -> RegistrationFormState:
    """
    Validate the form and, if valid, save the registration.

    Args:
        state: Current form state holding the entered values
        client: Storage client; defaults to the shared Supabase client

    Returns:
        New form state:
        - editing with field_errors if validation fails (nothing is sent)
        - submitted with empty fields if the insert succeeds
        - editing with submit_error and the entered values kept if the insert fails
    """
    if state.is_submitted:
        return state

    try:
        registration = require_valid_registration(
            state.name, state.email, state.organization, state.role
        )
    except ValidationError as e:
        return replace(state, status=EDITING, field_errors=e.errors, submit_error=None)

    success, message = register_attendee(registration, client=client)
    if not success:
        return replace(state, status=EDITING, field_errors={}, submit_error=message)

    return replace(RegistrationFormState(), status=SUBMITTED)


def start_new_registration(state: RegistrationFormState) -> RegistrationFormState:
    """Return to an empty editing form after a submission."""
    return state.cleared()
