"""Registration tab UI component."""
import logging

import streamlit as st

from meetup.models.registration_form import FORM_FIELDS, RegistrationFormState
from meetup.services.content_service import CONTACT_EMAIL, EVENT_TITLE
from meetup.services.registration_service import (
    SUCCESS_MESSAGE,
    start_new_registration,
    submit_form,
)

logger = logging.getLogger(__name__)

FORM_STATE_KEY = "registration_form_state"

FIELD_LABELS = {
    "name": "Full Name",
    "email": "Email",
    "organization": "Organization",
    "role": "Role",
}


def _field_key(field_name: str) -> str:
    """Build session state key for a form input widget."""
    return f"registration_{field_name}"


def get_form_state() -> RegistrationFormState:
    """Return the stored form state, initializing it on first access."""
    if FORM_STATE_KEY not in st.session_state:
        st.session_state[FORM_STATE_KEY] = RegistrationFormState()
    return st.session_state[FORM_STATE_KEY]


def _read_inputs(state: RegistrationFormState) -> RegistrationFormState:
    """Copy current widget values into the form state."""
    values = {name: st.session_state.get(_field_key(name), "") for name in FORM_FIELDS}
    return state.with_values(**values)


def _clear_inputs() -> None:
    """Reset input widgets to empty defaults."""
    for name in FORM_FIELDS:
        st.session_state.pop(_field_key(name), None)


def handle_submit() -> RegistrationFormState:
    """Validate and save the entered registration, storing the new state."""
    state = _read_inputs(get_form_state())
    new_state = submit_form(state)
    st.session_state[FORM_STATE_KEY] = new_state

    if new_state.is_submitted:
        _clear_inputs()
    elif new_state.submit_error:
        logger.warning("Registration submit failed; form kept for retry")

    return new_state


def handle_register_another() -> RegistrationFormState:
    """Leave the thank-you view and show an empty form."""
    new_state = start_new_registration(get_form_state())
    st.session_state[FORM_STATE_KEY] = new_state
    _clear_inputs()
    return new_state


def _render_form(state: RegistrationFormState) -> None:
    """Render the four-field form with inline errors."""
    with st.form("registration_form", clear_on_submit=False):
        for name in FORM_FIELDS:
            st.text_input(FIELD_LABELS[name], key=_field_key(name))
            if name in state.field_errors:
                st.markdown(
                    f"<p style='color: #ef4444; font-size: 0.85rem; margin-top: -8px;'>"
                    f"{state.field_errors[name]}</p>",
                    unsafe_allow_html=True,
                )

        if state.submit_error:
            st.error(state.submit_error)

        submitted = st.form_submit_button("Register Now", use_container_width=True, type="primary")

    if submitted:
        handle_submit()
        st.rerun()


def _render_thank_you() -> None:
    st.success(SUCCESS_MESSAGE)
    if st.button("Register Another Attendee", key="registration_another"):
        handle_register_another()
        st.rerun()


def render_registration_tab() -> None:
    """Render the registration card."""
    st.subheader("Registration")
    st.caption(f"Sign up for the {EVENT_TITLE}")

    state = get_form_state()
    if state.is_submitted:
        _render_thank_you()
    else:
        _render_form(state)

    st.caption(f"For any registration queries, please contact: {CONTACT_EMAIL}")
