"""
Meetup event page
Chainbase Meetup Nigeria
"""
import logging
import streamlit as st

from meetup.services.content_service import EVENT_TITLE
from meetup.ui.event_page import (
    render_agenda_tab,
    render_description_tab,
    render_event_details_tab,
    render_hackathon_tab,
)
from meetup.ui.registration_form import get_form_state, render_registration_tab

logger = logging.getLogger(__name__)


# Streamlit page configuration
st.set_page_config(
    page_title=EVENT_TITLE,
    page_icon="🔗",
    layout="wide",
    initial_sidebar_state="collapsed"
)

TABS = [
    ("Description", render_description_tab),
    ("Event Details", render_event_details_tab),
    ("Agenda", render_agenda_tab),
    ("Hackathon", render_hackathon_tab),
    ("Registration", render_registration_tab),
]


def initialize_session_state():
    """Initialize session state defaults."""
    get_form_state()


def apply_custom_css():
    """Apply custom CSS styles."""
    st.markdown("""
        <style>
        .stApp {
            background: linear-gradient(180deg, #eff6ff 0%, #ffffff 100%);
        }

        /* Hide default Streamlit chrome */
        #MainMenu {visibility: hidden;}
        footer {visibility: hidden;}

        .meetup-title {
            font-size: 3rem;
            font-weight: 700;
            text-align: center;
            color: #2563eb;
            margin-bottom: 2rem;
        }

        .stButton > button, .stFormSubmitButton > button {
            border-radius: 8px;
            font-weight: 600;
        }

        .stTextInput > div > div > input {
            border-radius: 8px;
        }
        </style>
    """, unsafe_allow_html=True)


def render_tabs():
    """Render all content tabs with an error boundary per tab."""
    containers = st.tabs([label for label, _ in TABS])

    for container, (label, render) in zip(containers, TABS):
        with container:
            try:
                render()
            except Exception as e:
                logger.exception("Unhandled exception while rendering %s tab", label)
                st.error("Something went wrong. Please try again later.")

                with st.expander("🔍 Error details"):
                    st.code(str(e))


def main():
    """Application entry point."""
    try:
        initialize_session_state()
        apply_custom_css()

        st.markdown(f"<h1 class='meetup-title'>{EVENT_TITLE}</h1>", unsafe_allow_html=True)
        render_tabs()
    except Exception as e:
        logger.exception("Unhandled exception during app execution")
        st.error("The application hit an error. Please reload the page.")
        st.code(str(e))

        if st.button("🔄 Reload"):
            st.session_state.clear()
            st.rerun()


if __name__ == "__main__":
    main()
