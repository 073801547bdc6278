"""Event information tabs."""
import streamlit as st

from meetup.models.event import AgendaItem, EventDetail, HackathonRule
from meetup.services.content_service import (
    CLOSING_NOTE,
    PRIZES_NOTE,
    get_additional_info,
    get_agenda,
    get_description_sections,
    get_event_details,
    get_hackathon_rules,
    get_prizes,
)
from meetup.ui.html_utils import html_block, text


def _render_detail_row(detail: EventDetail) -> str:
    """Build HTML for one labelled event detail."""
    return html_block(f"""
        <li style="display: flex; align-items: center; gap: 8px; margin-bottom: 10px;">
            <span style="font-size: 1.3rem;">{text(detail.icon)}</span>
            <span style="font-weight: 600;">{text(detail.label)}:</span>
            <span>{text(detail.value)}</span>
        </li>
    """)


def _render_agenda_item(item: AgendaItem) -> str:
    """Build HTML card for an agenda slot; empty descriptions are omitted."""
    lines = [
        '<div style="border-left: 4px solid #2563eb; padding: 8px 16px; margin-bottom: 12px; '
        'background: #eff6ff; border-radius: 8px;">',
        f'<div style="color: #2563eb; font-weight: 700;">{text(item.time)}</div>',
        f'<div style="font-weight: 600;">{text(item.session)}</div>',
    ]
    if item.description:
        lines.append(f'<p style="color: #4b5563; margin: 4px 0 0 0;">{text(item.description)}</p>')
    lines.append("</div>")

    # No blank lines: Markdown ends an HTML block at the first one
    return html_block("\n".join(lines))


def _render_rule(rule: HackathonRule) -> str:
    return html_block(f"""
        <div style="margin-bottom: 12px;">
            <span style="font-size: 1.2rem;">{text(rule.icon)}</span>
            <span style="font-weight: 600;">{text(rule.label)}:</span>
            {text(rule.value)}
        </div>
    """)


def render_description_tab() -> None:
    st.subheader("Event Description")
    st.caption("Detailed information about the Chainbase Meetup Nigeria")

    for section in get_description_sections():
        st.markdown(f"### {section.title}")
        for paragraph in section.paragraphs:
            st.markdown(paragraph)
        if section.bullets:
            st.markdown("\n".join(f"- {bullet}" for bullet in section.bullets))

    st.markdown(f"**{CLOSING_NOTE}**")


def render_event_details_tab() -> None:
    st.subheader("Event Details")
    st.caption("Key information about the Chainbase Meetup Nigeria")

    rows = "\n".join(_render_detail_row(detail) for detail in get_event_details())
    st.markdown(f"<ul style='list-style: none; padding: 0;'>{rows}</ul>", unsafe_allow_html=True)

    st.markdown("### Additional Information")
    st.markdown("\n".join(f"- {info}" for info in get_additional_info()))


def render_agenda_tab() -> None:
    st.subheader("Event Agenda")
    st.caption("Detailed schedule of the day's activities")

    for item in get_agenda():
        st.markdown(_render_agenda_item(item), unsafe_allow_html=True)


def render_hackathon_tab() -> None:
    """Render hackathon rules and prizes."""
    st.subheader("Mini Hackathon Details")
    st.caption("Information about our exciting and inclusive mini hackathon")

    for rule in get_hackathon_rules():
        st.markdown(_render_rule(rule), unsafe_allow_html=True)

    st.markdown("**🏆 Prizes:**")
    st.markdown("\n".join(f"- **{prize.place}:** {prize.reward}" for prize in get_prizes()))
    st.caption(PRIZES_NOTE)
