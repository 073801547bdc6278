"""Event content data models."""
from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class EventDetail:
    """One labelled fact about the event (date, venue, ...)."""

    label: str
    value: str
    icon: str = ""


@dataclass(frozen=True)
class AgendaItem:
    """Scheduled agenda slot."""

    time: str  # HH:MM - HH:MM
    session: str
    description: str = ""

    def __post_init__(self):
        """Validate agenda item."""
        if not self.session or not self.session.strip():
            raise ValueError("Agenda session title cannot be empty")

    @property
    def start(self) -> str:
        return self.time.split("-")[0].strip()


@dataclass(frozen=True)
class HackathonRule:
    """Labelled hackathon rule (theme, team size, ...)."""

    label: str
    value: str
    icon: str = ""


@dataclass(frozen=True)
class Prize:
    place: str
    reward: str = "To be announced"


@dataclass(frozen=True)
class DescriptionSection:
    """Heading with paragraphs and bullet points."""

    title: str
    paragraphs: List[str] = field(default_factory=list)
    bullets: List[str] = field(default_factory=list)
