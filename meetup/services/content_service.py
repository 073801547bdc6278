"""Static event content for the meetup page."""
from typing import List

from meetup.models.event import AgendaItem, DescriptionSection, EventDetail, HackathonRule, Prize

EVENT_TITLE = "Chainbase Meetup Nigeria"
CONTACT_EMAIL = "events@chainbase.com"

_EVENT_DETAILS = [
    EventDetail("Date", "October 20, 2024", "📅"),
    EventDetail("Time", "9:00 AM - 6:00 PM", "🕘"),
    EventDetail("Venue", "Chainspace Hub uyo, udo udoma avenue , Akwa ibom state , Nigeria", "📍"),
    EventDetail("Host", "Chainspace", "👥"),
    EventDetail("Theme", "Unlocking Blockchain Potential with Chainbase Tools", "📖"),
    EventDetail("Registration Fee", "Free", "🎟️"),
    EventDetail("Capacity", "100 attendees", "👥"),
    EventDetail("Wi-Fi", "Free high-speed internet available", "📶"),
    EventDetail("Refreshments", "Lunch and refreshments provided", "🍽️"),
    EventDetail("Recording", "Sessions will be recorded and shared post-event", "📷"),
]

_ADDITIONAL_INFO = [
    "Dress Code: Business Casual",
    "Language: The event will be conducted in English",
    "Parking: Limited free parking available at the venue",
    "Accommodation: List of nearby hotels will be provided upon registration",
    "COVID-19 Precautions: Please follow local health guidelines",
]

_AGENDA = [
    AgendaItem("09:00 - 09:30", "Registration and Welcome",
               "Check-in, distribution of event materials, networking"),
    AgendaItem("09:30 - 10:00", "Opening Ceremony",
               "Welcome address, event overview, introduction to Chainbase and Chainspace"),
    AgendaItem("10:00 - 11:00", "Chainbase Product Showcase: API",
               "Features, capabilities, use cases, and applications of Chainbase API"),
    AgendaItem("11:00 - 11:30", "Coffee Break and Networking"),
    AgendaItem("11:30 - 12:30", "Chainbase Product Showcase: Manuscript",
               "Overview of Chainbase Manuscript, benefits for developers and researchers"),
    AgendaItem("12:30 - 13:30", "Lunch Break"),
    AgendaItem("13:30 - 14:30", "Interactive Demo Sessions",
               "Hands-on demonstrations of Chainbase products, Q&A with Chainbase team"),
    AgendaItem("14:30 - 15:00", "Mini Hackathon Kickoff",
               "Announcement of hackathon guidelines and team formation"),
    AgendaItem("15:00 - 17:30", "Mini Hackathon",
               "Teams work on projects using Chainbase tools, mentors available for support"),
    AgendaItem("17:30 - 18:00", "Project Presentations and Awards",
               "Teams present their projects, winners announced, closing remarks"),
]

_HACKATHON_RULES = [
    HackathonRule("Theme", "\"Chainbase: Your Vision, Our Tools\"", "💡"),
    HackathonRule(
        "Challenge",
        "Build any blockchain-related project that excites you! Use Chainbase tools to bring "
        "your unique ideas to life. Whether it's DeFi, NFTs, data analytics, or something "
        "entirely new, we welcome all innovative concepts.",
        "🎯",
    ),
    HackathonRule("Team Size", "3-4 members per team", "👥"),
    HackathonRule("Duration", "2.5 hours", "⏱️"),
    HackathonRule(
        "Judging Criteria",
        "Innovation, technical implementation, use of Chainbase tools, presentation, "
        "and potential impact",
        "⚡",
    ),
]

_PRIZES = [
    Prize("1st Place"),
    Prize("2nd Place"),
    Prize("3rd Place"),
]

PRIZES_NOTE = "Exciting rewards await the top performers. Stay tuned for more details on the prizes!"

_DESCRIPTION = [
    DescriptionSection(
        "Event Overview",
        paragraphs=[
            "Chainbase Meetup Nigeria is a one-day intensive gathering designed to bring together "
            "blockchain enthusiasts, developers, researchers, and industry professionals. This event "
            "aims to showcase the power and versatility of Chainbase tools while fostering innovation "
            "and collaboration within the Nigerian blockchain community.",
        ],
    ),
    DescriptionSection(
        "Key Highlights",
        bullets=[
            "**Product Showcases:** In-depth demonstrations of Chainbase API and Chainbase "
            "Manuscript, highlighting their features and real-world applications.",
            "**Interactive Sessions:** Hands-on workshops where attendees can explore Chainbase "
            "tools with guidance from experts.",
            "**Networking Opportunities:** Multiple breaks designed for attendees to connect, "
            "share ideas, and form potential collaborations.",
            "**Mini Hackathon:** An exciting competition where participants can put their skills "
            "to the test, using Chainbase tools to bring innovative ideas to life.",
        ],
    ),
    DescriptionSection(
        "Who Should Attend?",
        bullets=[
            "**Blockchain Developers:** Enhance your skills and learn how to leverage Chainbase "
            "tools in your projects.",
            "**Data Analysts:** Discover how Chainbase can streamline your blockchain data "
            "analysis processes.",
            "**Researchers:** Explore new possibilities in blockchain research using Chainbase "
            "Manuscript.",
            "**Entrepreneurs:** Gain insights into how Chainbase tools can support and accelerate "
            "your blockchain-based startups.",
            "**Students:** Get a head start in the blockchain industry by familiarizing yourself "
            "with professional-grade tools.",
        ],
    ),
    DescriptionSection(
        "What to Expect",
        paragraphs=[
            "Attendees can expect a day filled with learning, collaboration, and innovation. From "
            "in-depth technical sessions to creative problem-solving in the hackathon, this event "
            "offers a comprehensive blockchain experience. You'll have the opportunity to:",
        ],
        bullets=[
            "Gain hands-on experience with cutting-edge blockchain tools",
            "Network with like-minded professionals and potential collaborators",
            "Showcase your skills and creativity in the mini hackathon",
            "Learn about the latest trends and applications in blockchain technology",
            "Receive expert insights and guidance from Chainbase professionals",
        ],
    ),
]

CLOSING_NOTE = (
    "Join us for this unique opportunity to enhance your blockchain skills, expand your network, "
    "and be part of Nigeria's growing blockchain community!"
)


def get_event_details() -> List[EventDetail]:
    return list(_EVENT_DETAILS)


def get_additional_info() -> List[str]:
    return list(_ADDITIONAL_INFO)


def get_agenda() -> List[AgendaItem]:
    """Agenda items in chronological order."""
    return sorted(_AGENDA, key=lambda item: item.start)


def get_hackathon_rules() -> List[HackathonRule]:
    return list(_HACKATHON_RULES)


def get_prizes() -> List[Prize]:
    return list(_PRIZES)


def get_description_sections() -> List[DescriptionSection]:
    return list(_DESCRIPTION)
