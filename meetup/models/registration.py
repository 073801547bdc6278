"""Registration data model."""
from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Registration:
    """Validated sign-up of one attendee."""

    name: str
    email: str
    organization: str = ""
    role: str = ""

    def to_row(self) -> Dict[str, str]:
        """Column mapping for the registrations table."""
        return {
            "name": self.name,
            "email": self.email,
            "organization": self.organization,
            "role": self.role,
        }
