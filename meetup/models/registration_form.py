"""Registration form state model."""
from dataclasses import dataclass, field, replace
from typing import Dict, Optional

EDITING = "editing"
SUBMITTED = "submitted"

FORM_FIELDS = ("name", "email", "organization", "role")


@dataclass(frozen=True)
class RegistrationFormState:
    """
    Field values and UI flags of the registration form.

    The form is either being edited or has been submitted. While editing,
    field_errors holds per-field validation messages and submit_error holds
    the banner shown after a failed insert.
    """

    name: str = ""
    email: str = ""
    organization: str = ""
    role: str = ""
    status: str = EDITING
    field_errors: Dict[str, str] = field(default_factory=dict)
    submit_error: Optional[str] = None

    def __post_init__(self):
        """Validate status value."""
        if self.status not in (EDITING, SUBMITTED):
            raise ValueError(f"Status must be one of ['{EDITING}', '{SUBMITTED}'], got: {self.status}")

    @property
    def is_submitted(self) -> bool:
        return self.status == SUBMITTED

    def values(self) -> Dict[str, str]:
        """Current field values keyed by field name."""
        return {name: getattr(self, name) for name in FORM_FIELDS}

    def with_values(self, **values: str) -> "RegistrationFormState":
        """Copy of the state with updated field values."""
        unknown = set(values) - set(FORM_FIELDS)
        if unknown:
            raise ValueError(f"Unknown form fields: {sorted(unknown)}")
        cleaned = {key: value if value is not None else "" for key, value in values.items()}
        return replace(self, **cleaned)

    def cleared(self) -> "RegistrationFormState":
        """Empty form in editing mode."""
        return RegistrationFormState()
