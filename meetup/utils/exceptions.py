"""Custom exception classes."""
from typing import Dict, Optional


class ValidationError(Exception):
    """Raised when registration form fields fail validation."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        super().__init__("; ".join(f"{field}: {message}" for field, message in self.errors.items()))


class SubmissionError(Exception):
    """Raised when the remote insert of a registration fails."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class ConfigurationError(Exception):
    """Raised when storage connection settings are missing."""
    pass
