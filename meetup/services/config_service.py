"""Configuration for the storage backend connection."""
import os
from dataclasses import dataclass
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv

from meetup.utils.exceptions import ConfigurationError

REGISTRATIONS_TABLE = "registrations"

SUPABASE_URL_VAR = "SUPABASE_URL"
SUPABASE_KEY_VAR = "SUPABASE_KEY"

_ENV_LOADED = False
_ENV_LOCK = Lock()


@dataclass(frozen=True)
class SupabaseSettings:
    """Connection settings for the Supabase project."""

    url: str
    key: str


def _load_env() -> None:
    """Load settings from .env file if present."""
    global _ENV_LOADED

    if _ENV_LOADED:
        return

    with _ENV_LOCK:
        if _ENV_LOADED:
            return

        env_path = Path(".env")
        if env_path.exists():
            # Real environment variables win over .env entries
            load_dotenv(env_path, override=False)

        _ENV_LOADED = True


def get_supabase_settings() -> SupabaseSettings:
    """
    Read Supabase connection settings.

    Returns:
        SupabaseSettings with project URL and anon key

    Raises:
        ConfigurationError: If SUPABASE_URL or SUPABASE_KEY is not set
    """
    _load_env()

    url = os.getenv(SUPABASE_URL_VAR, "").strip()
    key = os.getenv(SUPABASE_KEY_VAR, "").strip()

    missing = [name for name, value in ((SUPABASE_URL_VAR, url), (SUPABASE_KEY_VAR, key)) if not value]
    if missing:
        raise ConfigurationError(f"Missing storage settings: {', '.join(missing)}")

    return SupabaseSettings(url=url, key=key)
