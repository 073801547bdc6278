"""Low-level access to the Supabase storage backend."""
import logging
from threading import Lock
from typing import Any, Dict, List, Optional

from supabase import Client, create_client

from meetup.services.config_service import get_supabase_settings

logger = logging.getLogger(__name__)

_CLIENT: Optional[Client] = None
_CLIENT_LOCK = Lock()


def get_client() -> Client:
    """
    Return the shared Supabase client, creating it on first use.

    Raises:
        ConfigurationError: If connection settings are missing
    """
    global _CLIENT

    if _CLIENT is not None:
        return _CLIENT

    with _CLIENT_LOCK:
        if _CLIENT is None:
            settings = get_supabase_settings()
            _CLIENT = create_client(settings.url, settings.key)
            logger.info("Supabase client created for %s", settings.url)

    return _CLIENT


def insert_row(table: str, row: Dict[str, Any], client: Any = None) -> List[Dict[str, Any]]:
    """
    Insert a single row into a table.

    Args:
        table: Table name
        row: Column mapping to insert
        client: Object exposing table(name).insert(rows).execute();
            defaults to the shared Supabase client

    Returns:
        Rows echoed back by the backend (may be empty)

    Raises:
        RuntimeError: If the backend response reports an error
        Exception: Whatever the client raises on network or API failure
    """
    if client is None:
        client = get_client()

    response = client.table(table).insert([row]).execute()

    # Older clients report failures on the response instead of raising
    error = getattr(response, "error", None)
    if error:
        raise RuntimeError(f"Insert into {table} failed: {error}")

    data = getattr(response, "data", None)
    return data if isinstance(data, list) else []
