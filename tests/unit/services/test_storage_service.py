"""Unit tests for storage_service."""
import pytest
from types import SimpleNamespace
from unittest.mock import patch, MagicMock

from meetup.services import storage_service
from meetup.services.config_service import SupabaseSettings
from meetup.services.storage_service import get_client, insert_row
from meetup.utils.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def reset_client(monkeypatch):
    """Start each test without a cached client."""
    monkeypatch.setattr(storage_service, "_CLIENT", None)


def make_client(response):
    """Build a client whose insert().execute() returns response."""
    client = MagicMock()
    client.table.return_value.insert.return_value.execute.return_value = response
    return client


class TestGetClient:
    """Test get_client function."""

    @patch('meetup.services.storage_service.create_client')
    @patch('meetup.services.storage_service.get_supabase_settings')
    def test_creates_client_from_settings(self, mock_settings, mock_create):
        """Test client is created with configured URL and key."""
        mock_settings.return_value = SupabaseSettings(url="https://demo.supabase.co", key="anon")

        client = get_client()

        mock_create.assert_called_once_with("https://demo.supabase.co", "anon")
        assert client is mock_create.return_value

    @patch('meetup.services.storage_service.create_client')
    @patch('meetup.services.storage_service.get_supabase_settings')
    def test_client_is_cached(self, mock_settings, mock_create):
        """Test client is created only once."""
        mock_settings.return_value = SupabaseSettings(url="https://demo.supabase.co", key="anon")

        first = get_client()
        second = get_client()

        assert first is second
        mock_create.assert_called_once()

    @patch('meetup.services.storage_service.create_client')
    @patch('meetup.services.storage_service.get_supabase_settings')
    def test_missing_settings_propagate(self, mock_settings, mock_create):
        """Test configuration errors are raised and nothing is cached."""
        mock_settings.side_effect = ConfigurationError("Missing storage settings: SUPABASE_URL")

        with pytest.raises(ConfigurationError):
            get_client()

        mock_create.assert_not_called()
        assert storage_service._CLIENT is None


class TestInsertRow:
    """Test insert_row function."""

    def test_inserts_single_row(self):
        """Test one insert call with the row wrapped in a list."""
        row = {"name": "Jane Doe", "email": "jane@example.com", "organization": "", "role": ""}
        client = make_client(SimpleNamespace(data=[dict(row, id=1)]))

        data = insert_row("registrations", row, client=client)

        client.table.assert_called_once_with("registrations")
        client.table.return_value.insert.assert_called_once_with([row])
        client.table.return_value.insert.return_value.execute.assert_called_once_with()
        assert data == [dict(row, id=1)]

    def test_empty_response_data(self):
        """Test responses without a body return an empty list."""
        client = make_client(SimpleNamespace(data=None))

        assert insert_row("registrations", {"name": "Jo"}, client=client) == []

    def test_response_error_raises(self):
        """Test error reported on the response is raised."""
        client = make_client(SimpleNamespace(data=None, error="duplicate key"))

        with pytest.raises(RuntimeError, match="duplicate key"):
            insert_row("registrations", {"name": "Jo"}, client=client)

    def test_client_exception_propagates(self):
        """Test exceptions from the client are not swallowed."""
        client = MagicMock()
        client.table.return_value.insert.return_value.execute.side_effect = ConnectionError("offline")

        with pytest.raises(ConnectionError, match="offline"):
            insert_row("registrations", {"name": "Jo"}, client=client)

    @patch('meetup.services.storage_service.get_client')
    def test_uses_shared_client_by_default(self, mock_get_client):
        """Test the shared client is used when none is given."""
        mock_get_client.return_value = make_client(SimpleNamespace(data=[]))

        insert_row("registrations", {"name": "Jo"})

        mock_get_client.assert_called_once_with()
        mock_get_client.return_value.table.assert_called_once_with("registrations")
