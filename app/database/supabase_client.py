import logging
from supabase import create_client, Client
from app.config import settings
from app.modules.locations.repository import ReferenceStoreUnavailable

logger = logging.getLogger(__name__)


class SupabaseClient:
    _client: Client = None
    _service_client: Client = None

    @staticmethod
    def _connect(key: str) -> Client:
        if not settings.supabase_url or not key:
            raise ReferenceStoreUnavailable("Supabase URL or key is not configured")
        try:
            return create_client(settings.supabase_url, key)
        except Exception as e:
            logger.error(f"Error creating Supabase client: {e}")
            raise ReferenceStoreUnavailable("Failed to create Supabase client") from e

    @classmethod
    def get_client(cls) -> Client:
        """Client with the anon key; reference tables are readable under RLS."""
        if cls._client is None:
            cls._client = cls._connect(settings.supabase_key)
        return cls._client

    @classmethod
    def get_service_client(cls) -> Client:
        """Client with service_role key; bypasses RLS. Required for seeding reference data."""
        if cls._service_client is None:
            cls._service_client = cls._connect(settings.supabase_service_role_key)
        return cls._service_client

    @classmethod
    def reset_client(cls):
        cls._client = None
        cls._service_client = None


def get_supabase() -> Client:
    return SupabaseClient.get_client()
