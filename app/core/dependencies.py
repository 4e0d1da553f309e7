"""
Core dependencies for wiring the reference store and address resolver into routes
"""

from fastapi import Depends
from app.config import settings
from app.database.supabase_client import get_supabase
from app.modules.locations.repository import ReferenceStore, SupabaseReferenceStore
from app.modules.locations.resolver import AddressIdentifierResolver
from supabase import Client


def get_reference_store(supabase: Client = Depends(get_supabase)) -> ReferenceStore:
    """Reference store over the configured administrative tables"""
    return SupabaseReferenceStore(supabase, settings.get_reference_tables())


def get_address_resolver(
    store: ReferenceStore = Depends(get_reference_store)
) -> AddressIdentifierResolver:
    return AddressIdentifierResolver(store)
