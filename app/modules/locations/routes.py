from fastapi import APIRouter, Body, Depends
from app.core.dependencies import get_reference_store, get_address_resolver
from app.modules.locations.repository import ReferenceStore
from app.modules.locations.resolver import AddressIdentifierResolver
from app.modules.locations.schemas import (
    AdministrativeLevel, AdministrativeUnit,
    AddressValidationResponse, FormattedAddressResponse
)
from app.modules.locations.service import LocationService
from typing import Any, List

router = APIRouter(prefix="/locations", tags=["locations"])


def get_location_service(
    store: ReferenceStore = Depends(get_reference_store),
    resolver: AddressIdentifierResolver = Depends(get_address_resolver)
) -> LocationService:
    return LocationService(store, resolver)


@router.get("/provinces", response_model=List[AdministrativeUnit])
async def list_provinces(service: LocationService = Depends(get_location_service)):
    """List all provinces"""
    return service.list_provinces()


@router.get("/provinces/{province_code}/regencies", response_model=List[AdministrativeUnit])
async def list_regencies(
    province_code: str,
    service: LocationService = Depends(get_location_service)
):
    """List regencies/cities of a province by its government code"""
    return service.list_regencies(province_code)


@router.get("/regencies/{regency_code}/districts", response_model=List[AdministrativeUnit])
async def list_districts(
    regency_code: str,
    service: LocationService = Depends(get_location_service)
):
    """List districts of a regency by its government code"""
    return service.list_districts(regency_code)


@router.get("/districts/{district_code}/villages", response_model=List[AdministrativeUnit])
async def list_villages(
    district_code: str,
    service: LocationService = Depends(get_location_service)
):
    """List villages of a district by its government code"""
    return service.list_villages(district_code)


@router.post("/validate", response_model=AddressValidationResponse)
async def validate_address(
    payload: Any = Body(default=None),
    service: LocationService = Depends(get_location_service)
):
    """Validate an address payload. An invalid address is a normal response, not an error."""
    return service.check_address(payload)


@router.post("/format", response_model=FormattedAddressResponse)
async def format_address(
    payload: Any = Body(default=None),
    service: LocationService = Depends(get_location_service)
):
    """Render an address payload for display"""
    return service.format_address(payload)


@router.get("/{level}/{identifier}", response_model=AdministrativeUnit)
async def get_unit(
    level: AdministrativeLevel,
    identifier: str,
    service: LocationService = Depends(get_location_service)
):
    """Get a single administrative unit by UUID or government code"""
    return service.get_unit(level.value, identifier)
