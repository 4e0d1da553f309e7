from app.modules.locations.repository import ReferenceStore
from app.modules.locations.resolver import AddressIdentifierResolver, is_legacy_identifier
from app.modules.locations.schemas import (
    AdministrativeUnit, AddressValidationResponse, FormattedAddressResponse
)
from typing import Any, List
from fastapi import HTTPException


class LocationService:
    def __init__(self, store: ReferenceStore, resolver: AddressIdentifierResolver):
        self.store = store
        self.resolver = resolver

    def list_provinces(self) -> List[AdministrativeUnit]:
        """List all provinces ordered by name"""
        return self.store.list_units("province")

    def list_regencies(self, province_code: str) -> List[AdministrativeUnit]:
        """List regencies/cities of a province"""
        return self.store.list_units("city", parent_code=province_code)

    def list_districts(self, regency_code: str) -> List[AdministrativeUnit]:
        """List districts of a regency"""
        return self.store.list_units("district", parent_code=regency_code)

    def list_villages(self, district_code: str) -> List[AdministrativeUnit]:
        """List villages of a district"""
        return self.store.list_units("village", parent_code=district_code)

    def get_unit(self, level: str, identifier: str) -> AdministrativeUnit:
        """Get a unit by legacy UUID or by government code"""
        if is_legacy_identifier(identifier):
            unit = self.store.get_by_id(level, identifier)
        else:
            unit = self.store.get_by_code(level, identifier)

        if unit is None:
            raise HTTPException(status_code=404, detail=f"{level.capitalize()} not found")
        return unit

    def check_address(self, payload: Any) -> AddressValidationResponse:
        """Validate an address and report the identifier scheme it validated under"""
        scheme = self.resolver.detect_scheme(payload)
        return AddressValidationResponse(
            is_valid=scheme is not None,
            scheme=scheme,
            formatted=self.resolver.format(payload),
        )

    def format_address(self, payload: Any) -> FormattedAddressResponse:
        return FormattedAddressResponse(formatted=self.resolver.format(payload))
