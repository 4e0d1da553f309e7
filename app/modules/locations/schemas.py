import uuid
from enum import Enum
from pydantic import BaseModel, ConfigDict, field_validator
from typing import Any, Optional


class AdministrativeLevel(str, Enum):
    province = "province"
    city = "city"
    district = "district"
    village = "village"


def _coerce_text(value: Any) -> Optional[str]:
    """JSON scalars are read as text, the way Postgres ->> does; anything else is absent."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float, uuid.UUID)):
        try:
            return str(value)
        except ValueError:
            # int too large for str() under the interpreter's digit limit
            return None
    return None


class LevelRef(BaseModel):
    """Nested per-level object: {code, id, name}, any of them optional"""
    model_config = ConfigDict(extra="ignore")

    code: Optional[str] = None
    id: Optional[str] = None
    name: Optional[str] = None

    @field_validator("code", "id", "name", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> Optional[str]:
        return _coerce_text(value)


class AddressPayload(BaseModel):
    """Address as submitted by booking and listing forms.

    Each level may arrive as a flat ``<level>_id`` / ``<level>_name`` field,
    as a nested object, or both. Unknown keys are ignored and unreadable
    values become ``None`` so that parsing never rejects a payload.
    """
    model_config = ConfigDict(extra="ignore")

    street_address: Optional[str] = None
    postal_code: Optional[str] = None
    additional_info: Optional[str] = None

    province_id: Optional[str] = None
    city_id: Optional[str] = None
    district_id: Optional[str] = None
    village_id: Optional[str] = None

    province_name: Optional[str] = None
    city_name: Optional[str] = None
    district_name: Optional[str] = None
    village_name: Optional[str] = None

    province: Optional[LevelRef] = None
    city: Optional[LevelRef] = None
    district: Optional[LevelRef] = None
    village: Optional[LevelRef] = None

    @field_validator(
        "street_address", "postal_code", "additional_info",
        "province_name", "city_name", "district_name", "village_name",
        mode="before",
    )
    @classmethod
    def coerce_text(cls, value: Any) -> Optional[str]:
        return _coerce_text(value)

    @field_validator("province_id", "city_id", "district_id", "village_id", mode="before")
    @classmethod
    def coerce_identifier(cls, value: Any) -> Optional[str]:
        # Older rows stored the reference as {"id": ...} under the flat key
        if isinstance(value, dict):
            value = value.get("id", value.get("code"))
        return _coerce_text(value)

    @field_validator("province", "city", "district", "village", mode="before")
    @classmethod
    def coerce_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return {"name": value}
        if isinstance(value, dict):
            return value
        return None

    def flat_id(self, level: str) -> Optional[str]:
        return getattr(self, f"{level}_id")

    def flat_name(self, level: str) -> Optional[str]:
        return getattr(self, f"{level}_name")

    def nested(self, level: str) -> Optional[LevelRef]:
        return getattr(self, level)


class AdministrativeUnit(BaseModel):
    id: str
    code: Optional[str] = None
    name: str
    level: AdministrativeLevel
    parent_id: Optional[str] = None

    class Config:
        from_attributes = True


class AddressValidationResponse(BaseModel):
    is_valid: bool
    scheme: Optional[str] = None  # legacy | government_code
    formatted: str


class FormattedAddressResponse(BaseModel):
    formatted: str
