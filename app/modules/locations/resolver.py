import logging
import re
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import ValidationError

from app.config import address_config
from app.modules.locations.repository import ReferenceStore
from app.modules.locations.schemas import AddressPayload

logger = logging.getLogger(__name__)

LEGACY_SCHEME = "legacy"
GOVERNMENT_CODE_SCHEME = "government_code"

_LEGACY_ID_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)
_INTEGER_PATTERN = re.compile(r"^\s*[+-]?[0-9]+\s*$")


def is_legacy_identifier(value: Optional[str]) -> bool:
    """True for an opaque 8-4-4-4-12 hex identifier"""
    return isinstance(value, str) and bool(_LEGACY_ID_PATTERN.match(value))


def parse_government_code(value: Optional[str]) -> Optional[int]:
    """Integer value of a government code, or None when the text is not an integer"""
    try:
        if not _INTEGER_PATTERN.match(value):
            return None
        return int(value)
    except (TypeError, ValueError):
        return None


def _present(value: Optional[str]) -> Optional[str]:
    if value is None or value == "":
        return None
    return value


def _as_payload(payload: Any) -> Optional[AddressPayload]:
    if isinstance(payload, AddressPayload):
        return payload
    if not isinstance(payload, Mapping) or not payload:
        return None
    try:
        return AddressPayload.model_validate(dict(payload))
    except ValidationError as e:
        logger.debug(f"Unreadable address payload: {e}")
        return None


class AddressIdentifierResolver:
    """Validates and renders Indonesian addresses against the reference store.

    Addresses identify their city and province either by legacy UUID keys of
    the reference tables or by BPS government codes. Both operations are pure
    functions of the payload and the current reference data; the only error
    that escapes is ReferenceStoreUnavailable.
    """

    def __init__(self, store: ReferenceStore):
        self.store = store

    def extract_identifier(self, payload: AddressPayload, level: str) -> Optional[str]:
        """Flat <level>_id, then nested code, then nested id. Empty strings count as absent."""
        flat = _present(payload.flat_id(level))
        if flat is not None:
            return flat
        nested = payload.nested(level)
        if nested is None:
            return None
        return _present(nested.code) or _present(nested.id)

    def detect_scheme(self, payload: Any) -> Optional[str]:
        """Name of the identifier scheme the address validates under, or None if invalid"""
        address = _as_payload(payload)
        if address is None:
            logger.debug("Rejecting empty address payload")
            return None

        city_id = self.extract_identifier(address, "city")
        province_id = self.extract_identifier(address, "province")
        if city_id is None or province_id is None:
            logger.debug("Rejecting address without city or province identifier")
            return None

        if is_legacy_identifier(city_id) and is_legacy_identifier(province_id):
            # Existence only; the city is not checked against its parent province
            if self.store.get_by_id("city", city_id) is None:
                logger.debug(f"Legacy city id not found: {city_id}")
                return None
            if self.store.get_by_id("province", province_id) is None:
                logger.debug(f"Legacy province id not found: {province_id}")
                return None
            return LEGACY_SCHEME

        if self._government_codes_valid(city_id, province_id):
            return GOVERNMENT_CODE_SCHEME
        return None

    def _government_codes_valid(self, city_id: str, province_id: str) -> bool:
        city_num = parse_government_code(city_id)
        province_num = parse_government_code(province_id)
        if city_num is None or province_num is None:
            logger.debug(f"Non-numeric government codes: city={city_id!r} province={province_id!r}")
            return False

        low, high = address_config.PROVINCE_CODE_RANGE
        if not low <= province_num <= high:
            logger.debug(f"Province code out of range: {province_num}")
            return False

        low, high = address_config.REGENCY_CODE_RANGE
        if not low <= city_num <= high:
            logger.debug(f"City code out of range: {city_num}")
            return False

        if city_num // 100 != province_num:
            logger.debug(f"City code {city_num} does not belong to province {province_num}")
            return False

        if province_num in address_config.RESERVED_PROVINCE_CODES:
            logger.debug(f"Reserved province code: {province_num}")
            return False

        return True

    def validate(self, payload: Any) -> bool:
        return self.detect_scheme(payload) is not None

    def resolve_name(self, payload: AddressPayload, level: str) -> Optional[str]:
        nested = payload.nested(level)
        if nested is not None and nested.name and nested.name.strip():
            return nested.name.strip()

        flat_name = payload.flat_name(level)
        if flat_name and flat_name.strip():
            return flat_name.strip()

        identifier = self.extract_identifier(payload, level)
        if identifier is None:
            return None

        if is_legacy_identifier(identifier):
            unit = self.store.get_by_id(level, identifier)
            if unit is not None and unit.name:
                return unit.name

        return f"{address_config.LEVEL_LABELS[level]} {identifier.strip()}"

    def format(self, payload: Any) -> str:
        """Display string: city then province, or the unknown-location sentinel."""
        address = _as_payload(payload)
        if address is None:
            return address_config.UNKNOWN_LOCATION

        names = [self.resolve_name(address, level) for level in address_config.REQUIRED_LEVELS]
        parts = [name for name in names if name]
        if not parts:
            return address_config.UNKNOWN_LOCATION
        return address_config.FORMAT_SEPARATOR.join(parts)
