import logging
import re
import uuid
from typing import Dict, Iterable, List, Optional, Protocol

from supabase import Client

from app.config import address_config
from app.modules.locations.models import PARENT_COLUMNS
from app.modules.locations.schemas import AdministrativeUnit

logger = logging.getLogger(__name__)

_DIGITS_PATTERN = re.compile(r"^[0-9]+$")

DEFAULT_TABLES = {
    "province": "indonesian_provinces",
    "city": "indonesian_regencies",
    "district": "indonesian_districts",
    "village": "indonesian_villages",
}


class ReferenceStoreUnavailable(Exception):
    """The administrative reference data could not be read."""


class ReferenceStore(Protocol):
    def get_by_id(self, level: str, identifier: str) -> Optional[AdministrativeUnit]:
        ...

    def get_by_code(self, level: str, code: str) -> Optional[AdministrativeUnit]:
        ...

    def list_units(self, level: str, parent_code: Optional[str] = None) -> List[AdministrativeUnit]:
        ...


def _row_to_unit(level: str, row: dict) -> AdministrativeUnit:
    parent_column = PARENT_COLUMNS.get(level)
    parent_id = row.get(parent_column) if parent_column else None
    code = row.get("code") or row.get("government_code")
    return AdministrativeUnit(
        id=str(row["id"]),
        code=str(code) if code is not None else None,
        name=row["name"],
        level=level,
        parent_id=str(parent_id) if parent_id else None,
    )


def _parent_prefix(level: str, parent_code: str) -> Optional[str]:
    """parent_code when it is a full government code of the level above, else None"""
    index = address_config.LEVELS.index(level)
    if index == 0:
        return None
    parent_level = address_config.LEVELS[index - 1]
    if not _DIGITS_PATTERN.match(parent_code):
        return None
    if len(parent_code) != address_config.CODE_LENGTHS[parent_level]:
        return None
    return parent_code


def _is_child(level: str, unit: AdministrativeUnit, prefix: str) -> bool:
    code = unit.code or ""
    return len(code) == address_config.CODE_LENGTHS[level] and code[:len(prefix)] == prefix


class SupabaseReferenceStore:
    """Read-only access to the administrative hierarchy tables in Supabase"""

    def __init__(self, supabase: Client, tables: Optional[Dict[str, str]] = None):
        self.supabase = supabase
        self.tables = dict(DEFAULT_TABLES)
        if tables:
            self.tables.update(tables)

    def _table(self, level: str) -> str:
        if level not in self.tables:
            raise ValueError(f"Unknown administrative level: {level}")
        return self.tables[level]

    def _find_one(self, level: str, column: str, value: str) -> Optional[AdministrativeUnit]:
        table = self._table(level)
        try:
            result = self.supabase.table(table)\
                .select("*")\
                .eq(column, value)\
                .limit(1)\
                .execute()
        except Exception as e:
            logger.error(f"Error reading {table} by {column}: {e}")
            raise ReferenceStoreUnavailable(f"Failed to read {table}") from e

        if not result.data:
            return None
        return _row_to_unit(level, result.data[0])

    def get_by_id(self, level: str, identifier: str) -> Optional[AdministrativeUnit]:
        return self._find_one(level, "id", identifier)

    def get_by_code(self, level: str, code: str) -> Optional[AdministrativeUnit]:
        return self._find_one(level, "code", code)

    def list_units(self, level: str, parent_code: Optional[str] = None) -> List[AdministrativeUnit]:
        """List units of a level ordered by name.

        parent_code restricts the list to direct children and must be the
        full government code of the level above; anything else matches nothing.
        """
        table = self._table(level)
        prefix = None
        if parent_code:
            prefix = _parent_prefix(level, parent_code)
            if prefix is None:
                return []
        try:
            query = self.supabase.table(table).select("*")
            if prefix:
                query = query.like("code", f"{prefix}%")
            result = query.order("name").execute()
        except Exception as e:
            logger.error(f"Error listing {table}: {e}")
            raise ReferenceStoreUnavailable(f"Failed to read {table}") from e

        units = [_row_to_unit(level, row) for row in result.data or []]
        if prefix:
            units = [unit for unit in units if _is_child(level, unit, prefix)]
        return units


class InMemoryReferenceStore:
    """ReferenceStore over a fixed list of units"""

    def __init__(self, units: Iterable[AdministrativeUnit]):
        self._units = list(units)

    def get_by_id(self, level: str, identifier: str) -> Optional[AdministrativeUnit]:
        for unit in self._units:
            if unit.level == level and unit.id.lower() == identifier.lower():
                return unit
        return None

    def get_by_code(self, level: str, code: str) -> Optional[AdministrativeUnit]:
        for unit in self._units:
            if unit.level == level and unit.code == code:
                return unit
        return None

    def list_units(self, level: str, parent_code: Optional[str] = None) -> List[AdministrativeUnit]:
        prefix = None
        if parent_code:
            prefix = _parent_prefix(level, parent_code)
            if prefix is None:
                return []
        units = [
            unit for unit in self._units
            if unit.level == level and (not prefix or _is_child(level, unit, prefix))
        ]
        return sorted(units, key=lambda unit: unit.name)

    @staticmethod
    def seed_unit_id(level: str, code: str) -> str:
        """Stable UUID for a seeded unit, so fixtures can refer to it by code"""
        return str(uuid.uuid5(uuid.NAMESPACE_URL, f"indonesia/{level}/{code}"))

    @classmethod
    def from_seed(cls) -> "InMemoryReferenceStore":
        units = []
        for province in address_config.SEED_PROVINCES:
            units.append(AdministrativeUnit(
                id=cls.seed_unit_id("province", province["code"]),
                code=province["code"],
                name=province["name"],
                level="province",
            ))
        for regency in address_config.SEED_REGENCIES:
            province_code = regency["code"][:address_config.CODE_LENGTHS["province"]]
            units.append(AdministrativeUnit(
                id=cls.seed_unit_id("city", regency["code"]),
                code=regency["code"],
                name=regency["name"],
                level="city",
                parent_id=cls.seed_unit_id("province", province_code),
            ))
        return cls(units)
