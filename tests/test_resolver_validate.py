import pytest

from app.config import address_config

from app.modules.locations.repository import ReferenceStoreUnavailable
from app.modules.locations.resolver import (
    AddressIdentifierResolver,
    GOVERNMENT_CODE_SCHEME,
    LEGACY_SCHEME,
    is_legacy_identifier,
    parse_government_code,
)
from tests.fakes import UnavailableStore, seed_id


MISSING_UUID = "00000000-0000-4000-8000-000000000000"


@pytest.mark.parametrize("payload", [None, {}, [], "", "3101", 3101])
def test_validate_rejects_empty_or_non_mapping_payload(resolver, payload) -> None:
    assert resolver.validate(payload) is False


def test_validate_accepts_matching_government_codes(resolver) -> None:
    assert resolver.validate({"city_id": "3101", "province_id": "31"}) is True
    assert resolver.detect_scheme({"city_id": "3101", "province_id": "31"}) == GOVERNMENT_CODE_SCHEME


def test_validate_rejects_city_from_another_province(resolver) -> None:
    assert resolver.validate({"city_id": "3201", "province_id": "31"}) is False


@pytest.mark.parametrize("city_code", ["9901", "9471", "3101", "1101"])
def test_validate_rejects_province_out_of_range(resolver, city_code) -> None:
    assert resolver.validate({"city_id": city_code, "province_id": "99"}) is False


@pytest.mark.parametrize(
    "city_code,province_code",
    [("1001", "10"), ("1100", "11"), ("9472", "94"), ("9501", "95")],
)
def test_validate_rejects_codes_outside_ranges(resolver, city_code, province_code) -> None:
    assert resolver.validate({"city_id": city_code, "province_id": province_code}) is False


def test_validate_accepts_range_boundaries(resolver) -> None:
    assert resolver.validate({"city_id": "1101", "province_id": "11"}) is True
    assert resolver.validate({"city_id": "9471", "province_id": "94"}) is True


@pytest.mark.parametrize("province_code", sorted(address_config.RESERVED_PROVINCE_CODES))
def test_validate_rejects_reserved_province_codes(resolver, province_code) -> None:
    payload = {"city_id": f"{province_code}01", "province_id": str(province_code)}
    assert resolver.validate(payload) is False


def test_reserved_province_codes() -> None:
    expected = {17, 20, 25, 29, 30, 59, 60, 69, 70, 79, 80, 89, 90, 93} | set(range(39, 51))
    assert address_config.RESERVED_PROVINCE_CODES == expected


def test_validate_empty_flat_field_falls_back_to_nested_code(resolver) -> None:
    nested = {
        "street_address": "Jl. Sudirman No. 123",
        "province": {"code": "31", "name": "DKI Jakarta"},
        "city": {"code": "3101", "name": "Jakarta Pusat"},
        "province_id": "",
        "city_id": "",
        "district_id": "",
        "village_id": "",
        "postal_code": "10110",
        "additional_info": "",
    }
    flat = dict(nested, province_id="31", city_id="3101")
    assert resolver.validate(nested) is True
    assert resolver.validate(nested) == resolver.validate(flat)


def test_validate_empty_nested_code_falls_back_to_nested_id(resolver) -> None:
    payload = {"city": {"code": "", "id": "3101"}, "province": {"id": "31"}}
    assert resolver.validate(payload) is True


def test_validate_all_identifiers_empty(resolver) -> None:
    payload = {
        "province": {"code": "", "name": ""},
        "city": {"code": "", "name": ""},
        "province_id": "",
        "city_id": "",
    }
    assert resolver.validate(payload) is False


def test_validate_requires_both_levels(resolver) -> None:
    assert resolver.validate({"city_id": "3101"}) is False
    assert resolver.validate({"province": {"code": "31"}}) is False


def test_validate_reads_numeric_json_values_as_codes(resolver) -> None:
    assert resolver.validate({"city_id": 3101, "province_id": 31}) is True


def test_validate_reads_flat_identifier_object(resolver) -> None:
    assert resolver.validate({"city_id": {"id": "3101"}, "province_id": {"id": "31"}}) is True


@pytest.mark.parametrize(
    "city_code,province_code",
    [("abc", "31"), ("3101", "DKI"), ("31.01", "31"), ("3_101", "31"), ("", "31")],
)
def test_validate_rejects_non_numeric_codes(resolver, city_code, province_code) -> None:
    assert resolver.validate({"city_id": city_code, "province_id": province_code}) is False


def test_validate_legacy_identifiers_present(resolver) -> None:
    payload = {"city_id": seed_id("city", "3101"), "province_id": seed_id("province", "31")}
    assert resolver.validate(payload) is True
    assert resolver.detect_scheme(payload) == LEGACY_SCHEME


def test_validate_legacy_identifiers_are_case_insensitive(resolver) -> None:
    payload = {
        "city_id": seed_id("city", "3101").upper(),
        "province_id": seed_id("province", "31").upper(),
    }
    assert resolver.validate(payload) is True


def test_validate_legacy_identifier_missing(resolver) -> None:
    assert resolver.validate({"city_id": MISSING_UUID, "province_id": seed_id("province", "31")}) is False
    assert resolver.validate({"city_id": seed_id("city", "3101"), "province_id": MISSING_UUID}) is False


def test_validate_legacy_identifiers_skip_parent_check(resolver) -> None:
    # Bogor belongs to Jawa Barat; existence of both rows is all that is checked
    payload = {"city_id": seed_id("city", "3201"), "province_id": seed_id("province", "31")}
    assert resolver.validate(payload) is True


def test_validate_mixed_schemes_rejected(resolver) -> None:
    assert resolver.validate({"city_id": seed_id("city", "3101"), "province_id": "31"}) is False


def test_validate_propagates_store_failure_for_legacy_identifiers() -> None:
    resolver = AddressIdentifierResolver(UnavailableStore())
    payload = {"city_id": MISSING_UUID, "province_id": MISSING_UUID}
    with pytest.raises(ReferenceStoreUnavailable):
        resolver.validate(payload)


def test_validate_government_codes_do_not_touch_store() -> None:
    resolver = AddressIdentifierResolver(UnavailableStore())
    assert resolver.validate({"city_id": "3101", "province_id": "31"}) is True


def test_validate_is_repeatable(resolver) -> None:
    payloads = [
        {"city_id": "3101", "province_id": "31"},
        {"city_id": "3201", "province_id": "31"},
        {"city_id": seed_id("city", "3101"), "province_id": seed_id("province", "31")},
    ]
    for payload in payloads:
        assert resolver.validate(payload) == resolver.validate(payload)


def test_is_legacy_identifier() -> None:
    assert is_legacy_identifier("3f2b8c1e-9a7d-4e5f-8b6a-1c2d3e4f5a6b")
    assert not is_legacy_identifier("3f2b8c1e9a7d4e5f8b6a1c2d3e4f5a6b")
    assert not is_legacy_identifier("3101")
    assert not is_legacy_identifier(None)


def test_parse_government_code() -> None:
    assert parse_government_code("3101") == 3101
    assert parse_government_code(" 031 ") == 31
    assert parse_government_code("31.0") is None
    assert parse_government_code("") is None
    assert parse_government_code(None) is None
