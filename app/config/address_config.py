"""
Indonesian Address Configuration
Government (BPS) administrative code rules used by the address resolver,
plus the reference dataset of provinces and major regencies.
Used by the resolver at request time and by the seed script to populate
the reference tables.
"""

# Administrative levels, top-down
LEVELS = ["province", "city", "district", "village"]

# Levels that must resolve for an address to be valid
REQUIRED_LEVELS = ["city", "province"]

# Government code digit width per level
CODE_LENGTHS = {
    "province": 2,
    "city": 4,
    "district": 6,
    "village": 10,
}

# Valid numeric ranges (inclusive)
PROVINCE_CODE_RANGE = (11, 94)
REGENCY_CODE_RANGE = (1101, 9471)

# Reserved/unused province codes, rejected even when inside PROVINCE_CODE_RANGE.
# Fixed list carried over from the production database; not derived from any rule.
RESERVED_PROVINCE_CODES = frozenset({
    17, 20, 25, 29, 30,
    39, 40, 41, 42, 43, 44, 45, 46, 47, 48, 49, 50,
    59, 60, 69, 70, 79, 80, 89, 90, 93,
})

# Display text
UNKNOWN_LOCATION = "Unknown location"
LEVEL_LABELS = {
    "province": "Province",
    "city": "City",
    "district": "District",
    "village": "Village",
}
FORMAT_SEPARATOR = ", "

# Reference dataset: provinces
SEED_PROVINCES = [
    # Sumatra
    {"code": "11", "name": "Nanggroe Aceh Darussalam", "island_group": "Sumatra", "is_special_region": True},
    {"code": "12", "name": "Sumatera Utara", "island_group": "Sumatra", "is_special_region": False},
    {"code": "13", "name": "Sumatera Barat", "island_group": "Sumatra", "is_special_region": False},
    {"code": "14", "name": "Riau", "island_group": "Sumatra", "is_special_region": False},
    {"code": "15", "name": "Jambi", "island_group": "Sumatra", "is_special_region": False},
    {"code": "16", "name": "Sumatera Selatan", "island_group": "Sumatra", "is_special_region": False},
    {"code": "17", "name": "Bengkulu", "island_group": "Sumatra", "is_special_region": False},
    {"code": "18", "name": "Lampung", "island_group": "Sumatra", "is_special_region": False},
    {"code": "19", "name": "Kepulauan Bangka Belitung", "island_group": "Sumatra", "is_special_region": False},
    {"code": "21", "name": "Kepulauan Riau", "island_group": "Sumatra", "is_special_region": False},
    # Java
    {"code": "31", "name": "DKI Jakarta", "island_group": "Java", "is_special_region": True},
    {"code": "32", "name": "Jawa Barat", "island_group": "Java", "is_special_region": False},
    {"code": "33", "name": "Jawa Tengah", "island_group": "Java", "is_special_region": False},
    {"code": "34", "name": "DI Yogyakarta", "island_group": "Java", "is_special_region": True},
    {"code": "35", "name": "Jawa Timur", "island_group": "Java", "is_special_region": False},
    {"code": "36", "name": "Banten", "island_group": "Java", "is_special_region": False},
    # Nusa Tenggara
    {"code": "51", "name": "Bali", "island_group": "Nusa Tenggara", "is_special_region": False},
    {"code": "52", "name": "Nusa Tenggara Barat", "island_group": "Nusa Tenggara", "is_special_region": False},
    {"code": "53", "name": "Nusa Tenggara Timur", "island_group": "Nusa Tenggara", "is_special_region": False},
    # Kalimantan
    {"code": "61", "name": "Kalimantan Barat", "island_group": "Kalimantan", "is_special_region": False},
    {"code": "62", "name": "Kalimantan Tengah", "island_group": "Kalimantan", "is_special_region": False},
    {"code": "63", "name": "Kalimantan Selatan", "island_group": "Kalimantan", "is_special_region": False},
    {"code": "64", "name": "Kalimantan Timur", "island_group": "Kalimantan", "is_special_region": False},
    {"code": "65", "name": "Kalimantan Utara", "island_group": "Kalimantan", "is_special_region": False},
    # Sulawesi
    {"code": "71", "name": "Sulawesi Utara", "island_group": "Sulawesi", "is_special_region": False},
    {"code": "72", "name": "Sulawesi Tengah", "island_group": "Sulawesi", "is_special_region": False},
    {"code": "73", "name": "Sulawesi Selatan", "island_group": "Sulawesi", "is_special_region": False},
    {"code": "74", "name": "Sulawesi Tenggara", "island_group": "Sulawesi", "is_special_region": False},
    {"code": "75", "name": "Gorontalo", "island_group": "Sulawesi", "is_special_region": False},
    {"code": "76", "name": "Sulawesi Barat", "island_group": "Sulawesi", "is_special_region": False},
    # Maluku & Papua
    {"code": "81", "name": "Maluku", "island_group": "Maluku", "is_special_region": False},
    {"code": "82", "name": "Maluku Utara", "island_group": "Maluku", "is_special_region": False},
    {"code": "91", "name": "Papua", "island_group": "Papua", "is_special_region": False},
    {"code": "92", "name": "Papua Barat", "island_group": "Papua", "is_special_region": False},
]

# Reference dataset: major regencies/cities, keyed to their province by code prefix
SEED_REGENCIES = [
    # DKI Jakarta
    {"code": "3101", "name": "Jakarta Pusat", "type": "municipality", "is_capital": True, "is_major_city": True},
    {"code": "3102", "name": "Jakarta Utara", "type": "municipality", "is_capital": False, "is_major_city": True},
    {"code": "3103", "name": "Jakarta Barat", "type": "municipality", "is_capital": False, "is_major_city": True},
    {"code": "3104", "name": "Jakarta Selatan", "type": "municipality", "is_capital": False, "is_major_city": True},
    {"code": "3105", "name": "Jakarta Timur", "type": "municipality", "is_capital": False, "is_major_city": True},
    # Jawa Barat
    {"code": "3201", "name": "Bogor", "type": "regency", "is_capital": False, "is_major_city": True},
    {"code": "3202", "name": "Sukabumi", "type": "regency", "is_capital": False, "is_major_city": False},
    {"code": "3204", "name": "Bandung", "type": "regency", "is_capital": False, "is_major_city": True},
    {"code": "3273", "name": "Kota Bandung", "type": "city", "is_capital": True, "is_major_city": True},
    {"code": "3275", "name": "Kota Bekasi", "type": "city", "is_capital": False, "is_major_city": True},
    {"code": "3276", "name": "Kota Depok", "type": "city", "is_capital": False, "is_major_city": True},
    # Jawa Tengah
    {"code": "3301", "name": "Cilacap", "type": "regency", "is_capital": False, "is_major_city": False},
    {"code": "3372", "name": "Kota Surakarta", "type": "city", "is_capital": False, "is_major_city": True},
    {"code": "3374", "name": "Kota Semarang", "type": "city", "is_capital": True, "is_major_city": True},
    # DI Yogyakarta
    {"code": "3402", "name": "Bantul", "type": "regency", "is_capital": False, "is_major_city": False},
    {"code": "3404", "name": "Sleman", "type": "regency", "is_capital": False, "is_major_city": True},
    {"code": "3471", "name": "Kota Yogyakarta", "type": "city", "is_capital": True, "is_major_city": True},
    # Jawa Timur
    {"code": "3507", "name": "Malang", "type": "regency", "is_capital": False, "is_major_city": True},
    {"code": "3578", "name": "Kota Surabaya", "type": "city", "is_capital": True, "is_major_city": True},
    # Banten
    {"code": "3603", "name": "Tangerang", "type": "regency", "is_capital": False, "is_major_city": True},
    {"code": "3671", "name": "Kota Tangerang", "type": "city", "is_capital": False, "is_major_city": True},
    # Bali
    {"code": "5103", "name": "Badung", "type": "regency", "is_capital": False, "is_major_city": True},
    {"code": "5104", "name": "Gianyar", "type": "regency", "is_capital": False, "is_major_city": True},
    {"code": "5171", "name": "Kota Denpasar", "type": "city", "is_capital": True, "is_major_city": True},
    # Sumatera Utara
    {"code": "1275", "name": "Kota Medan", "type": "city", "is_capital": True, "is_major_city": True},
    # Sulawesi Selatan
    {"code": "7371", "name": "Kota Makassar", "type": "city", "is_capital": True, "is_major_city": True},
]
