# Supabase tables: indonesian_provinces, indonesian_regencies, indonesian_districts, indonesian_villages
# This file documents the expected database schema
# Read operations are handled via Supabase SDK in repository.py

"""
Expected Supabase table structure:

indonesian_provinces:
- id: uuid (primary key)
- code: varchar(2) (unique, not null) - BPS government code, e.g. '31'
- name: varchar(100) (unique, not null)
- island_group: varchar(50) (not null)
- is_special_region: boolean (default: false)
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())

indonesian_regencies:
- id: uuid (primary key)
- province_id: uuid (foreign key to indonesian_provinces.id, not null)
- code: varchar(4) (unique, not null) - first two digits are the province code
- name: varchar(100) (not null)
- type: varchar(20) (not null) - values: city, regency, municipality
- is_capital: boolean (default: false)
- is_major_city: boolean (default: false)
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())
- unique constraint on (province_id, name)

indonesian_districts:
- id: uuid (primary key)
- regency_id: uuid (foreign key to indonesian_regencies.id, not null)
- code: varchar(6) (unique, not null) - first four digits are the regency code
- name: varchar(100) (not null)

indonesian_villages:
- id: uuid (primary key)
- district_id: uuid (foreign key to indonesian_districts.id, not null)
- code: varchar(10) (unique, not null) - first six digits are the district code
- name: varchar(100) (not null)
- type: varchar(20) (default: 'desa') - values: desa, kelurahan
"""

# Column holding the parent reference, per level
PARENT_COLUMNS = {
    "province": None,
    "city": "province_id",
    "district": "regency_id",
    "village": "district_id",
}
