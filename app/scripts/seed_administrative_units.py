"""
Seed Administrative Units Script
This script populates the province and regency reference tables using the address config.
Can be run manually after provisioning a new database.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from app.config import settings
from app.config.address_config import CODE_LENGTHS, SEED_PROVINCES, SEED_REGENCIES
from app.database.supabase_client import SupabaseClient
from supabase import Client
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _upsert_by_code(supabase: Client, table: str, row: dict) -> str:
    """Update the row with the same code or insert it. Returns 'created' or 'updated'."""
    existing = supabase.table(table)\
        .select("id")\
        .eq("code", row["code"])\
        .execute()

    if existing.data:
        supabase.table(table)\
            .update({k: v for k, v in row.items() if k != "code"})\
            .eq("code", row["code"])\
            .execute()
        return "updated"

    supabase.table(table).insert(row).execute()
    return "created"


def seed_provinces(supabase: Client, table: str = settings.provinces_table):
    """Seed provinces from config"""
    logger.info("Seeding provinces...")

    created_count = 0
    updated_count = 0

    for province in SEED_PROVINCES:
        try:
            outcome = _upsert_by_code(supabase, table, dict(province))
            if outcome == "created":
                created_count += 1
            else:
                updated_count += 1
            logger.debug(f"{outcome.capitalize()} province: {province['code']} {province['name']}")
        except Exception as e:
            logger.error(f"Error processing province {province['code']}: {e}")

    logger.info(f"Provinces seeded: {created_count} created, {updated_count} updated")
    return created_count + updated_count


def seed_regencies(
    supabase: Client,
    table: str = settings.regencies_table,
    provinces_table: str = settings.provinces_table,
):
    """Seed regencies from config, linking each to its province by code prefix"""
    logger.info("Seeding regencies...")

    created_count = 0
    updated_count = 0
    province_ids = {}

    for regency in SEED_REGENCIES:
        province_code = regency["code"][:CODE_LENGTHS["province"]]
        try:
            if province_code not in province_ids:
                province_result = supabase.table(provinces_table)\
                    .select("id")\
                    .eq("code", province_code)\
                    .execute()
                province_ids[province_code] = province_result.data[0]["id"] if province_result.data else None

            province_id = province_ids[province_code]
            if province_id is None:
                logger.warning(f"No province {province_code} for regency {regency['code']}, skipping")
                continue

            row = dict(regency)
            row["province_id"] = province_id
            outcome = _upsert_by_code(supabase, table, row)
            if outcome == "created":
                created_count += 1
            else:
                updated_count += 1
            logger.debug(f"{outcome.capitalize()} regency: {regency['code']} {regency['name']}")
        except Exception as e:
            logger.error(f"Error processing regency {regency['code']}: {e}")

    logger.info(f"Regencies seeded: {created_count} created, {updated_count} updated")
    return created_count + updated_count


def main():
    """Main function to seed the administrative reference tables"""
    try:
        supabase = SupabaseClient.get_service_client()

        logger.info("Starting administrative units seeding...")

        # Provinces first; regencies reference them
        province_count = seed_provinces(supabase)
        regency_count = seed_regencies(supabase)

        logger.info("Seeding completed successfully!")
        logger.info(f"Total: {province_count} provinces, {regency_count} regencies processed")

    except Exception as e:
        logger.error(f"Error during seeding: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
