from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, List


class Settings(BaseSettings):
    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""
    supabase_service_role_key: Optional[str] = None  # Required by the seed script (writes bypass RLS)

    # Reference tables (administrative hierarchy)
    provinces_table: str = "indonesian_provinces"
    regencies_table: str = "indonesian_regencies"
    districts_table: str = "indonesian_districts"
    villages_table: str = "indonesian_villages"

    # App
    app_name: str = "rental-address-service"
    debug: bool = False
    environment: str = "development"  # development | staging | production
    log_level: str = "INFO"
    cors_origins: str = "http://localhost:3000,http://127.0.0.1:3000"
    rate_limit: str = "100/minute"  # slowapi format, e.g. "100/minute"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def get_cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    def get_reference_tables(self) -> dict:
        """Level key -> Supabase table name"""
        return {
            "province": self.provinces_table,
            "city": self.regencies_table,
            "district": self.districts_table,
            "village": self.villages_table,
        }

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",  # No prefix needed
        extra="ignore"
    )


settings = Settings()
