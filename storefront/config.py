# storefront/config.py
import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TABLES_PATH = Path(__file__).resolve().parent / "pricing" / "data" / "pricing_v1.yaml"


class Settings(BaseSettings):
    # === Algemene app settings ===
    app_env: str = "local"  # local | development | production
    shop_name: str = "Chilisaus.be"

    # === Pricing ===
    pricing_tables_path: str = Field(
        str(DEFAULT_TABLES_PATH), description="YAML file with shipping/weight/tax tables"
    )
    default_country: str = "BEL"  # checkout form zonder land
    currency: str = "EUR"
    default_locale: str = "en"

    # === Logging ===
    log_level: str = "INFO"

    # === Metrics ===
    metrics_enabled: bool = True

    # === Pydantic Settings config ===
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Singleton Settings instance met simpele env-overrides."""
    s = Settings()

    env = os.getenv("ENVIRONMENT", s.app_env).lower()
    if env == "production":
        s.log_level = "WARNING"
    elif env == "development":
        s.log_level = "DEBUG"

    return s


settings = get_settings()
