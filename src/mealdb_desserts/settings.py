import logging
import sys
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="MEALDB_", env_file=".env", extra="ignore")

    base_url: str = "https://themealdb.com/api/json/v1/1"
    category: str = "Dessert"

    # Seconds, handed to httpx as the transport timeout
    timeout: float = 10.0

    log_level: str = "INFO"


settings = Settings()


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )
