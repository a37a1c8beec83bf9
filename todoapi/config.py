"""All settings, loaded from the environment or the .env file."""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

APP_VERSION = "1.0.0"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # App
    app_name: str = "Todo API"
    host: str = "0.0.0.0"
    port: int = 8080

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # CORS
    cors_origins: list[str] = ["*"]

    # Behavior
    seed_sample_data: bool = True


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
