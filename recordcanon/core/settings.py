from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field(default="RecordCanon API", alias="APP_NAME")
    app_env: str = Field(default="local", alias="APP_ENV")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    rules_path: str = Field(default="config/rules.yaml", alias="RULES_PATH")

    # Geocoding provider used by the address validation adapter.  The public
    # endpoint allows one request per second per client.
    geocoder_url: str = Field(
        default="https://nominatim.openstreetmap.org/search",
        alias="GEOCODER_URL",
    )
    geocoder_user_agent: str = Field(default="recordcanon/0.1.0", alias="GEOCODER_USER_AGENT")
    validation_retry_count: int = Field(default=3, alias="VALIDATION_RETRY_COUNT")
    validation_delay_s: float = Field(default=1.0, alias="VALIDATION_DELAY_S")
    validation_timeout_s: float = Field(default=10.0, alias="VALIDATION_TIMEOUT_S")
    validation_fallback_to_local: bool = Field(default=True, alias="VALIDATION_FALLBACK_TO_LOCAL")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
