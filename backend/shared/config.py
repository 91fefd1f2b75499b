"""Application settings loaded from environment variables."""

from pydantic          import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing            import Literal

OVERRIDE_ALWAYS = "always"
OVERRIDE_MATCH  = "match"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Nominatim
    NOMINATIM_URL           : str = "https://nominatim.openstreetmap.org"
    NOMINATIM_USER_AGENT    : str = "OdontoSoft-Address-Search/1.0"
    NOMINATIM_COUNTRY_CODES : str = "ar"
    NOMINATIM_LIMIT         : int = 8
    NOMINATIM_TIMEOUT       : float = 10.0

    # Formatting
    ADDRESS_OVERRIDE_POLICY : Literal["always", "match"] = OVERRIDE_ALWAYS
    ADDRESS_REQUIRE_ROAD    : bool = False

    # Autocomplete
    MIN_QUERY_LENGTH        : int = 3
    DEBOUNCE_SECONDS        : float = 0.3

    @field_validator("NOMINATIM_URL")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("ADDRESS_OVERRIDE_POLICY", mode="before")
    @classmethod
    def normalize_policy(cls, value):
        return value.strip().lower() if isinstance(value, str) else value


settings = Settings()
