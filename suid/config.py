from __future__ import annotations
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="", extra="ignore")

    # Defaults for generate_suid / parse_suid
    SUID_ALPHABET: str = "standard"
    SUID_SEPARATOR: str = "."
    SUID_RANDOM_BYTES: int = 12

    # Logging (LOG_JSON is read from the environment by configure_logging)
    LOG_LEVEL: str = "INFO"

settings = Settings()
