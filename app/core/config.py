from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "F1 History API"
    app_version: str = "0.1.0"
    env: str = "development"

    # SQLite file holding the Ergast dataset, opened read-only
    database_path: str = "data/f1.db"
    api_prefix: str = "/api"

    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    debug: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="",
        case_sensitive=False,
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
