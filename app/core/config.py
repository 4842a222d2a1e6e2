from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import computed_field

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # App
    app_name: str = "Catalog"
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    debug: bool = False
    log_level: str = "INFO"

    # DB settings
    db_user: str = "catalog"
    db_pass: str = "catalog"
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "catalog"
    # full SQLAlchemy URL; wins over the db_* parts when set (e.g. sqlite+aiosqlite for local runs)
    database_url_override: Optional[str] = None

    # Listing
    default_per_page: int = 15
    max_per_page: int = 100

    # Redis (item cache)
    redis_url: str = "redis://localhost:6379/0"
    cache_enabled: bool = True
    cache_ttl_seconds: int = 120

    @computed_field
    @property
    def database_url(self) -> str:
        if self.database_url_override:
            return self.database_url_override
        return (
            f"postgresql+asyncpg://{self.db_user}:{self.db_pass}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

settings = Settings()
