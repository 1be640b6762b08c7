"""
Application Configuration
تنظیمات مرکزی سرویس تقسیم سواپ
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """تنظیمات اصلی برنامه"""

    # === Application ===
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # === Database ===
    database_url: str = Field(..., alias="DATABASE_URL")
    db_pool_size: int = Field(default=10, alias="DB_POOL_SIZE")
    db_max_overflow: int = Field(default=20, alias="DB_MAX_OVERFLOW")
    auto_create_tables: bool = Field(default=False, alias="AUTO_CREATE_TABLES")

    # === Rate Limiting ===
    rate_limit_enabled: bool = Field(default=True, alias="RATE_LIMIT_ENABLED")
    subscribe_rate_limit: str = Field(default="10/minute", alias="SUBSCRIBE_RATE_LIMIT")

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    s = Settings()

    # Sanitize DATABASE_URL: remove copy/paste artifacts (quotes, whitespace)
    s.database_url = s.database_url.strip().strip('"').strip("'")
    s.log_level = s.log_level.strip().upper()

    return s


def async_database_url(url: str) -> str:
    """تبدیل URL به فرمت async"""
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url
