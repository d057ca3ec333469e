"""Application configuration module."""
from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_env: str = Field(default="development", alias="APP_ENV")
    app_version: str = Field(default="0.0.1-alpha", alias="APP_VERSION")
    app_host: str = Field(default="127.0.0.1", alias="APP_HOST")
    app_port: int = Field(default=8000, alias="APP_PORT")

    api_prefix: str = Field(default="/api/v1", alias="API_PREFIX")
    api_docs_enabled: bool = Field(default=True, alias="API_DOCS_ENABLED")
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    db_host: str = Field(..., alias="DB_HOST")
    db_port: int = Field(default=5432, alias="DB_PORT")
    db_user: str = Field(..., alias="DB_USER")
    db_password: str = Field(default="", alias="DB_PASSWORD")
    db_name: str = Field(..., alias="DB_NAME")

    db_pool_min_size: int = Field(default=5, ge=0, alias="DB_POOL_MIN_SIZE")
    db_pool_max_size: int = Field(default=25, ge=1, alias="DB_POOL_MAX_SIZE")
    db_conn_max_inactive_lifetime: float = Field(default=300.0, alias="DB_CONN_MAX_INACTIVE_LIFETIME")
    db_query_timeout: float = Field(default=10.0, gt=0, alias="DB_QUERY_TIMEOUT")
    db_auto_migrate: bool = Field(default=False, alias="DB_AUTO_MIGRATE")

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
        "populate_by_name": True,
        "extra": "ignore",
    }

    @property
    def cors_origin_list(self) -> List[str]:
        """Comma-separated CORS_ORIGINS as a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
