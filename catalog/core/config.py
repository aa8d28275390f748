"""Centralized application settings using pydantic settings."""

from functools import lru_cache
from pathlib import Path
from typing import List

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from catalog.services.product_manager import OnLoadError

# Project root holds the optional .env file and the default data directory
PROJECT_ROOT = Path(__file__).parent.parent.parent
load_dotenv(dotenv_path=PROJECT_ROOT / ".env", override=False)

DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    "http://localhost:3000",
]


class Settings(BaseSettings):
    """Environment-aware configuration (backing file, load policy, server)."""

    # Application settings
    app_name: str = "Product Catalog"
    log_level: str = "INFO"

    # Persistence settings
    products_file: str = Field(
        default="data/products.json",
        description="JSON file holding the product collection (absolute or relative path)",
    )
    on_load_error: OnLoadError = Field(
        default=OnLoadError.START_EMPTY,
        description="start_empty to ignore an unreadable products file, propagate to fail startup",
    )

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8080

    # CORS settings - stored as string, converted to list via property
    cors_origins_raw: str | None = Field(
        default=None,
        alias="CORS_ORIGINS",
        description="Comma-separated list of allowed CORS origins",
        exclude=True,
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def cors_origins(self) -> List[str]:
        """Parse CORS_ORIGINS from comma-separated string to list."""
        if self.cors_origins_raw is None or not self.cors_origins_raw.strip():
            return list(DEFAULT_CORS_ORIGINS)
        origins = [
            origin.strip().rstrip("/")
            for origin in self.cors_origins_raw.split(",")
            if origin.strip()
        ]
        return origins if origins else list(DEFAULT_CORS_ORIGINS)

    @field_validator("products_file", mode="after")
    @classmethod
    def resolve_products_file(cls, v: str) -> str:
        """Resolve products_file to an absolute path and ensure its directory exists."""
        path = Path(v)
        if not path.is_absolute():
            path = (PROJECT_ROOT / v).resolve()
        else:
            path = path.resolve()
        path.parent.mkdir(parents=True, exist_ok=True)
        return str(path)

    @field_validator("log_level", mode="after")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.strip().upper()


@lru_cache
def get_settings() -> Settings:
    """Provide singleton-like access for dependency injection."""
    return Settings()
