"""Classroom Settings — database, paging and logging knobs read from the environment.

Invariants:
    - get_settings() is cached: one Settings instance per process
    - default_page_size never exceeds max_page_size
    - log_format is "json" or "text"

Design Decisions:
    - pydantic-settings with .env support; names are case-insensitive env vars
    - Every field has a default that matches the docker-compose database
    - create_schema_on_startup only adds missing tables; nothing alters existing ones
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Storage
    database_url: str = (
        "postgresql+asyncpg://classroom:classroom@db:5432/classroom"
    )
    database_pool_size: int = 20
    database_max_overflow: int = 10
    create_schema_on_startup: bool = True

    # HTTP
    cors_origins: list[str] = ["http://localhost:5173"]
    default_page_size: int = 50
    max_page_size: int = 500

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @field_validator("database_url", mode="before")
    @classmethod
    def use_asyncpg_driver(cls, v: str) -> str:
        """A bare postgresql:// URL would load the sync driver; registries need asyncpg."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    @model_validator(mode="after")
    def check_page_sizes(self) -> "Settings":
        if not 1 <= self.default_page_size <= self.max_page_size:
            raise ValueError(
                "default_page_size must be between 1 and max_page_size",
            )
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
