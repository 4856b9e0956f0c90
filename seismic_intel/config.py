"""Configuration management using Pydantic Settings"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = "sqlite:///./seismic.db"

    # Record source: live store, static export on disk, or static export over HTTP
    record_source: Literal["database", "file", "http"] = "file"
    export_path: str = "data/fintechs.json"
    export_url: str = "http://localhost:8001/data/fintechs.json"

    # Service
    service_name: str = "seismic-intel"
    log_level: str = "INFO"

    # HTTP Client
    http_timeout_seconds: float = 5.0

    # Impact calculator
    savings_rate: float = 0.02  # Share of encrypted volume assumed saved
    default_adoption_rate: int = 25


settings = Settings()
